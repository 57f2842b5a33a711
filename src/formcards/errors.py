from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    METADATA_FETCH_FAILED = "METADATA_FETCH_FAILED"
    EDITOR_NOT_FOUND = "EDITOR_NOT_FOUND"
    TOKEN_UNAVAILABLE = "TOKEN_UNAVAILABLE"


class FormCardsError(Exception):
    """Raised for expected failure conditions inside formcards.

    Transport failures while exporting a document are deliberately not
    wrapped in this type; they reach the caller as the original httpx error.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }
