from __future__ import annotations

from pydantic import BaseModel, field_validator


class DocumentRequest(BaseModel):
    """Validated document id for export and metadata lookups."""

    document_id: str

    @field_validator("document_id")
    @classmethod
    def validate_document_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("document_id must not be empty")
        return v
