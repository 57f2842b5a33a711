from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class EvictionPolicy(StrEnum):
    NEVER = "never"


class CachedDocument(BaseModel):
    """HTML export of a remote document, as first fetched."""

    document_id: str
    content: str  # Exported HTML, merge tags left unresolved
    status_code: int  # Non-2xx bodies are cached like any other
    fetched_at: datetime
