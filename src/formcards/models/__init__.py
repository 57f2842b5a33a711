from __future__ import annotations

from formcards.models.cache import CachedDocument, EvictionPolicy
from formcards.models.metadata import FileMetadata
from formcards.models.requests import DocumentRequest

__all__ = [
    # cache
    "CachedDocument",
    "EvictionPolicy",
    # metadata
    "FileMetadata",
    # requests
    "DocumentRequest",
]
