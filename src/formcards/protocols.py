"""Protocol interfaces for swappable collaborators.

DocumentService and EditableCard reference these protocols, not the concrete
implementations. This allows:
- Tests to use lightweight in-memory implementations
- Hosts to plug in their own credential source, metadata store or renderer
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from formcards.models.cache import CachedDocument
    from formcards.models.metadata import FileMetadata


class DocumentCacheProtocol(Protocol):
    """Interface for the exported-document cache."""

    def get(self, document_id: str) -> CachedDocument | None: ...

    def set(self, entry: CachedDocument) -> None: ...

    def __contains__(self, document_id: object) -> bool: ...


class TokenProviderProtocol(Protocol):
    """Supplies a short-lived bearer token for outbound fetches."""

    def get_token(self) -> str: ...


class MetadataProviderProtocol(Protocol):
    """File-storage metadata lookup."""

    async def get_file(self, document_id: str) -> FileMetadata: ...


class RenderServiceProtocol(Protocol):
    """Resolves merge placeholders in content before it is previewed."""

    def render(self, content: str) -> str: ...

