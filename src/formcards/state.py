"""Application state container.

AppState is created once by the host (inside the ``formcards.app.lifespan``
context manager) and handed to whatever builds cards or pulls documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from formcards.cache import DocumentCache
    from formcards.config import Settings
    from formcards.documents import DocumentService
    from formcards.editor import EditorToolkit
    from formcards.protocols import RenderServiceProtocol


@dataclass
class AppState:
    """Holds all shared runtime state."""

    settings: Settings
    toolkit: EditorToolkit
    render_service: RenderServiceProtocol

    http_client: httpx.AsyncClient | None = None
    cache: DocumentCache | None = None
    document_service: DocumentService | None = None
