"""Reads remotely hosted documents as HTML.

DocumentService exports a document by id, at most once per cache lifetime,
and looks up file metadata (including thumbnails) through a separate
metadata collaborator. Hosts compose it; nothing here knows about cards.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx
import structlog

from formcards.errors import ErrorCode, FormCardsError
from formcards.fetcher import bearer_headers
from formcards.models.cache import CachedDocument
from formcards.models.metadata import FileMetadata
from formcards.models.requests import DocumentRequest

if TYPE_CHECKING:
    from formcards.config import DocumentSettings
    from formcards.fetcher import DocumentFetcher
    from formcards.protocols import (
        DocumentCacheProtocol,
        MetadataProviderProtocol,
        TokenProviderProtocol,
    )

log = structlog.get_logger()


def _validate_document_id(document_id: str) -> str:
    try:
        return DocumentRequest(document_id=document_id).document_id
    except ValueError as exc:
        raise FormCardsError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide the id of an existing document.",
            recoverable=False,
        ) from exc


def _consume_exception(task: asyncio.Task[str]) -> None:
    # Waiters may all have been cancelled; mark the failure as retrieved.
    if not task.cancelled():
        task.exception()


# ---------------------------------------------------------------------------
# Token providers
# ---------------------------------------------------------------------------


class StaticTokenProvider:
    """Hands out a fixed bearer token, typically from FORMCARDS__AUTH__TOKEN."""

    def __init__(self, token: str | None) -> None:
        self._token = token

    def get_token(self) -> str:
        if not self._token:
            raise FormCardsError(
                code=ErrorCode.TOKEN_UNAVAILABLE,
                message="No bearer token is configured.",
                suggestion="Set FORMCARDS__AUTH__TOKEN or inject a token provider.",
                recoverable=False,
            )
        return self._token


class CallableTokenProvider:
    """Adapts a zero-argument callable (e.g. a credential refresh hook)."""

    def __init__(self, func: Callable[[], str]) -> None:
        self._func = func

    def get_token(self) -> str:
        return self._func()


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class DriveMetadataClient:
    """Looks up file records on the Drive files endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_provider: TokenProviderProtocol,
        settings: DocumentSettings,
    ) -> None:
        self._client = client
        self._token_provider = token_provider
        self._settings = settings

    async def get_file(self, document_id: str) -> FileMetadata:
        url = f"{self._settings.metadata_url.rstrip('/')}/{document_id}"
        try:
            response = await self._client.get(
                url, headers=bearer_headers(self._token_provider.get_token())
            )
        except httpx.HTTPError as exc:
            raise FormCardsError(
                code=ErrorCode.METADATA_FETCH_FAILED,
                message=f"Network error fetching metadata for {document_id}: {exc}",
                suggestion="The file-storage service may be temporarily unavailable.",
                recoverable=True,
            ) from exc

        if response.status_code == 404:
            raise FormCardsError(
                code=ErrorCode.FILE_NOT_FOUND,
                message=f"File '{document_id}' not found.",
                suggestion="Check the document id and that the user can access the file.",
                recoverable=False,
            )
        if not response.is_success:
            raise FormCardsError(
                code=ErrorCode.METADATA_FETCH_FAILED,
                message=f"HTTP {response.status_code} fetching metadata for {document_id}",
                suggestion="The file-storage service may be temporarily unavailable.",
                recoverable=True,
            )
        return FileMetadata.model_validate(response.json())


# ---------------------------------------------------------------------------
# Document service
# ---------------------------------------------------------------------------


class DocumentService:
    """Exports documents as HTML through a first-write-wins cache.

    NOTE: the token provider must yield a token that can read the document.
    """

    def __init__(
        self,
        *,
        fetcher: DocumentFetcher,
        cache: DocumentCacheProtocol,
        token_provider: TokenProviderProtocol,
        metadata: MetadataProviderProtocol,
        settings: DocumentSettings,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._token_provider = token_provider
        self._metadata = metadata
        self._settings = settings
        self._inflight: dict[str, asyncio.Task[str]] = {}

    async def get_document_as_html(self, document_id: str) -> str:
        """Return the document as HTML. The result may include merge tags.

        A cached export is returned without any I/O. Otherwise the export
        endpoint is fetched once; whatever body comes back, error pages
        included, is cached and returned.
        """
        document_id = _validate_document_id(document_id)

        cached = self._cache.get(document_id)
        if cached is not None:
            log.debug("document_cache_hit", document_id=document_id)
            return cached.content

        # Concurrent callers share one fetch so the id is only fetched once.
        task = self._inflight.get(document_id)
        if task is None:
            task = asyncio.create_task(self._load(document_id))
            task.add_done_callback(_consume_exception)
            self._inflight[document_id] = task
        return await asyncio.shield(task)

    async def _load(self, document_id: str) -> str:
        try:
            response = await self._fetcher.fetch(
                self._settings.export_url,
                token=self._token_provider.get_token(),
                params={"id": document_id, "exportFormat": self._settings.export_format},
            )
            html = response.text
            log.info("document_loaded", document_id=document_id, status_code=response.status_code)
            self._cache.set(
                CachedDocument(
                    document_id=document_id,
                    content=html,
                    status_code=response.status_code,
                    fetched_at=datetime.now(UTC),
                )
            )
            return html
        finally:
            self._inflight.pop(document_id, None)

    async def get_thumbnail(self, document_id: str) -> str | None:
        """Return the document's thumbnail URL. Not cached."""
        metadata = await self.get_metadata(document_id)
        return metadata.thumbnail_link

    async def get_metadata(self, document_id: str) -> FileMetadata:
        """Return the document's full metadata record. Not cached."""
        document_id = _validate_document_id(document_id)
        return await self._metadata.get_file(document_id)
