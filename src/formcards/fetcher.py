"""Authenticated HTTP fetcher for document exports.

DocumentFetcher receives an httpx.AsyncClient via constructor injection; the
lifespan owns the client lifecycle.

HTTP error statuses are muted: a 404 or 500 comes back as a normal response
whose body the caller can inspect. Transport failures (connection refused,
DNS, timeout) are not muted and reach the caller as the original httpx error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

if TYPE_CHECKING:
    from formcards.config import HttpSettings

log = structlog.get_logger()


def build_http_client(settings: HttpSettings) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": settings.user_agent},
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
    )


def bearer_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class DocumentFetcher:
    """GETs export URLs with a bearer token, returning any HTTP status."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(
        self,
        url: str,
        *,
        token: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.get(url, params=params, headers=bearer_headers(token))
        except httpx.TransportError:
            log.warning("document_fetch_failed", url=url, exc_info=True)
            raise

        if not response.is_success:
            log.warning(
                "document_fetch_http_error",
                url=url,
                status_code=response.status_code,
            )
        else:
            log.info(
                "fetch_complete",
                url=url,
                status_code=response.status_code,
                content_length=len(response.text),
            )
        return response
