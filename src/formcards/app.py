"""Host-side wiring.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the ``lifespan`` context manager
- Close shared resources on exit
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog

from formcards import __version__
from formcards.cache import DocumentCache
from formcards.config import Settings
from formcards.documents import DocumentService, DriveMetadataClient, StaticTokenProvider
from formcards.editor import EditorToolkit
from formcards.fetcher import DocumentFetcher, build_http_client
from formcards.render import MergeTagRenderer
from formcards.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from formcards.protocols import TokenProviderProtocol

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    *,
    token_provider: TokenProviderProtocol | None = None,
    merge_values: Mapping[str, str] | None = None,
) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the host's lifetime."""
    settings = settings or Settings()
    setup_logging(settings)

    log.info("formcards_starting", version=__version__)

    token_provider = token_provider or StaticTokenProvider(settings.auth.token)
    http_client = build_http_client(settings.http)
    cache = DocumentCache(settings.documents.eviction_policy)
    document_service = DocumentService(
        fetcher=DocumentFetcher(http_client),
        cache=cache,
        token_provider=token_provider,
        metadata=DriveMetadataClient(http_client, token_provider, settings.documents),
        settings=settings.documents,
    )

    state = AppState(
        settings=settings,
        toolkit=EditorToolkit(settings.editor),
        render_service=MergeTagRenderer(
            merge_values, pattern=settings.render.merge_tag_pattern
        ),
        http_client=http_client,
        cache=cache,
        document_service=document_service,
    )

    log.info("formcards_started", eviction_policy=cache.eviction_policy)

    try:
        yield state
    finally:
        await http_client.aclose()
        log.info("formcards_stopping", cached_documents=len(cache))
