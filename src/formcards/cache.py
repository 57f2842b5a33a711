"""In-memory cache of exported documents.

One entry per document id, written once and kept for the cache's lifetime.
There is no TTL and no invalidation: the first stored export is what every
later reader sees, even when the remote document has changed since.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from formcards.models.cache import CachedDocument, EvictionPolicy

if TYPE_CHECKING:
    from collections.abc import Iterator

log = structlog.get_logger()


class DocumentCache:
    """Dict-backed cache implementing DocumentCacheProtocol."""

    def __init__(self, eviction_policy: EvictionPolicy = EvictionPolicy.NEVER) -> None:
        self.eviction_policy = eviction_policy
        self._entries: dict[str, CachedDocument] = {}

    def get(self, document_id: str) -> CachedDocument | None:
        """Return the cached export, or ``None`` on a miss."""
        return self._entries.get(document_id)

    def set(self, entry: CachedDocument) -> None:
        """Store ``entry`` unless the id is already cached. First write wins."""
        if entry.document_id in self._entries:
            log.debug("document_cache_write_ignored", document_id=entry.document_id)
            return
        self._entries[entry.document_id] = entry

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
