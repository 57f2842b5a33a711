"""Merge-tag rendering for previews."""

from __future__ import annotations

import re
from collections.abc import Mapping

import structlog

log = structlog.get_logger()

DEFAULT_MERGE_TAG_PATTERN = r"<<(.+?)>>"


class MergeTagRenderer:
    """Replaces ``<<name>>`` merge tags with values. Unknown tags are left intact."""

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        *,
        pattern: str = DEFAULT_MERGE_TAG_PATTERN,
    ) -> None:
        self.values: dict[str, str] = dict(values or {})
        self._pattern = re.compile(pattern)

    def render(self, content: str) -> str:
        unresolved: list[str] = []

        def _replace(match: re.Match[str]) -> str:
            name = match.group(1).strip()
            if name in self.values:
                return self.values[name]
            unresolved.append(name)
            return match.group(0)

        rendered = self._pattern.sub(_replace, content)
        if unresolved:
            log.debug("merge_tags_unresolved", tags=unresolved)
        return rendered
