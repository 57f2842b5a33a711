"""Autocomplete configuration for text cards.

Every option is independently optional. Absent options fall back to:
no trigger (the whole value is the query), empty prepend/append, unlimited
results, no search on focus, and no suggestions when there is no getter.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from formcards.dom import Element

log = structlog.get_logger()

ValueGetter = Callable[[], Awaitable[list[str]]]


class AutocompleteOptions(BaseModel):
    """Accepts snake_case names or the camelCase keys hosts pass (maxResults, triggerOnFocus)."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    trigger: str | None = None
    append: str = ""
    prepend: str = ""
    max_results: int | None = Field(default=None, alias="maxResults")
    trigger_on_focus: bool = Field(default=False, alias="triggerOnFocus")
    getter: ValueGetter | None = None


class AutocompleteConfig:
    """Turns the values from a getter into suggestions for a query."""

    def __init__(self, element: Element) -> None:
        self.element = element
        self.options = AutocompleteOptions()
        self.last_query: str | None = None
        self.last_results: list[str] = []

    def configure(self, options: AutocompleteOptions) -> None:
        self.options = options

    def _term(self, query: str) -> str | None:
        trigger = self.options.trigger
        if not trigger:
            return query
        if trigger not in query:
            return None
        return query.rsplit(trigger, 1)[1]

    async def search(self, query: str) -> list[str]:
        """Return decorated values matching the text after the last trigger."""
        self.last_query = query
        term = self._term(query)
        if self.options.getter is None or term is None:
            self.last_results = []
            return self.last_results

        values = await self.options.getter()
        term = term.lower()
        matches = [
            f"{self.options.prepend}{value}{self.options.append}"
            for value in values
            if term in value.lower()
        ]
        if self.options.max_results is not None:
            matches = matches[: self.options.max_results]
        self.last_results = matches

        log.debug("autocomplete_search", query=query, match_count=len(matches))
        return matches
