"""Unit tests for formcards.autocomplete."""

from __future__ import annotations

from formcards.autocomplete import AutocompleteConfig, AutocompleteOptions
from formcards.dom import Container

VALUES = ["FirstName", "LastName", "Email", "City"]


async def _values() -> list[str]:
    return VALUES


def _config(**options: object) -> AutocompleteConfig:
    config = AutocompleteConfig(Container())
    config.configure(AutocompleteOptions(getter=_values, **options))
    return config


class TestAutocompleteOptions:
    def test_defaults(self) -> None:
        options = AutocompleteOptions()
        assert options.trigger is None
        assert options.append == ""
        assert options.prepend == ""
        assert options.max_results is None
        assert options.trigger_on_focus is False
        assert options.getter is None


class TestSearch:
    async def test_without_getter_returns_nothing(self) -> None:
        config = AutocompleteConfig(Container())
        assert await config.search("anything") == []
        assert config.last_query == "anything"

    async def test_no_trigger_matches_whole_query(self) -> None:
        assert await _config().search("name") == ["FirstName", "LastName"]

    async def test_trigger_uses_text_after_last_trigger(self) -> None:
        config = _config(trigger="<<")
        assert await config.search("Hi <<First>> and <<ci") == ["City"]

    async def test_query_without_trigger_has_no_suggestions(self) -> None:
        assert await _config(trigger="<<").search("plain text") == []

    async def test_bare_trigger_suggests_everything(self) -> None:
        assert await _config(trigger="<<").search("Dear <<") == VALUES

    async def test_prepend_and_append(self) -> None:
        config = _config(prepend="<<", append=">>")
        assert await config.search("email") == ["<<Email>>"]

    async def test_max_results(self) -> None:
        assert await _config(max_results=1).search("name") == ["FirstName"]
