"""Shared test fixtures for the formcards test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from formcards.app import setup_logging
from formcards.config import Settings
from formcards.dom import Container, Header
from formcards.editor import EditorToolkit
from formcards.render import MergeTagRenderer


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def toolkit(settings: Settings) -> EditorToolkit:
    return EditorToolkit(settings.editor)


@pytest.fixture()
def container() -> Container:
    """Host element that cards append themselves to."""
    return Container("host")


@pytest.fixture()
def header() -> Header:
    return Header("page-header", **{"data-id": "header"})


@pytest.fixture()
def render_service() -> MergeTagRenderer:
    return MergeTagRenderer({"FirstName": "Ada", "City": "Edmonton"})


@pytest.fixture()
def configured_logging() -> Iterator[None]:
    """Run with the real structlog pipeline at DEBUG, then restore defaults."""
    setup_logging(Settings(logging={"level": "DEBUG", "format": "text"}))
    # Loggers cached here would keep writing to this test's stderr.
    structlog.configure(cache_logger_on_first_use=False)
    yield
    structlog.reset_defaults()
