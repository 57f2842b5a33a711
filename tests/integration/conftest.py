"""Integration test fixtures.

Provides a fully wired AppState built by the real lifespan. HTTP calls are
intercepted with respx by the tests themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from formcards.app import lifespan
from formcards.config import Settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from formcards.state import AppState


@pytest.fixture()
def integration_settings() -> Settings:
    return Settings(
        auth={"token": "integration-token"},
        documents={
            "export_url": "https://docs.example.com/feeds/download/documents/export/Export",
            "metadata_url": "https://files.example.com/drive/v2/files",
        },
        logging={"level": "WARNING", "format": "text"},
    )


@pytest.fixture()
async def app_state(integration_settings: Settings) -> AsyncGenerator[AppState, None]:
    """Full AppState with merge values for preview rendering."""
    async with lifespan(
        integration_settings, merge_values={"FirstName": "Ada", "City": "Edmonton"}
    ) as state:
        yield state
