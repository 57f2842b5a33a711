"""Integration tests: documents pulled through the service into a card.

Exercises the full path a host takes: lifespan → DocumentService export →
EditableCard value → preview rendering through the merge-tag renderer.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import respx

from formcards.app import lifespan
from formcards.cards import EditableCard
from formcards.dom import Container, Header

if TYPE_CHECKING:
    from formcards.config import Settings
    from formcards.state import AppState

EXPORT_URL = "https://docs.example.com/feeds/download/documents/export/Export"
METADATA_URL = "https://files.example.com/drive/v2/files"
TEMPLATE = "<p>Dear <<FirstName>>, welcome to <<City>>.</p>"


class TestLifespan:
    async def test_state_is_fully_wired(self, app_state: AppState) -> None:
        assert app_state.http_client is not None
        assert app_state.cache is not None
        assert app_state.document_service is not None
        assert len(app_state.cache) == 0

    async def test_http_client_closed_on_exit(self, integration_settings: Settings) -> None:
        async with lifespan(integration_settings) as state:
            client = state.http_client
        assert client is not None
        assert client.is_closed


class TestTemplateIntoCard:
    async def test_exported_template_previews_with_merge_values(
        self, app_state: AppState
    ) -> None:
        assert app_state.document_service is not None
        with respx.mock:
            route = respx.get(url__startswith=EXPORT_URL).mock(
                return_value=httpx.Response(200, text=TEMPLATE)
            )
            html = await app_state.document_service.get_document_as_html("template-1")
            # Repeated includes of the same template hit the cache.
            again = await app_state.document_service.get_document_as_html("template-1")
            assert route.call_count == 1
            request = route.calls.last.request
            assert request.headers["Authorization"] == "Bearer integration-token"
        assert html == again == TEMPLATE

        header = Header("header")
        card = EditableCard(
            Container("form"),
            app_state.toolkit,
            render_service=app_state.render_service,
            header=header,
        )
        card.set_value(html)
        await asyncio.sleep(0)
        assert card.is_ready
        assert card.get_value() == TEMPLATE
        assert card.is_valid()

        editor = card.get_editor()
        assert editor is not None
        assert editor.preview() == "<p>Dear Ada, welcome to Edmonton.</p>"

        editor.set_fullscreen(True)
        assert not header.visible
        editor.set_fullscreen(False)
        assert header.visible

    async def test_error_page_lands_in_card_as_content(self, app_state: AppState) -> None:
        assert app_state.document_service is not None
        with respx.mock:
            respx.get(url__startswith=EXPORT_URL).mock(
                return_value=httpx.Response(404, text="<html>not found</html>")
            )
            html = await app_state.document_service.get_document_as_html("missing")

        card = EditableCard(Container("form"), app_state.toolkit)
        await asyncio.sleep(0)
        card.set_value(html)
        assert card.get_value() == "<html>not found</html>"


class TestThumbnails:
    async def test_thumbnail_lookup_is_not_cached(self, app_state: AppState) -> None:
        assert app_state.document_service is not None
        with respx.mock:
            route = respx.get(f"{METADATA_URL}/template-1").mock(
                return_value=httpx.Response(
                    200,
                    json={"id": "template-1", "thumbnailLink": "https://thumbs.example.com/1"},
                )
            )
            first = await app_state.document_service.get_thumbnail("template-1")
            second = await app_state.document_service.get_thumbnail("template-1")
            assert route.call_count == 2
        assert first == second == "https://thumbs.example.com/1"
