"""In-process rich-text editor toolkit.

Mirrors the way a browser editor toolkit attaches to a textarea: the host asks
for an editor with ``EditorToolkit.init``, gets control back immediately, and
the editor becomes ready later, announcing it with an ``init`` event. Inside a
running event loop the pending requests complete on the next loop iteration;
without one they wait for an explicit ``complete_pending()`` call.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from formcards.errors import ErrorCode, FormCardsError

if TYPE_CHECKING:
    from formcards.config import EditorSettings
    from formcards.dom import TextArea

log = structlog.get_logger()

EditorHandler = Callable[["EditorEvent"], None]
SetupHook = Callable[["RichTextEditor"], None]


@dataclass
class EditorEvent:
    """Event object handed to editor handlers. Handlers may mutate ``state``."""

    state: Any = None


class RichTextEditor:
    """Owns the authoritative content of one textarea once initialized."""

    def __init__(
        self, element_id: str, content: str = "", config: dict[str, Any] | None = None
    ) -> None:
        self.id = element_id
        self.config = config or {}
        self.initialized = False
        self._content = content
        self._handlers: defaultdict[str, list[EditorHandler]] = defaultdict(list)

    def on(self, name: str, handler: EditorHandler) -> None:
        self._handlers[name].append(handler)

    def fire(self, name: str, event: EditorEvent | None = None) -> EditorEvent:
        """Deliver ``event`` to handlers for ``name`` in registration order."""
        event = event if event is not None else EditorEvent()
        for handler in list(self._handlers.get(name, [])):
            handler(event)
        return event

    def get_content(self) -> str:
        return self._content

    def set_content(self, content: str) -> None:
        self._content = content

    def set_fullscreen(self, state: bool) -> None:
        self.fire("FullscreenStateChanged", EditorEvent(state=state))

    def preview(self) -> str:
        """Return the content as it would be shown in the preview dialog."""
        event = self.fire("Previewing", EditorEvent(state={"content": self._content}))
        return event.state["content"]


@dataclass
class _InitRequest:
    element: TextArea
    setup: SetupHook | None
    config: dict[str, Any] = field(default_factory=dict)


class EditorToolkit:
    """Creates and tracks editors by element id."""

    def __init__(self, settings: EditorSettings) -> None:
        self.settings = settings
        self._editors: dict[str, RichTextEditor] = {}
        self._pending: list[_InitRequest] = []

    def init(self, element: TextArea, *, setup: SetupHook | None = None) -> None:
        """Request an editor for ``element``. Returns before the editor is ready."""
        if not element.id:
            raise FormCardsError(
                code=ErrorCode.INVALID_INPUT,
                message="Cannot attach an editor to an element without an id.",
                suggestion="Assign an element id before requesting an editor.",
            )
        config = self.settings.model_dump()
        self._pending.append(_InitRequest(element=element, setup=setup, config=config))
        log.debug("editor_init_requested", element_id=element.id)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return  # No loop: the host completes requests via complete_pending()
        loop.call_soon(self.complete_pending)

    def complete_pending(self) -> list[RichTextEditor]:
        """Create editors for every queued request and signal their readiness."""
        requests, self._pending = self._pending, []
        created: list[RichTextEditor] = []
        for request in requests:
            editor = RichTextEditor(
                request.element.id or "", request.element.value, request.config
            )
            if request.setup is not None:
                request.setup(editor)
            self._editors[editor.id] = editor
            editor.initialized = True
            log.info("editor_ready", element_id=editor.id)
            editor.fire("init")
            created.append(editor)
        return created

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def get(self, element_id: str) -> RichTextEditor | None:
        return self._editors.get(element_id)

    def require(self, element_id: str) -> RichTextEditor:
        """Return the editor for ``element_id``; asking for an unknown id is misuse."""
        editor = self._editors.get(element_id)
        if editor is None:
            raise FormCardsError(
                code=ErrorCode.EDITOR_NOT_FOUND,
                message=f"No editor is attached to element '{element_id}'.",
                suggestion="Wait for the editor's init event before reading its content.",
            )
        return editor
