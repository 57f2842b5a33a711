"""Rich-text input card.

EditableCard keeps its authoritative value in an embedded rich-text editor.
The editor is requested at construction and becomes ready later, so the card
runs a two-state lifecycle:

  initializing: reads return the plain-text proxy (the textarea). Writes go
                to the proxy and are queued.
  ready:        reads and writes go through the editor only. Queued writes
                are flushed into the editor, in order, on the transition.

Editor events are forwarded rather than stored: fullscreen toggles the page
header, previews are passed through the render service, and suggestion
requests are re-emitted on the card as ``getSuggestions``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import structlog

from formcards.autocomplete import AutocompleteConfig, AutocompleteOptions
from formcards.cards.base import TitledCard, next_element_id
from formcards.dom import Container, TextArea
from formcards.events import EventEmitter, Listener

if TYPE_CHECKING:
    from formcards.dom import Header
    from formcards.editor import EditorEvent, EditorToolkit, RichTextEditor
    from formcards.protocols import RenderServiceProtocol

log = structlog.get_logger()

Validator = Callable[["EditableCard"], bool]


class EditorState(StrEnum):
    INITIALIZING = "initializing"
    READY = "ready"


class EditableCard(TitledCard):
    """A card with a multi-line rich-text input."""

    def __init__(
        self,
        container: Container,
        toolkit: EditorToolkit,
        *,
        render_service: RenderServiceProtocol | None = None,
        header: Header | None = None,
        label: str | None = None,
        autocomplete: AutocompleteOptions | Mapping[str, Any] | None = None,
        title: str | None = None,
        element_id: str | None = None,
    ) -> None:
        super().__init__(container, title)
        self._toolkit = toolkit
        self._render_service = render_service
        self._header = header
        self._validate: Validator | None = None
        self._events = EventEmitter()
        self._pending_writes: list[str] = []
        self._focus_bound = False
        self.state = EditorState.INITIALIZING

        self.inner_base = Container(**{"class": "textfield"})
        self.textarea = TextArea(element_id or next_element_id("textarea"))
        self.inner_base.append(self.textarea)
        self.append(self.inner_base)
        self._autocomplete = AutocompleteConfig(self.inner_base)

        if label is not None:
            self.set_label(label)
        if autocomplete is not None:
            self.set_autocomplete(autocomplete)

        toolkit.init(self.textarea, setup=self._setup_editor)

    # ------------------------------------------------------------------
    # Editor setup
    # ------------------------------------------------------------------

    def _setup_editor(self, editor: RichTextEditor) -> None:
        editor.on("init", self._on_ready)
        editor.on("FullscreenStateChanged", self._on_fullscreen)
        editor.on("Previewing", self._on_previewing)
        editor.on("getSuggestions", self._on_suggestions)

    def _on_ready(self, event: EditorEvent) -> None:
        editor = self._toolkit.require(self.textarea.id or "")
        pending, self._pending_writes = self._pending_writes, []
        for value in pending:
            editor.set_content(value)
        self.state = EditorState.READY
        log.info("card_editor_ready", element_id=self.textarea.id, flushed_writes=len(pending))
        self._events.emit("ready", self)

    def _on_fullscreen(self, event: EditorEvent) -> None:
        # The page header overlaps a fullscreen editor whatever its z-index.
        if self._header is None:
            return
        if event.state:
            self._header.hide()
        else:
            self._header.show()
        log.debug("card_fullscreen_changed", element_id=self.textarea.id, state=bool(event.state))

    def _on_previewing(self, event: EditorEvent) -> None:
        if self._render_service is None:
            return
        if isinstance(event.state, Mapping) and event.state.get("content"):
            event.state["content"] = self._render_service.render(event.state["content"])

    def _on_suggestions(self, event: EditorEvent) -> None:
        self._events.emit("getSuggestions", event.state)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, event: str, listener: Listener) -> Callable[[], None]:
        """Listen for ``ready`` or ``getSuggestions``. Returns an unsubscribe function."""
        return self._events.subscribe(event, listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        self._events.unsubscribe(event, listener)

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        return self.state is EditorState.READY

    def get_editor(self) -> RichTextEditor | None:
        return self._toolkit.get(self.textarea.id or "")

    def set_autocomplete(self, options: AutocompleteOptions | Mapping[str, Any]) -> None:
        """Configure autocomplete. Every option is optional.

        When ``trigger_on_focus`` is true, focusing the textarea runs a search
        with the card's current value, like opening a drop-down list.
        """
        if not isinstance(options, AutocompleteOptions):
            options = AutocompleteOptions.model_validate(dict(options))
        self._autocomplete.configure(options)

        if options.trigger_on_focus and not self._focus_bound:
            self.textarea.on_focus(lambda: self._autocomplete.search(self.get_value()))
            self._focus_bound = True

    @property
    def autocomplete(self) -> AutocompleteConfig:
        return self._autocomplete

    def get_value(self) -> str:
        """Return the editor's live content, or the textarea value before it is ready."""
        if not self.is_ready:
            return self.textarea.value
        return self._toolkit.require(self.textarea.id or "").get_content()

    def set_value(self, value: str) -> None:
        """Set the content. Never raises, whatever the editor's state."""
        editor = self.get_editor()
        if self.is_ready and editor is not None:
            editor.set_content(value)
            return
        self.textarea.value = value
        self._pending_writes.append(value)

    def set_label(self, label: str) -> None:
        """Set the placeholder shown when nothing has been typed."""
        self.textarea.attr("placeholder", label)

    def get_text_element(self) -> TextArea:
        return self.textarea

    def set_validation(self, callback: Validator) -> None:
        self._validate = callback

    def is_valid(self) -> bool:
        body = self.get_value()
        if not body:
            return False
        if self._validate is not None and not self._validate(self):
            return False
        return True
