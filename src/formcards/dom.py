"""Headless host elements.

Cards are composed out of these objects the way a browser card would be
composed out of DOM nodes. They hold only the state the card contract reads
or writes: value, placeholder, visibility, children and focus listeners.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any


class Element:
    def __init__(self, element_id: str | None = None, **attributes: str) -> None:
        self.id = element_id
        self.attributes: dict[str, str] = dict(attributes)
        self.visible = True

    def attr(self, name: str, value: str | None = None) -> str | None:
        """Read an attribute, or set it when ``value`` is given."""
        if value is None:
            return self.attributes.get(name)
        self.attributes[name] = value
        return value

    def hide(self) -> None:
        self.visible = False

    def show(self) -> None:
        self.visible = True


class Header(Element):
    """Page header that a fullscreen editor must not be hidden behind."""


class Container(Element):
    def __init__(self, element_id: str | None = None, **attributes: str) -> None:
        super().__init__(element_id, **attributes)
        self.children: list[Element] = []

    def append(self, child: Element) -> None:
        self.children.append(child)

    def find(self, element_type: type[Element]) -> Element | None:
        """Depth-first search for the first descendant of ``element_type``."""
        for child in self.children:
            if isinstance(child, element_type):
                return child
            if isinstance(child, Container):
                found = child.find(element_type)
                if found is not None:
                    return found
        return None


FocusHandler = Callable[[], Awaitable[Any] | None]


class TextArea(Element):
    """Multi-line plain-text input. Doubles as the editor's pre-ready proxy."""

    def __init__(self, element_id: str | None = None, **attributes: str) -> None:
        super().__init__(element_id, **attributes)
        self.value = ""
        self._focus_handlers: list[FocusHandler] = []

    @property
    def placeholder(self) -> str | None:
        return self.attributes.get("placeholder")

    def on_focus(self, handler: FocusHandler) -> None:
        self._focus_handlers.append(handler)

    async def focus(self) -> None:
        """Run focus handlers in registration order, awaiting any that are async."""
        for handler in list(self._focus_handlers):
            result = handler()
            if inspect.isawaitable(result):
                await result
