"""Base card types.

A card is a self-contained input widget: it owns a root container that it
appends to the host, and exposes get/set value, label and validation.
"""

from __future__ import annotations

import itertools

from formcards.dom import Container, Element

_ids = itertools.count(1)


def next_element_id(prefix: str) -> str:
    return f"formcards-{prefix}-{next(_ids)}"


class Card:
    def __init__(self, container: Container) -> None:
        self.base = Container(next_element_id("card"), **{"class": "card"})
        container.append(self.base)

    def append(self, element: Element) -> None:
        self.base.append(element)

    def get_id(self) -> str | None:
        return self.base.id

    def get_value(self) -> str | None:
        return None

    def set_value(self, value: str) -> None:
        pass

    def is_valid(self) -> bool:
        return True


class TitledCard(Card):
    """A card with a heading above its content."""

    def __init__(self, container: Container, title: str | None = None) -> None:
        super().__init__(container)
        self._title = Element(next_element_id("title"), **{"class": "card-title"})
        self.append(self._title)
        if title is not None:
            self.set_title(title)

    def set_title(self, title: str) -> None:
        self._title.attr("text", title)

    def get_title(self) -> str | None:
        return self._title.attr("text")
