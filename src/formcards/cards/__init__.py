from __future__ import annotations

from formcards.cards.base import Card, TitledCard
from formcards.cards.editable import EditableCard, EditorState

__all__ = [
    "Card",
    "TitledCard",
    "EditableCard",
    "EditorState",
]
