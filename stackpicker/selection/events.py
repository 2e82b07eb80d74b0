"""Structured events emitted by the selection engine.

The engine never talks to a UI.  Every mutation produces ``SelectionEvent``
objects and hands them to whoever subscribed; the presentation layer decides
how (or whether) to surface them.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """What happened to the tree."""
    SELECTED = "selected"
    DESELECTED = "deselected"
    BASE_SELECTED = "base_selected"
    TREE_CHANGED = "tree_changed"


class SelectionEvent(BaseModel):
    """A single notification produced by ``toggle`` or ``clear``."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    label: str = Field(default="", description="Label of the affected dependency")
    value: str = Field(default="", description="Value of the affected dependency")
    checked: bool = Field(default=False, description="Checked flag after the change")

    @property
    def message(self) -> str:
        """Short human-readable text, e.g. ``"Vite selected."``."""
        if self.kind in (EventKind.SELECTED, EventKind.BASE_SELECTED):
            return f"{self.label} selected."
        if self.kind is EventKind.DESELECTED:
            return f"{self.label} deselected."
        return "Selection changed."


Observer = Callable[[SelectionEvent], None]


def tree_changed() -> SelectionEvent:
    return SelectionEvent(kind=EventKind.TREE_CHANGED)
