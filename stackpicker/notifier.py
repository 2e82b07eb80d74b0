"""Console presenter for selection events.

Subscribe a ``ConsoleNotifier`` to a ``SelectionTree`` to get the short
"X selected." / "X deselected." feedback on the terminal.
"""

from __future__ import annotations

from rich.markup import escape

from stackpicker.selection.events import EventKind, SelectionEvent
from stackpicker.utils import print_info, print_success, print_warning


class ConsoleNotifier:
    """Prints one line per selection event; ``tree_changed`` is silent."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.history: list[SelectionEvent] = []

    def __call__(self, event: SelectionEvent) -> None:
        self.history.append(event)
        if self.quiet or event.kind is EventKind.TREE_CHANGED:
            return
        if event.kind is EventKind.SELECTED:
            print_success(escape(event.message))
        elif event.kind is EventKind.DESELECTED:
            print_warning(escape(event.message))
        else:
            print_info(escape(event.message))
