"""Selection engine: checked state, constraints and the ordered selection list.

Usage::

    from stackpicker.catalog import default_catalog
    from stackpicker.selection import SelectionTree

    tree = SelectionTree(default_catalog())
    tree.toggle("frontend-vite")
    tree.toggle("shadcn")
    print(tree.get_selected_dependencies())
"""

from stackpicker.selection.events import EventKind, Observer, SelectionEvent
from stackpicker.selection.tree import NotFoundError, SelectionTree

__all__ = [
    "EventKind",
    "NotFoundError",
    "Observer",
    "SelectionEvent",
    "SelectionTree",
]
