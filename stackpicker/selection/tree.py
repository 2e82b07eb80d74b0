"""Selection engine over a catalog forest.

``SelectionTree`` owns a private copy of the catalog, keeps every leaf's
``checked`` flag in step with the ordered selection list, and enforces the
configured constraints:

* single-select categories: checking a leaf unchecks its checked siblings;
* requires-base pairs: toggling a dependent forces its base leaf's flag on;
* priority values: inserted at the head of the list instead of the tail.

Queries hand out deep copies.  Callers identify nodes by what those copies
carry: a category's ``id`` (its stable key) and a dependency's ``value``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any, Union

from stackpicker.catalog.models import Catalog, CatalogError, Category, Dependency, Node, walk
from stackpicker.config import SelectionRules
from stackpicker.selection.events import EventKind, Observer, SelectionEvent, tree_changed


class NotFoundError(LookupError):
    """Raised when a node does not belong to the current forest."""

    def __init__(self, message: str, key: str = "") -> None:
        self.key = key
        super().__init__(message)


CatalogInput = Union[Catalog, Iterable[Union[Node, dict[str, Any]]]]


class SelectionTree:
    """The selection/constraint engine.

    Attributes:
        rules: Constraint tables (single-select labels, requires-base pairs,
            priority values).
    """

    def __init__(self, catalog: CatalogInput, rules: SelectionRules | None = None) -> None:
        if isinstance(catalog, Catalog):
            owned = catalog.model_copy(deep=True)
        else:
            owned = Catalog.model_validate(
                [n.model_dump() if isinstance(n, (Category, Dependency)) else n for n in catalog]
            )
        self.rules = rules or SelectionRules()
        self._roots: list[Node] = owned.root
        self._selected: list[str] = []
        self._observers: list[Observer] = []
        self._lock = threading.RLock()

        self._categories: dict[str, Category] = {}
        self._leaves: dict[str, Dependency] = {}
        self._parents: dict[str, Category | None] = {}
        self._index(self._roots, ())

    def _index(self, nodes: list[Node], path: tuple[str, ...], parent: Category | None = None) -> None:
        for node in nodes:
            if isinstance(node, Category):
                node_path = path + (node.label,)
                if node.id is None:
                    node.id = "/".join(node_path)
                if node.id in self._categories:
                    raise CatalogError(f"Duplicate category key: {node.id!r}")
                self._categories[node.id] = node
                self._index(node.children, node_path, node)
            else:
                node.checked = False
                self._leaves[node.value] = node
                self._parents[node.value] = parent

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer* for every emitted event.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _emit(self, events: list[SelectionEvent]) -> None:
        for event in events:
            for observer in list(self._observers):
                observer(event)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def children_of(self, node: Node | None = None) -> list[Node]:
        """Return copies of the immediate children of *node*, or the roots.

        Raises:
            NotFoundError: If *node* is not part of this forest.
        """
        if node is None:
            return [child.model_copy(deep=True) for child in self._roots]
        if isinstance(node, Dependency):
            if node.value not in self._leaves:
                raise NotFoundError(f"Dependency not in tree: {node.value!r}", node.value)
            return []
        category = self._resolve_category(node)
        return [child.model_copy(deep=True) for child in category.children]

    def find_category_by_label(self, label: str) -> Category | None:
        """Return the first category labelled *label* in depth-first order."""
        found = self._find_category_by_label(label)
        return found.model_copy(deep=True) if found is not None else None

    def find_category(self, key: str) -> Category | None:
        """Return the category with stable key *key*."""
        found = self._categories.get(key)
        return found.model_copy(deep=True) if found is not None else None

    def find_nearest_parent_category(self, dependency: Dependency | str) -> Category | None:
        """Return the category holding *dependency* as a direct child.

        Returns ``None`` for root-level leaves and unknown dependencies.
        """
        parent = self._parents.get(_value_of(dependency))
        return parent.model_copy(deep=True) if parent is not None else None

    def find_dependency(self, value: str) -> Dependency | None:
        """Return the leaf whose value is *value*."""
        leaf = self._leaves.get(value)
        return leaf.model_copy() if leaf is not None else None

    def is_checked(self, value: str) -> bool:
        leaf = self._leaves.get(value)
        return leaf.checked if leaf is not None else False

    def iter_dependencies(self) -> list[Dependency]:
        """Return copies of every leaf in depth-first order."""
        return [node.model_copy() for node, _ in walk(self._roots) if isinstance(node, Dependency)]

    def get_selected_dependencies(self) -> tuple[str, ...]:
        """Return a snapshot of the ordered selection list."""
        return tuple(self._selected)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle(self, dependency: Dependency | str) -> list[SelectionEvent]:
        """Flip a leaf, applying the constraint rules first.

        Args:
            dependency: A dependency copy obtained from a query, or its value.

        Returns:
            The events emitted, in emission order; the last one is always
            ``tree_changed``.

        Raises:
            TypeError: If a category is passed.
            NotFoundError: If no leaf has the given value.
        """
        if isinstance(dependency, Category):
            raise TypeError(f"Only dependencies can be toggled, got category {dependency.label!r}")

        with self._lock:
            value = _value_of(dependency)
            leaf = self._leaves.get(value)
            if leaf is None:
                raise NotFoundError(f"Dependency not in tree: {value!r}", value)

            events: list[SelectionEvent] = []

            self._exclude_siblings(leaf)

            base_value = self.rules.base_for(value)
            if base_value is not None and base_value not in self._selected:
                # The forced flag is not added to the selection list.
                base = self._leaves.get(base_value)
                if base is not None:
                    if self._parents[base.value] is not self._parents[value]:
                        self._exclude_siblings(base)
                    base.checked = True
                    events.append(
                        SelectionEvent(
                            kind=EventKind.BASE_SELECTED,
                            label=base.label,
                            value=base.value,
                            checked=True,
                        )
                    )

            leaf.checked = not leaf.checked
            if leaf.checked:
                self._discard(value)
                if self.rules.is_priority(value):
                    self._selected.insert(0, value)
                else:
                    self._selected.append(value)
            else:
                self._discard(value)

            events.append(
                SelectionEvent(
                    kind=EventKind.SELECTED if leaf.checked else EventKind.DESELECTED,
                    label=leaf.label,
                    value=value,
                    checked=leaf.checked,
                )
            )
            events.append(tree_changed())
            self._emit(events)
            return events

    def clear_selected_dependencies(self) -> list[SelectionEvent]:
        """Uncheck every leaf and empty the selection list."""
        with self._lock:
            for leaf in self._leaves.values():
                leaf.checked = False
            self._selected = []
            events = [tree_changed()]
            self._emit(events)
            return events

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _exclude_siblings(self, leaf: Dependency) -> None:
        """Uncheck the other leaves of *leaf*'s category if it is single-select."""
        parent = self._parents[leaf.value]
        if parent is None or not self.rules.is_single_select(parent.label):
            return
        for sibling in parent.children:
            if isinstance(sibling, Dependency) and sibling is not leaf and sibling.checked:
                sibling.checked = False
                self._discard(sibling.value)

    def _discard(self, value: str) -> None:
        self._selected = [v for v in self._selected if v != value]

    def _find_category_by_label(self, label: str) -> Category | None:
        for node, _ in walk(self._roots):
            if isinstance(node, Category) and node.label == label:
                return node
        return None

    def _resolve_category(self, node: Category) -> Category:
        if node.id is not None:
            category = self._categories.get(node.id)
            if category is None:
                raise NotFoundError(f"Category not in tree: {node.id!r}", node.id)
            return category
        # Categories built outside the tree carry no key; fall back to label.
        category = self._find_category_by_label(node.label)
        if category is None:
            raise NotFoundError(f"Category not in tree: {node.label!r}", node.label)
        return category


def _value_of(dependency: Dependency | str) -> str:
    return dependency if isinstance(dependency, str) else dependency.value
