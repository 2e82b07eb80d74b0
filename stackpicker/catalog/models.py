"""Pydantic v2 models for the dependency catalog.

A catalog is an ordered forest.  Internal nodes are ``Category`` objects that
group other nodes; leaves are ``Dependency`` objects that can be checked.  The
two variants are told apart by the presence of ``children`` and carry no
behaviour beyond what traversal needs.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, Discriminator, Field, RootModel, Tag, model_validator


class CatalogError(ValueError):
    """Raised when a catalog is malformed or cannot be loaded."""


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

class Dependency(BaseModel):
    """A selectable leaf. Identity is ``value``."""
    label: str = Field(..., description="Display name, unique among siblings")
    value: str = Field(..., min_length=1, description="Stable identifier, e.g. 'frontend-vite'")
    checked: bool = Field(default=False, description="Whether the leaf is selected")
    icon: str = Field(default="", description="Icon identifier (not a path)")


class Category(BaseModel):
    """A grouping node holding dependencies and/or nested categories."""
    label: str = Field(..., description="Display name")
    collapsible: bool = Field(default=True)
    children: list[Node] = Field(default_factory=list)
    id: Optional[str] = Field(
        default=None,
        description="Optional stable key; the label path is used when omitted",
    )


def _node_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "category" if "children" in value else "dependency"
    return "category" if hasattr(value, "children") else "dependency"


Node = Annotated[
    Union[Annotated[Category, Tag("category")], Annotated[Dependency, Tag("dependency")]],
    Discriminator(_node_kind),
]

Category.model_rebuild()


def is_category(node: Node) -> bool:
    """Return ``True`` for internal nodes."""
    return isinstance(node, Category)


def walk(
    nodes: list[Node], parent: Category | None = None
) -> Iterator[tuple[Node, Category | None]]:
    """Yield ``(node, parent)`` pairs in depth-first pre-order."""
    for node in nodes:
        yield node, parent
        if isinstance(node, Category):
            yield from walk(node.children, node)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Catalog(RootModel[list[Node]]):
    """The ordered forest a selection session starts from.

    Dependency values must be unique across the whole forest and labels must
    be unique among siblings.
    """

    root: list[Node] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_identities(self) -> "Catalog":
        _check_sibling_labels(self.root, "<root>")
        seen: set[str] = set()
        for node, _parent in walk(self.root):
            if isinstance(node, Dependency):
                if node.value in seen:
                    raise CatalogError(f"Duplicate dependency value: {node.value!r}")
                seen.add(node.value)
        return self

    def __iter__(self) -> Iterator[Node]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def dependencies(self) -> list[Dependency]:
        """Return every leaf in depth-first order."""
        return [node for node, _ in walk(self.root) if isinstance(node, Dependency)]

    def categories(self) -> list[Category]:
        """Return every category in depth-first order."""
        return [node for node, _ in walk(self.root) if isinstance(node, Category)]


def _check_sibling_labels(nodes: list[Node], where: str) -> None:
    labels: set[str] = set()
    for node in nodes:
        if node.label in labels:
            raise CatalogError(f"Duplicate label {node.label!r} under {where}")
        labels.add(node.label)
        if isinstance(node, Category):
            _check_sibling_labels(node.children, repr(node.label))
