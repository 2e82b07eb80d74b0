"""Shared pytest fixtures for the stackpicker test suite.

Provides reusable fixtures for:
- Small hand-written catalogs (flat and nested)
- The built-in catalog
- Selection trees with default and custom rules
- Event recording observers
"""

from __future__ import annotations

from typing import Any

import pytest

from stackpicker.catalog import Catalog, default_catalog
from stackpicker.config import SelectionRules
from stackpicker.selection import SelectionEvent, SelectionTree


# ---------------------------------------------------------------------------
# Catalog data
# ---------------------------------------------------------------------------

def leaf(label: str, value: str, icon: str = "") -> dict[str, Any]:
    return {"label": label, "value": value, "checked": False, "icon": icon}


def category(label: str, *children: dict[str, Any]) -> dict[str, Any]:
    return {"label": label, "collapsible": True, "children": list(children)}


@pytest.fixture
def frameworks_catalog() -> list[dict[str, Any]]:
    """Single top-level 'Frameworks' category with two leaves."""
    return [
        category(
            "Frameworks",
            leaf("Vite", "frontend-vite", "vite"),
            leaf("React", "frontend-react", "react"),
        ),
    ]


@pytest.fixture
def stack_catalog() -> list[dict[str, Any]]:
    """A nested catalog covering every rule.

    Layout::

        Frontend
          Frameworks       (single-select)
            Vite, React, Next.js
          Languages        (single-select)
            TypeScript, JavaScript
        Styles             (single-select, top-level)
          Tailwind CSS, Bootstrap
        Libraries
          UI
            shadcn/ui, Radix UI
          Axios
        Zustand            (root-level leaf)
    """
    return [
        category(
            "Frontend",
            category(
                "Frameworks",
                leaf("Vite", "frontend-vite"),
                leaf("React", "frontend-react"),
                leaf("Next.js", "frontend-next"),
            ),
            category(
                "Languages",
                leaf("TypeScript", "frontend-ts"),
                leaf("JavaScript", "frontend-js"),
            ),
        ),
        category(
            "Styles",
            leaf("Tailwind CSS", "tailwind"),
            leaf("Bootstrap", "bootstrap"),
        ),
        category(
            "Libraries",
            category(
                "UI",
                leaf("shadcn/ui", "shadcn"),
                leaf("Radix UI", "radixui"),
            ),
            leaf("Axios", "axios"),
        ),
        leaf("Zustand", "zustand"),
    ]


@pytest.fixture
def builtin_catalog() -> Catalog:
    return default_catalog()


# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------

@pytest.fixture
def rules() -> SelectionRules:
    """Default rules: Frameworks/Languages/Styles single-select, shadcn/radixui need tailwind."""
    return SelectionRules()


@pytest.fixture
def tree(stack_catalog: list[dict[str, Any]], rules: SelectionRules) -> SelectionTree:
    return SelectionTree(stack_catalog, rules)


@pytest.fixture
def recorder() -> list[SelectionEvent]:
    """An observer that is also the list of events it received."""

    class _Recorder(list):
        def __call__(self, event: SelectionEvent) -> None:
            self.append(event)

    return _Recorder()
