"""Catalog loading.

Catalogs are plain data: a JSON or YAML document holding either the forest
itself (a top-level list) or a mapping with a ``catalog`` key.  The built-in
catalog mirrors the frontend stack offered out of the box.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import Catalog, CatalogError


_SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def _leaf(label: str, value: str, icon: str = "") -> dict[str, Any]:
    return {"label": label, "value": value, "checked": False, "icon": icon}


def _category(label: str, children: list[dict[str, Any]]) -> dict[str, Any]:
    return {"label": label, "collapsible": True, "children": children}


DEFAULT_CATALOG: list[dict[str, Any]] = [
    _category(
        "Frontend",
        [
            _category(
                "Frameworks",
                [
                    _leaf("Vite", "frontend-vite", "vite"),
                    _leaf("React (CRA)", "frontend-react", "react"),
                    _leaf("Next.js", "frontend-next", "nextjs"),
                ],
            ),
            _category(
                "Languages",
                [
                    _leaf("TypeScript", "frontend-ts", "typescript"),
                    _leaf("JavaScript", "frontend-js", "javascript"),
                ],
            ),
            _category(
                "Styles",
                [
                    _leaf("Tailwind CSS", "tailwind", "tailwind"),
                    _leaf("Bootstrap", "bootstrap", "bootstrap"),
                ],
            ),
            _category(
                "UI Libraries",
                [
                    _leaf("shadcn/ui", "shadcn", "shadcn"),
                    _leaf("Radix UI", "radixui", "radixui"),
                ],
            ),
            _category(
                "Other Libraries",
                [
                    _leaf(
                        "React Data Table Component",
                        "react-datatable-component",
                        "react",
                    ),
                    _leaf("React Router", "react-router", "reactrouter"),
                    _leaf("Axios", "axios", "axios"),
                    _leaf("Zustand", "zustand", "zustand"),
                ],
            ),
        ],
    ),
]


def default_catalog() -> Catalog:
    """Return a fresh copy of the built-in catalog."""
    return Catalog.model_validate(DEFAULT_CATALOG)


def parse_catalog(data: Any) -> Catalog:
    """Validate raw catalog data.

    Args:
        data: A list of node mappings, or a mapping with a ``catalog`` key.

    Raises:
        CatalogError: If the data has the wrong shape or fails validation.
    """
    if isinstance(data, dict):
        if "catalog" not in data:
            raise CatalogError("Catalog mapping must contain a 'catalog' key")
        data = data["catalog"]
    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog must be a list of nodes, got {type(data).__name__}"
        )
    try:
        return Catalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog: {exc}") from exc


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        FileNotFoundError: If the file does not exist.
        CatalogError: If the suffix is unsupported or the contents are invalid.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in _SUPPORTED_SUFFIXES:
        raise CatalogError(
            f"Unsupported catalog format {suffix!r}; expected one of "
            f"{', '.join(_SUPPORTED_SUFFIXES)}"
        )

    try:
        raw = file_path.read_text(encoding="utf-8")
        if suffix == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Could not parse {file_path}: {exc}") from exc

    return parse_catalog(data)
