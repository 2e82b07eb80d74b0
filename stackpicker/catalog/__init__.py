"""Dependency catalog: the static forest of categories and dependencies.

Usage::

    from stackpicker.catalog import default_catalog, load_catalog

    catalog = load_catalog("catalog.yaml")
    for dep in catalog.dependencies():
        print(dep.value)
"""

from stackpicker.catalog.loader import default_catalog, load_catalog, parse_catalog
from stackpicker.catalog.models import (
    Catalog,
    CatalogError,
    Category,
    Dependency,
    Node,
    is_category,
    walk,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "Category",
    "Dependency",
    "Node",
    "default_catalog",
    "is_category",
    "load_catalog",
    "parse_catalog",
    "walk",
]
