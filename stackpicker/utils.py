"""Shared console helpers for stackpicker.

Every user-facing message goes through the module-level Rich ``console`` so
output can be captured or redirected in one place.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from stackpicker.catalog.models import Category, Dependency, Node

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_cyan") -> None:
    """Print a full-width rule with *title*."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_catalog_table(nodes: Sequence[Node], title: str = "Catalog") -> None:
    """Print every dependency with its category path and value."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Category", style="dim")
    table.add_column("Label")
    table.add_column("Value", style="bold")

    def _rows(children: Sequence[Node], path: str) -> None:
        for node in children:
            if isinstance(node, Category):
                _rows(node.children, f"{path} / {node.label}" if path else node.label)
            elif isinstance(node, Dependency):
                table.add_row(path, node.label, node.value)

    _rows(nodes, "")
    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a cyan informational message."""
    console.print(f"[cyan]{message}[/cyan]")
