"""stackpicker command-line entry point.

Loads a catalog, applies the requested toggles in order, and prints the
resulting selection and command plan.  Commands are never executed.

Usage::

    python -m stackpicker.cli --list
    python -m stackpicker.cli --select frontend-vite --select frontend-ts --select shadcn
    python -m stackpicker.cli -s frontend-next -s zustand --script setup.sh
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from stackpicker.catalog import CatalogError, default_catalog, load_catalog
from stackpicker.config import Config, InstallerConfig
from stackpicker.installers import CommandGenerator, TemplateRenderer
from stackpicker.notifier import ConsoleNotifier
from stackpicker.selection import NotFoundError, SelectionTree
from stackpicker.utils import (
    console,
    print_catalog_table,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the selection and return a process exit code."""
    import argparse

    parser = argparse.ArgumentParser(
        description="stackpicker -- build a project setup plan from a dependency catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m stackpicker.cli --list\n"
            "  python -m stackpicker.cli -s frontend-vite -s frontend-ts -s tailwind\n"
            "  python -m stackpicker.cli -s frontend-next --script setup.sh\n"
        ),
    )
    parser.add_argument("--catalog", "-c", default=None, help="Catalog file (.json, .yaml, .yml)")
    parser.add_argument(
        "--select", "-s",
        action="append",
        default=[],
        metavar="VALUE",
        help="Dependency value to toggle; repeat to toggle several in order",
    )
    parser.add_argument("--app-name", default=None, help="Base name of the generated app directory")
    parser.add_argument(
        "--package-manager",
        choices=("npm", "pnpm", "yarn"),
        default=None,
        help="Package manager used for library installs",
    )
    parser.add_argument("--script", default=None, help="Write the rendered setup script to this path")
    parser.add_argument("--list", action="store_true", help="List the catalog and exit")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print selection events")

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        if args.catalog:
            config.catalog_path = Path(args.catalog)
        overrides = {
            key: value
            for key, value in (("app_name", args.app_name), ("package_manager", args.package_manager))
            if value
        }
        if overrides:
            config.installer = InstallerConfig(**{**config.installer.model_dump(), **overrides})

        catalog = load_catalog(config.catalog_path) if config.catalog_path else default_catalog()
        tree = SelectionTree(catalog, config.selection)

        if args.list:
            print_catalog_table(tree.children_of())
            return 0

        notifier = ConsoleNotifier(quiet=args.quiet)
        tree.subscribe(notifier)
        for value in args.select:
            tree.toggle(value)
    except (CatalogError, NotFoundError, FileNotFoundError, ValidationError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    selected = tree.get_selected_dependencies()
    if not selected:
        print_warning("Nothing selected.")
        return 0

    forced = [
        dep.value for dep in tree.iter_dependencies()
        if dep.checked and dep.value not in selected
    ]
    plan = CommandGenerator(config.installer).generate(selected, output_dir=config.output_dir)

    print_header("Selection")
    print_summary_table(
        {
            "Selected": ", ".join(selected),
            "Checked (not in list)": ", ".join(forced) or "-",
            "App directory": plan.app_name,
            "Framework": plan.framework or "-",
            "Skipped": ", ".join(plan.skipped) or "-",
        },
        title="Selection",
    )

    print_header("Commands")
    for index, step in enumerate(plan.steps, start=1):
        console.print(f"[dim]{index:>2}.[/dim] [dim]({escape(step.cwd)})[/dim] {escape(step.command)}")
    console.print()

    if args.script:
        try:
            path = TemplateRenderer().render_to_file("setup.sh.j2", args.script, {"plan": plan})
        except OSError as exc:
            print_error(f"Error: could not write {escape(args.script)}: {escape(str(exc))}")
            return 1
        print_success(f"Setup script written to {path}")
    return 0


def main() -> None:
    """CLI entry point for ``python -m stackpicker.cli``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
