"""Turn an ordered selection list into shell commands.

``CommandGenerator`` reads the values produced by
``SelectionTree.get_selected_dependencies()`` and builds a ``CommandPlan``:
the framework scaffolder first, then one or more install/init steps per
library, all of them run inside the generated app directory.  Nothing is
executed here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Sequence

from pydantic import BaseModel, Field

from stackpicker.config import InstallerConfig

from .templates import TemplateRenderer


FRAMEWORK_VALUES: tuple[str, ...] = ("frontend-vite", "frontend-react", "frontend-next")
LANGUAGE_VALUES: tuple[str, ...] = ("frontend-ts", "frontend-js")

FRAMEWORK_NAMES: dict[str, str] = {
    "frontend-vite": "vite",
    "frontend-react": "react",
    "frontend-next": "next",
}

Action = Literal["add", "add_dev", "exec"]

# value -> ordered (action, arguments) pairs
LIBRARY_RECIPES: dict[str, list[tuple[Action, str]]] = {
    "tailwind": [
        ("add_dev", "tailwindcss postcss autoprefixer"),
        ("exec", "tailwindcss init -p"),
    ],
    "bootstrap": [("add", "bootstrap")],
    "shadcn": [("exec", "shadcn@latest init -d")],
    "radixui": [("add", "@radix-ui/themes")],
    "react-datatable-component": [("add", "react-data-table-component")],
    "react-router": [("add", "react-router-dom")],
    "axios": [("add", "axios")],
    "zustand": [("add", "zustand")],
}

_ADD: dict[str, str] = {"npm": "npm install", "pnpm": "pnpm add", "yarn": "yarn add"}
_ADD_DEV: dict[str, str] = {"npm": "npm install -D", "pnpm": "pnpm add -D", "yarn": "yarn add -D"}
_EXEC: dict[str, str] = {"npm": "npx", "pnpm": "pnpm dlx", "yarn": "yarn dlx"}


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class CommandStep(BaseModel):
    """A single shell command and the directory it must run in."""

    command: str
    cwd: str = Field(default=".", description="Directory relative to the launch directory")
    description: str = Field(default="")
    source: str = Field(default="", description="Selection value that produced this step")


class CommandPlan(BaseModel):
    """Ordered commands for one selection."""

    app_name: str
    framework: Optional[str] = Field(default=None, description="'vite', 'react', 'next' or None")
    steps: list[CommandStep] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Selected values with no known commands"
    )

    def commands(self) -> list[str]:
        """Return the bare command strings in execution order."""
        return [step.command for step in self.steps]

    def render_script(self, renderer: TemplateRenderer | None = None) -> str:
        """Render the plan as a POSIX shell script."""
        renderer = renderer or TemplateRenderer()
        return renderer.render("setup.sh.j2", {"plan": self})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def unique_app_directory(base: str, parent: str | Path = ".") -> str:
    """Return *base*, or *base*-N for the first N whose directory is free.

    Examples::

        unique_app_directory("my-project")  -> "my-project"    # nothing there yet
        unique_app_directory("my-project")  -> "my-project-1"  # my-project exists
    """
    parent_path = Path(parent)
    candidate = base
    counter = 1
    while (parent_path / candidate).exists():
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class CommandGenerator:
    """Builds a ``CommandPlan`` from selected values."""

    def __init__(self, config: InstallerConfig | None = None) -> None:
        self.config = config or InstallerConfig()

    def generate(
        self,
        selected: Sequence[str],
        output_dir: str | Path | None = None,
    ) -> CommandPlan:
        """Build the plan for *selected*.

        Args:
            selected: Ordered selection values, framework values first.
            output_dir: When given, the app directory name is made unique
                within it.

        Returns:
            The command plan.  When several framework values are present the
            first of vite, react, next wins, regardless of list order.
        """
        app_name = self.config.app_name
        if output_dir is not None:
            app_name = unique_app_directory(app_name, output_dir)

        typescript = "frontend-ts" in selected
        plan = CommandPlan(app_name=app_name)

        framework_value = next((v for v in FRAMEWORK_VALUES if v in selected), None)
        if framework_value is not None:
            plan.framework = FRAMEWORK_NAMES[framework_value]
            plan.steps.extend(self._framework_steps(framework_value, app_name, typescript))

        workdir = app_name if framework_value is not None else "."
        for value in selected:
            if value in FRAMEWORK_VALUES or value in LANGUAGE_VALUES:
                continue
            recipe = LIBRARY_RECIPES.get(value)
            if recipe is None:
                plan.skipped.append(value)
                continue
            for action, args in recipe:
                plan.steps.append(
                    CommandStep(
                        command=self._library_command(action, args),
                        cwd=workdir,
                        description=f"Set up {value}",
                        source=value,
                    )
                )
        return plan

    def _library_command(self, action: Action, args: str) -> str:
        pm = self.config.package_manager
        if action == "add":
            return f"{_ADD[pm]} {args}"
        if action == "add_dev":
            return f"{_ADD_DEV[pm]} {args}"
        return f"{_EXEC[pm]} {args}"

    def _framework_steps(self, value: str, app_name: str, typescript: bool) -> list[CommandStep]:
        if value == "frontend-vite":
            template = "react-ts" if typescript else "react"
            create = f"npm create vite@latest {app_name} -- --template {template}"
        elif value == "frontend-react":
            create = f"npx create-react-app@latest {app_name}"
            if typescript:
                create += " --template typescript"
        else:
            language = "--typescript" if typescript else "--javascript"
            create = (
                f"npx create-next-app@latest {app_name} {language} "
                "--no-tailwind --eslint --src-dir --app --import-alias '@/*' --yes"
            )
        framework = FRAMEWORK_NAMES[value]
        return [
            CommandStep(command=create, cwd=".", description=f"Create {framework} app", source=value),
            CommandStep(
                command=f"{self.config.package_manager} install",
                cwd=app_name,
                description="Install app dependencies",
                source=value,
            ),
        ]
