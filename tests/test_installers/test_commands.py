"""Tests for command generation (stackpicker.installers.commands).

Covers:
- Framework scaffold commands with and without TypeScript
- Library steps, working directory, package manager variants
- Unknown values, empty selections
- unique_app_directory
- End to end from a SelectionTree
"""

from __future__ import annotations

from pathlib import Path

import pytest

from stackpicker.catalog import default_catalog
from stackpicker.config import InstallerConfig
from stackpicker.installers import CommandGenerator, CommandPlan, CommandStep, unique_app_directory
from stackpicker.selection import SelectionTree


pytestmark = pytest.mark.unit


@pytest.fixture
def generator() -> CommandGenerator:
    return CommandGenerator(InstallerConfig(app_name="my-project"))


# ---------------------------------------------------------------------------
# Frameworks
# ---------------------------------------------------------------------------


class TestFrameworks:
    def test_vite_javascript(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-vite"])
        assert plan.framework == "vite"
        assert plan.commands() == [
            "npm create vite@latest my-project -- --template react",
            "npm install",
        ]
        assert plan.steps[0].cwd == "."
        assert plan.steps[1].cwd == "my-project"

    def test_vite_typescript(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-ts", "frontend-vite"])
        assert plan.commands()[0] == "npm create vite@latest my-project -- --template react-ts"

    def test_react(self, generator: CommandGenerator):
        assert generator.generate(["frontend-react"]).commands()[0] == (
            "npx create-react-app@latest my-project"
        )
        assert generator.generate(["frontend-react", "frontend-ts"]).commands()[0] == (
            "npx create-react-app@latest my-project --template typescript"
        )

    def test_next(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-next", "frontend-js"])
        assert plan.framework == "next"
        assert plan.commands()[0] == (
            "npx create-next-app@latest my-project --javascript --no-tailwind --eslint "
            "--src-dir --app --import-alias '@/*' --yes"
        )
        ts_plan = generator.generate(["frontend-next", "frontend-ts"])
        assert "--typescript" in ts_plan.commands()[0]

    def test_framework_precedence_is_fixed(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-next", "frontend-react", "frontend-vite"])
        assert plan.framework == "vite"
        assert plan.commands()[0].startswith("npm create vite@latest")
        assert generator.generate(["frontend-next", "frontend-react"]).framework == "react"
        assert sum(1 for step in plan.steps if step.cwd == ".") == 1

    def test_language_alone_produces_nothing(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-ts"])
        assert plan.framework is None
        assert plan.steps == []
        assert plan.skipped == []


# ---------------------------------------------------------------------------
# Libraries
# ---------------------------------------------------------------------------


class TestLibraries:
    def test_run_inside_app_directory(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-vite", "tailwind", "shadcn"])
        library_steps = [s for s in plan.steps if s.source in ("tailwind", "shadcn")]
        assert [s.command for s in library_steps] == [
            "npm install -D tailwindcss postcss autoprefixer",
            "npx tailwindcss init -p",
            "npx shadcn@latest init -d",
        ]
        assert all(s.cwd == "my-project" for s in library_steps)

    def test_without_framework_runs_in_place(self, generator: CommandGenerator):
        plan = generator.generate(["react-datatable-component"])
        assert plan.steps == [
            CommandStep(
                command="npm install react-data-table-component",
                cwd=".",
                description="Set up react-datatable-component",
                source="react-datatable-component",
            )
        ]

    def test_order_follows_selection(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-vite", "zustand", "axios"])
        assert [s.source for s in plan.steps] == ["frontend-vite", "frontend-vite", "zustand", "axios"]

    @pytest.mark.parametrize(
        "manager,add,exec_",
        [
            ("npm", "npm install radix", "npx"),
            ("pnpm", "pnpm add radix", "pnpm dlx"),
            ("yarn", "yarn add radix", "yarn dlx"),
        ],
    )
    def test_package_managers(self, manager: str, add: str, exec_: str):
        generator = CommandGenerator(InstallerConfig(package_manager=manager))
        plan = generator.generate(["frontend-vite", "radixui", "shadcn"])
        assert plan.commands()[1] == f"{manager} install"
        assert plan.commands()[2] == add.replace("radix", "@radix-ui/themes")
        assert plan.commands()[3] == f"{exec_} shadcn@latest init -d"

    def test_unknown_values_skipped(self, generator: CommandGenerator):
        plan = generator.generate(["frontend-vite", "left-pad", "axios"])
        assert plan.skipped == ["left-pad"]
        assert plan.commands()[-1] == "npm install axios"

    def test_empty_selection(self, generator: CommandGenerator):
        plan = generator.generate([])
        assert plan == CommandPlan(app_name="my-project")


# ---------------------------------------------------------------------------
# App directory
# ---------------------------------------------------------------------------


class TestUniqueAppDirectory:
    def test_free_name(self, tmp_path: Path):
        assert unique_app_directory("my-project", tmp_path) == "my-project"

    def test_taken_names(self, tmp_path: Path):
        (tmp_path / "my-project").mkdir()
        (tmp_path / "my-project-1").mkdir()
        assert unique_app_directory("my-project", tmp_path) == "my-project-2"

    def test_files_count_as_taken(self, tmp_path: Path):
        (tmp_path / "app").write_text("", encoding="utf-8")
        assert unique_app_directory("app", tmp_path) == "app-1"

    def test_generator_uses_output_dir(self, generator: CommandGenerator, tmp_path: Path):
        (tmp_path / "my-project").mkdir()
        plan = generator.generate(["frontend-vite", "axios"], output_dir=tmp_path)
        assert plan.app_name == "my-project-1"
        assert plan.commands()[0] == "npm create vite@latest my-project-1 -- --template react"
        assert plan.steps[-1].cwd == "my-project-1"


# ---------------------------------------------------------------------------
# From a selection
# ---------------------------------------------------------------------------


class TestFromSelection:
    def test_framework_runs_before_libraries(self, generator: CommandGenerator):
        tree = SelectionTree(default_catalog())
        for value in ("axios", "tailwind", "frontend-vite", "frontend-ts"):
            tree.toggle(value)
        selected = tree.get_selected_dependencies()
        assert selected == ("frontend-ts", "frontend-vite", "axios", "tailwind")

        plan = generator.generate(selected)
        assert plan.commands() == [
            "npm create vite@latest my-project -- --template react-ts",
            "npm install",
            "npm install axios",
            "npm install -D tailwindcss postcss autoprefixer",
            "npx tailwindcss init -p",
        ]
