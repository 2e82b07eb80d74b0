"""stackpicker configuration.

Centralised, typed configuration for the selection engine and the command
generator. All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables without
boiler-plate.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator


def _default_single_select() -> list[str]:
    return ["Frameworks", "Languages", "Styles"]


def _default_requires_base() -> dict[str, str]:
    return {"shadcn": "tailwind", "radixui": "tailwind"}


def _default_priority() -> list[str]:
    return ["frontend-vite", "frontend-react", "frontend-next", "frontend-ts", "frontend-js"]


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class SelectionRules(BaseModel):
    """Lookup tables consulted by the selection engine.

    The engine never modifies these; they are fixed for the lifetime of a
    ``SelectionTree``.
    """

    single_select_categories: list[str] = Field(
        default_factory=_default_single_select,
        description="Category labels in which at most one direct child leaf may be checked",
    )
    requires_base: dict[str, str] = Field(
        default_factory=_default_requires_base,
        description="Dependent value -> base value forced on when the dependent is toggled",
    )
    priority_values: list[str] = Field(
        default_factory=_default_priority,
        description="Values inserted at the front of the selection list",
    )

    def is_single_select(self, label: str) -> bool:
        return label in self.single_select_categories

    def base_for(self, value: str) -> str | None:
        return self.requires_base.get(value)

    def is_priority(self, value: str) -> bool:
        return value in self.priority_values


class InstallerConfig(BaseModel):
    """Knobs for turning a selection into shell commands."""

    app_name: str = Field(default="my-project", description="Base directory name of the generated app")
    package_manager: Literal["npm", "pnpm", "yarn"] = Field(default="npm")

    @field_validator("app_name")
    @classmethod
    def _safe_app_name(cls, value: str) -> str:
        if not re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9._-]*", value):
            raise ValueError(
                f"app_name must be a plain directory name (letters, digits, '.', '_', '-'), got {value!r}"
            )
        return value


class Config(BaseModel):
    """Global stackpicker configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``SelectionTree`` and ``CommandGenerator``.
    """

    catalog_path: Optional[Path] = Field(
        default=None, description="Catalog file; the built-in catalog is used when unset"
    )
    output_dir: Path = Field(default=Path("."))
    selection: SelectionRules = Field(default_factory=SelectionRules)
    installer: InstallerConfig = Field(default_factory=InstallerConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STACKPICKER_CATALOG, STACKPICKER_OUTPUT_DIR,
            STACKPICKER_APP_NAME, STACKPICKER_PACKAGE_MANAGER,
            STACKPICKER_SINGLE_SELECT, STACKPICKER_PRIORITY.

        List-valued variables are comma-separated.
        """
        selection_kwargs: dict[str, Any] = {}
        if os.environ.get("STACKPICKER_SINGLE_SELECT"):
            selection_kwargs["single_select_categories"] = _split_csv(
                os.environ["STACKPICKER_SINGLE_SELECT"]
            )
        if os.environ.get("STACKPICKER_PRIORITY"):
            selection_kwargs["priority_values"] = _split_csv(os.environ["STACKPICKER_PRIORITY"])

        installer_kwargs: dict[str, Any] = {}
        if os.environ.get("STACKPICKER_APP_NAME"):
            installer_kwargs["app_name"] = os.environ["STACKPICKER_APP_NAME"]
        if os.environ.get("STACKPICKER_PACKAGE_MANAGER"):
            installer_kwargs["package_manager"] = os.environ["STACKPICKER_PACKAGE_MANAGER"]

        catalog = os.environ.get("STACKPICKER_CATALOG")
        return cls(
            catalog_path=Path(catalog) if catalog else None,
            output_dir=Path(os.environ.get("STACKPICKER_OUTPUT_DIR", ".")),
            selection=SelectionRules(**selection_kwargs),
            installer=InstallerConfig(**installer_kwargs),
        )
