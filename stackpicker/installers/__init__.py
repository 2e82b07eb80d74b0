"""Command generation for a finished selection.

Quick usage::

    from stackpicker.installers import CommandGenerator

    plan = CommandGenerator().generate(tree.get_selected_dependencies())
    print(plan.render_script())
"""

from stackpicker.installers.commands import (
    CommandGenerator,
    CommandPlan,
    CommandStep,
    unique_app_directory,
)
from stackpicker.installers.templates import TemplateRenderer

__all__ = [
    "CommandGenerator",
    "CommandPlan",
    "CommandStep",
    "TemplateRenderer",
    "unique_app_directory",
]
