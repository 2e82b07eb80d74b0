"""stackpicker: pick a frontend stack from a dependency catalog.

The selection engine (``stackpicker.selection``) keeps a checked-state forest
consistent while the user toggles items; the command generator
(``stackpicker.installers``) turns the ordered selection into shell commands.
"""

__version__ = "0.1.0"
