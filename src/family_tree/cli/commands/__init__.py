"""
CLI command modules for family_tree.

Each command module defines a single Typer-compatible command function.
"""

from family_tree.cli.commands.mrca import mrca_command
from family_tree.cli.commands.show import show_command
from family_tree.cli.commands.stats import stats_command

__all__ = [
    "mrca_command",
    "show_command",
    "stats_command",
]
