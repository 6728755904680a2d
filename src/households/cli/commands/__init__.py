"""
CLI command modules for households.

Each command module defines a single Typer-compatible command function.
"""

from households.cli.commands.export import export_command
from households.cli.commands.report import report_command
from households.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "report_command",
    "stats_command",
]
