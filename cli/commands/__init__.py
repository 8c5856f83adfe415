"""CLI commands package."""

from cli.commands.generate import generate_command
from cli.commands.info import info_command
from cli.commands.stats import stats_command
from cli.commands.validate import validate_command

__all__ = [
    "generate_command",
    "info_command",
    "stats_command",
    "validate_command",
]
