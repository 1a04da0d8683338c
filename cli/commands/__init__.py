"""CLI commands package."""

from cli.commands.add import add_command
from cli.commands.config import config_command
from cli.commands.preview import preview_command

__all__ = [
    "add_command",
    "config_command",
    "preview_command",
]
