"""CLI commands package."""

from cli.commands.config import config_command
from cli.commands.preview import preview_command
from cli.commands.write import write_command

__all__ = [
    "config_command",
    "preview_command",
    "write_command",
]
