"""Display helpers for the CLI."""

from cli.display.console import console

__all__ = ["console"]
