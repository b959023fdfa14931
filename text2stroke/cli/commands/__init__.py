"""CLI commands for text2stroke."""

from text2stroke.cli.commands.fonts import fonts
from text2stroke.cli.commands.render import render

__all__ = ["fonts", "render"]
