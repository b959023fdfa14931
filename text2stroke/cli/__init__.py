"""Command line interface for text2stroke."""

from text2stroke.cli.main import cli, main

__all__ = ["cli", "main"]
