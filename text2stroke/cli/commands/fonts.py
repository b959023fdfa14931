"""Fonts command - stroke font inspection utilities."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from text2stroke.config import Config
from text2stroke.exceptions import GlyphNotFoundError
from text2stroke.fonts import StrokeFont

console = Console()


def _load(ctx: click.Context, font_file: Path) -> StrokeFont:
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    with console.status(f"[bold green]Loading {font_file.name}..."):
        font = StrokeFont(font_file, replacements=config.replacement_table())
        font.resolver  # blocks until the background parse is done
    if font.load_failed:
        console.print(f"[red]Failed to load font:[/red] {font.load_error}")
        raise SystemExit(1)
    return font


@click.group()
def fonts() -> None:
    """Stroke font commands."""
    pass


@fonts.command("info")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def font_info(ctx: click.Context, font_file: Path) -> None:
    """Show header metrics of a stroke font."""
    font = _load(ctx, font_file)
    header = font.header

    table = Table(title=f"Font {font_file.name}")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Name", header.name or "-")
    table.add_row("ID", header.id or "-")
    table.add_row("Version", header.version or "-")
    table.add_row("Authors", ", ".join(header.authors) or "-")
    table.add_row("License", header.license or "-")
    table.add_row("Letter spacing", f"{header.letter_spacing:g}")
    table.add_row("Word spacing", f"{header.word_spacing:g}")
    table.add_row("Line spacing", f"{header.line_spacing:g}")
    table.add_row("Glyphs", str(len(font.font_data)))
    console.print(table)


@fonts.command("missing")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("text")
@click.pass_context
def missing_glyphs(ctx: click.Context, font_file: Path, text: str) -> None:
    """List characters of TEXT that FONT_FILE cannot draw."""
    font = _load(ctx, font_file)

    missing: list[GlyphNotFoundError] = []
    for char in dict.fromkeys(text):
        if char.isspace():
            continue
        try:
            font.resolver.require_glyph(ord(char))
        except GlyphNotFoundError as e:
            missing.append(e)

    if not missing:
        console.print("[green]All characters are available[/green]")
        return

    table = Table(title="Missing glyphs")
    table.add_column("Char", style="cyan")
    table.add_column("Code point", style="yellow")
    for err in missing:
        table.add_row(chr(err.code_point), f"U+{err.code_point:04X}")
    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(missing)} missing")
    raise SystemExit(1)
