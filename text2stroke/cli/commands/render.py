"""Render command - stroke text and write it as SVG."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from text2stroke.config import Config
from text2stroke.exceptions import FontNotFoundError
from text2stroke.fonts import StrokeFontPool
from text2stroke.geometry import Alignment
from text2stroke.svg import build_svg, svg_to_string, write_svg
from text2stroke.text import StrokeText, StrokeTextSpec

console = Console()
err_console = Console(stderr=True)


def unescape_text(text: str) -> str:
    """Turn literal ``\\n`` sequences typed on a shell into line breaks."""
    return text.replace("\\n", "\n")


@click.command()
@click.argument("text")
@click.option(
    "--font",
    "font_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Stroke font file (default: config default_font in font_dirs)",
)
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output SVG file")
@click.option("--height", type=float, default=1.0, show_default=True, help="Cap height")
@click.option("--line-spacing", type=float, help="Line spacing factor")
@click.option(
    "--halign",
    type=click.Choice(["left", "center", "right"]),
    default="left",
    show_default=True,
)
@click.option(
    "--valign",
    type=click.Choice(["top", "middle", "bottom"]),
    default="bottom",
    show_default=True,
)
@click.option("--mirror", is_flag=True, help="Mirror the text horizontally")
@click.option("--stroke-width-ratio", type=float, help="Stroke width relative to height")
@click.option("-p", "--precision", type=int, help="Path coordinate precision")
@click.pass_context
def render(
    ctx: click.Context,
    text: str,
    font_path: Path | None,
    output: Path | None,
    height: float,
    line_spacing: float | None,
    halign: str,
    valign: str,
    mirror: bool,
    stroke_width_ratio: float | None,
    precision: int | None,
) -> None:
    """Stroke TEXT and write the result as SVG.

    Use "\\n" inside TEXT for line breaks. Without --output the SVG is
    printed to stdout.
    """
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    replacements = config.replacement_table()

    if font_path:
        pool = StrokeFontPool(replacements)
        font_name = font_path.name
        pool.add_font(font_path, name=font_name)
    else:
        pool = StrokeFontPool.from_directories(config.font_dirs, replacements)
        font_name = config.default_font

    with pool:
        try:
            font = pool.get_font(font_name)
        except FontNotFoundError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1) from e

        spec = StrokeTextSpec(
            text=unescape_text(text),
            height=height,
            stroke_width_ratio=(
                stroke_width_ratio
                if stroke_width_ratio is not None
                else config.stroke_width_ratio
            ),
            line_spacing_factor=(
                line_spacing if line_spacing is not None else config.line_spacing_factor
            ),
            align=Alignment.parse(halign, valign),
            mirrored=mirror,
            font_name=font_name,
        )
        item = StrokeText(spec, pool)
        if font.load_failed:
            err_console.print(
                f"[yellow]Warning:[/yellow] font {font_name} could not be loaded, "
                "output is empty"
            )

        digits = precision if precision is not None else config.precision
        paths = item.paths
        if output:
            write_svg(paths, output, spec.stroke_width, digits)
            console.print(f"[green]Wrote[/green] {len(paths)} paths to {output}")
        else:
            click.echo(svg_to_string(build_svg(paths, spec.stroke_width, digits)))
