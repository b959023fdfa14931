"""SVG rendering of stroke paths."""

from text2stroke.svg.writer import (
    build_svg,
    path_to_svg_d,
    paths_to_svg_d,
    svg_to_string,
    write_svg,
)

__all__ = ["build_svg", "path_to_svg_d", "paths_to_svg_d", "svg_to_string", "write_svg"]
