"""SVG output for stroked text.

Stroke paths are y-up; SVG is y-down, so every y coordinate is negated and
arc sweep flags are inverted accordingly.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from io import StringIO
from pathlib import Path as FilePath
from xml.etree.ElementTree import register_namespace as _register_namespace

from text2stroke.geometry.bbox import ANGLE_EPSILON, arc_radius, bounding_box
from text2stroke.geometry.types import Path

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_to_svg_d(path: Path, precision: int = 6) -> str:
    """Render one Path as SVG path data."""
    vertices = path.vertices
    if not vertices:
        return ""
    first = vertices[0].position
    parts = [f"M{_fmt(first.x, precision)} {_fmt(-first.y, precision)}"]
    for start, end, angle in path.segments():
        x, y = _fmt(end.x, precision), _fmt(-end.y, precision)
        if abs(angle) < ANGLE_EPSILON or start == end:
            parts.append(f"L{x} {y}")
            continue
        r = _fmt(arc_radius(start, end, angle), precision)
        large_arc = 1 if abs(angle) > 180 else 0
        # counter-clockwise in y-up space is clockwise in SVG space
        sweep = 0 if angle > 0 else 1
        parts.append(f"A{r} {r} 0 {large_arc} {sweep} {x} {y}")
    return " ".join(parts)


def paths_to_svg_d(paths: Iterable[Path], precision: int = 6) -> str:
    """Render all paths as a single SVG path data string."""
    return " ".join(d for d in (path_to_svg_d(p, precision) for p in paths) if d)


def build_svg(
    paths: list[Path],
    stroke_width: float = 0.15,
    precision: int = 6,
    margin: float | None = None,
) -> ET.ElementTree:
    """Build an SVG document containing the stroked paths."""
    if margin is None:
        margin = stroke_width
    bottom_left, top_right = bounding_box(paths)
    min_x = bottom_left.x - margin
    min_y = -top_right.y - margin
    width = (top_right.x - bottom_left.x) + 2 * margin
    height = (top_right.y - bottom_left.y) + 2 * margin

    _register_namespace("", SVG_NS)
    root = ET.Element(
        f"{{{SVG_NS}}}svg",
        {
            "version": "1.1",
            "viewBox": " ".join(
                _fmt(v, precision) for v in (min_x, min_y, width, height)
            ),
        },
    )
    ET.SubElement(
        root,
        f"{{{SVG_NS}}}path",
        {
            "d": paths_to_svg_d(paths, precision),
            "fill": "none",
            "stroke": "black",
            "stroke-width": _fmt(stroke_width, precision),
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
        },
    )
    return ET.ElementTree(root)


def svg_to_string(tree: ET.ElementTree) -> str:
    buffer = StringIO()
    tree.write(buffer, encoding="unicode", xml_declaration=True)
    return buffer.getvalue()


def write_svg(
    paths: list[Path],
    output: str | FilePath,
    stroke_width: float = 0.15,
    precision: int = 6,
    margin: float | None = None,
) -> FilePath:
    """Write the stroked paths to ``output`` as an SVG file."""
    output = FilePath(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    tree = build_svg(paths, stroke_width, precision, margin)
    output.write_text(svg_to_string(tree), encoding="utf-8")
    return output
