"""Conversion of font polylines into positioned stroke paths."""

from __future__ import annotations

from collections.abc import Iterable

from text2stroke.fonts.model import FontVertex, Polyline
from text2stroke.geometry.types import Path, Point, Vertex

# A bulge of +/-9 in font units is a half circle.
BULGE_TO_DEGREES = 180.0


def convert_vertex(vertex: FontVertex, height: float) -> Vertex:
    """Scale a font vertex to ``height``; the angle comes from its own bulge."""
    return Vertex(
        Point(vertex.scaled_x(height), vertex.scaled_y(height)),
        vertex.scaled_bulge(BULGE_TO_DEGREES),
    )


def build_path(polyline: Polyline, height: float) -> Path:
    """Convert one polyline into a Path scaled to cap height ``height``.

    The bulge in the font describes the segment *arriving* at a vertex while a
    Path stores the sweep on the vertex where the segment *starts*, so every
    vertex takes the angle of its successor. The last vertex wraps around to
    the first one; no closing segment is added.
    """
    count = len(polyline)
    vertices = []
    for i in range(count):
        v = convert_vertex(polyline[i], height)
        v2 = convert_vertex(polyline[(i + 1) % count], height)
        vertices.append(Vertex(v.position, v2.angle))
    return Path(tuple(vertices))


def build_paths(polylines: Iterable[Polyline], height: float) -> list[Path]:
    """Build paths for all non-empty polylines."""
    return [build_path(p, height) for p in polylines if p]
