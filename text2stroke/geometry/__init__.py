"""Geometry primitives for text2stroke.

This subpackage provides:
- Stroke-space value types (points, vertices, paths, alignment)
- Bounding box computation including arc extents
"""

from text2stroke.geometry.bbox import arc_center, arc_radius, bounding_box, segment_extent
from text2stroke.geometry.types import (
    Alignment,
    HAlign,
    Orientation,
    Path,
    Point,
    VAlign,
    Vertex,
)

__all__ = [
    "Alignment",
    "HAlign",
    "VAlign",
    "Orientation",
    "Path",
    "Point",
    "Vertex",
    "arc_center",
    "arc_radius",
    "bounding_box",
    "segment_extent",
]
