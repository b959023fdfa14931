"""Extents of rendered stroke paths, arcs included."""

from __future__ import annotations

import math
from collections.abc import Iterable

from text2stroke.geometry.types import Path, Point

# Angles below this (degrees) are rendered as straight lines.
ANGLE_EPSILON = 1e-9


def arc_center(start: Point, end: Point, angle: float) -> Point | None:
    """Centre of the circular arc from ``start`` to ``end`` sweeping ``angle``.

    Returns None for straight segments and zero-length chords.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    chord = math.hypot(dx, dy)
    if abs(angle) < ANGLE_EPSILON or chord == 0:
        return None
    half = math.radians(angle) / 2
    # signed distance from chord midpoint to the centre, along the left normal
    dist = (chord / 2) / math.tan(half)
    nx, ny = -dy / chord, dx / chord
    return Point((start.x + end.x) / 2 + nx * dist, (start.y + end.y) / 2 + ny * dist)


def arc_radius(start: Point, end: Point, angle: float) -> float:
    chord = math.hypot(end.x - start.x, end.y - start.y)
    return chord / (2 * abs(math.sin(math.radians(angle) / 2)))


def segment_extent(start: Point, end: Point, angle: float) -> tuple[Point, Point]:
    """Return ``(bottom_left, top_right)`` of one straight or arc segment."""
    xs = [start.x, end.x]
    ys = [start.y, end.y]
    center = arc_center(start, end, angle)
    if center is not None:
        radius = math.hypot(start.x - center.x, start.y - center.y)
        begin = math.degrees(math.atan2(start.y - center.y, start.x - center.x))
        for axis in (0.0, 90.0, 180.0, 270.0):
            if _angle_within_sweep(axis, begin, angle):
                xs.append(center.x + radius * math.cos(math.radians(axis)))
                ys.append(center.y + radius * math.sin(math.radians(axis)))
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def _angle_within_sweep(target: float, begin: float, sweep: float) -> bool:
    if sweep > 0:
        delta = (target - begin) % 360.0
        return delta <= sweep
    delta = (begin - target) % 360.0
    return delta <= -sweep


def bounding_box(paths: Iterable[Path]) -> tuple[Point, Point]:
    """Compute ``(bottom_left, top_right)`` over all rendered segments.

    Single-vertex paths contribute their point. An empty collection yields a
    degenerate box at the origin.
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for path in paths:
        vertices = path.vertices
        if len(vertices) == 1:
            p = vertices[0].position
            min_x, min_y = min(min_x, p.x), min(min_y, p.y)
            max_x, max_y = max(max_x, p.x), max(max_y, p.y)
            continue
        for start, end, angle in path.segments():
            lo, hi = segment_extent(start, end, angle)
            min_x, min_y = min(min_x, lo.x), min(min_y, lo.y)
            max_x, max_y = max(max_x, hi.x), max(max_y, hi.y)
    if min_x == math.inf:
        return Point(0.0, 0.0), Point(0.0, 0.0)
    return Point(min_x, min_y), Point(max_x, max_y)
