"""Stroke-space value types.

Coordinates are plain floats in output length units (typically millimetres)
in a y-up coordinate system. Angles are degrees, positive = counter-clockwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Orientation(Enum):
    """Mirror axis selector."""

    HORIZONTAL = "horizontal"  # flip x
    VERTICAL = "vertical"  # flip y


class HAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Alignment:
    """Horizontal/vertical text alignment pair."""

    h: HAlign = HAlign.LEFT
    v: VAlign = VAlign.BOTTOM

    @classmethod
    def parse(cls, h: str, v: str) -> Alignment:
        """Build an alignment from enum values such as ``"center"``/``"top"``."""
        return cls(HAlign(h.lower()), VAlign(v.lower()))


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def mirrored(self, orientation: Orientation) -> Point:
        if orientation is Orientation.HORIZONTAL:
            return Point(-self.x, self.y)
        return Point(self.x, -self.y)


@dataclass(frozen=True)
class Vertex:
    """A path vertex.

    ``angle`` is the sweep of the segment that starts at this vertex and ends
    at the next one; 0 means a straight line.
    """

    position: Point
    angle: float = 0.0


@dataclass(frozen=True)
class Path:
    """Ordered sequence of vertices rendered as "move to v0, then line/arc to
    each following vertex using the previous vertex's angle"."""

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def translated(self, offset: Point) -> Path:
        """Return a copy with every vertex moved by ``offset``."""
        if offset.x == 0 and offset.y == 0:
            return self
        return Path(
            tuple(
                Vertex(v.position.translated(offset.x, offset.y), v.angle)
                for v in self.vertices
            )
        )

    def mirrored(self, orientation: Orientation = Orientation.HORIZONTAL) -> Path:
        """Return a reflected copy.

        Reflection reverses the rotation sense, so every angle is negated.
        """
        return Path(
            tuple(
                Vertex(v.position.mirrored(orientation), -v.angle)
                for v in self.vertices
            )
        )

    def segments(self):
        """Yield ``(start, end, angle)`` for every drawn segment."""
        for a, b in zip(self.vertices, self.vertices[1:]):
            yield a.position, b.position, a.angle
