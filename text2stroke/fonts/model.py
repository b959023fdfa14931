"""In-memory representation of a parsed stroke font.

Glyph coordinates are in font design units where the cap height is
``DESIGN_UNIT`` (9). Spacing metrics in the header use the same unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DESIGN_UNIT = 9.0
MAX_BULGE = 9.0


@dataclass(frozen=True)
class FontHeader:
    """Font metadata and spacing metrics."""

    name: str = ""
    id: str = ""
    version: str = ""
    authors: tuple[str, ...] = ()
    license: str = ""
    letter_spacing: float = 0.0
    word_spacing: float = 0.0
    line_spacing: float = 0.0
    user: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class FontVertex:
    """A vertex in font design units.

    ``bulge`` describes the arc of the segment arriving at this vertex:
    0 is straight, +/-9 a half circle.
    """

    x: float
    y: float
    bulge: float = 0.0

    def scaled_x(self, height: float) -> float:
        return self.x * height / DESIGN_UNIT

    def scaled_y(self, height: float) -> float:
        return self.y * height / DESIGN_UNIT

    def scaled_bulge(self, factor: float) -> float:
        """Bulge mapped onto ``[-factor, factor]``; ``scaled_bulge(180)`` gives degrees."""
        bulge = max(-MAX_BULGE, min(MAX_BULGE, self.bulge))
        return bulge * factor / MAX_BULGE


Polyline = tuple[FontVertex, ...]


@dataclass(frozen=True)
class Glyph:
    code_point: int
    polylines: tuple[Polyline, ...] = ()
    references: tuple[int, ...] = ()
    name: str = ""


@dataclass(frozen=True)
class FontData:
    """A loaded font: header plus glyph table keyed by code point."""

    header: FontHeader = field(default_factory=FontHeader)
    glyphs: dict[int, Glyph] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> FontData:
        """Placeholder used when a font could not be loaded."""
        return cls()

    def __len__(self) -> int:
        return len(self.glyphs)

    def __contains__(self, code_point: object) -> bool:
        return code_point in self.glyphs

    def get(self, code_point: int) -> Glyph | None:
        return self.glyphs.get(code_point)
