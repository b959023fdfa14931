"""Multi-line text layout for stroke fonts.

All spacing metrics are scaled as ``height * metric / 9``, 9 being the cap
height of the font design grid.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from text2stroke.fonts.model import DESIGN_UNIT, FontHeader
from text2stroke.fonts.resolver import GlyphResolver
from text2stroke.geometry.bbox import bounding_box
from text2stroke.geometry.types import Alignment, HAlign, Path, Point, VAlign
from text2stroke.stroke.builder import build_paths

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029]")


@dataclass
class StrokedLine:
    paths: list[Path]
    width: float


def calc_letter_spacing(header: FontHeader, height: float) -> float:
    return height * header.letter_spacing / DESIGN_UNIT


def calc_word_spacing(header: FontHeader, height: float) -> float:
    return height * header.word_spacing / DESIGN_UNIT


def calc_line_spacing(header: FontHeader, height: float, factor: float) -> float:
    return height * header.line_spacing * factor / DESIGN_UNIT


def split_lines(text: str) -> list[str]:
    """Split on the line boundaries of ``str.splitlines``.

    Unlike ``splitlines``, empty lines are kept, including a trailing one.
    """
    return _LINE_BREAK_RE.split(text)


def stroke_glyph(resolver: GlyphResolver, char: str, height: float) -> list[Path]:
    polylines, found = resolver.resolve_glyph(ord(char))
    if not found:
        logger.warning("Failed to load stroke font glyph %r (U+%04X)", char, ord(char))
    return build_paths(polylines, height)


def stroke_line(resolver: GlyphResolver, text: str, height: float) -> StrokedLine:
    """Lay out a single line starting at x = 0.

    ``width`` follows the visible extent of the last glyph; ``offset`` also
    includes the letter spacing after it. Whitespace counts fully toward the
    width. Glyphs without geometry are skipped without any spacing.
    """
    header = resolver.font.header
    paths: list[Path] = []
    offset = 0.0
    width = 0.0
    for char in text:
        if char.isspace():
            offset += calc_word_spacing(header, height)
            width = offset
            continue
        glyph_paths = stroke_glyph(resolver, char, height)
        if not glyph_paths:
            continue
        _bottom_left, top_right = bounding_box(glyph_paths)
        shift = Point(offset, 0.0)
        paths.extend(p.translated(shift) for p in glyph_paths)
        width = offset + abs(top_right.x)
        offset = width + calc_letter_spacing(header, height)
    return StrokedLine(paths, width)


def stroke_lines(
    resolver: GlyphResolver, text: str, height: float
) -> tuple[list[StrokedLine], float]:
    """Stroke every line; returns the lines and the widest line's width."""
    lines = []
    total_width = 0.0
    for line_text in split_lines(text):
        line = stroke_line(resolver, line_text, height)
        lines.append(line)
        total_width = max(total_width, line.width)
    return lines, total_width


def stroke_text(
    resolver: GlyphResolver,
    text: str,
    height: float,
    line_spacing_factor: float = 1.0,
    align: Alignment | None = None,
) -> list[Path]:
    """Stroke a text block and position it relative to the origin per ``align``."""
    align = align or Alignment()
    lines, total_width = stroke_lines(resolver, text, height)
    line_spacing = calc_line_spacing(resolver.font.header, height, line_spacing_factor)
    count = len(lines)
    result: list[Path] = []
    for i, line in enumerate(lines):
        if align.h is HAlign.LEFT:
            x = 0.0
        elif align.h is HAlign.RIGHT:
            x = (total_width - line.width) - total_width
        else:
            x = line.width / -2
        if align.v is VAlign.BOTTOM:
            y = line_spacing * (count - i - 1)
        elif align.v is VAlign.TOP:
            y = -height - line_spacing * i
        else:
            total_height = height + line_spacing * (count - 1)
            y = line_spacing * (count - i - 1) - total_height / 2
        pos = Point(x, y)
        result.extend(p.translated(pos) for p in line.paths)
    return result
