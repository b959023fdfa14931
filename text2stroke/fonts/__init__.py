"""Stroke font handling for text2stroke.

This subpackage provides:
- The in-memory font model (header metrics and glyph table)
- A reader for FontoBene font definitions
- Glyph resolution with a replacement table
- Asynchronous font loading and a font registry
"""

from text2stroke.fonts.loader import StrokeFont
from text2stroke.fonts.model import DESIGN_UNIT, FontData, FontHeader, FontVertex, Glyph, Polyline
from text2stroke.fonts.parser import parse_font, parse_font_file
from text2stroke.fonts.pool import StrokeFontPool
from text2stroke.fonts.resolver import DEFAULT_REPLACEMENTS, GlyphResolver

__all__ = [
    "DESIGN_UNIT",
    "DEFAULT_REPLACEMENTS",
    "FontData",
    "FontHeader",
    "FontVertex",
    "Glyph",
    "GlyphResolver",
    "Polyline",
    "StrokeFont",
    "StrokeFontPool",
    "parse_font",
    "parse_font_file",
]
