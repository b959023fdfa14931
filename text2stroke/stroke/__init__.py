"""Glyph-to-path conversion and text layout."""

from text2stroke.stroke.builder import build_path, build_paths, convert_vertex
from text2stroke.stroke.layout import (
    StrokedLine,
    calc_letter_spacing,
    calc_line_spacing,
    calc_word_spacing,
    split_lines,
    stroke_glyph,
    stroke_line,
    stroke_lines,
    stroke_text,
)

__all__ = [
    "build_path",
    "build_paths",
    "convert_vertex",
    "StrokedLine",
    "calc_letter_spacing",
    "calc_line_spacing",
    "calc_word_spacing",
    "split_lines",
    "stroke_glyph",
    "stroke_line",
    "stroke_lines",
    "stroke_text",
]
