"""Unit tests for text2stroke.fonts.parser.

Tests cover header parsing, glyph/polyline/reference parsing and the
errors raised for malformed definitions.
"""

from pathlib import Path

import pytest

from text2stroke.exceptions import FontParseError
from text2stroke.fonts import FontData, FontVertex, parse_font, parse_font_file

MINIMAL_HEADER = """\
[format]
format = FontoBene
format_version = 1.0

[font]
name = Minimal
---
"""


class TestHeaderParsing:
    """Tests for the INI-like header section."""

    def test_metrics_are_read_as_floats(self, font_data: FontData) -> None:
        """letter/word/line spacing are parsed from the [font] section."""
        header = font_data.header
        assert header.letter_spacing == 1.5
        assert header.word_spacing == 6.0
        assert header.line_spacing == 15.0

    def test_metadata_fields(self, font_data: FontData) -> None:
        """name, id, version and license are kept as strings."""
        header = font_data.header
        assert header.name == "Test Stroke"
        assert header.id == "test-stroke"
        assert header.version == "0.3"
        assert header.license == "CC0-1.0"

    def test_author_may_repeat(self, font_data: FontData) -> None:
        """Every author line is collected in order."""
        assert font_data.header.authors == ("Alice Example", "Bob Example")

    def test_unknown_keys_are_preserved(self, font_data: FontData) -> None:
        """Unknown [font] keys and the [user] section end up in header.user."""
        assert font_data.header.user == {"weight": "light", "comment": "fixture"}

    def test_missing_metrics_default_to_zero(self) -> None:
        """A header without spacing keys yields zero metrics."""
        font = parse_font(MINIMAL_HEADER)
        assert font.header.letter_spacing == 0.0
        assert font.header.word_spacing == 0.0
        assert font.header.line_spacing == 0.0
        assert len(font) == 0


class TestGlyphParsing:
    """Tests for glyph headers, polylines and references."""

    def test_glyph_count(self, font_data: FontData) -> None:
        """All glyph headers of the fixture are parsed."""
        assert len(font_data) == 11

    def test_polylines_of_simple_glyph(self, font_data: FontData) -> None:
        """Each data line becomes one polyline of vertices."""
        glyph = font_data.get(0x41)
        assert glyph is not None
        assert glyph.name == "LATIN CAPITAL LETTER A"
        assert glyph.polylines == (
            (FontVertex(0, 0), FontVertex(3, 9), FontVertex(6, 0)),
            (FontVertex(1, 3), FontVertex(5, 3)),
        )

    def test_bulge_is_third_vertex_value(self, font_data: FontData) -> None:
        """x,y,bulge vertices keep their bulge."""
        glyph = font_data.get(0x4F)
        assert glyph.polylines[0][1] == FontVertex(6, 4.5, 9)
        assert glyph.polylines[0][0].bulge == 0

    def test_empty_glyph(self, font_data: FontData) -> None:
        """A glyph header without data lines is a valid empty glyph."""
        glyph = font_data.get(0x20)
        assert glyph.polylines == ()
        assert glyph.references == ()

    def test_references_are_collected(self, font_data: FontData) -> None:
        """@XXXX lines are stored as references, not polylines."""
        glyph = font_data.get(0xC4)
        assert glyph.references == (0x41,)
        assert glyph.polylines == ((FontVertex(2, 11), FontVertex(2, 10.5)),)

    def test_comments_and_blank_lines_ignored(self) -> None:
        """Lines starting with # are skipped in both parts."""
        text = MINIMAL_HEADER + "# comment\n\n[0031] ONE\n# inner comment\n0,0;0,9\n"
        font = parse_font(text)
        assert font.get(0x31).polylines == ((FontVertex(0, 0), FontVertex(0, 9)),)


class TestParseErrors:
    """Tests for FontParseError reporting."""

    def test_missing_separator(self) -> None:
        with pytest.raises(FontParseError, match="separator"):
            parse_font("[format]\nformat = FontoBene\nformat_version = 1.0\n")

    def test_wrong_format_id(self) -> None:
        text = MINIMAL_HEADER.replace("FontoBene", "Hershey")
        with pytest.raises(FontParseError, match="Not a FontoBene font"):
            parse_font(text)

    def test_unsupported_major_version(self) -> None:
        text = MINIMAL_HEADER.replace("1.0", "2.0")
        with pytest.raises(FontParseError, match="Unsupported format version") as exc:
            parse_font(text)
        assert exc.value.line == 3

    def test_invalid_vertex_reports_line(self) -> None:
        """The line number counts from the start of the file."""
        text = MINIMAL_HEADER + "[0031] ONE\n0,0;1,2,3,4\n"
        with pytest.raises(FontParseError, match="Invalid vertex") as exc:
            parse_font(text, source="bad.bene")
        assert exc.value.line == 9
        assert exc.value.source == "bad.bene"
        assert "line=9" in str(exc.value)

    def test_invalid_number(self) -> None:
        text = MINIMAL_HEADER + "[0031] ONE\n0,zero\n"
        with pytest.raises(FontParseError, match="Invalid number"):
            parse_font(text)

    def test_invalid_metric(self) -> None:
        text = MINIMAL_HEADER.replace("name = Minimal", "letter_spacing = wide")
        with pytest.raises(FontParseError, match="Invalid number"):
            parse_font(text)

    def test_duplicate_glyph(self) -> None:
        text = MINIMAL_HEADER + "[0031]\n0,0;0,9\n[0031]\n0,0;1,9\n"
        with pytest.raises(FontParseError, match="Duplicate glyph U\\+0031"):
            parse_font(text)

    def test_data_before_first_glyph(self) -> None:
        text = MINIMAL_HEADER + "0,0;0,9\n"
        with pytest.raises(FontParseError, match="before first glyph"):
            parse_font(text)

    def test_header_line_without_equals(self) -> None:
        text = MINIMAL_HEADER.replace("name = Minimal", "name Minimal")
        with pytest.raises(FontParseError, match="Invalid header line"):
            parse_font(text)

    def test_code_point_out_of_range(self) -> None:
        text = MINIMAL_HEADER + "[110000]\n0,0;0,9\n"
        with pytest.raises(FontParseError, match="Invalid code point"):
            parse_font(text)


class TestParseFontFile:
    """Tests for reading fonts from disk."""

    def test_reads_file(self, font_file: Path) -> None:
        font = parse_font_file(font_file)
        assert font.header.name == "Test Stroke"

    def test_missing_file_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            parse_font_file(tmp_path / "missing.bene")

    def test_byte_order_mark_is_skipped(self, tmp_path: Path, font_text: str) -> None:
        """Editors on Windows often save UTF-8 with a BOM."""
        path = tmp_path / "bom.bene"
        path.write_text(font_text, encoding="utf-8-sig")
        assert path.read_bytes().startswith(b"\xef\xbb\xbf")
        font = parse_font_file(path)
        assert font.header.name == "Test Stroke"
        assert len(font) == 11
