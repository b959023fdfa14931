"""Unit tests for text2stroke.fonts.resolver.

Tests cover direct lookup, the replacement table, glyph references and the
found flag for unresolvable code points.
"""

import pytest

from text2stroke.exceptions import GlyphNotFoundError
from text2stroke.fonts import DEFAULT_REPLACEMENTS, FontData, FontVertex, GlyphResolver


class TestDirectLookup:
    """Tests for code points present in the font."""

    def test_present_glyph(self, resolver: GlyphResolver) -> None:
        polylines, found = resolver.resolve_glyph(ord("B"))
        assert found is True
        assert len(polylines) == 1
        assert len(polylines[0]) == 5

    def test_empty_glyph_is_found(self, resolver: GlyphResolver) -> None:
        """A blank glyph resolves successfully to no polylines."""
        polylines, found = resolver.resolve_glyph(0x0000)
        assert found is True
        assert polylines == []

    def test_missing_glyph(self, resolver: GlyphResolver) -> None:
        polylines, found = resolver.resolve_glyph(ord("Z"))
        assert found is False
        assert polylines == []

    def test_has_glyph(self, resolver: GlyphResolver) -> None:
        assert resolver.has_glyph(ord("A"))
        assert not resolver.has_glyph(ord("Z"))


class TestReplacementTable:
    """Tests for the fallback replacement table."""

    def test_default_entries(self) -> None:
        assert DEFAULT_REPLACEMENTS == {0x00B5: 0x03BC, 0x2126: 0x03A9}

    def test_micro_sign_resolves_to_mu(self, resolver: GlyphResolver) -> None:
        """U+00B5 yields exactly the polylines of U+03BC."""
        micro, found = resolver.resolve_glyph(0x00B5)
        mu, mu_found = resolver.resolve_glyph(0x03BC)
        assert found and mu_found
        assert micro == mu

    def test_ohm_sign_resolves_to_omega(self, resolver: GlyphResolver) -> None:
        ohm, found = resolver.resolve_glyph(0x2126)
        assert found
        assert ohm == resolver.resolve_glyph(0x03A9)[0]

    def test_direct_glyph_wins_over_replacement(self, font_data: FontData) -> None:
        """Replacements are only consulted when the glyph is missing."""
        resolver = GlyphResolver(font_data, {0x41: 0x42})
        assert resolver.resolve_glyph(0x41)[0] == list(font_data.get(0x41).polylines)

    def test_replacement_to_missing_glyph(self, font_data: FontData) -> None:
        resolver = GlyphResolver(font_data, {0x5A: 0x5B})
        assert resolver.resolve_glyph(0x5A) == ([], False)

    def test_replacements_do_not_chain(self, resolver: GlyphResolver) -> None:
        """A replacement pointing at another replaced code point is not followed."""
        resolver.add_replacements({0xE100: 0x2126})
        assert resolver.resolve_glyph(0xE100) == ([], False)

    def test_add_replacements_accepts_pairs(self, resolver: GlyphResolver) -> None:
        resolver.add_replacements([(ord("Z"), ord("B"))])
        assert resolver.replacements[ord("Z")] == ord("B")
        assert resolver.resolve_glyph(ord("Z")) == resolver.resolve_glyph(ord("B"))


class TestGlyphReferences:
    """Tests for @XXXX glyph references."""

    def test_reference_is_expanded_after_own_polylines(
        self, resolver: GlyphResolver, font_data: FontData
    ) -> None:
        polylines, found = resolver.resolve_glyph(0xC4)
        assert found
        assert polylines[0] == (FontVertex(2, 11), FontVertex(2, 10.5))
        assert polylines[1:] == list(font_data.get(0x41).polylines)

    def test_reference_cycle_terminates(self, resolver: GlyphResolver) -> None:
        polylines, found = resolver.resolve_glyph(0xE000)
        assert found
        assert polylines == [(FontVertex(0, 0), FontVertex(1, 1))]

    def test_missing_reference_keeps_geometry(self, resolver: GlyphResolver) -> None:
        polylines, found = resolver.resolve_glyph(0xE002)
        assert found is False
        assert polylines == [(FontVertex(0, 0), FontVertex(2, 0))]


class TestRequireGlyph:
    """Tests for the raising variant."""

    def test_returns_polylines(self, resolver: GlyphResolver) -> None:
        assert resolver.require_glyph(ord("A")) == resolver.resolve_glyph(ord("A"))[0]

    def test_raises_for_missing(self, resolver: GlyphResolver) -> None:
        with pytest.raises(GlyphNotFoundError, match="U\\+005A") as exc:
            resolver.require_glyph(ord("Z"))
        assert exc.value.code_point == 0x5A

    def test_empty_font(self) -> None:
        resolver = GlyphResolver(FontData.empty())
        assert resolver.resolve_glyph(ord("A")) == ([], False)
