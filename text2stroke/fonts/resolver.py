"""Glyph resolution with replacement fallback and glyph references."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from text2stroke.exceptions import GlyphNotFoundError
from text2stroke.fonts.model import FontData, Polyline

logger = logging.getLogger(__name__)

# Code points commonly typed but rarely drawn by stroke fonts, mapped to the
# visually identical Greek letters.
DEFAULT_REPLACEMENTS: dict[int, int] = {
    0x00B5: 0x03BC,  # MICRO SIGN -> GREEK SMALL LETTER MU
    0x2126: 0x03A9,  # OHM SIGN -> GREEK CAPITAL LETTER OMEGA
}


class GlyphResolver:
    """Maps code points to the polylines of a font's glyphs.

    Lookup order is: the glyph table, then one replacement-table hop, then
    give up. Referenced glyphs (``@XXXX`` lines) are expanded recursively.
    """

    def __init__(
        self,
        font: FontData,
        replacements: Mapping[int, int] | None = None,
    ) -> None:
        self.font = font
        self._replacements: dict[int, int] = dict(DEFAULT_REPLACEMENTS)
        if replacements:
            self._replacements.update(replacements)

    @property
    def replacements(self) -> dict[int, int]:
        return dict(self._replacements)

    def add_replacements(self, pairs: Iterable[tuple[int, int]] | Mapping[int, int]) -> None:
        """Register ``missing -> present`` code point pairs."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for missing, present in items:
            self._replacements[int(missing)] = int(present)

    def resolve_glyph(self, code_point: int) -> tuple[list[Polyline], bool]:
        """Return ``(polylines, found)`` for a code point.

        ``found`` is False when neither the code point nor its replacement is
        in the font, or when a referenced glyph is missing. Geometry that
        could be resolved is returned in every case.
        """
        if code_point not in self.font:
            replacement = self._replacements.get(code_point)
            if replacement is None or replacement not in self.font:
                return [], False
            code_point = replacement
        polylines: list[Polyline] = []
        found = self._expand(code_point, polylines, set())
        return polylines, found

    def require_glyph(self, code_point: int) -> list[Polyline]:
        """Like resolve_glyph but raises GlyphNotFoundError when not found."""
        polylines, found = self.resolve_glyph(code_point)
        if not found:
            raise GlyphNotFoundError(code_point)
        return polylines

    def has_glyph(self, code_point: int) -> bool:
        return self.resolve_glyph(code_point)[1]

    def _expand(self, code_point: int, out: list[Polyline], chain: set[int]) -> bool:
        glyph = self.font.get(code_point)
        if glyph is None:
            logger.debug("Referenced glyph U+%04X is missing", code_point)
            return False
        if code_point in chain:
            logger.debug("Glyph reference cycle at U+%04X", code_point)
            return True
        out.extend(glyph.polylines)
        found = True
        chain = chain | {code_point}
        for ref in glyph.references:
            found = self._expand(ref, out, chain) and found
        return found
