"""Reader for FontoBene stroke font definitions (``*.bene``).

A file consists of an INI-like header terminated by a ``---`` line,
followed by the glyph list::

    [format]
    format = FontoBene
    format_version = 1.0

    [font]
    name = Example
    letter_spacing = 1.5
    word_spacing = 6
    line_spacing = 15

    ---

    [0041] LATIN CAPITAL LETTER A
    0,0;3,9;6,0
    1,3;5,3

    [00C4] LATIN CAPITAL LETTER A WITH DIAERESIS
    @0041
    2,11;2,10.5
"""

from __future__ import annotations

import re
from pathlib import Path

from text2stroke.exceptions import FontParseError
from text2stroke.fonts.model import FontData, FontHeader, FontVertex, Glyph, Polyline

FORMAT_ID = "FontoBene"
SUPPORTED_MAJOR_VERSION = 1
HEADER_SEPARATOR = "---"

_SECTION_RE = re.compile(r"^\[([A-Za-z_][A-Za-z0-9_]*)\]$")
_GLYPH_RE = re.compile(r"^\[([0-9A-Fa-f]{1,6})\](?:\s+(.*))?$")
_REFERENCE_RE = re.compile(r"^@([0-9A-Fa-f]{1,6})$")

_FLOAT_KEYS = {
    "letter_spacing": "letter_spacing",
    "word_spacing": "word_spacing",
    "line_spacing": "line_spacing",
}


def parse_font_file(path: str | Path) -> FontData:
    """Read and parse a font file, skipping a UTF-8 BOM.

    I/O errors propagate as OSError.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8-sig")
    return parse_font(text, source=str(path))


def parse_font(text: str, source: str | None = None) -> FontData:
    """Parse font definition text into a FontData.

    Raises:
        FontParseError: On any syntax or content violation.
    """
    lines = text.splitlines()
    try:
        separator = next(
            i for i, raw in enumerate(lines) if raw.strip() == HEADER_SEPARATOR
        )
    except StopIteration:
        raise FontParseError(
            f"Missing '{HEADER_SEPARATOR}' header separator", source=source
        ) from None

    header = _parse_header(lines[:separator], source)
    glyphs = _parse_glyphs(lines[separator + 1 :], separator + 2, source)
    return FontData(header=header, glyphs=glyphs)


def _parse_header(lines: list[str], source: str | None) -> FontHeader:
    sections: dict[str, list[tuple[int, str, str]]] = {}
    current: str | None = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        match = _SECTION_RE.match(line)
        if match:
            current = match.group(1).lower()
            sections.setdefault(current, [])
            continue
        if current is None:
            raise FontParseError("Header entry outside of a section", lineno, source)
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            raise FontParseError(f"Invalid header line: {line!r}", lineno, source)
        sections[current].append((lineno, key.strip().lower(), value.strip()))

    fmt = {key: (lineno, value) for lineno, key, value in sections.get("format", [])}
    if fmt.get("format", (0, ""))[1] != FORMAT_ID:
        raise FontParseError(f"Not a {FORMAT_ID} font", source=source)
    version_line, version = fmt.get("format_version", (0, ""))
    major = version.split(".", 1)[0]
    if not major.isdigit() or int(major) != SUPPORTED_MAJOR_VERSION:
        raise FontParseError(
            f"Unsupported format version: {version!r}", version_line or None, source
        )

    values: dict[str, object] = {}
    authors: list[str] = []
    user: dict[str, str] = {}
    for lineno, key, value in sections.get("font", []):
        if key in _FLOAT_KEYS:
            values[_FLOAT_KEYS[key]] = _to_float(value, lineno, source)
        elif key == "author":
            authors.append(value)
        elif key in ("name", "id", "version", "license"):
            values[key] = value
        else:
            user[key] = value
    for _lineno, key, value in sections.get("user", []):
        user[key] = value

    return FontHeader(authors=tuple(authors), user=user, **values)  # type: ignore[arg-type]


def _parse_glyphs(
    lines: list[str], first_lineno: int, source: str | None
) -> dict[int, Glyph]:
    glyphs: dict[int, Glyph] = {}
    code_point: int | None = None
    name = ""
    polylines: list[Polyline] = []
    references: list[int] = []

    def flush() -> None:
        if code_point is not None:
            glyphs[code_point] = Glyph(
                code_point, tuple(polylines), tuple(references), name
            )

    for lineno, raw in enumerate(lines, start=first_lineno):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        match = _GLYPH_RE.match(line)
        if match:
            flush()
            code_point = _to_code_point(match.group(1), lineno, source)
            if code_point in glyphs:
                raise FontParseError(
                    f"Duplicate glyph U+{code_point:04X}", lineno, source
                )
            name = (match.group(2) or "").strip()
            polylines, references = [], []
            continue
        if code_point is None:
            raise FontParseError("Glyph data before first glyph header", lineno, source)
        ref = _REFERENCE_RE.match(line)
        if ref:
            references.append(_to_code_point(ref.group(1), lineno, source))
        else:
            polylines.append(_parse_polyline(line, lineno, source))
    flush()
    return glyphs


def _parse_polyline(line: str, lineno: int, source: str | None) -> Polyline:
    vertices = []
    for chunk in line.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(",")
        if len(parts) not in (2, 3):
            raise FontParseError(f"Invalid vertex: {chunk!r}", lineno, source)
        numbers = [_to_float(p, lineno, source) for p in parts]
        vertices.append(FontVertex(*numbers))
    return tuple(vertices)


def _to_float(value: str, lineno: int, source: str | None) -> float:
    try:
        return float(value.strip())
    except ValueError:
        raise FontParseError(f"Invalid number: {value!r}", lineno, source) from None


def _to_code_point(value: str, lineno: int, source: str | None) -> int:
    code_point = int(value, 16)
    if code_point > 0x10FFFF:
        raise FontParseError(f"Invalid code point: {value}", lineno, source)
    return code_point
