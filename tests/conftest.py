"""Pytest configuration and shared fixtures for text2stroke tests."""

from __future__ import annotations

import concurrent.futures
from pathlib import Path

import pytest

from text2stroke.fonts import FontData, GlyphResolver, parse_font

# Height 9 makes stroke-space coordinates equal to font design units, so the
# numbers below can be read straight off the glyph definitions:
# letter spacing 1.5, word spacing 6, line spacing 15.
FONT_TEXT = """\
# Fixture font for the test suite
[format]
format = FontoBene
format_version = 1.0

[font]
name = Test Stroke
id = test-stroke
version = 0.3
author = Alice Example
author = Bob Example
license = CC0-1.0
letter_spacing = 1.5
word_spacing = 6
line_spacing = 15
weight = light

[user]
comment = fixture

---

[0000] NULL

[0020] SPACE

[0041] LATIN CAPITAL LETTER A
0,0;3,9;6,0
1,3;5,3

[0042] LATIN CAPITAL LETTER B
0,0;0,9;4,9;4,0;0,0

[004F] LATIN CAPITAL LETTER O
0,4.5;6,4.5,9;0,4.5,9

[00C4] LATIN CAPITAL LETTER A WITH DIAERESIS
@0041
2,11;2,10.5

[03A9] GREEK CAPITAL LETTER OMEGA
0,0;2,0;0,5,-9;6,5,-9;4,0;6,0

[03BC] GREEK SMALL LETTER MU
0,-3;0,6
0,1;4,1;4,6

[E000] CYCLE START
@E001
0,0;1,1

[E001] CYCLE END
@E000

[E002] BROKEN REFERENCE
@E0FF
0,0;2,0
"""

HEIGHT = 9.0


class ImmediateExecutor(concurrent.futures.Executor):
    """Runs submitted callables synchronously in the calling thread."""

    def __init__(self) -> None:
        self.calls = 0

    def submit(self, fn, /, *args, **kwargs):
        self.calls += 1
        future: concurrent.futures.Future = concurrent.futures.Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future


@pytest.fixture
def font_text() -> str:
    """Return the fixture font definition text."""
    return FONT_TEXT


@pytest.fixture
def font_data() -> FontData:
    """Return the parsed fixture font."""
    return parse_font(FONT_TEXT, source="fixture.bene")


@pytest.fixture
def resolver(font_data: FontData) -> GlyphResolver:
    """Return a resolver over the fixture font."""
    return GlyphResolver(font_data)


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """Write the fixture font to a temporary .bene file."""
    path = tmp_path / "fonts" / "test.bene"
    path.parent.mkdir()
    path.write_text(FONT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def broken_font_file(tmp_path: Path) -> Path:
    """Write a font file that fails to parse."""
    path = tmp_path / "broken.bene"
    path.write_text("[format]\nformat = FontoBene\nformat_version = 1.0\n", encoding="utf-8")
    return path


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    """Return an executor that completes work synchronously."""
    return ImmediateExecutor()
