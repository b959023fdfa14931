"""text2stroke: Render Unicode text as stroke-font vector geometry.

This library turns text into line/arc stroke paths suitable for engraving
style output (PCB silkscreen, laser cutters, pen plotters):
- FontoBene stroke font loading in the background
- Glyph lookup with a replacement table for look-alike code points
- Multi-line layout with letter/word/line spacing and alignment
- SVG output of the stroked paths

Example:
    >>> from text2stroke import StrokeFont, Alignment, HAlign, VAlign
    >>> font = StrokeFont("newstroke.bene")
    >>> paths = font.stroke("Hello", height=1.0, align=Alignment(HAlign.CENTER, VAlign.MIDDLE))
"""

# fonts must be imported before stroke (the loader depends on the layout)
from text2stroke.fonts import (
    FontData,
    FontHeader,
    FontVertex,
    Glyph,
    GlyphResolver,
    StrokeFont,
    StrokeFontPool,
    parse_font,
    parse_font_file,
)
from text2stroke.config import Config
from text2stroke.exceptions import (
    ConfigError,
    FontNotFoundError,
    FontParseError,
    GlyphNotFoundError,
    InvalidStateError,
    Text2StrokeError,
)
from text2stroke.geometry import (
    Alignment,
    HAlign,
    Orientation,
    Path,
    Point,
    VAlign,
    Vertex,
    bounding_box,
)
from text2stroke.text import StrokeText, StrokeTextSpec

__version__ = "0.1.0"

__all__ = [
    # Fonts
    "StrokeFont",
    "StrokeFontPool",
    "FontData",
    "FontHeader",
    "FontVertex",
    "Glyph",
    "GlyphResolver",
    "parse_font",
    "parse_font_file",
    # Geometry
    "Alignment",
    "HAlign",
    "VAlign",
    "Orientation",
    "Path",
    "Point",
    "Vertex",
    "bounding_box",
    # Text items
    "StrokeText",
    "StrokeTextSpec",
    # Config
    "Config",
    # Exceptions
    "Text2StrokeError",
    "FontParseError",
    "FontNotFoundError",
    "GlyphNotFoundError",
    "InvalidStateError",
    "ConfigError",
    # Metadata
    "__version__",
]
