"""Exception hierarchy for text2stroke.

All library errors derive from Text2StrokeError so callers can catch a
single base class. Note that StrokeFont.stroke() never raises for font or
glyph problems; FontParseError and GlyphNotFoundError are recovered inside
the loader and resolver and only reported through logging.
"""

from __future__ import annotations

from typing import Any


class Text2StrokeError(Exception):
    """Base exception for all text2stroke errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({extra})"
        return self.message


class FontParseError(Text2StrokeError):
    """Raised when a stroke font definition is malformed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        source: str | None = None,
    ) -> None:
        self.line = line
        self.source = source
        details: dict[str, Any] = {}
        if source is not None:
            details["source"] = source
        if line is not None:
            details["line"] = line
        super().__init__(message, details)


class GlyphNotFoundError(Text2StrokeError):
    """A code point could not be resolved, even through the replacement table."""

    def __init__(self, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(f"Glyph not found: U+{code_point:04X}")


class FontNotFoundError(Text2StrokeError):
    """Raised when a font pool has no font registered under a name."""

    def __init__(self, font_name: str, available: list[str] | None = None) -> None:
        self.font_name = font_name
        self.available = available or []
        details = {"available": ", ".join(self.available)} if self.available else None
        super().__init__(f"Stroke font not found: {font_name}", details)


class InvalidStateError(Text2StrokeError):
    """A font object was used after it was closed."""


class ConfigError(Text2StrokeError):
    """Raised when the configuration file cannot be read or validated."""
