"""Background loading of stroke fonts.

A StrokeFont starts parsing its source on a worker thread as soon as it is
constructed. The first query blocks until that parse has finished and then
caches the result; a font that fails to parse is replaced by an empty one so
that stroking keeps working (and simply produces no geometry).
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path as FilePath
from typing import Any

from text2stroke.exceptions import InvalidStateError
from text2stroke.fonts.model import FontData, FontHeader, Polyline
from text2stroke.fonts.parser import parse_font_file
from text2stroke.fonts.resolver import GlyphResolver
from text2stroke.geometry.types import Alignment, Path
from text2stroke.stroke.layout import stroke_text

logger = logging.getLogger(__name__)

FontReader = Callable[[Any], FontData]
ReadyCallback = Callable[["StrokeFont"], None]


class StrokeFont:
    """A stroke font whose data is loaded asynchronously.

    Args:
        source: Font source handed to ``reader`` (a file path by default).
        reader: Callable turning ``source`` into FontData. Runs on a worker thread.
        replacements: Extra ``missing -> present`` code point replacements.
        on_ready: Called once with this font when the background parse has
            finished, whether it succeeded or failed. Runs on the worker
            thread; the font data itself is still materialized lazily.
        executor: Executor to run the reader on. A private single-thread
            executor is used when omitted.
    """

    def __init__(
        self,
        source: str | FilePath | Any,
        reader: FontReader = parse_font_file,
        replacements: Mapping[int, int] | None = None,
        on_ready: ReadyCallback | None = None,
        executor: concurrent.futures.Executor | None = None,
    ) -> None:
        self.source = source
        self._replacements = dict(replacements or {})
        self._lock = threading.Lock()
        self._resolver: GlyphResolver | None = None
        self._load_error: Exception | None = None
        self._closed = False
        self._ready_notified = False
        self._ready_callbacks: list[ReadyCallback] = [on_ready] if on_ready else []

        logger.debug("Start loading font %s", source)
        if executor is None:
            own = concurrent.futures.ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="text2stroke-font"
            )
            self._future = own.submit(reader, source)
            own.shutdown(wait=False)
        else:
            self._future = executor.submit(reader, source)
        self._future.add_done_callback(self._font_loaded)

    def __repr__(self) -> str:
        if self._load_error is not None:
            state = "failed"
        elif self._resolver is not None:
            state = "loaded"
        elif self._future.done():
            state = "ready"
        else:
            state = "loading"
        return f"<StrokeFont {self.source!s} ({state})>"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        """True once the background parse has finished (never blocks)."""
        return self._future.done()

    @property
    def is_loaded(self) -> bool:
        """True once the parse result has been materialized."""
        return self._resolver is not None

    @property
    def load_failed(self) -> bool:
        """Whether loading fell back to the empty font. Blocks like a query."""
        self._accessor()
        return self._load_error is not None

    @property
    def load_error(self) -> Exception | None:
        self._accessor()
        return self._load_error

    def add_ready_listener(self, callback: ReadyCallback) -> None:
        """Register a ready callback; runs immediately if already notified.

        Raises:
            InvalidStateError: If the font has been closed.
        """
        with self._lock:
            if self._closed:
                raise InvalidStateError(f"Font {self.source!s} has been closed")
            if not self._ready_notified:
                self._ready_callbacks.append(callback)
                return
        callback(self)

    def close(self) -> None:
        """Mark the font as torn down. Later queries raise InvalidStateError.

        A running parse is not cancelled; its result is discarded.
        """
        with self._lock:
            self._closed = True
            self._ready_callbacks.clear()

    # ------------------------------------------------------------------
    # Queries (block until loaded on first use)
    # ------------------------------------------------------------------

    @property
    def resolver(self) -> GlyphResolver:
        return self._accessor()

    @property
    def font_data(self) -> FontData:
        return self._accessor().font

    @property
    def header(self) -> FontHeader:
        return self._accessor().font.header

    def resolve_glyph(self, code_point: int) -> tuple[list[Polyline], bool]:
        return self._accessor().resolve_glyph(code_point)

    def stroke(
        self,
        text: str,
        height: float,
        line_spacing_factor: float = 1.0,
        align: Alignment | None = None,
    ) -> list[Path]:
        """Stroke ``text`` at cap height ``height``; see layout.stroke_text."""
        return stroke_text(self._accessor(), text, height, line_spacing_factor, align)

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _font_loaded(self, _future: concurrent.futures.Future) -> None:
        with self._lock:
            if self._closed or self._ready_notified:
                return
            self._ready_notified = True
            callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback(self)

    def _accessor(self) -> GlyphResolver:
        if self._closed:
            raise InvalidStateError(f"Font {self.source!s} has been closed")
        resolver = self._resolver
        if resolver is not None:
            return resolver

        with self._lock:
            if self._closed:
                raise InvalidStateError(f"Font {self.source!s} has been closed")
            if self._resolver is not None:
                return self._resolver
            try:
                data = self._future.result()
                logger.debug(
                    "Successfully loaded font %s with %d glyphs", self.source, len(data)
                )
            except Exception as e:
                self._load_error = e
                data = FontData.empty()
                logger.error("Failed to load font %s: %s", self.source, e)
            resolver = GlyphResolver(data, self._replacements)
            self._resolver = resolver
        return resolver
