"""Registry of stroke fonts owned by a document or session."""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from text2stroke.exceptions import FontNotFoundError
from text2stroke.fonts.loader import ReadyCallback, StrokeFont

logger = logging.getLogger(__name__)

FONT_SUFFIX = ".bene"


class StrokeFontPool:
    """Loads a set of stroke fonts and looks them up by file name.

    All fonts start loading in the background when they are added. The pool
    is an ordinary object: whoever creates it owns it and passes it on.
    """

    def __init__(
        self,
        replacements: Mapping[int, int] | None = None,
        max_workers: int = 2,
    ) -> None:
        self._replacements = dict(replacements or {})
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="text2stroke-pool"
        )
        self._fonts: dict[str, StrokeFont] = {}

    @classmethod
    def from_directories(
        cls,
        directories: Iterable[str | Path],
        replacements: Mapping[int, int] | None = None,
    ) -> StrokeFontPool:
        """Create a pool with every ``*.bene`` file found in ``directories``."""
        pool = cls(replacements)
        for directory in directories:
            directory = Path(directory).expanduser()
            if not directory.is_dir():
                logger.warning("Font directory does not exist: %s", directory)
                continue
            for path in sorted(directory.glob(f"*{FONT_SUFFIX}")):
                pool.add_font(path)
        return pool

    def add_font(
        self,
        path: str | Path,
        name: str | None = None,
        on_ready: ReadyCallback | None = None,
    ) -> StrokeFont:
        """Start loading ``path`` and register it under ``name`` (default: file name)."""
        path = Path(path)
        name = name or path.name
        if name in self._fonts:
            logger.debug("Replacing stroke font %s", name)
            self._fonts[name].close()
        font = StrokeFont(
            path,
            replacements=self._replacements,
            on_ready=on_ready,
            executor=self._executor,
        )
        self._fonts[name] = font
        return font

    def names(self) -> list[str]:
        return sorted(self._fonts)

    def exists(self, name: str) -> bool:
        return name in self._fonts

    def get_font(self, name: str) -> StrokeFont:
        """Return the font registered as ``name``.

        Raises:
            FontNotFoundError: If no such font was added.
        """
        try:
            return self._fonts[name]
        except KeyError:
            raise FontNotFoundError(name, self.names()) from None

    def close(self) -> None:
        for font in self._fonts.values():
            font.close()
        self._fonts.clear()
        self._executor.shutdown(wait=False)

    def __enter__(self) -> StrokeFontPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
