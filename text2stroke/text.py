"""Stroke text items: an immutable text specification plus derived geometry."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from text2stroke.exceptions import FontNotFoundError
from text2stroke.fonts.pool import StrokeFontPool
from text2stroke.geometry.bbox import bounding_box
from text2stroke.geometry.types import Alignment, Orientation, Path, Point

logger = logging.getLogger(__name__)

DEFAULT_FONT = "newstroke.bene"

TextObserver = Callable[["StrokeText", frozenset], None]


@dataclass(frozen=True)
class StrokeTextSpec:
    """Everything that defines how a piece of stroke text looks."""

    text: str = ""
    height: float = 1.0
    stroke_width_ratio: float = 0.15
    line_spacing_factor: float = 1.0
    align: Alignment = field(default_factory=Alignment)
    mirrored: bool = False
    position: Point = field(default_factory=Point)
    rotation: float = 0.0
    font_name: str = DEFAULT_FONT

    @property
    def stroke_width(self) -> float:
        return self.height * self.stroke_width_ratio


# Changing only these fields does not require re-stroking.
_PLACEMENT_FIELDS = frozenset({"position", "rotation", "stroke_width_ratio"})


class StrokeText:
    """A stroke text bound to a font pool.

    ``paths`` holds the stroked geometry in text-local coordinates; placement
    (position, rotation) is left to the renderer.
    """

    def __init__(self, spec: StrokeTextSpec, pool: StrokeFontPool) -> None:
        self._spec = spec
        self._pool = pool
        self._paths: list[Path] = []
        self._observers: list[TextObserver] = []
        self.update_paths()

    @property
    def spec(self) -> StrokeTextSpec:
        return self._spec

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def add_observer(self, observer: TextObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: TextObserver) -> None:
        self._observers.remove(observer)

    def update(self, **changes) -> StrokeTextSpec:
        """Replace spec fields; geometry is recomputed when needed."""
        new_spec = dataclasses.replace(self._spec, **changes)
        changed = frozenset(
            name
            for name in changes
            if getattr(new_spec, name) != getattr(self._spec, name)
        )
        if not changed:
            return self._spec
        self._spec = new_spec
        if not changed <= _PLACEMENT_FIELDS:
            self.update_paths()
        for observer in list(self._observers):
            observer(self, changed)
        return new_spec

    def update_paths(self) -> None:
        spec = self._spec
        try:
            font = self._pool.get_font(spec.font_name)
        except FontNotFoundError as e:
            logger.error("Failed to draw text: %s", e)
            return
        paths = font.stroke(spec.text, spec.height, spec.line_spacing_factor, spec.align)
        if spec.mirrored:
            paths = [p.mirrored(Orientation.HORIZONTAL) for p in paths]
        self._paths = paths

    def bounding_box(self) -> tuple[Point, Point]:
        return bounding_box(self._paths)
