"""Immutable pen/brush descriptors passed to the drawing surface."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .utils import clamp

RGB = Tuple[int, int, int]


class PaintStyle(Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class Style:
    """How a primitive is painted.

    Instances never change; derive variants with :meth:`with_alpha` and
    friends so one draw pass cannot leak settings into the next.
    """

    color: RGB = (0, 0, 0)
    alpha: int = 255
    width: float = 1.0
    paint: PaintStyle = PaintStyle.STROKE

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", int(clamp(int(self.alpha), 0, 255)))
        object.__setattr__(self, "width", max(0.0, float(self.width)))

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        r, g, b = self.color
        return int(r), int(g), int(b), self.alpha

    def with_alpha(self, alpha: int) -> "Style":
        return replace(self, alpha=alpha)

    def with_width(self, width: float) -> "Style":
        return replace(self, width=width)

    def with_paint(self, paint: PaintStyle) -> "Style":
        return replace(self, paint=paint)


__all__ = ["PaintStyle", "Style"]
