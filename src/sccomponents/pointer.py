"""Pointer glyph drawn at a percentage position along a path."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .measure import PathMeasure, PathSample, as_measure, sample_at
from .models import PointerParams, PointerStatus
from .style import PaintStyle, Style
from .surface import Surface
from .utils import translate_point

logger = logging.getLogger(__name__)


@dataclass
class PointerInfo:
    """Mutable record handed to the before-draw hook.

    Setting ``bitmap`` replaces the default circles with that image.
    """

    source: "Pointer"
    halo_style: Style
    angle: float = 0.0
    offset: Tuple[float, float] = (0.0, 0.0)
    bitmap: Optional[Any] = None


OnBeforeDrawPointer = Callable[[PointerInfo], None]


class Pointer:
    """Pointer with a halo ring whose opacity mirrors the pressed state."""

    def __init__(
        self,
        path: Any = None,
        params: Optional[PointerParams] = None,
        style: Optional[Style] = None,
        on_before_draw_pointer: Optional[OnBeforeDrawPointer] = None,
    ) -> None:
        self._measure: Optional[PathMeasure] = None
        self.path = path
        self._params = params or PointerParams()
        self.style = style or Style(width=1.0, paint=PaintStyle.FILL)
        self._on_before_draw_pointer = on_before_draw_pointer

    # ----------------------------- Properties ---------------------------------

    @property
    def path(self) -> Any:
        return self._path

    @path.setter
    def path(self, value: Any) -> None:
        self._path = value
        self._measure = None if value is None else as_measure(value)

    @property
    def params(self) -> PointerParams:
        return self._params

    @property
    def position(self) -> float:
        return self._params.position

    @position.setter
    def position(self, value: float) -> None:
        self._params = replace(self._params, position=value)

    @property
    def radius(self) -> float:
        return self._params.radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._params = replace(self._params, radius=value)

    @property
    def halo_width(self) -> float:
        return self._params.halo_width

    @halo_width.setter
    def halo_width(self, value: float) -> None:
        self._params = replace(self._params, halo_width=value)

    @property
    def halo_alpha(self) -> int:
        return self._params.halo_alpha

    @halo_alpha.setter
    def halo_alpha(self, value: int) -> None:
        self._params = replace(self._params, halo_alpha=value)

    @property
    def status(self) -> PointerStatus:
        return self._params.status

    @status.setter
    def status(self, value: PointerStatus) -> None:
        self._params = replace(self._params, status=value)

    def set_on_draw_listener(self, listener: Optional[OnBeforeDrawPointer]) -> None:
        self._on_before_draw_pointer = listener

    # ----------------------------- Drawing ------------------------------------

    def glyph_style(self) -> Style:
        return self.style.with_alpha(self.halo_alpha if self._params.pressed else 255)

    def halo_style(self) -> Style:
        glyph = self.glyph_style()
        return replace(
            glyph,
            alpha=255 if self._params.pressed else self.halo_alpha,
            width=self.halo_width,
            paint=PaintStyle.STROKE,
        )

    def sample(self) -> Optional[PathSample]:
        """Point and tangent under the pointer, ``None`` for a degenerate path."""
        if self._measure is None:
            return None
        return sample_at(self._measure, self.position)

    def draw(self, surface: Surface) -> bool:
        """Draw the pointer; returns ``False`` when nothing could be placed."""
        sample = self.sample()
        if sample is None:
            logger.debug("Pointer skipped: path is empty or has zero length.")
            return False

        glyph = self.glyph_style()
        info = PointerInfo(
            source=self, halo_style=self.halo_style(), angle=sample.angle
        )
        if self._on_before_draw_pointer is not None:
            self._on_before_draw_pointer(info)

        if info.bitmap is not None:
            surface.draw_bitmap(
                info.bitmap, sample.x, sample.y, info.angle, info.offset, glyph
            )
            return True

        x, y = translate_point(sample.x, sample.y, info.offset, info.angle)
        if self.radius > 0.0:
            surface.draw_circle(x, y, self.radius, info.halo_style)
            surface.draw_circle(x, y, self.radius, glyph)
        return True

    # ----------------------------- State --------------------------------------

    def save_state(self) -> Dict[str, Any]:
        return self._params.to_state()

    def restore_state(self, state: Mapping[str, Any]) -> None:
        self._params = PointerParams.from_state(state)


__all__ = ["Pointer", "PointerInfo", "OnBeforeDrawPointer"]
