"""Notches: radial tick marks that follow an elliptical arc."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from .models import DEFAULT_STROKE_SIZE, NotchParams, default_notch_length
from .style import Style
from .surface import Surface
from .utils import Region, point_on_arc

logger = logging.getLogger(__name__)

# (style, angle relative to the arc start, index) -> notch length
OnBeforeNotch = Callable[[Style, float, int], float]


class Notchs:
    """Draw ``count + 1`` notches evenly spread over an arc sweep.

    Both arc ends get a notch, so ``count`` is really the number of
    intervals. The notch style doubles as the arc stroke: ticks are pushed
    outward by half its width so they end flush with the arc's outer edge.
    Without explicit params a notch is twice as long as the stroke is wide.
    """

    def __init__(
        self,
        params: Optional[NotchParams] = None,
        style: Optional[Style] = None,
        on_before_notch: Optional[OnBeforeNotch] = None,
    ) -> None:
        self.style = style or Style(width=DEFAULT_STROKE_SIZE)
        if params is None:
            params = NotchParams(length=default_notch_length(self.style.width))
        self._params = params
        self._on_before_notch = on_before_notch

    # ----------------------------- Properties ---------------------------------

    @property
    def params(self) -> NotchParams:
        return self._params

    @property
    def count(self) -> int:
        return self._params.count

    @count.setter
    def count(self, value: int) -> None:
        self._params = replace(self._params, count=value)

    @property
    def length(self) -> float:
        return self._params.length

    @length.setter
    def length(self, value: float) -> None:
        self._params = replace(self._params, length=value)

    def set_on_draw_listener(self, listener: Optional[OnBeforeNotch]) -> None:
        self._on_before_notch = listener

    # ----------------------------- Drawing ------------------------------------

    def tick_angles(self, sweep: float) -> List[float]:
        """Angles of every notch, relative to the arc start."""
        if self.count <= 0:
            return []
        delta = sweep / self.count
        return [index * delta for index in range(self.count + 1)]

    def draw(
        self,
        surface: Surface,
        region: Region,
        sweep: float = 360.0,
        start: float = 0.0,
    ) -> int:
        """Draw the notches and return how many lines were emitted."""
        if self.length <= 0 or self.count <= 0:
            return 0

        middle_stroke = self.style.width / 2.0
        drawn = 0
        for index, angle in enumerate(self.tick_angles(sweep)):
            length = self.length
            if self._on_before_notch is not None:
                length = float(self._on_before_notch(self.style, angle, index))
            if length <= 0:
                continue

            absolute = start + angle
            x1, y1 = point_on_arc(absolute, region, -length + middle_stroke)
            x2, y2 = point_on_arc(absolute, region, middle_stroke)
            surface.draw_line(x1, y1, x2, y2, self.style)
            drawn += 1

        logger.debug("Drew %d notches over a %.1f degree sweep.", drawn, sweep)
        return drawn

    # ----------------------------- State --------------------------------------

    def save_state(self) -> Dict[str, Any]:
        return self._params.to_state()

    def restore_state(self, state: Mapping[str, Any]) -> None:
        self._params = NotchParams.from_state(state)


__all__ = ["Notchs", "OnBeforeNotch"]
