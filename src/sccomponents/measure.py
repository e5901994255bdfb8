"""Arc-length measurement of polyline paths.

A path is a list of contours, each contour an ordered list of ``(x, y)``
points. Distances run across contours in order, so a path drawn as several
disconnected strokes is measured as one continuous length.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .utils import clamp

logger = logging.getLogger(__name__)

XY = Tuple[float, float]


class PathSample(NamedTuple):
    """Point on a path together with the tangent angle in degrees."""

    x: float
    y: float
    angle: float

    @property
    def point(self) -> XY:
        return self.x, self.y


class PathMeasure:
    """Measure the length of a multi-contour path and sample it by distance."""

    def __init__(self, contours: Iterable[Sequence[XY]] = ()) -> None:
        self._contours: List[Tuple[np.ndarray, np.ndarray]] = []
        for contour in contours:
            pts = np.asarray(contour, dtype=np.float64).reshape(-1, 2)
            if len(pts) < 2:
                continue
            seg = np.hypot(*np.diff(pts, axis=0).T)
            if float(seg.sum()) <= 0.0:
                continue
            cum = np.concatenate(([0.0], np.cumsum(seg)))
            self._contours.append((pts, cum))
        self._length = float(sum(cum[-1] for _, cum in self._contours))

    @classmethod
    def from_points(cls, points: Sequence[XY]) -> "PathMeasure":
        return cls([points])

    @property
    def length(self) -> float:
        return self._length

    @property
    def contour_count(self) -> int:
        return len(self._contours)

    def is_empty(self) -> bool:
        return self._length <= 0.0

    def pos_tan(self, distance: float) -> Optional[PathSample]:
        """Return the point and tangent at ``distance`` along the path.

        ``None`` is returned when the path has no measurable contour.
        """
        if self.is_empty():
            return None

        distance = clamp(float(distance), 0.0, self._length)
        pts, cum = self._contours[-1]
        for c_pts, c_cum in self._contours:
            if distance <= c_cum[-1]:
                pts, cum = c_pts, c_cum
                break
            distance -= float(c_cum[-1])
        distance = min(distance, float(cum[-1]))

        last = len(pts) - 2
        i = int(np.searchsorted(cum, distance, side="right")) - 1
        i = int(clamp(i, 0, last))
        # zero length segments carry no direction
        while i > 0 and cum[i + 1] - cum[i] <= 0.0:
            i -= 1
        while i < last and cum[i + 1] - cum[i] <= 0.0:
            i += 1

        seg_len = float(cum[i + 1] - cum[i])
        t = (distance - float(cum[i])) / seg_len
        x0, y0 = pts[i]
        x1, y1 = pts[i + 1]
        dx = float(x1 - x0)
        dy = float(y1 - y0)
        return PathSample(
            float(x0) + dx * t,
            float(y0) + dy * t,
            math.degrees(math.atan2(dy, dx)),
        )


def as_measure(path: Any) -> PathMeasure:
    """Coerce ``path`` into a :class:`PathMeasure`.

    Accepts an existing measure, a :class:`~PySide6.QtGui.QPainterPath`, or a
    single polyline given as a sequence of points.
    """
    if isinstance(path, PathMeasure):
        return path
    if hasattr(path, "toSubpathPolygons"):
        from .utils.qt import painter_path_contours

        return PathMeasure(painter_path_contours(path))
    return PathMeasure.from_points(list(path))


def sample_at(path: Any, percentage: float) -> Optional[PathSample]:
    """Sample ``path`` at ``percentage`` (0-100) of its total length."""
    measure = as_measure(path)
    if measure.is_empty():
        logger.debug("Path has no measurable contour; nothing to sample.")
        return None
    percentage = clamp(float(percentage), 0.0, 100.0)
    distance = measure.length * percentage / 100.0
    return measure.pos_tan(distance)


__all__ = ["PathSample", "PathMeasure", "as_measure", "sample_at"]
