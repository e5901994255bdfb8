"""Geometry helpers shared by the notch and pointer renderers."""

import math
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Region:
    """Axis-aligned bounding box of an ellipse."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2.0

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    @classmethod
    def from_rect(cls, rect: Any) -> "Region":
        """Build a region from anything exposing ``left/top/right/bottom``
        methods, such as :class:`~PySide6.QtCore.QRectF`."""
        return cls(
            float(rect.left()),
            float(rect.top()),
            float(rect.right()),
            float(rect.bottom()),
        )


def point_on_arc(
    degrees: float, region: Region, radius_adjust: float = 0.0
) -> Tuple[int, int]:
    """Return the pixel on the ellipse inscribed in ``region`` at ``degrees``.

    ``radius_adjust`` is added to both half axes, which moves the point
    inside (negative) or outside (positive) the base arc. An adjusted radius
    below zero mirrors the point through the center.
    """
    x_radius = region.width / 2.0 + radius_adjust
    y_radius = region.height / 2.0 + radius_adjust

    rad = math.radians(degrees)
    x = round(x_radius * math.cos(rad) + region.center_x)
    y = round(y_radius * math.sin(rad) + region.center_y)
    return int(x), int(y)


def rotate_point(
    x: float, y: float, cx: float, cy: float, angle_deg: float
) -> Tuple[float, float]:
    """Rotate a point around ``(cx, cy)`` by ``angle_deg`` degrees."""
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x0 = x - cx
    y0 = y - cy
    xr = x0 * cos_t - y0 * sin_t + cx
    yr = x0 * sin_t + y0 * cos_t + cy
    return xr, yr


def translate_point(
    x: float, y: float, offset: Tuple[float, float], angle_deg: float
) -> Tuple[float, float]:
    """Move ``(x, y)`` by ``offset`` expressed in a frame rotated by ``angle_deg``."""
    dx, dy = rotate_point(offset[0], offset[1], 0.0, 0.0, angle_deg)
    return x + dx, y + dy


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = ["Region", "point_on_arc", "rotate_point", "translate_point", "clamp"]
