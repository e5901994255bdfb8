"""Utility helpers for geometry and Qt interop."""

from .geometry import Region, clamp, point_on_arc, rotate_point, translate_point

__all__ = ["Region", "clamp", "point_on_arc", "rotate_point", "translate_point"]
