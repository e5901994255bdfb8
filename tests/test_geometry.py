"""Property tests for the arc point locator and the small geometry helpers."""

from __future__ import annotations

import math

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from sccomponents.utils import (
    Region,
    clamp,
    point_on_arc,
    rotate_point,
    translate_point,
)

angles = st.floats(min_value=-720.0, max_value=720.0, allow_nan=False)
coords = st.floats(min_value=-500.0, max_value=500.0, allow_nan=False)
sizes = st.floats(min_value=20.0, max_value=400.0, allow_nan=False)


@st.composite
def regions(draw, square: bool = False, min_size: float = 20.0) -> Region:
    left = draw(coords)
    top = draw(coords)
    w = draw(st.floats(min_value=min_size, max_value=400.0, allow_nan=False))
    h = w if square else draw(sizes)
    return Region(left, top, left + w, top + h)


def test_region_measures() -> None:
    r = Region(10.0, 20.0, 110.0, 70.0)
    assert r.width == 100.0
    assert r.height == 50.0
    assert r.center_x == 60.0
    assert r.center_y == 45.0


def test_point_on_arc_cardinal_points() -> None:
    r = Region(0.0, 0.0, 200.0, 100.0)
    assert point_on_arc(0.0, r) == (200, 50)
    assert point_on_arc(90.0, r) == (100, 100)
    assert point_on_arc(180.0, r) == (0, 50)
    assert point_on_arc(270.0, r) == (100, 0)


def test_point_on_arc_radius_adjust_moves_both_axes() -> None:
    r = Region(0.0, 0.0, 200.0, 100.0)
    assert point_on_arc(0.0, r, 10.0) == (210, 50)
    assert point_on_arc(90.0, r, -10.0) == (100, 90)


def test_negative_adjusted_radius_mirrors_point() -> None:
    r = Region(0.0, 0.0, 100.0, 100.0)
    assert point_on_arc(0.0, r, -60.0) == (40, 50)


@given(theta=angles, region=regions())
@settings(max_examples=200)
def test_point_lies_on_inscribed_ellipse(theta: float, region: Region) -> None:
    x, y = point_on_arc(theta, region, 0.0)
    a = region.width / 2.0
    b = region.height / 2.0

    rad = math.radians(theta)
    assert abs(x - (a * math.cos(rad) + region.center_x)) <= 0.5 + 1e-9
    assert abs(y - (b * math.sin(rad) + region.center_y)) <= 0.5 + 1e-9

    value = ((x - region.center_x) / a) ** 2 + ((y - region.center_y) / b) ** 2
    tolerance = 1.0 / a + 1.0 / b + 0.25 / (a * a) + 0.25 / (b * b)
    assert value == pytest.approx(1.0, abs=tolerance)


@given(
    theta=angles,
    region=regions(square=True, min_size=40.0),
    r1=st.floats(min_value=-5.0, max_value=60.0, allow_nan=False),
    gap=st.floats(min_value=2.0, max_value=60.0, allow_nan=False),
)
@settings(max_examples=200)
def test_radius_adjust_orders_points_along_the_ray(
    theta: float, region: Region, r1: float, gap: float
) -> None:
    r2 = r1 + gap
    cx, cy = region.center_x, region.center_y
    p1 = point_on_arc(theta, region, r1)
    p2 = point_on_arc(theta, region, r2)

    d1 = math.hypot(p1[0] - cx, p1[1] - cy)
    d2 = math.hypot(p2[0] - cx, p2[1] - cy)
    assert d2 > d1

    rad = math.radians(theta)
    for px, py in (p1, p2):
        vx, vy = px - cx, py - cy
        cross = math.cos(rad) * vy - math.sin(rad) * vx
        dot = math.cos(rad) * vx + math.sin(rad) * vy
        assert dot > 0
        assert abs(math.atan2(cross, dot)) < 0.06


def test_rotate_point_quarter_turn() -> None:
    x, y = rotate_point(2.0, 1.0, 1.0, 1.0, 90.0)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(2.0)


def test_translate_point_follows_rotated_frame() -> None:
    assert translate_point(10.0, 10.0, (5.0, 0.0), 0.0) == pytest.approx((15.0, 10.0))
    assert translate_point(10.0, 10.0, (5.0, 0.0), 90.0) == pytest.approx((10.0, 15.0))


@pytest.mark.parametrize(("value", "expected"), ((-1.0, 0.0), (0.5, 0.5), (3.0, 1.0)))
def test_clamp(value: float, expected: float) -> None:
    assert clamp(value, 0.0, 1.0) == expected


def test_region_from_rect() -> None:
    class _Rect:
        def left(self) -> float:
            return 1.0

        def top(self) -> float:
            return 2.0

        def right(self) -> float:
            return 11.0

        def bottom(self) -> float:
            return 22.0

    r = Region.from_rect(_Rect())
    assert (r.width, r.height) == (10.0, 20.0)
