"""Clamping, state records and JSON configuration."""

from __future__ import annotations

import json

import pytest

from sccomponents.models import (
    DEFAULT_HALO_ALPHA,
    DEFAULT_HALO_WIDTH,
    DEFAULT_STROKE_SIZE,
    STATE_VERSION,
    AppConfig,
    ArcParams,
    NotchParams,
    PointerParams,
    PointerStatus,
    default_notch_length,
)
from sccomponents.notchs import Notchs
from sccomponents.pointer import Pointer
from sccomponents.style import Style


def test_notch_setters_clamp_negative_values() -> None:
    notchs = Notchs()
    notchs.count = -5
    notchs.length = -1
    assert notchs.count == 0
    assert notchs.length == 0.0


def test_default_notch_length_is_twice_the_stroke() -> None:
    assert default_notch_length(DEFAULT_STROKE_SIZE) == 6.0
    assert NotchParams().length == 6.0
    assert default_notch_length(-2.0) == 0.0


def test_notchs_without_params_follow_their_style_width() -> None:
    assert Notchs(style=Style(width=4.0)).length == 8.0
    explicit = Notchs(NotchParams(count=3, length=2.5), style=Style(width=4.0))
    assert explicit.length == 2.5


@pytest.mark.parametrize(
    ("value", "expected"), ((150.0, 100.0), (-10.0, 0.0), (42.5, 42.5))
)
def test_pointer_position_is_clamped(value: float, expected: float) -> None:
    pointer = Pointer()
    pointer.position = value
    assert pointer.position == expected


@pytest.mark.parametrize(("value", "expected"), ((300, 255), (-1, 0), (64, 64)))
def test_pointer_halo_alpha_is_clamped(value: int, expected: int) -> None:
    pointer = Pointer()
    pointer.halo_alpha = value
    assert pointer.halo_alpha == expected


def test_pointer_radius_and_halo_width_never_negative() -> None:
    pointer = Pointer()
    pointer.radius = -3.0
    pointer.halo_width = -0.5
    assert pointer.radius == 0.0
    assert pointer.halo_width == 0.0


def test_pointer_defaults() -> None:
    params = PointerParams()
    assert params.radius == 0.0
    assert params.halo_width == DEFAULT_HALO_WIDTH
    assert params.halo_alpha == DEFAULT_HALO_ALPHA
    assert params.status is PointerStatus.RELEASED


def test_status_parsing() -> None:
    assert PointerStatus.parse("pressed") is PointerStatus.PRESSED
    assert PointerStatus.parse(PointerStatus.RELEASED) is PointerStatus.RELEASED
    with pytest.raises(ValueError):
        PointerStatus.parse("hovered")


def test_notch_state_round_trip() -> None:
    notchs = Notchs(NotchParams(count=12, length=7.5))
    state = notchs.save_state()
    assert state == {"version": STATE_VERSION, "count": 12, "length": 7.5}

    other = Notchs()
    other.restore_state(state)
    assert other.params == notchs.params


def test_pointer_state_round_trip() -> None:
    pointer = Pointer(
        params=PointerParams(
            position=30.0, radius=6.0, halo_width=4.0, halo_alpha=90, status="PRESSED"
        )
    )
    state = pointer.save_state()
    assert state["status"] == "PRESSED"
    assert json.loads(json.dumps(state)) == state

    other = Pointer()
    other.restore_state(state)
    assert other.params == pointer.params


def test_restore_rejects_unknown_version() -> None:
    with pytest.raises(ValueError):
        Notchs().restore_state({"version": 99, "count": 1, "length": 1.0})


def test_restore_clamps_out_of_range_values() -> None:
    pointer = Pointer()
    pointer.restore_state(
        {
            "version": STATE_VERSION,
            "position": 120.0,
            "radius": -1.0,
            "halo_width": 2.0,
            "halo_alpha": 999,
            "status": "RELEASED",
        }
    )
    assert pointer.position == 100.0
    assert pointer.radius == 0.0
    assert pointer.halo_alpha == 255


def test_app_config_json_round_trip() -> None:
    cfg = AppConfig(
        arc=ArcParams(angle_start=90.0, angle_sweep=180.0, stroke_size=4.0),
        notchs=NotchParams(count=4, length=10.0),
        pointer=PointerParams(position=50.0, radius=5.0, status=PointerStatus.PRESSED),
    )
    restored = AppConfig.from_json(cfg.to_json())
    assert restored == cfg


def test_app_config_fills_defaults_and_clamps() -> None:
    text = json.dumps({"notchs": {"count": -3}, "pointer": {"halo_alpha": 400}})
    cfg = AppConfig.from_json(text)
    default = AppConfig()
    assert cfg.notchs.count == 0
    assert cfg.notchs.length == default.notchs.length
    assert cfg.pointer.halo_alpha == 255
    assert cfg.arc == default.arc
    assert cfg.ui == default.ui


def test_app_config_notch_length_defaults_from_arc_stroke() -> None:
    cfg = AppConfig.from_json(json.dumps({"arc": {"stroke_size": 5.0}}))
    assert cfg.arc.stroke_size == 5.0
    assert cfg.notchs.length == 10.0


def test_app_config_rejects_bad_json() -> None:
    with pytest.raises(ValueError):
        AppConfig.from_json("{not json")
