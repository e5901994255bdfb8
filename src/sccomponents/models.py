"""Dataclasses describing notch, pointer and arc configuration.

Every record clamps its values on construction, so an instance is always
within range no matter where it came from (setters, JSON, restored state).
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

from .utils import clamp

STATE_VERSION = 1

DEFAULT_HALO_WIDTH = 10.0
DEFAULT_HALO_ALPHA = 128
DEFAULT_STROKE_SIZE = 3.0


class PointerStatus(Enum):
    RELEASED = "RELEASED"
    PRESSED = "PRESSED"

    @classmethod
    def parse(cls, value: Any) -> "PointerStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown pointer status: {value!r}") from None


def default_notch_length(stroke_size: float) -> float:
    """Notch length used when none is configured: twice the arc stroke."""
    return max(0.0, float(stroke_size)) * 2.0


def _check_version(state: Mapping[str, Any]) -> None:
    version = state.get("version", STATE_VERSION)
    if version != STATE_VERSION:
        raise ValueError(
            f"Unsupported state version {version!r} (expected {STATE_VERSION})."
        )


@dataclass(frozen=True)
class NotchParams:
    """Number and length of the notches drawn along an arc."""

    count: int = 0
    length: float = default_notch_length(DEFAULT_STROKE_SIZE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", max(0, int(self.count)))
        object.__setattr__(self, "length", max(0.0, float(self.length)))

    def to_state(self) -> Dict[str, Any]:
        return {"version": STATE_VERSION, "count": self.count, "length": self.length}

    @staticmethod
    def from_state(state: Mapping[str, Any]) -> "NotchParams":
        _check_version(state)
        return NotchParams(count=int(state["count"]), length=float(state["length"]))


@dataclass(frozen=True)
class PointerParams:
    """Pointer placement along a path and its halo appearance."""

    position: float = 0.0  # percentage of the path length
    radius: float = 0.0
    halo_width: float = DEFAULT_HALO_WIDTH
    halo_alpha: int = DEFAULT_HALO_ALPHA
    status: PointerStatus = PointerStatus.RELEASED

    def __post_init__(self) -> None:
        position = clamp(float(self.position), 0.0, 100.0)
        halo_alpha = int(clamp(int(self.halo_alpha), 0, 255))
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "radius", max(0.0, float(self.radius)))
        object.__setattr__(self, "halo_width", max(0.0, float(self.halo_width)))
        object.__setattr__(self, "halo_alpha", halo_alpha)
        object.__setattr__(self, "status", PointerStatus.parse(self.status))

    @property
    def pressed(self) -> bool:
        return self.status is PointerStatus.PRESSED

    def to_state(self) -> Dict[str, Any]:
        return {
            "version": STATE_VERSION,
            "position": self.position,
            "radius": self.radius,
            "halo_width": self.halo_width,
            "halo_alpha": self.halo_alpha,
            "status": self.status.name,
        }

    @staticmethod
    def from_state(state: Mapping[str, Any]) -> "PointerParams":
        _check_version(state)
        return PointerParams(
            position=float(state["position"]),
            radius=float(state["radius"]),
            halo_width=float(state["halo_width"]),
            halo_alpha=int(state["halo_alpha"]),
            status=PointerStatus.parse(state["status"]),
        )


@dataclass(frozen=True)
class ArcParams:
    """The host arc: where it starts, how far it sweeps and its stroke."""

    angle_start: float = 135.0
    angle_sweep: float = 270.0
    stroke_size: float = DEFAULT_STROKE_SIZE

    def __post_init__(self) -> None:
        sweep = clamp(float(self.angle_sweep), -360.0, 360.0)
        object.__setattr__(self, "angle_start", float(self.angle_start))
        object.__setattr__(self, "angle_sweep", sweep)
        object.__setattr__(self, "stroke_size", max(0.0, float(self.stroke_size)))


@dataclass
class UIState:
    """User-interface level preferences for the demo window."""

    always_on_top: bool = False
    antialiasing: bool = True


def _default_notchs() -> NotchParams:
    return NotchParams(count=9, length=default_notch_length(DEFAULT_STROKE_SIZE))


def _default_pointer() -> PointerParams:
    return PointerParams(radius=8.0)


@dataclass
class AppConfig:
    """Persisted configuration for the demo application."""

    arc: ArcParams = field(default_factory=ArcParams)
    notchs: NotchParams = field(default_factory=_default_notchs)
    pointer: PointerParams = field(default_factory=_default_pointer)
    ui: UIState = field(default_factory=UIState)

    def to_json(self) -> str:
        data = asdict(self)
        data["pointer"]["status"] = self.pointer.status.name
        return json.dumps(data, indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        default = AppConfig()
        a = data.get("arc", {})
        n = data.get("notchs", {})
        p = data.get("pointer", {})
        u = data.get("ui", {})
        arc = ArcParams(
            angle_start=float(a.get("angle_start", default.arc.angle_start)),
            angle_sweep=float(a.get("angle_sweep", default.arc.angle_sweep)),
            stroke_size=float(a.get("stroke_size", default.arc.stroke_size)),
        )
        return AppConfig(
            arc=arc,
            notchs=NotchParams(
                count=int(n.get("count", default.notchs.count)),
                length=float(n.get("length", default_notch_length(arc.stroke_size))),
            ),
            pointer=PointerParams(
                position=float(p.get("position", default.pointer.position)),
                radius=float(p.get("radius", default.pointer.radius)),
                halo_width=float(p.get("halo_width", default.pointer.halo_width)),
                halo_alpha=int(p.get("halo_alpha", default.pointer.halo_alpha)),
                status=PointerStatus.parse(p.get("status", default.pointer.status)),
            ),
            ui=UIState(
                always_on_top=bool(u.get("always_on_top", default.ui.always_on_top)),
                antialiasing=bool(u.get("antialiasing", default.ui.antialiasing)),
            ),
        )


__all__ = [
    "STATE_VERSION",
    "DEFAULT_HALO_WIDTH",
    "DEFAULT_HALO_ALPHA",
    "DEFAULT_STROKE_SIZE",
    "PointerStatus",
    "default_notch_length",
    "NotchParams",
    "PointerParams",
    "ArcParams",
    "UIState",
    "AppConfig",
]
