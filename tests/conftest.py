"""Shared fixtures: an offscreen Qt platform and a recording surface."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, List, Tuple

import pytest

from sccomponents.style import Style

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@dataclass
class RecordingSurface:
    """Surface double that records every primitive it is asked to draw."""

    calls: List[Tuple[str, Tuple[Any, ...], Style]] = field(default_factory=list)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, style: Style
    ) -> None:
        self.calls.append(("line", (x1, y1, x2, y2), style))

    def draw_circle(self, cx: float, cy: float, radius: float, style: Style) -> None:
        self.calls.append(("circle", (cx, cy, radius), style))

    def draw_bitmap(
        self,
        bitmap: Any,
        x: float,
        y: float,
        angle: float,
        offset: Tuple[float, float],
        style: Style,
    ) -> None:
        self.calls.append(("bitmap", (bitmap, x, y, angle, offset), style))

    def of_kind(self, kind: str) -> List[Tuple[str, Tuple[Any, ...], Style]]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qt_app():
    """A QApplication for tests that need widgets or image painting."""
    from PySide6 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
