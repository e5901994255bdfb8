"""Qt widget hosting an arc decorated with notches and a pointer."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from .models import ArcParams, NotchParams, PointerParams, PointerStatus
from .notchs import Notchs, OnBeforeNotch
from .pointer import OnBeforeDrawPointer, Pointer
from .style import PaintStyle, Style
from .surface import QtSurface, Surface
from .utils import Region


def arc_path(rect: QtCore.QRectF, start: float, sweep: float) -> QtGui.QPainterPath:
    """Painter path following the ellipse in ``rect`` from ``start`` over ``sweep``.

    Angles run clockwise on screen from the positive x axis; Qt counts them
    counter-clockwise, hence the sign flips.
    """
    path = QtGui.QPainterPath()
    path.arcMoveTo(rect, -start)
    path.arcTo(rect, -start, -sweep)
    return path


class ArcGaugeWidget(QtWidgets.QWidget):
    stateChanged = QtCore.Signal()

    def __init__(
        self,
        arc: Optional[ArcParams] = None,
        notchs: Optional[NotchParams] = None,
        pointer: Optional[PointerParams] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._arc = arc or ArcParams()
        self._antialiasing = True

        self.arc_style = Style(color=(90, 90, 90), width=self._arc.stroke_size)
        self.notchs = Notchs(notchs, style=self.arc_style)
        self.pointer = Pointer(
            params=pointer,
            style=Style(color=(0, 170, 255), paint=PaintStyle.FILL),
        )

        self.setMinimumSize(160, 160)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    # ----------------------------- Properties ---------------------------------

    @property
    def arc(self) -> ArcParams:
        return self._arc

    def set_arc(self, arc: ArcParams) -> None:
        self._arc = arc
        self.arc_style = self.arc_style.with_width(arc.stroke_size)
        self.notchs.style = self.arc_style
        self._changed()

    def set_notch_count(self, n: int) -> None:
        self.notchs.count = n
        self._changed()

    def set_notch_length(self, length: float) -> None:
        self.notchs.length = length
        self._changed()

    def set_pointer_position(self, value: float) -> None:
        self.pointer.position = value
        self._changed()

    def set_pointer_radius(self, value: float) -> None:
        self.pointer.radius = value
        self._changed()

    def set_halo_width(self, value: float) -> None:
        self.pointer.halo_width = value
        self._changed()

    def set_halo_alpha(self, value: int) -> None:
        self.pointer.halo_alpha = value
        self._changed()

    def set_pressed(self, pressed: bool) -> None:
        self.pointer.status = (
            PointerStatus.PRESSED if pressed else PointerStatus.RELEASED
        )
        self._changed()

    def set_antialiasing(self, enabled: bool) -> None:
        self._antialiasing = bool(enabled)
        self.update()

    def set_notch_listener(self, listener: Optional[OnBeforeNotch]) -> None:
        self.notchs.set_on_draw_listener(listener)
        self.update()

    def set_pointer_listener(self, listener: Optional[OnBeforeDrawPointer]) -> None:
        self.pointer.set_on_draw_listener(listener)
        self.update()

    def _changed(self) -> None:
        self.stateChanged.emit()
        self.update()

    # ----------------------------- State --------------------------------------

    def save_state(self) -> Dict[str, Any]:
        return {
            "notchs": self.notchs.save_state(),
            "pointer": self.pointer.save_state(),
        }

    def restore_state(self, state: Mapping[str, Any]) -> None:
        self.notchs.restore_state(state["notchs"])
        self.pointer.restore_state(state["pointer"])
        self._changed()

    # ----------------------------- Painting -----------------------------------

    def arc_rect(self) -> QtCore.QRectF:
        """Area of the arc, leaving room for the halo around the pointer."""
        margin = max(
            self._arc.stroke_size / 2.0,
            self.pointer.radius + self.pointer.halo_width / 2.0,
        )
        rect = QtCore.QRectF(self.rect())
        return rect.adjusted(margin + 1, margin + 1, -margin - 1, -margin - 1)

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        try:
            self.render_to(painter)
        finally:
            painter.end()

    def render_to(self, painter: QtGui.QPainter) -> None:
        painter.setRenderHint(
            QtGui.QPainter.RenderHint.Antialiasing, self._antialiasing
        )
        rect = self.arc_rect()
        if rect.width() <= 0 or rect.height() <= 0:
            return

        path = arc_path(rect, self._arc.angle_start, self._arc.angle_sweep)
        painter.setPen(QtSurface.to_pen(self.arc_style))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

        self.decorate(QtSurface(painter), rect, path)

    def decorate(
        self,
        surface: Surface,
        rect: QtCore.QRectF,
        path: Optional[QtGui.QPainterPath] = None,
    ) -> None:
        """Draw the notches and the pointer for the arc inscribed in ``rect``."""
        if path is None:
            path = arc_path(rect, self._arc.angle_start, self._arc.angle_sweep)
        self.notchs.draw(
            surface,
            Region.from_rect(rect),
            sweep=self._arc.angle_sweep,
            start=self._arc.angle_start,
        )
        self.pointer.path = path
        self.pointer.draw(surface)


__all__ = ["ArcGaugeWidget", "arc_path"]
