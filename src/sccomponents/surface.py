"""Drawing surfaces the renderers paint on."""

from __future__ import annotations

from typing import Any, Protocol, Tuple

from PySide6 import QtCore, QtGui

from .style import PaintStyle, Style


class Surface(Protocol):
    """Minimal set of primitives used by the notch and pointer renderers."""

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, style: Style
    ) -> None:
        """Stroke a straight line from (x1, y1) to (x2, y2)."""

    def draw_circle(self, cx: float, cy: float, radius: float, style: Style) -> None:
        """Draw a circle, filled or stroked depending on ``style.paint``."""

    def draw_bitmap(
        self,
        bitmap: Any,
        x: float,
        y: float,
        angle: float,
        offset: Tuple[float, float],
        style: Style,
    ) -> None:
        """Draw ``bitmap`` centred on (x, y), rotated by ``angle`` degrees."""


class QtSurface:
    """:class:`Surface` backed by a :class:`~PySide6.QtGui.QPainter`."""

    def __init__(self, painter: QtGui.QPainter) -> None:
        self._painter = painter

    @property
    def painter(self) -> QtGui.QPainter:
        return self._painter

    @staticmethod
    def to_pen(style: Style) -> QtGui.QPen:
        pen = QtGui.QPen(QtGui.QColor(*style.rgba))
        pen.setWidthF(style.width)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.FlatCap)
        return pen

    def _apply(self, style: Style) -> None:
        if style.paint is PaintStyle.FILL:
            self._painter.setPen(QtCore.Qt.PenStyle.NoPen)
            self._painter.setBrush(QtGui.QBrush(QtGui.QColor(*style.rgba)))
        else:
            self._painter.setPen(self.to_pen(style))
            self._painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, style: Style
    ) -> None:
        # lines are always stroked, whatever the paint style says
        self._painter.setPen(self.to_pen(style))
        self._painter.drawLine(QtCore.QPointF(x1, y1), QtCore.QPointF(x2, y2))

    def draw_circle(self, cx: float, cy: float, radius: float, style: Style) -> None:
        self._apply(style)
        self._painter.drawEllipse(QtCore.QPointF(cx, cy), radius, radius)

    def draw_bitmap(
        self,
        bitmap: QtGui.QImage,
        x: float,
        y: float,
        angle: float,
        offset: Tuple[float, float],
        style: Style,
    ) -> None:
        painter = self._painter
        painter.save()
        try:
            painter.translate(x, y)
            painter.rotate(angle)
            painter.translate(offset[0], offset[1])
            painter.setOpacity(style.alpha / 255.0)
            painter.drawImage(
                QtCore.QPointF(-bitmap.width() / 2.0, -bitmap.height() / 2.0), bitmap
            )
        finally:
            painter.restore()


__all__ = ["Surface", "QtSurface"]
