"""Qt helper utilities."""

from typing import List, Tuple

import numpy as np
from PySide6 import QtGui


def painter_path_contours(path: QtGui.QPainterPath) -> List[List[Tuple[float, float]]]:
    """Flatten a :class:`~PySide6.QtGui.QPainterPath` into polyline contours."""
    return [
        [(float(p.x()), float(p.y())) for p in polygon]
        for polygon in path.toSubpathPolygons()
    ]


def qimage_to_rgba(img: QtGui.QImage) -> np.ndarray:
    """Convert a :class:`~PySide6.QtGui.QImage` into an RGBA NumPy array."""
    fmt = getattr(QtGui.QImage, "Format_RGBA8888", None)
    if fmt is None:
        fmt = QtGui.QImage.Format.Format_RGBA8888
    img = img.convertToFormat(fmt)
    width = img.width()
    height = img.height()
    bytes_per_line = img.bytesPerLine()
    buf = img.constBits()  # memoryview in PySide6
    arr = np.frombuffer(buf, np.uint8)
    arr = arr.reshape((height, bytes_per_line))  # include stride
    arr = arr[:, : width * 4]  # crop padding
    arr = arr.reshape((height, width, 4))
    return np.array(arr, dtype=np.uint8, copy=True)


__all__ = ["painter_path_contours", "qimage_to_rgba"]
