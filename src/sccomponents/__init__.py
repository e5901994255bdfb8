"""sccomponents: notches and pointers that decorate arc based gauges.

The geometric kernel (:func:`point_on_arc`, :func:`sample_at`) has no Qt
dependency; the renderers draw onto any :class:`~sccomponents.surface.Surface`.
"""

from __future__ import annotations

from ._version import get_version
from .measure import PathMeasure, PathSample, sample_at
from .models import NotchParams, PointerParams, PointerStatus
from .notchs import Notchs
from .pointer import Pointer, PointerInfo
from .style import PaintStyle, Style
from .utils import Region, point_on_arc

__version__ = get_version()


def main() -> None:
    """Entry point for ``python -m sccomponents`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "Region",
    "point_on_arc",
    "PathMeasure",
    "PathSample",
    "sample_at",
    "NotchParams",
    "PointerParams",
    "PointerStatus",
    "Notchs",
    "Pointer",
    "PointerInfo",
    "PaintStyle",
    "Style",
]
