"""Qt application entry point for the sccomponents gauge demo."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from PySide6 import QtCore, QtWidgets

from ._version import get_version
from .logging_config import setup_logging
from .models import AppConfig, ArcParams
from .notchs import Notchs, OnBeforeNotch
from .style import Style
from .widgets import ArcGaugeWidget

logger = logging.getLogger(__name__)

APP_VERSION = get_version()
MAJOR_NOTCH_EVERY = 3


def major_minor_notchs(notchs: Notchs, every: int = MAJOR_NOTCH_EVERY) -> OnBeforeNotch:
    """Notch hook drawing every ``every``-th notch at full length, others at half."""

    def on_before_notch(style: Style, angle: float, index: int) -> float:
        return notchs.length if index % every == 0 else notchs.length / 2.0

    return on_before_notch


# ---------------------------- Control Dialog UI -------------------------------


class ControlDialog(QtWidgets.QDialog):
    notchCountChanged = QtCore.Signal(int)
    notchLengthChanged = QtCore.Signal(float)
    majorNotchsToggled = QtCore.Signal(bool)
    positionChanged = QtCore.Signal(float)
    radiusChanged = QtCore.Signal(float)
    haloWidthChanged = QtCore.Signal(float)
    haloAlphaChanged = QtCore.Signal(int)
    pressedToggled = QtCore.Signal(bool)
    alwaysOnTopToggled = QtCore.Signal(bool)
    arcChanged = QtCore.Signal(object)  # ArcParams

    def __init__(self, cfg: AppConfig, app_version: str) -> None:
        super().__init__(None)
        self._app_version = app_version or "unknown"
        self.setWindowTitle(f"sccomponents {self._app_version} — Gauge controls")
        self.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, cfg.ui.always_on_top
        )
        self.setMinimumWidth(380)

        self.start_spin = QtWidgets.QDoubleSpinBox()
        self.start_spin.setRange(-360.0, 360.0)
        self.start_spin.setValue(cfg.arc.angle_start)
        self.start_spin.valueChanged.connect(self._on_arc_change)

        self.sweep_spin = QtWidgets.QDoubleSpinBox()
        self.sweep_spin.setRange(-360.0, 360.0)
        self.sweep_spin.setValue(cfg.arc.angle_sweep)
        self.sweep_spin.valueChanged.connect(self._on_arc_change)

        self.stroke_spin = QtWidgets.QDoubleSpinBox()
        self.stroke_spin.setRange(0.0, 50.0)
        self.stroke_spin.setValue(cfg.arc.stroke_size)
        self.stroke_spin.valueChanged.connect(self._on_arc_change)

        self.count_spin = QtWidgets.QSpinBox()
        self.count_spin.setRange(0, 360)
        self.count_spin.setValue(cfg.notchs.count)
        self.count_spin.valueChanged.connect(self.notchCountChanged)

        self.length_spin = QtWidgets.QDoubleSpinBox()
        self.length_spin.setRange(0.0, 200.0)
        self.length_spin.setValue(cfg.notchs.length)
        self.length_spin.valueChanged.connect(self.notchLengthChanged)

        self.major_check = QtWidgets.QCheckBox("Enable")
        self.major_check.toggled.connect(self.majorNotchsToggled)

        self.position_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.position_slider.setRange(0, 1000)
        self.position_slider.setValue(int(round(cfg.pointer.position * 10)))
        self.position_slider.valueChanged.connect(self._on_position_change)

        self.radius_spin = QtWidgets.QDoubleSpinBox()
        self.radius_spin.setRange(0.0, 100.0)
        self.radius_spin.setValue(cfg.pointer.radius)
        self.radius_spin.valueChanged.connect(self.radiusChanged)

        self.halo_width_spin = QtWidgets.QDoubleSpinBox()
        self.halo_width_spin.setRange(0.0, 100.0)
        self.halo_width_spin.setValue(cfg.pointer.halo_width)
        self.halo_width_spin.valueChanged.connect(self.haloWidthChanged)

        self.halo_alpha_spin = QtWidgets.QSpinBox()
        self.halo_alpha_spin.setRange(0, 255)
        self.halo_alpha_spin.setValue(cfg.pointer.halo_alpha)
        self.halo_alpha_spin.valueChanged.connect(self.haloAlphaChanged)

        self.pressed_check = QtWidgets.QCheckBox("Pressed")
        self.pressed_check.setChecked(cfg.pointer.pressed)
        self.pressed_check.toggled.connect(self.pressedToggled)

        self.topmost_check = QtWidgets.QCheckBox("Enable")
        self.topmost_check.setChecked(cfg.ui.always_on_top)
        self.topmost_check.toggled.connect(self.alwaysOnTopToggled)

        form = QtWidgets.QFormLayout()
        form.setFieldGrowthPolicy(
            QtWidgets.QFormLayout.FieldGrowthPolicy.AllNonFixedFieldsGrow
        )
        form.addRow("Arc start (deg):", self.start_spin)
        form.addRow("Arc sweep (deg):", self.sweep_spin)
        form.addRow("Arc stroke (px):", self.stroke_spin)
        form.addRow("Notches:", self.count_spin)
        form.addRow("Notch length (px):", self.length_spin)
        form.addRow("Major/minor notches:", self.major_check)
        form.addRow("Pointer position (%):", self.position_slider)
        form.addRow("Pointer radius (px):", self.radius_spin)
        form.addRow("Halo width (px):", self.halo_width_spin)
        form.addRow("Halo alpha:", self.halo_alpha_spin)
        form.addRow("Pointer status:", self.pressed_check)
        form.addRow("Always on top:", self.topmost_check)

        v = QtWidgets.QVBoxLayout(self)
        v.addLayout(form)

    def _on_position_change(self, val: int) -> None:
        self.positionChanged.emit(val / 10.0)

    def arc_params(self) -> ArcParams:
        return ArcParams(
            angle_start=self.start_spin.value(),
            angle_sweep=self.sweep_spin.value(),
            stroke_size=self.stroke_spin.value(),
        )

    def _on_arc_change(self, _val: float) -> None:
        self.arcChanged.emit(self.arc_params())


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(self, app: QtWidgets.QApplication) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = self._load_config()

        self.gauge = ArcGaugeWidget(self.cfg.arc, self.cfg.notchs, self.cfg.pointer)
        self.gauge.setWindowTitle("sccomponents")
        self.gauge.set_antialiasing(self.cfg.ui.antialiasing)
        self.gauge.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, self.cfg.ui.always_on_top
        )
        self.gauge.resize(420, 420)
        self._app_version = app.applicationVersion() or APP_VERSION
        self.ctrl = ControlDialog(self.cfg, self._app_version)

        # Wire signals
        self.ctrl.arcChanged.connect(self.gauge.set_arc)
        self.ctrl.notchCountChanged.connect(self.gauge.set_notch_count)
        self.ctrl.notchLengthChanged.connect(self.gauge.set_notch_length)
        self.ctrl.majorNotchsToggled.connect(self._on_major_toggle)
        self.ctrl.positionChanged.connect(self.gauge.set_pointer_position)
        self.ctrl.radiusChanged.connect(self.gauge.set_pointer_radius)
        self.ctrl.haloWidthChanged.connect(self.gauge.set_halo_width)
        self.ctrl.haloAlphaChanged.connect(self.gauge.set_halo_alpha)
        self.ctrl.pressedToggled.connect(self.gauge.set_pressed)
        self.ctrl.alwaysOnTopToggled.connect(self._on_topmost_toggle)
        self.gauge.stateChanged.connect(self._on_gauge_changed)

        self.gauge.show()
        self.ctrl.show()
        self.ctrl.move(self.gauge.x() + self.gauge.width() + 40, self.gauge.y())

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        home = Path.home()
        return home / ".sccomponents_config.json"

    def _load_config(self) -> AppConfig:
        p = self._config_path()
        if p.exists():
            try:
                return AppConfig.from_json(p.read_text(encoding="utf-8"))
            except (OSError, ValueError, TypeError, AttributeError) as exc:
                logger.warning(f"Ignoring unreadable config '{p}': {exc}")
        return AppConfig()

    def _save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
            logger.debug(f"Saved config to {p}")
        except OSError as exc:
            logger.warning(f"Could not save config to '{p}': {exc}")

    # ---------------------------- Event Handlers ------------------------------

    def _on_gauge_changed(self) -> None:
        self.cfg.arc = self.gauge.arc
        self.cfg.notchs = self.gauge.notchs.params
        self.cfg.pointer = self.gauge.pointer.params

    def _on_major_toggle(self, enabled: bool) -> None:
        listener: Optional[OnBeforeNotch] = None
        if enabled:
            listener = major_minor_notchs(self.gauge.notchs)
        self.gauge.set_notch_listener(listener)

    def _on_topmost_toggle(self, enabled: bool) -> None:
        self.cfg.ui = replace(self.cfg.ui, always_on_top=bool(enabled))
        self.gauge.setWindowFlag(QtCore.Qt.WindowType.WindowStaysOnTopHint, enabled)
        self.ctrl.setWindowFlag(QtCore.Qt.WindowType.WindowStaysOnTopHint, enabled)
        self.gauge.show()
        self.ctrl.show()
        self._save_config()


# ---------------------------------- Main --------------------------------------


def main() -> None:
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("sccomponents")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()
    ctrl._save_config()

    sys.exit(ret)


if __name__ == "__main__":
    main()
