from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import QCheckBox, QHBoxLayout, QLabel, QPushButton, QSlider, QWidget

from mathcanvas.config import ZOOM_DEFAULT, ZOOM_MAX, ZOOM_MIN, ZOOM_SLIDER_STEPS


class OverlayToolbar(QWidget):
    """Zoom slider, grid toggle, reset/export buttons and the error indicator."""
    zoom_requested = Signal(float)
    grid_toggled = Signal(bool)
    reset_requested = Signal()
    export_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)

        layout.addWidget(QLabel(self.tr("Zoom"), self))
        self.zoom_slider = QSlider(Qt.Orientation.Horizontal, self)
        self.zoom_slider.setRange(round(ZOOM_MIN * ZOOM_SLIDER_STEPS), round(ZOOM_MAX * ZOOM_SLIDER_STEPS))
        self.zoom_slider.setValue(round(ZOOM_DEFAULT * ZOOM_SLIDER_STEPS))
        self.zoom_slider.setMaximumWidth(200)
        self.zoom_slider.valueChanged.connect(lambda v: self.zoom_requested.emit(v / ZOOM_SLIDER_STEPS))
        layout.addWidget(self.zoom_slider)

        self.grid_toggle = QCheckBox(self.tr("Grid"), self)
        self.grid_toggle.setChecked(True)
        self.grid_toggle.toggled.connect(self.grid_toggled)
        layout.addWidget(self.grid_toggle)

        self.reset_button = QPushButton(self.tr("Reset"), self)
        self.reset_button.clicked.connect(self.reset_requested)
        layout.addWidget(self.reset_button)

        self.export_button = QPushButton(self.tr("Export PNG"), self)
        self.export_button.clicked.connect(self.export_requested)
        layout.addWidget(self.export_button)

        self.error_indicator = QLabel("", self)
        self.error_indicator.setObjectName("error-indicator")
        self.error_indicator.setStyleSheet("color: red; margin-left: 10px;")
        layout.addWidget(self.error_indicator, 1)

    @Slot(float)
    def set_zoom(self, zoom: float) -> None:
        """Move the slider without re-emitting `zoom_requested`."""
        blocked = self.zoom_slider.blockSignals(True)
        self.zoom_slider.setValue(round(zoom * ZOOM_SLIDER_STEPS))
        self.zoom_slider.blockSignals(blocked)

    @Slot(str)
    def set_error_text(self, text: str) -> None:
        self.error_indicator.setText(text)
