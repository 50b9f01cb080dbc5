from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from mathcanvas.render.frame import ViewerContext

logger = logging.getLogger(__name__)


class ViewerStore(QObject):
    """
    Owns the `ViewerContext` of one window and announces every change.

    `changed` is the redraw trigger: it is emitted once per mutation and the
    canvas repaints synchronously in response.
    """
    changed = Signal()
    zoom_changed = Signal(float)
    error_text_changed = Signal(str)

    def __init__(self, context: ViewerContext | None = None) -> None:
        super().__init__()
        self.context = context or ViewerContext()
        self._error_text = ""

    @property
    def error_text(self) -> str:
        return self._error_text

    def set_text(self, text: str) -> None:
        self.context.text = text
        self.changed.emit()

    def pan(self, delta_x: float, delta_y: float) -> None:
        self.context.camera.pan(delta_x, delta_y)
        self.changed.emit()

    def set_zoom(self, z: float) -> None:
        camera = self.context.camera
        old = camera.zoom
        camera.set_zoom(z)
        if camera.zoom != old:
            self.zoom_changed.emit(camera.zoom)
        self.changed.emit()

    def zoom_by(self, factor: float) -> None:
        self.set_zoom(self.context.camera.zoom * factor)

    def set_grid_visible(self, visible: bool) -> None:
        self.context.grid_visible = visible
        self.changed.emit()

    def set_viewport(self, width: float, height: float) -> None:
        self.context.viewport_width = width
        self.context.viewport_height = height
        self.changed.emit()

    def reset(self) -> None:
        """Restore the initial camera."""
        self.context.camera.reset()
        self.zoom_changed.emit(self.context.camera.zoom)
        self.changed.emit()

    def set_error_text(self, text: str) -> None:
        if text != self._error_text:
            self._error_text = text
            self.error_text_changed.emit(text)
