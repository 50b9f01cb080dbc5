from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent, QWheelEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from mathcanvas.app.state import ViewerStore
from mathcanvas.app.ui.painter_surface import QPainterSurface
from mathcanvas.config import WHEEL_ZOOM_SENSITIVITY
from mathcanvas.render.frame import FrameRenderer


class CurveCanvas(QWidget):
    """
    Pannable/zoomable canvas:
      - left-drag pans,
      - the wheel zooms around the view center,
      - every store change repaints immediately (no coalescing).
    """
    def __init__(self, store: ViewerStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.frame_renderer = FrameRenderer()

        self._last_pos: QPointF | None = None

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setMinimumSize(200, 200)

        self.store.changed.connect(self.repaint)

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        try:
            surface = QPainterSurface(painter)
            self.frame_renderer.draw(
                self.store.context, surface, report_error=self.store.set_error_text
            )
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.store.set_viewport(self.width(), self.height())

    # ---- pan ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._last_pos = event.position()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._last_pos is not None:
            pos = event.position()
            delta = pos - self._last_pos
            self._last_pos = pos
            self.store.pan(delta.x(), delta.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._last_pos = None
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        super().mouseReleaseEvent(event)

    # ---- zoom ----

    def wheelEvent(self, event: QWheelEvent) -> None:
        factor = 1.0 + event.angleDelta().y() * WHEEL_ZOOM_SENSITIVITY
        if factor > 0.0:
            self.store.zoom_by(factor)
        event.accept()
