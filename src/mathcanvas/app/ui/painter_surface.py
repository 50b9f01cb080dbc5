"""
QPainter Drawing Surface
Implements the renderers' `DrawingSurface` protocol on top of a QPainter.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPainterPath, QPen

from mathcanvas.model.style import Rgba
from mathcanvas.render.surface import HAlign, VAlign


def to_qcolor(color: Rgba) -> QColor:
    qcolor = QColor(color.red, color.green, color.blue)
    qcolor.setAlphaF(color.alpha)
    return qcolor


class QPainterSurface:
    """
    Drawing surface backed by an active QPainter (widget, QImage, ...).

    Text is drawn in device space: the anchor point and the font size are
    mapped through the current world transform first, so glyphs are hinted at
    their final pixel size.
    """
    def __init__(self, painter: QPainter, background: QColor | None = None, font_family: str = "sans-serif") -> None:
        self.painter = painter
        self.background = background if background is not None else QColor("white")
        self.font_family = font_family
        self.path = QPainterPath()
        self._fonts: dict[int, tuple[QFont, QFontMetricsF]] = {}

    # ---- state ----

    def clear(self) -> None:
        device = self.painter.device()
        self.painter.save()
        self.painter.resetTransform()
        self.painter.fillRect(0, 0, device.width(), device.height(), self.background)
        self.painter.restore()

    def save(self) -> None:
        self.painter.save()

    def restore(self) -> None:
        self.painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self.painter.scale(sx, sy)

    # ---- paths ----

    def begin_path(self) -> None:
        self.path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self.path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        self.path.lineTo(x, y)

    def close_path(self) -> None:
        self.path.closeSubpath()

    def fill(self, color: Rgba) -> None:
        self.painter.fillPath(self.path, QBrush(to_qcolor(color)))

    def stroke(self, color: Rgba, width: float) -> None:
        pen = QPen(to_qcolor(color))
        pen.setWidthF(width)
        self.painter.strokePath(self.path, pen)

    # ---- text ----

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        h_align: HAlign = HAlign.LEFT,
        v_align: VAlign = VAlign.TOP,
        color: Rgba = Rgba(0, 0, 0),
    ) -> None:
        transform = self.painter.transform()
        anchor = transform.map(QPointF(x, y))
        font, metrics = self._font(max(1, round(size * abs(transform.m11()))))

        width = metrics.horizontalAdvance(text)
        match h_align:
            case HAlign.CENTER:
                left = anchor.x() - width / 2
            case HAlign.RIGHT:
                left = anchor.x() - width
            case _:
                left = anchor.x()

        match v_align:
            case VAlign.MIDDLE:
                baseline = anchor.y() + (metrics.ascent() - metrics.descent()) / 2
            case VAlign.BOTTOM:
                baseline = anchor.y() - metrics.descent()
            case _:
                baseline = anchor.y() + metrics.ascent()

        self.painter.save()
        self.painter.resetTransform()
        self.painter.setFont(font)
        self.painter.setPen(to_qcolor(color))
        self.painter.drawText(QPointF(left, baseline), text)
        self.painter.restore()

    def _font(self, pixel_size: int) -> tuple[QFont, QFontMetricsF]:
        if pixel_size not in self._fonts:
            font = QFont(self.font_family)
            font.setPixelSize(pixel_size)
            self._fonts[pixel_size] = (font, QFontMetricsF(font))
        return self._fonts[pixel_size]
