"""
Grid Renderer
Draws the two axes and integer tick labels in canvas space.
"""
from __future__ import annotations

from typing import Callable, Optional

from mathcanvas.config import (
    GRID_AXIS_EXTENT,
    GRID_COLOR,
    GRID_LABEL_OFFSET,
    GRID_LABEL_SIZE,
    GRID_LINE_WIDTH,
    UNIT_SCALE,
)
from mathcanvas.model.camera import Camera
from mathcanvas.model.style import Rgba
from mathcanvas.render.surface import DrawingSurface, HAlign, VAlign

# (x_min, x_max, y_min, y_max) in canvas units
Bounds = tuple[float, float, float, float]


class GridRenderer:
    def __init__(self, extent: int = GRID_AXIS_EXTENT) -> None:
        self.extent = extent
        self.color = Rgba.from_hex(GRID_COLOR)
        self.label_formatter: Callable[[int], str] = lambda v: str(v)

    def render(self, camera: Camera, surface: DrawingSurface, visible: Optional[Bounds] = None) -> None:
        """
        Draw axes and labels. Line width and text size are divided by the zoom
        so they stay constant on screen.

        Args:
            camera: Current camera.
            surface: Target surface, already transformed by the camera.
            visible: Visible canvas rectangle; labels outside it are skipped.
                     None draws every label of the fixed range.
        """
        zoom = camera.zoom
        length = self.extent * UNIT_SCALE

        surface.save()
        surface.begin_path()
        surface.move_to(0.0, -length)
        surface.line_to(0.0, length)
        surface.move_to(-length, 0.0)
        surface.line_to(length, 0.0)
        surface.stroke(self.color, GRID_LINE_WIDTH / zoom)

        size = GRID_LABEL_SIZE / zoom
        offset = GRID_LABEL_OFFSET / zoom

        # x labels below the horizontal axis
        for i in self._label_range(visible, axis=0):
            surface.draw_text(
                self.label_formatter(i), i * UNIT_SCALE, offset, size,
                HAlign.CENTER, VAlign.TOP, self.color,
            )

        # y labels left of the vertical axis, canvas row i reads world -i
        for i in self._label_range(visible, axis=1):
            surface.draw_text(
                self.label_formatter(-i), -offset, i * UNIT_SCALE, size,
                HAlign.RIGHT, VAlign.MIDDLE, self.color,
            )
        surface.restore()

    def _label_range(self, visible: Optional[Bounds], axis: int) -> list[int]:
        lo, hi = -self.extent, self.extent
        if visible is not None:
            v_min, v_max = visible[2 * axis], visible[2 * axis + 1]
            # one unit of margin for label text overhanging the edge
            lo = max(lo, int(v_min // UNIT_SCALE) - 1)
            hi = min(hi, int(v_max // UNIT_SCALE) + 1)
        return [i for i in range(lo, hi + 1) if i != 0]
