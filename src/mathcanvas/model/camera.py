"""
Camera / Viewport Transform
===========================
Pan offset and zoom factor of one viewer, and the transform they induce.

The camera state lives in world-independent canvas units: pan deltas come in
as screen pixels and are divided by the zoom, so a drag of N pixels always
moves the picture by N pixels whatever the magnification.

Composite transform (canvas -> screen):
    translate(viewport center + pan * zoom), then scale(zoom)
Canvas coordinates are world coordinates scaled by UNIT_SCALE with y flipped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from mathcanvas.config import UNIT_SCALE, ZOOM_DEFAULT, ZOOM_MAX, ZOOM_MIN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale followed by a translation: screen = canvas * scale + (dx, dy)."""
    dx: float
    dy: float
    scale: float

    def map(self, x: float, y: float) -> tuple[float, float]:
        return x * self.scale + self.dx, y * self.scale + self.dy

    def inverted_map(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.dx) / self.scale, (y - self.dy) / self.scale


def clamp_zoom(z: float) -> float:
    return min(ZOOM_MAX, max(ZOOM_MIN, z))


@dataclass
class Camera:
    """
    Mutable camera state of a single viewer.

    Invariant: ZOOM_MIN <= zoom <= ZOOM_MAX.
    """
    pan_x: float = 0.0
    pan_y: float = 0.0
    zoom: float = ZOOM_DEFAULT

    def __post_init__(self) -> None:
        self.zoom = clamp_zoom(self.zoom)

    def pan(self, delta_screen_x: float, delta_screen_y: float) -> None:
        """Move by a screen-space drag delta (pixels)."""
        self.pan_x += delta_screen_x / self.zoom
        self.pan_y += delta_screen_y / self.zoom

    def set_zoom(self, z: float) -> None:
        self.zoom = clamp_zoom(z)

    def zoom_by(self, factor: float) -> None:
        self.set_zoom(self.zoom * factor)

    def reset(self) -> None:
        """Restore the initial view."""
        self.pan_x = 0.0
        self.pan_y = 0.0
        self.zoom = ZOOM_DEFAULT
        logger.info("Camera has been reset.")

    def to_screen_transform(self, viewport_width: float, viewport_height: float) -> ViewTransform:
        """
        Canvas -> screen transform for a viewport of the given size (pixels).
        """
        return ViewTransform(
            dx=viewport_width / 2 + self.pan_x * self.zoom,
            dy=viewport_height / 2 + self.pan_y * self.zoom,
            scale=self.zoom,
        )

    def world_to_screen(
        self,
        world_x: float,
        world_y: float,
        viewport_width: float,
        viewport_height: float
    ) -> tuple[float, float]:
        """Map a world point (y-up) to screen pixels (y-down)."""
        transform = self.to_screen_transform(viewport_width, viewport_height)
        return transform.map(world_x * UNIT_SCALE, -world_y * UNIT_SCALE)

    def screen_to_world(
        self,
        screen_x: float,
        screen_y: float,
        viewport_width: float,
        viewport_height: float
    ) -> tuple[float, float]:
        """Inverse of `world_to_screen`."""
        transform = self.to_screen_transform(viewport_width, viewport_height)
        cx, cy = transform.inverted_map(screen_x, screen_y)
        return cx / UNIT_SCALE, -cy / UNIT_SCALE
