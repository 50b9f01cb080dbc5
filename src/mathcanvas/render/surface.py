"""
Drawing Surface Protocol
========================
The capabilities the renderers need from a 2-D drawing backend.

Coordinates are in the surface's current user space, i.e. after every
`translate`/`scale` applied since the last `save`. The current path is built
with `begin_path`/`move_to`/`line_to`/`close_path` and consumed by `fill` and
`stroke` (the path is kept, so a fill may be followed by a stroke).
"""
from __future__ import annotations

from enum import Enum
from typing import Protocol

from mathcanvas.model.style import Rgba


class HAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class DrawingSurface(Protocol):
    def clear(self) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: Rgba) -> None: ...

    def stroke(self, color: Rgba, width: float) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        h_align: HAlign = HAlign.LEFT,
        v_align: VAlign = VAlign.TOP,
        color: Rgba = Rgba(0, 0, 0),
    ) -> None: ...
