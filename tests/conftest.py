"""Shared fixtures: a drawing surface that records every call."""

from __future__ import annotations

from typing import Any

import pytest

from mathcanvas.model.style import Rgba
from mathcanvas.render.surface import HAlign, VAlign


class RecordingSurface:
    """DrawingSurface fake. `calls` holds (method name, args) tuples in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def clear(self) -> None:
        self._record("clear")

    def save(self) -> None:
        self._record("save")

    def restore(self) -> None:
        self._record("restore")

    def translate(self, dx: float, dy: float) -> None:
        self._record("translate", dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: Rgba) -> None:
        self._record("fill", color)

    def stroke(self, color: Rgba, width: float) -> None:
        self._record("stroke", color, width)

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
        self._record("draw_text", text, x, y, size, h_align, v_align, color)

    # ---- helpers ----

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    def paths(self) -> list[list[tuple[str, tuple[Any, ...]]]]:
        """Split path-building calls into one list per `begin_path`."""
        paths: list[list[tuple[str, tuple[Any, ...]]]] = []
        for name, args in self.calls:
            if name == "begin_path":
                paths.append([])
            elif paths and name in ("move_to", "line_to", "close_path", "fill", "stroke"):
                paths[-1].append((name, args))
        return paths


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
