"""
Frame Orchestrator
==================
Runs the full parse + render pipeline for one redraw.

Why is this file needed?
------------------------
Every trigger (text edit, pan, zoom, grid toggle, reset, resize) redraws the
whole frame synchronously:
    1. clear the surface and apply the camera transform,
    2. draw the grid if enabled,
    3. parse the document and report the first validation error,
    4. draw every error-free directive in document order.

All per-viewer state is carried by a `ViewerContext`, so several viewers can
coexist and frames are reproducible in tests.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from mathcanvas.model.camera import Camera, ViewTransform
from mathcanvas.model.directives import DirectiveRecord, parse
from mathcanvas.render.curves import CurveRenderer
from mathcanvas.render.grid import Bounds, GridRenderer
from mathcanvas.render.surface import DrawingSurface

logger = logging.getLogger(__name__)

ERROR_PREFIX = "ERROR: "


@dataclass
class ViewerContext:
    """Everything one viewer needs to draw a frame."""
    text: str = ""
    camera: Camera = field(default_factory=Camera)
    grid_visible: bool = True
    viewport_width: float = 0.0
    viewport_height: float = 0.0


@dataclass
class FrameResult:
    """Outcome of one frame."""
    records: list[DirectiveRecord] = field(default_factory=list)
    error_message: str = ""  # first validation error, "" if none
    drawn: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)  # valid but failed to render

    @property
    def indicator_text(self) -> str:
        return f"{ERROR_PREFIX}{self.error_message}" if self.error_message else ""


def first_error(records: list[DirectiveRecord]) -> str:
    """First message of the lowest-index record with errors, or ""."""
    for record in sorted(records, key=lambda r: r.index):
        if record.errors:
            return record.errors[0]
    return ""


class FrameRenderer:
    def __init__(
        self,
        curve_renderer: Optional[CurveRenderer] = None,
        grid_renderer: Optional[GridRenderer] = None,
        parser: Callable[[str], list[DirectiveRecord]] = parse,
    ) -> None:
        self.curve_renderer = curve_renderer or CurveRenderer()
        self.grid_renderer = grid_renderer or GridRenderer()
        self.parser = parser

    def draw(
        self,
        context: ViewerContext,
        surface: DrawingSurface,
        report_error: Optional[Callable[[str], None]] = None
    ) -> FrameResult:
        """
        Draw one complete frame.

        Args:
            context: Viewer state (text, camera, grid flag, viewport size).
            surface: Target surface.
            report_error: Receives the indicator text, `ERROR: <message>` or ""
                          to clear it.

        Returns:
            A `FrameResult` describing what was drawn.
        """
        camera = context.camera
        transform = camera.to_screen_transform(context.viewport_width, context.viewport_height)

        surface.clear()
        surface.save()
        surface.translate(transform.dx, transform.dy)
        surface.scale(transform.scale, transform.scale)

        if context.grid_visible:
            self.grid_renderer.render(camera, surface, visible=self._visible_bounds(context, transform))

        records = self.parser(context.text)
        result = FrameResult(records=records, error_message=first_error(records))
        if result.error_message:
            logger.debug(f"Validation error reported: {result.error_message}")
        if report_error is not None:
            report_error(result.indicator_text)

        for record in sorted(records, key=lambda r: r.index):
            if record.errors:
                continue
            if self.curve_renderer.render(record, camera, surface):
                result.drawn.append(record.index)
            else:
                result.skipped.append(record.index)

        surface.restore()
        return result

    @staticmethod
    def _visible_bounds(context: ViewerContext, transform: ViewTransform) -> Optional[Bounds]:
        if context.viewport_width <= 0 or context.viewport_height <= 0:
            return None
        x0, y0 = transform.inverted_map(0.0, 0.0)
        x1, y1 = transform.inverted_map(context.viewport_width, context.viewport_height)
        return x0, x1, y0, y1
