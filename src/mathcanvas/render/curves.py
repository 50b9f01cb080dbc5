"""
Curve Renderer
==============
Draws one valid directive: classify, sample, then emit path/fill/stroke calls.

Failures while classifying or sampling (bad expression, unbound symbol, an
evaluator that raises on any sample) are logged and the directive is skipped as
a whole. Sampling finishes before the first surface call, so a failing
directive never leaves a partial path on the surface.

Samples where the function is undefined come back as NaN. The path is broken
there and resumes with a new subpath at the next finite point.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from mathcanvas.model.camera import Camera
from mathcanvas.model.curves import SampledCurve, classify, sample
from mathcanvas.model.directives import DirectiveRecord
from mathcanvas.model.expressions import ExpressionCompiler, compile_expression
from mathcanvas.render.surface import DrawingSurface

logger = logging.getLogger(__name__)


class CurveRenderer:
    def __init__(self, compiler: ExpressionCompiler = compile_expression) -> None:
        self.compiler = compiler

    def render(self, record: DirectiveRecord, camera: Camera, surface: DrawingSurface) -> bool:
        """
        Draw `record` onto `surface`.

        Args:
            record: An error-free directive (its `style` is set).
            camera: Current camera, used for the zoom-compensated stroke width.
            surface: Target surface, already transformed by the camera.

        Returns:
            True if the curve was drawn, False if it was skipped.
        """
        if record.errors or record.style is None:
            raise ValueError(f"Directive #{record.index} has validation errors and cannot be rendered.")

        try:
            sampled = sample(classify(record.expression), self.compiler)
        except Exception as e:
            logger.error(f"Directive #{record.index} '{record.expression}' skipped: {e}")
            return False

        if not np.isfinite(sampled.points).all(axis=1).any():
            logger.warning(f"Directive #{record.index} '{record.expression}' has no defined point in range.")
            return False

        self._draw(sampled, record, camera, surface)
        return True

    @staticmethod
    def _draw(sampled: SampledCurve, record: DirectiveRecord, camera: Camera, surface: DrawingSurface) -> None:
        style = record.style
        points = sampled.points

        surface.begin_path()
        pen_down = False
        for x, y in points:
            if not (math.isfinite(x) and math.isfinite(y)):
                pen_down = False
            elif pen_down:
                surface.line_to(float(x), float(y))
            else:
                surface.move_to(float(x), float(y))
                pen_down = True
        if sampled.closed:
            surface.close_path()

        if style.fill is not None:
            surface.fill(style.fill)
        surface.stroke(style.stroke, style.width / camera.zoom)
