"""
Curve Classification & Sampling
===============================
Turns a directive expression into a drawable polyline.

Classification is tried in a fixed order:
    1. Polygon     `poly(x1, y1, x2, y2, ...)`  (even count of numbers only)
    2. Parametric  `x(t)=<expr> | y(t)=<expr>`  (labels optional)
    3. Explicit    `<lhs>=<expr>`               (only the right-hand side is used)

A `poly(...)` with an odd or non-numeric list is not a polygon and falls through
to the next forms.

Sampled points are returned in canvas units: world coordinates scaled by
UNIT_SCALE with the y axis flipped (screen y grows downward). The camera
transform is applied later by the frame renderer.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Union, TYPE_CHECKING

import numpy as np

from mathcanvas.config import EXPLICIT_RANGE, PARAMETRIC_RANGE, SAMPLE_SEGMENTS, UNIT_SCALE
from mathcanvas.model.expressions import ExpressionCompiler, compile_expression
from mathcanvas.model.style import parse_number

if TYPE_CHECKING:
    import numpy.typing as npt

POLY_PATTERN = re.compile(r"^poly\((.*)\)$", re.IGNORECASE | re.DOTALL)
X_LABEL_PATTERN = re.compile(r"^\s*x\s*\(\s*t\s*\)\s*=\s*")
Y_LABEL_PATTERN = re.compile(r"^\s*y\s*\(\s*t\s*\)\s*=\s*")


class CurveError(ValueError):
    """Raised when an expression matches none of the curve forms."""


# -------------------------------------------------------------------------------
# Curve variants
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class PolygonCurve:
    """Closed polygon through world-space vertices."""
    vertices: tuple[tuple[float, float], ...]
    closed: ClassVar[bool] = True


@dataclass(frozen=True)
class ParametricCurve:
    """x(t), y(t) over t in PARAMETRIC_RANGE."""
    x_text: str
    y_text: str
    closed: ClassVar[bool] = False


@dataclass(frozen=True)
class ExplicitCurve:
    """y = f(x) over x in EXPLICIT_RANGE."""
    rhs: str
    closed: ClassVar[bool] = False


Curve = Union[PolygonCurve, ParametricCurve, ExplicitCurve]


@dataclass(frozen=True)
class SampledCurve:
    curve: Curve
    points: npt.NDArray[np.float64]  # (N, 2), canvas units

    @property
    def closed(self) -> bool:
        return self.curve.closed


# -------------------------------------------------------------------------------
# Classification
# -------------------------------------------------------------------------------

def classify(expression: str) -> Curve:
    """
    Classify a directive expression.

    Raises:
        CurveError: If the expression is neither a polygon, a parametric pair
            nor an equation.
    """
    text = expression.strip()

    polygon = _as_polygon(text)
    if polygon is not None:
        return polygon

    if "|" in text:
        # only the first two components count
        x_part, y_part = text.split("|")[:2]
        return ParametricCurve(
            x_text=X_LABEL_PATTERN.sub("", x_part.strip(), count=1),
            y_text=Y_LABEL_PATTERN.sub("", y_part.strip(), count=1),
        )

    if "=" in text:
        # right-hand side stops at a second "="
        rhs = text.split("=")[1]
        return ExplicitCurve(rhs=rhs.strip())

    raise CurveError(f"Not a curve: '{text}' (expected poly(...), x(t)=...|y(t)=... or y=...)")


def _as_polygon(text: str) -> PolygonCurve | None:
    match = POLY_PATTERN.match(text)
    if match is None:
        return None

    numbers = [parse_number(item.strip()) for item in match.group(1).split(",")]
    if any(n is None for n in numbers) or len(numbers) % 2 != 0:
        return None

    vertices = tuple(zip(numbers[0::2], numbers[1::2]))
    return PolygonCurve(vertices=vertices)


# -------------------------------------------------------------------------------
# Sampling
# -------------------------------------------------------------------------------

def world_to_canvas(points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Scale (N, 2) world points by UNIT_SCALE and flip y."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return np.column_stack((pts[:, 0] * UNIT_SCALE, -pts[:, 1] * UNIT_SCALE))


def sample(curve: Curve, compiler: ExpressionCompiler = compile_expression) -> SampledCurve:
    """
    Sample a curve into canvas-space points.

    Polygons yield their vertices; parametric and explicit curves yield
    SAMPLE_SEGMENTS + 1 evenly spaced samples. A sample where the expression
    is undefined is kept as a NaN row.

    Args:
        curve: A classified curve.
        compiler: Expression compiler, `compile_expression` by default.

    Raises:
        ExpressionError: (or whatever `compiler` raises) on the first failing
            compilation or sample. No partial result is returned.
    """
    match curve:
        case PolygonCurve():
            world = np.array(curve.vertices, dtype=np.float64)

        case ParametricCurve():
            fx = compiler(curve.x_text)
            fy = compiler(curve.y_text)
            ts = np.linspace(PARAMETRIC_RANGE[0], PARAMETRIC_RANGE[1], SAMPLE_SEGMENTS + 1)
            world = np.array(
                [(fx.evaluate({"t": float(t)}), fy.evaluate({"t": float(t)})) for t in ts],
                dtype=np.float64,
            )

        case ExplicitCurve():
            f = compiler(curve.rhs)
            xs = np.linspace(EXPLICIT_RANGE[0], EXPLICIT_RANGE[1], SAMPLE_SEGMENTS + 1)
            world = np.array(
                [(float(x), f.evaluate({"x": float(x)})) for x in xs],
                dtype=np.float64,
            )

        case _:
            raise TypeError(f"Unsupported curve type: {type(curve).__name__}")

    return SampledCurve(curve=curve, points=world_to_canvas(world))
