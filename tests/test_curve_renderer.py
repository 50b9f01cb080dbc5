"""Test drawing a single directive.

Tests for mathcanvas.render.curves:
    - Path shape of polygons, explicit and parametric curves
    - Fill before stroke, zoom-compensated stroke width
    - An evaluator that raises skips the whole directive with no surface calls
    - Undefined points break the path into subpaths

Run:
    pytest tests/test_curve_renderer.py -v
"""

from __future__ import annotations

import logging

import pytest

from mathcanvas.config import SAMPLE_SEGMENTS
from mathcanvas.model.camera import Camera
from mathcanvas.model.directives import parse
from mathcanvas.model.style import Rgba
from mathcanvas.render.curves import CurveRenderer


def record_for(block: str):
    records = parse(block)
    assert len(records) == 1
    return records[0]


class FailingOnSample:
    """Evaluates to 0 until the n-th call (1-based), which raises."""

    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at
        self.calls = 0

    def evaluate(self, bindings) -> float:
        self.calls += 1
        if self.calls == self.fail_at:
            raise ZeroDivisionError("pole")
        return 0.0


# ---------------------------------------------------------------------------
# Path construction
# ---------------------------------------------------------------------------


class TestPaths:
    def test_triangle(self, surface) -> None:
        record = record_for("@{poly(0,0,10,0,10,10); stroke=#ff0000; width=2}")
        assert CurveRenderer().render(record, Camera(), surface)
        assert surface.calls == [
            ("begin_path", ()),
            ("move_to", (0.0, 0.0)),
            ("line_to", (500.0, 0.0)),
            ("line_to", (500.0, -500.0)),
            ("close_path", ()),
            ("stroke", (Rgba(255, 0, 0, 1.0), 2.0)),
        ]

    def test_stroke_width_compensates_zoom(self, surface) -> None:
        record = record_for("@{y=x; stroke=#000000; width=3}")
        CurveRenderer().render(record, Camera(zoom=2.0), surface)
        (_, width), = surface.of("stroke")
        assert width == pytest.approx(1.5)

    def test_explicit_curve_is_open(self, surface) -> None:
        record = record_for("@{y=x; stroke=#000000; width=1}")
        CurveRenderer().render(record, Camera(), surface)
        assert "close_path" not in surface.names()
        assert len(surface.of("move_to")) == 1
        assert len(surface.of("line_to")) == SAMPLE_SEGMENTS
        assert surface.of("move_to")[0] == pytest.approx((-500.0, 500.0))
        assert surface.of("line_to")[-1] == pytest.approx((500.0, -500.0))

    def test_parametric_curve_is_open(self, surface) -> None:
        record = record_for("@{x(t)=cos(t) | y(t)=sin(t); stroke=#000000; width=1}")
        assert CurveRenderer().render(record, Camera(), surface)
        assert "close_path" not in surface.names()
        assert len(surface.of("line_to")) == SAMPLE_SEGMENTS

    def test_fill_before_stroke_with_shared_alpha(self, surface) -> None:
        record = record_for("@{poly(0,0,1,0,1,1); stroke=#0000ff; width=1; fill=#00ff00; alpha=0.25}")
        CurveRenderer().render(record, Camera(), surface)
        assert surface.names()[-3:] == ["close_path", "fill", "stroke"]
        assert surface.of("fill") == [(Rgba(0, 255, 0, 0.25),)]
        assert surface.of("stroke")[0][0] == Rgba(0, 0, 255, 0.25)

    def test_fill_on_open_curve(self, surface) -> None:
        record = record_for("@{y=x^2; stroke=#000000; width=1; fill=#ff0000}")
        CurveRenderer().render(record, Camera(), surface)
        assert surface.names()[-2:] == ["fill", "stroke"]


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    def test_failing_sample_draws_nothing(self, surface) -> None:
        evaluator = FailingOnSample(fail_at=37)
        renderer = CurveRenderer(compiler=lambda text: evaluator)
        record = record_for("@{y=x; stroke=#000000; width=1}")

        assert renderer.render(record, Camera(), surface) is False
        assert evaluator.calls == 37
        assert surface.calls == []

    def test_failure_is_logged(self, surface, caplog) -> None:
        record = record_for("@{y=a*x; stroke=#000000; width=1}")
        with caplog.at_level(logging.ERROR, logger="mathcanvas"):
            assert CurveRenderer().render(record, Camera(), surface) is False
        assert "Directive #0" in caplog.text
        assert "Undefined symbol a" in caplog.text
        assert surface.calls == []

    def test_unclassifiable_expression_is_skipped(self, surface) -> None:
        record = record_for("@{x^2; stroke=#000000; width=1}")
        assert CurveRenderer().render(record, Camera(), surface) is False
        assert surface.calls == []

    def test_odd_polygon_is_skipped(self, surface) -> None:
        record = record_for("@{poly(0,0,1,1,2); stroke=#000000; width=1}")
        assert CurveRenderer().render(record, Camera(), surface) is False
        assert surface.calls == []

    def test_invalid_record_is_rejected(self, surface) -> None:
        record = record_for("@{y=x; stroke=#000000}")
        with pytest.raises(ValueError):
            CurveRenderer().render(record, Camera(), surface)


# ---------------------------------------------------------------------------
# Undefined points
# ---------------------------------------------------------------------------


class TestGaps:
    def test_sqrt_draws_defined_half(self, surface) -> None:
        record = record_for("@{y=sqrt(x); stroke=#000000; width=1}")
        assert CurveRenderer().render(record, Camera(), surface)
        assert surface.of("move_to") == [pytest.approx((0.0, 0.0))]
        assert len(surface.of("line_to")) == SAMPLE_SEGMENTS // 2
        assert surface.of("line_to")[-1] == pytest.approx((500.0, -10 ** 0.5 * 50.0))
        assert surface.names()[-1] == "stroke"

    def test_pole_splits_path(self, surface) -> None:
        record = record_for("@{y=1/x; stroke=#000000; width=1}")
        assert CurveRenderer().render(record, Camera(), surface)
        moves = surface.of("move_to")
        assert len(moves) == 2
        assert moves[0] == pytest.approx((-500.0, 5.0))    # x = -10, y = -0.1
        assert moves[1] == pytest.approx((2.5, -1000.0))   # x = 0.05, y = 20
        assert len(surface.of("line_to")) == SAMPLE_SEGMENTS - 2
        assert len(surface.paths()) == 1

    def test_no_line_across_gap(self, surface) -> None:
        record = record_for("@{y=1/x; stroke=#000000; width=1}")
        CurveRenderer().render(record, Camera(), surface)
        path = surface.paths()[0]
        second_move = [i for i, (name, _) in enumerate(path) if name == "move_to"][1]
        # last point before the gap is x = -0.05
        assert path[second_move - 1][1] == pytest.approx((-2.5, 1000.0))

    def test_nowhere_defined_draws_nothing(self, surface, caplog) -> None:
        record = record_for("@{y=sqrt(-1-x^2); stroke=#000000; width=1}")
        with caplog.at_level(logging.WARNING, logger="mathcanvas"):
            assert CurveRenderer().render(record, Camera(), surface) is False
        assert surface.calls == []
        assert "no defined point" in caplog.text
