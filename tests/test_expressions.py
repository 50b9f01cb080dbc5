"""Test the sympy-backed expression evaluator.

Tests for mathcanvas.model.expressions:
    - Compilation of common syntax (^, implicit multiplication, constants)
    - Evaluation with bindings
    - Compile failures and unbound symbols surface as ExpressionError
    - Undefined points (poles, domain errors, overflow) evaluate to NaN

Run:
    pytest tests/test_expressions.py -v
"""

from __future__ import annotations

import math

import pytest

from mathcanvas.model.expressions import Evaluable, ExpressionError, compile_expression


class TestCompile:
    @pytest.mark.parametrize(
        ("text", "x", "expected"),
        [
            ("x", 3.0, 3.0),
            ("x^2", 3.0, 9.0),
            ("x**2 + 1", 2.0, 5.0),
            ("2x", 4.0, 8.0),
            ("sin(x)", math.pi / 2, 1.0),
            ("3 cos(x)", 0.0, 3.0),
            ("abs(x)", -2.5, 2.5),
            ("sqrt(x)", 16.0, 4.0),
            ("exp(x)", 1.0, math.e),
            ("e^x", 1.0, math.e),
            ("ln(x)", math.e, 1.0),
        ],
    )
    def test_evaluate(self, text: str, x: float, expected: float) -> None:
        assert compile_expression(text).evaluate({"x": x}) == pytest.approx(expected)

    def test_constant_expression(self) -> None:
        f = compile_expression("2*pi")
        assert f.variables == ()
        assert f.evaluate({}) == pytest.approx(2 * math.pi)

    def test_returns_float(self) -> None:
        value = compile_expression("1 + 1").evaluate({"x": 0.0})
        assert isinstance(value, float)

    def test_compiled_expressions_are_cached(self) -> None:
        assert compile_expression("x + 7") is compile_expression("x + 7")

    def test_variables(self) -> None:
        f = compile_expression("t*x")
        assert isinstance(f, Evaluable)
        assert f.variables == ("t", "x")

    @pytest.mark.parametrize("text", ["", "   ", "x +", "(x", "x = 2", "1, 2"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ExpressionError):
            compile_expression(text)


class TestEvaluateErrors:
    def test_unbound_symbol(self) -> None:
        with pytest.raises(ExpressionError, match="Undefined symbol a"):
            compile_expression("a*x").evaluate({"x": 1.0})

    def test_compile_error_chains_cause(self) -> None:
        with pytest.raises(ExpressionError) as info:
            compile_expression("(x")
        assert info.value.__cause__ is not None


class TestUndefinedPoints:
    @pytest.mark.parametrize(
        ("text", "x"),
        [
            ("1/x", 0.0),            # division by zero
            ("log(x)", -1.0),        # math domain error
            ("sqrt(x)", -4.0),       # math domain error
            ("x^0.5", -4.0),         # complex result
            ("exp(exp(x))", 10.0),   # overflow
        ],
    )
    def test_undefined_point_is_nan(self, text: str, x: float) -> None:
        assert math.isnan(compile_expression(text).evaluate({"x": x}))

    def test_complex_constant_is_nan(self) -> None:
        assert math.isnan(compile_expression("sqrt(-1)").evaluate({}))

    def test_defined_points_unaffected(self) -> None:
        f = compile_expression("sqrt(x)")
        assert math.isnan(f.evaluate({"x": -1.0}))
        assert f.evaluate({"x": 9.0}) == pytest.approx(3.0)
