"""
Expression Evaluator
====================
Adapter between the curve renderer and sympy.

`compile_expression("sin(x)^2")` returns an `Evaluable` whose
`evaluate({"x": 1.0})` gives a float. Compile failures and unbound symbols
are raised as `ExpressionError`. A point where the function is undefined
(`sqrt(-1)`, `log(0)`, `1/0`, overflow, complex result) evaluates to NaN so a
sampled curve can leave a gap there instead of failing as a whole.

Accepted syntax is sympy's with `^` as power and implicit multiplication
(`2x`, `3 sin(t)`); `e` and `pi` are the usual constants.

Note:
    sympy's parser evaluates the input text. Expressions come from the local
    editor only.
"""
from __future__ import annotations

import math
import numbers
from functools import lru_cache
from typing import Callable, Mapping, Protocol

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

TRANSFORMATIONS = standard_transformations + (implicit_multiplication_application, convert_xor)

LOCAL_NAMES: dict[str, object] = {
    "e": sp.E,
    "pi": sp.pi,
    "abs": sp.Abs,
    "ln": sp.log,
}


class ExpressionError(Exception):
    """Raised when an expression cannot be compiled or evaluated."""


class SupportsEvaluate(Protocol):
    def evaluate(self, bindings: Mapping[str, float]) -> float: ...


ExpressionCompiler = Callable[[str], SupportsEvaluate]


class Evaluable:
    """A compiled expression, evaluated with named variable bindings."""

    def __init__(self, text: str, expr: sp.Expr) -> None:
        self.text = text
        self.expr = expr
        self._symbols = sorted(expr.free_symbols, key=str)
        self.variables: tuple[str, ...] = tuple(str(s) for s in self._symbols)
        self._func = sp.lambdify(self._symbols, expr, modules="math")

    def evaluate(self, bindings: Mapping[str, float]) -> float:
        """
        Evaluate the expression.

        Args:
            bindings: Variable name -> value, e.g. {"x": 0.5}.

        Returns:
            The real result, NaN where the expression is undefined.

        Raises:
            ExpressionError: On unbound variables and on failures that are not
                arithmetic (e.g. a non-numeric result).
        """
        missing = [name for name in self.variables if name not in bindings]
        if missing:
            raise ExpressionError(f"Undefined symbol {missing[0]} in '{self.text}'")

        try:
            value = self._func(*(bindings[name] for name in self.variables))
        except (ValueError, ZeroDivisionError, OverflowError):
            return math.nan
        except Exception as e:
            raise ExpressionError(f"Cannot evaluate '{self.text}': {e}") from e

        if isinstance(value, bool):
            raise ExpressionError(f"'{self.text}' did not evaluate to a number: {value!r}")
        if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
            return math.nan
        if not isinstance(value, numbers.Real):
            raise ExpressionError(f"'{self.text}' did not evaluate to a number: {value!r}")

        value = float(value)
        return value if math.isfinite(value) else math.nan

    def __repr__(self) -> str:
        return f"Evaluable({self.text!r})"


@lru_cache(maxsize=256)
def compile_expression(text: str) -> Evaluable:
    """
    Compile `text` into an `Evaluable`.

    Compiled expressions are cached by text, redraws re-use them.

    Raises:
        ExpressionError: If the text is not a valid scalar expression.
    """
    try:
        expr = parse_expr(text, local_dict=dict(LOCAL_NAMES), transformations=TRANSFORMATIONS)
    except Exception as e:
        raise ExpressionError(f"Cannot parse '{text}': {e}") from e

    if not isinstance(expr, sp.Expr):
        raise ExpressionError(f"'{text}' is not a numeric expression")

    try:
        return Evaluable(text, expr)
    except Exception as e:
        raise ExpressionError(f"Cannot compile '{text}': {e}") from e
