"""Function strategies evaluated by the graph renderer.

A strategy maps a real ``x`` to a real ``y`` or returns ``None`` where the
function is undefined. The renderer treats ``None`` as a gap in the curve.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

from .constants import SINGULARITY_EPSILON

__all__ = [
    "FunctionStrategy",
    "ArctanRatioFunction",
    "SineFunction",
    "ExpressionFunction",
    "FUNCTION_STRATEGIES",
    "available_functions",
    "get_function",
]


class FunctionStrategy(ABC):
    key: str = ""
    name: str = ""

    @abstractmethod
    def evaluate(self, x: float) -> float | None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ArctanRatioFunction(FunctionStrategy):
    """``y = (3x + 1) / atan(x)``, undefined in a small band around zero."""

    key = "arctan-ratio"
    name = "y = (3x + 1) / atan(x)"

    def evaluate(self, x: float) -> float | None:
        if abs(x) < SINGULARITY_EPSILON:
            return None
        return (3 * x + 1) / math.atan(x)


class SineFunction(FunctionStrategy):
    key = "sine"
    name = "y = 5·sin(x)"

    def evaluate(self, x: float) -> float | None:
        return 5 * math.sin(x)


class ExpressionFunction(FunctionStrategy):
    """User-supplied expression in ``x``, parsed with SymPy.

    The expression is compiled once with ``lambdify`` against the ``math``
    module; points where evaluation fails or goes complex come back as
    ``None``.
    """

    key = "expression"

    def __init__(self, expression: str) -> None:
        import sympy as sp
        from sympy.core.function import AppliedUndef

        try:
            expr = sp.sympify(expression)
        except Exception as exc:
            raise ValueError(f"Invalid expression {expression!r}: {exc}") from exc
        if not isinstance(expr, sp.Expr):
            raise ValueError(f"Invalid expression {expression!r}: not a numeric expression")

        x_sym = sp.Symbol("x")
        extra = sorted(str(s) for s in expr.free_symbols - {x_sym})
        if extra:
            raise ValueError(
                f"Invalid expression {expression!r}: unknown symbols {', '.join(extra)}; only 'x' is allowed"
            )

        undefined = sorted(str(f.func) for f in expr.atoms(AppliedUndef))
        if undefined:
            raise ValueError(
                f"Invalid expression {expression!r}: unknown functions {', '.join(undefined)}"
            )

        func: Callable[[float], Any] = sp.lambdify(x_sym, expr, modules="math")
        # Functions with no math-module counterpart only fail once called
        try:
            func(1.0)
        except (NameError, TypeError) as exc:
            raise ValueError(f"Invalid expression {expression!r}: unsupported function ({exc})") from exc
        except (ValueError, ZeroDivisionError, OverflowError):
            pass

        self.expression = expression
        self.name = f"y = {expression}"
        self._func = func

    def evaluate(self, x: float) -> float | None:
        try:
            y = self._func(x)
        except (ValueError, TypeError, ZeroDivisionError, OverflowError):
            return None
        if isinstance(y, complex):
            return None
        return float(y)


FUNCTION_STRATEGIES: dict[str, type[FunctionStrategy]] = {
    cls.key: cls for cls in (ArctanRatioFunction, SineFunction)
}


def available_functions() -> list[FunctionStrategy]:
    """Return one instance of each built-in strategy, in display order."""
    return [cls() for cls in FUNCTION_STRATEGIES.values()]


def get_function(name: str) -> FunctionStrategy:
    """Look up a built-in strategy by key or display name."""
    if name in FUNCTION_STRATEGIES:
        return FUNCTION_STRATEGIES[name]()
    for cls in FUNCTION_STRATEGIES.values():
        if cls.name == name:
            return cls()
    valid = ", ".join(FUNCTION_STRATEGIES)
    raise KeyError(f"Unknown function {name!r}; expected one of: {valid}")
