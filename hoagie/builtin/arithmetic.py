"""Arithmetic builtins: + - * / % ^ min max.

All share one folding routine; the operator's binary function is looked up
once per call. Results stay IEEE doubles, so overflow gives inf rather than
an error, the way C's libm behaves.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from hoagie.builtin.checks import DIVISION_BY_ZERO, NON_NUMBER, no_arguments
from hoagie.types.value import Error, Number, SExpr, Value


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and x % 2 == 1


def remainder(a: float, b: float) -> float:
    """C fmod: the result takes the sign of the dividend."""
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(inf, y)
        return math.nan


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # pow(0, negative) is a pole; a negative base with a fractional exponent is undefined
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def fmin(a: float, b: float) -> float:
    """C fmin: a NaN operand is ignored, so the result never depends on order."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": remainder,
    "^": power,
    "min": fmin,
    "max": fmax,
}

ZERO_CHECKED = frozenset({"/", "%"})


def builtin_op(op: str, args: SExpr) -> Value:
    """Fold `args` left to right with `op`; (- x) negates."""
    if len(args) == 0:
        return no_arguments(op)
    if not all(isinstance(cell, Number) for cell in args):
        return Error(NON_NUMBER)

    fn = OPERATORS[op]
    check_zero = op in ZERO_CHECKED
    acc = args.pop(0)

    if op == "-" and len(args) == 0:
        return Number(-acc.value)

    while len(args):
        rhs = args.pop(0)
        if check_zero and rhs.value == 0:
            return Error(DIVISION_BY_ZERO)
        acc = Number(fn(acc.value, rhs.value))
    return acc
