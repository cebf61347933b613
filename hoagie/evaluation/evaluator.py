"""Core evaluator for HoagieLisp.

Reduces S-expressions depth first, strictly left to right, then hands the
reduced argument list to the builtin named by the head symbol. Everything
other than an SExpr evaluates to itself.
"""

from __future__ import annotations

import logging

from hoagie.builtin import dispatch
from hoagie.types.value import Error, SExpr, Symbol, Value

logger = logging.getLogger(__name__)

NOT_A_SYMBOL = "S-expression does not start with a symbol!"


def evaluate(value: Value) -> Value:
    """Consume `value` and return its reduced form."""
    match value:
        case SExpr():
            return evaluate_sexpr(value)
    return value


def evaluate_sexpr(expr: SExpr) -> Value:
    # Reduce every cell in place before looking at any of them.
    for i, cell in enumerate(expr.cells):
        expr[i] = evaluate(cell)

    # First error by position wins.
    for i, cell in enumerate(expr.cells):
        if isinstance(cell, Error):
            logger.debug("Propagating %s from cell %d of %d", cell, i, len(expr))
            return expr.take(i)

    if len(expr) == 0:
        return expr
    if len(expr) == 1:
        return expr.take(0)

    head = expr.pop(0)
    if not isinstance(head, Symbol):
        return Error(NOT_A_SYMBOL)

    logger.debug("Dispatching %r with %d argument(s)", head.id, len(expr))
    return dispatch(head.id, expr)
