"""Translate a parse tree into Values. Pure construction; nothing is evaluated."""

from __future__ import annotations

import logging
import math

from hoagie.reader.syntax import NodeKind, SyntaxNode
from hoagie.types.value import Error, Expr, Number, QExpr, SExpr, Symbol, Value

logger = logging.getLogger(__name__)

INVALID_NUMBER = "invalid number"

SKIPPED_KINDS = frozenset({NodeKind.CHAR, NodeKind.REGEX})


def _underflows(text: str, x: float) -> bool:
    """A non-zero mantissa that parsed to zero fell below the smallest double."""
    mantissa = text.lower().partition("e")[0]
    return x == 0 and any(ch in "123456789" for ch in mantissa)


def read_number(text: str) -> Value:
    try:
        x = float(text)
    except ValueError:
        x = math.nan
    if not math.isfinite(x) or _underflows(text, x):
        logger.debug("Rejecting numeric literal %r", text)
        return Error(INVALID_NUMBER)
    return Number(x)


def read(node: SyntaxNode) -> Value:
    match node.kind:
        case NodeKind.NUMBER:
            return read_number(node.contents)
        case NodeKind.SYMBOL:
            return Symbol(node.contents)
        case NodeKind.ROOT | NodeKind.SEXPR:
            result: Expr = SExpr()
        case NodeKind.QEXPR:
            result = QExpr()
        case _:
            raise ValueError(f"Cannot read a {node.kind.value} node")

    for child in node.children:
        if child.kind in SKIPPED_KINDS:
            continue
        result.add(read(child))
    return result
