"""Registry of builtin operations.

Maps symbol names to handlers. The evaluator consults this table once per
reduced S-expression; each handler takes ownership of the argument list.
"""

from __future__ import annotations

from functools import partial

from hoagie import BuiltinFn
from hoagie.builtin.arithmetic import OPERATORS, builtin_op
from hoagie.builtin.checks import UNKNOWN_FUNCTION
from hoagie.builtin.list_builtin import (
    builtin_cons,
    builtin_eval,
    builtin_head,
    builtin_join,
    builtin_list,
    builtin_tail,
)
from hoagie.types.value import Error, SExpr, Value

BUILTINS: dict[str, BuiltinFn] = {op: partial(builtin_op, op) for op in OPERATORS}
BUILTINS.update(
    {
        "list": builtin_list,
        "head": builtin_head,
        "tail": builtin_tail,
        "join": builtin_join,
        "cons": builtin_cons,
        "eval": builtin_eval,
    }
)


def dispatch(name: str, args: SExpr) -> Value:
    handler = BUILTINS.get(name)
    if handler is None:
        return Error(UNKNOWN_FUNCTION)
    return handler(args)
