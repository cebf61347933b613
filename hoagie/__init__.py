# Core aliases for HoagieLisp.
# Runtime values are the classes in hoagie.types.value (Number, Error, Symbol,
# SExpr, QExpr). Code and data share that one representation: the reader builds
# Values straight from the syntax tree and the evaluator reduces them in place.
#
# BuiltinFn: a builtin handler. It takes ownership of its argument SExpr and
# returns a fresh Value (an Error value on failure, never an exception).

from typing import Callable

__version__ = "0.0.0.1"

BuiltinFn = Callable[..., object]
