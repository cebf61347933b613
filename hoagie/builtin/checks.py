"""Error values shared by the builtins, and argument checks that produce them."""

from __future__ import annotations

from typing import Optional

from hoagie.types.value import Error, QExpr, SExpr

NON_NUMBER = "Cannot operate on non-number!"
DIVISION_BY_ZERO = "Division By Zero!"
UNKNOWN_FUNCTION = "Unknown Function!"


def no_arguments(name: str) -> Error:
    return Error(f"Function '{name}' passed no arguments!")


def too_many_arguments(name: str) -> Error:
    return Error(f"Function '{name}' passed too many arguments!")


def incorrect_type(name: str) -> Error:
    return Error(f"Function '{name}' passed incorrect type!")


def empty_list(name: str) -> Error:
    return Error(f"Function '{name}' passed {{}}!")


def expect_single_qexpr(name: str, args: SExpr, non_empty: bool = False) -> Optional[Error]:
    """Return the Error describing why `args` is not exactly one (non-empty) QExpr, else None."""
    if len(args) == 0:
        return no_arguments(name)
    if len(args) > 1:
        return too_many_arguments(name)
    if not isinstance(args[0], QExpr):
        return incorrect_type(name)
    if non_empty and len(args[0]) == 0:
        return empty_list(name)
    return None
