"""List builtins: list head tail join cons eval."""

from __future__ import annotations

from hoagie.builtin.checks import expect_single_qexpr, incorrect_type, no_arguments
from hoagie.types.value import Number, QExpr, SExpr, Value


def builtin_list(args: SExpr) -> Value:
    """Reinterpret the argument list as a Q-expression."""
    return args.to_qexpr()


def builtin_head(args: SExpr) -> Value:
    """Q-expression holding only the first element of the single Q-expression argument."""
    err = expect_single_qexpr("head", args, non_empty=True)
    if err is not None:
        return err
    qexpr = args.take(0)
    del qexpr.cells[1:]
    return qexpr


def builtin_tail(args: SExpr) -> Value:
    """The single Q-expression argument without its first element."""
    err = expect_single_qexpr("tail", args, non_empty=True)
    if err is not None:
        return err
    qexpr = args.take(0)
    qexpr.pop(0)
    return qexpr


def builtin_join(args: SExpr) -> Value:
    """Concatenate Q-expressions in argument order."""
    if len(args) == 0:
        return no_arguments("join")
    if not all(isinstance(cell, QExpr) for cell in args):
        return incorrect_type("join")
    result = args.pop(0)
    while len(args):
        result.join(args.pop(0))
    return result


def builtin_cons(args: SExpr) -> Value:
    """(cons n {a b} ...) => {n a b ...}"""
    if len(args) == 0:
        return no_arguments("cons")
    if not isinstance(args[0], Number):
        return incorrect_type("cons")
    if not all(isinstance(cell, QExpr) for cell in args.cells[1:]):
        return incorrect_type("cons")
    head = builtin_list(SExpr().add(args.pop(0)))
    return builtin_join(SExpr().add(head).join(args))


def builtin_eval(args: SExpr) -> Value:
    """Evaluate a single Q-expression argument as if it were an S-expression."""
    err = expect_single_qexpr("eval", args)
    if err is not None:
        return err
    # Lazy import to avoid circular imports
    from hoagie.evaluation.evaluator import evaluate
    return evaluate(args.take(0).to_sexpr())
