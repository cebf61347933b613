from __future__ import annotations
from typing import Callable

from hoagie.evaluation.evaluator import evaluate
from hoagie.reader.parser import parse
from hoagie.reader.reader import read
from hoagie.types.value import Value


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating HoagieLisp code via a pluggable evaluator.
    A whole input is one root S-expression, so `+ 1 2` and `(+ 1 2)` both give 3.
    """

    def __init__(self, eval_fn: Callable[[Value], Value] | None = None):
        self.eval_fn = eval_fn or evaluate

    def read(self, code: str) -> Value:
        return read(parse(code))

    def eval(self, code: str) -> Value:
        return self.eval_fn(self.read(code))

    def rep(self, code: str) -> str:
        return str(self.eval(code))
