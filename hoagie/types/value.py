"""HoagieLisp value model.

Five variants: Number, Error, Symbol (terminals) and the two list flavors
SExpr and QExpr, which share the Expr base. A list owns its cells outright;
every operation that moves a cell out of a list (pop, take, join, flavor
change) removes it from its old container, so a Value is never reachable from
two places at once.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Iterator


def format_number(x: float) -> str:
    """Shortest round-trip text for a double; integral values print without '.0'."""
    if x == 0 and math.copysign(1.0, x) < 0:
        return "-0"
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


class Value:
    __slots__ = ()


class Number(Value):
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return format_number(self.value)


class Error(Value):
    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("error", self.message))

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"


class Symbol(Value):
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Builtin names repeat constantly; interning keeps lookups cheap
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Expr(Value):
    """Ordered, owning list of Values. Subclasses only choose the brackets."""

    __slots__ = ("cells",)
    open_bracket = ""
    close_bracket = ""

    def __init__(self, cells: Iterable[Value] = ()):
        self.cells: list[Value] = list(cells)

    # --- ownership transfer ---
    def add(self, value: Value) -> Expr:
        """Append `value`, taking ownership of it. Returns self for chaining."""
        self.cells.append(value)
        return self

    def pop(self, i: int = 0) -> Value:
        """Remove the cell at `i` and hand it to the caller."""
        return self.cells.pop(i)

    def take(self, i: int = 0) -> Value:
        """Pop the cell at `i` and discard everything else in this list."""
        value = self.cells.pop(i)
        self.cells.clear()
        return value

    def join(self, other: Expr) -> Expr:
        """Move every cell of `other` onto the end of this list, emptying `other`."""
        self.cells.extend(other.cells)
        other.cells = []
        return self

    def _move_into(self, target: Expr) -> Expr:
        target.cells, self.cells = self.cells, []
        return target

    def to_qexpr(self) -> QExpr:
        return self._move_into(QExpr())

    def to_sexpr(self) -> SExpr:
        return self._move_into(SExpr())

    # --- sequence protocol ---
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __setitem__(self, i: int, value: Value) -> None:
        self.cells[i] = value

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"

    def __str__(self):
        inner = " ".join(str(cell) for cell in self.cells)
        return f"{self.open_bracket}{inner}{self.close_bracket}"


class SExpr(Expr):
    __slots__ = ()
    open_bracket = "("
    close_bracket = ")"


class QExpr(Expr):
    __slots__ = ()
    open_bracket = "{"
    close_bracket = "}"
