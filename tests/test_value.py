import math

import pytest
from hypothesis import given, strategies as st

from hoagie.types import Error, Number, QExpr, SExpr, Symbol, format_number


def nums(*xs):
    return [Number(x) for x in xs]


@pytest.mark.parametrize(
    "x,expected",
    [
        (3.0, "3"),
        (-5.0, "-5"),
        (0.0, "0"),
        (-0.0, "-0"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (1e20, "1e+20"),
        (1.5e-05, "1.5e-05"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ],
)
def test_format_number(x, expected):
    assert format_number(x) == expected
    assert str(Number(x)) == expected


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_number_rendering_round_trips(x):
    assert float(str(Number(x))) == x


@pytest.mark.parametrize(
    "value,expected",
    [
        (Error("Division By Zero!"), "Error: Division By Zero!"),
        (Symbol("head"), "head"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), Number(1), QExpr(nums(2, 3))]), "(+ 1 {2 3})"),
        (QExpr([SExpr(), QExpr(), Symbol("x")]), "{() {} x}"),
    ],
)
def test_rendering(value, expected):
    assert str(value) == expected


def test_structural_equality():
    assert SExpr(nums(1, 2)) == SExpr(nums(1, 2))
    assert SExpr() != QExpr()
    assert QExpr(nums(1)) != QExpr(nums(2))
    assert Number(1) != Symbol("1")
    assert Error("a") == Error("a")
    assert Symbol("x") == Symbol("x")


def test_add_appends_in_order_and_chains():
    q = QExpr()
    assert q.add(Number(1)).add(Number(2)) is q
    assert q.cells == nums(1, 2)


def test_pop_transfers_cell_to_caller():
    q = QExpr(nums(1, 2, 3))
    assert q.pop() == Number(1)
    assert q.pop(1) == Number(3)
    assert q.cells == nums(2)


def test_take_discards_the_rest():
    q = QExpr(nums(1, 2, 3))
    assert q.take(1) == Number(2)
    assert len(q) == 0


def test_join_moves_cells_and_empties_source():
    a = QExpr(nums(1, 2))
    b = QExpr(nums(3))
    assert a.join(b) is a
    assert a.cells == nums(1, 2, 3)
    assert len(b) == 0


def test_flavor_change_moves_without_copying():
    s = SExpr(nums(1, 2))
    cells = s.cells
    q = s.to_qexpr()
    assert isinstance(q, QExpr)
    assert q.cells is cells
    assert len(s) == 0
    back = q.to_sexpr()
    assert isinstance(back, SExpr)
    assert back.cells is cells


def test_symbols_are_interned():
    assert Symbol("".join(["he", "ad"])).id is Symbol("head").id
