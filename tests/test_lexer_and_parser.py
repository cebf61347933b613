import pytest
from hypothesis import given, strategies as st

from hoagie.errors import HoagieSyntaxError
from hoagie.reader.parser import lex, parse
from hoagie.reader.syntax import NodeKind, SyntaxNode


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("(+ 1 2)", [("lparen", "(", 0), ("atom", "+", 1), ("atom", "1", 3), ("atom", "2", 5), ("rparen", ")", 6)]),
        ("{x}", [("lbrace", "{", 0), ("atom", "x", 1), ("rbrace", "}", 2)]),
        (" ; comment\n a", [("atom", "a", 12)]),
        ("-5 -", [("atom", "-5", 0), ("atom", "-", 3)]),
        ("", []),
        ("   \n\t ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source,position", [("$", 0), ("(+ 1 #)", 5), ("  'a", 2)])
def test_lexer_rejects_characters_outside_grammar(source, position):
    with pytest.raises(HoagieSyntaxError) as info:
        list(lex(source))
    assert info.value.position == position


def kinds(node: SyntaxNode) -> list[NodeKind]:
    return [child.kind for child in node.children]


def test_root_is_framed_by_regex_markers():
    root = parse("+ 1 2")
    assert root.kind is NodeKind.ROOT
    assert kinds(root) == [NodeKind.REGEX, NodeKind.SYMBOL, NodeKind.NUMBER, NodeKind.NUMBER, NodeKind.REGEX]
    assert [c.contents for c in root.children[1:4]] == ["+", "1", "2"]


def test_empty_input_parses_to_bare_root():
    assert kinds(parse("")) == [NodeKind.REGEX, NodeKind.REGEX]


def test_lists_keep_punctuation_children():
    qexpr = parse("{1 (a)}").children[1]
    assert qexpr.kind is NodeKind.QEXPR
    assert kinds(qexpr) == [NodeKind.CHAR, NodeKind.NUMBER, NodeKind.SEXPR, NodeKind.CHAR]
    assert qexpr.children[0].contents == "{"
    assert qexpr.children[-1].contents == "}"
    assert kinds(qexpr.children[2]) == [NodeKind.CHAR, NodeKind.SYMBOL, NodeKind.CHAR]


@pytest.mark.parametrize(
    "text,kind",
    [
        ("42", NodeKind.NUMBER),
        ("-5", NodeKind.NUMBER),
        ("3.25", NodeKind.NUMBER),
        ("1e999", NodeKind.NUMBER),
        ("2.5E-3", NodeKind.NUMBER),
        ("-", NodeKind.SYMBOL),
        ("min", NodeKind.SYMBOL),
        ("<=", NodeKind.SYMBOL),
        ("a_b\\c", NodeKind.SYMBOL),
        ("-5x", NodeKind.SYMBOL),
    ],
)
def test_atom_classification(text, kind):
    node = parse(text).children[1]
    assert node.kind is kind
    assert node.contents == text


@pytest.mark.parametrize("source", ["(1 2", "{1 (2}", ")", "}", "1.2.3", "."])
def test_malformed_input_raises(source):
    with pytest.raises(HoagieSyntaxError):
        parse(source)


def test_unmatched_message_names_opening_bracket():
    with pytest.raises(HoagieSyntaxError, match=r"Unmatched '\(' at 3"):
        parse("1 2(3")


def test_pretty_prints_tree():
    assert parse("(+ 1)").pretty() == "\n".join(
        [
            "root",
            "  regex",
            "  sexpr",
            "    char: '('",
            "    symbol: '+'",
            "    number: '1'",
            "    char: ')'",
            "  regex",
        ]
    )


@given(st.integers())
def test_integers_lex_as_single_atom(n):
    assert list(lex(str(n))) == [("atom", str(n), 0)]
    assert parse(str(n)).children[1].kind is NodeKind.NUMBER
