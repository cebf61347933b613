"""
  HoagieLisp Lexer and Parser

Turns source text into the generic parse tree the reader consumes:

    number : /-?[0-9]+(\\.[0-9]+)?([eE][-+]?[0-9]+)?/
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&^%]+/
    sexpr  : '(' <expr>* ')'
    qexpr  : '{' <expr>* '}'
    expr   : <number> | <symbol> | <sexpr> | <qexpr>
    root   : /^/ <expr>* /$/

- lists keep their bracket tokens as CHAR children
- the root is framed by REGEX start/end markers
- nothing here evaluates or builds Values
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from hoagie.errors import HoagieSyntaxError
from hoagie.reader.syntax import NodeKind, SyntaxNode


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<atom>[a-zA-Z0-9_+\-*/\\=<>!&^%.]+)"  # numbers and symbols
    r")",
)

NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?")
SYMBOL_RE = re.compile(r"[a-zA-Z0-9_+\-*/\\=<>!&^%]+")

CLOSERS: dict[str, tuple[str, NodeKind]] = {
    "lparen": ("rparen", NodeKind.SEXPR),
    "lbrace": ("rbrace", NodeKind.QEXPR),
}

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:]
            if not rest.strip():
                break
            bad = pos + len(rest) - len(rest.lstrip())
            raise HoagieSyntaxError(f"Unexpected char at {bad}: {source[bad]!r}", bad)
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind), m.start(kind)


def classify_atom(text: str, position: int) -> SyntaxNode:
    if NUMBER_RE.fullmatch(text):
        return SyntaxNode(NodeKind.NUMBER, text)
    if SYMBOL_RE.fullmatch(text):
        return SyntaxNode(NodeKind.SYMBOL, text)
    raise HoagieSyntaxError(f"Malformed atom at {position}: {text!r}", position)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[SyntaxNode]:
        tok = self.peek()
        if tok is None:
            return None
        tok_type, tok_val, pos = tok

        if tok_type == "atom":
            self.advance()
            return classify_atom(tok_val, pos)

        if tok_type in CLOSERS:
            closer, kind = CLOSERS[tok_type]
            self.advance()
            node = SyntaxNode(kind, children=[SyntaxNode(NodeKind.CHAR, tok_val)])
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise HoagieSyntaxError(f"Unmatched {tok_val!r} at {pos}", pos)
                if nxt[0] == closer:
                    self.advance()
                    node.children.append(SyntaxNode(NodeKind.CHAR, nxt[1]))
                    return node
                node.children.append(self.parse_expr())

        raise HoagieSyntaxError(f"Unexpected {tok_val!r} at {pos}", pos)

    def parse_all(self) -> Iterator[SyntaxNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> SyntaxNode:
    """Parse a whole input into a ROOT node."""
    stream = TokenStream(lex(source))
    root = SyntaxNode(NodeKind.ROOT, children=[SyntaxNode(NodeKind.REGEX)])
    root.children.extend(stream.parse_all())
    root.children.append(SyntaxNode(NodeKind.REGEX))
    return root
