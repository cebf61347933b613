from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    ROOT = "root"
    NUMBER = "number"
    SYMBOL = "symbol"
    SEXPR = "sexpr"
    QEXPR = "qexpr"
    CHAR = "char"  # punctuation: ( ) { }
    REGEX = "regex"  # start/end of input markers


@dataclass
class SyntaxNode:
    """Generic parse-tree node: a kind, literal text for leaves, ordered children."""

    kind: NodeKind
    contents: str = ""
    children: list[SyntaxNode] = field(default_factory=list)

    def pretty(self, depth: int = 0) -> str:
        pad = "  " * depth
        line = f"{pad}{self.kind.value}"
        if self.contents:
            line += f": '{self.contents}'"
        return "\n".join([line] + [c.pretty(depth + 1) for c in self.children])
