from hoagie.reader.syntax import NodeKind, SyntaxNode
from hoagie.reader.parser import lex, parse, TokenStream
from hoagie.reader.reader import read

__all__ = ["NodeKind", "SyntaxNode", "lex", "parse", "TokenStream", "read"]
