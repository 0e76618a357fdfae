"""
  Lioliosh Reader: Lexer and Parser

Grammar:

    number : /-?[0-9]+/ ;
    symbol : '+' | '-' | '*' | '/' | /[A-Za-z_][A-Za-z0-9_?!-]*/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lang   : /^/ <expr>* /$/ ;

Emits a tree of `Node`s rather than values:

    - the whole line   -> Node(ROOT) framed by two REGEX anchor nodes
    - ( ... )          -> Node(SEXPR) framed by CHAR delimiter nodes
    - { ... }          -> Node(QEXPR) framed by CHAR delimiter nodes
    - numbers, symbols -> leaf Nodes holding their literal text

Numbers are kept as text; range checking belongs to the importer.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lioliosh.errors import LioSyntaxError
from lioliosh.reader.ast import Node, Tag


TOKEN_RE = re.compile(
    r"(?P<number>-?[0-9]+)"  # tried before symbol so -5 is a number
    r"|(?P<symbol>[+\-*/]|[A-Za-z_][A-Za-z0-9_?!\-]*)"
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
)

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
LIST_TAGS = {"lparen": Tag.SEXPR, "lbrace": Tag.QEXPR}

Token = tuple[str, str, int]


def lex(source: str, source_name: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LioSyntaxError(f"Unexpected character {source[pos]!r}", pos, source_name)
        yield m.lastgroup, m.group(m.lastgroup), m.start(m.lastgroup)
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source_name: str = "<stdin>", length: int = 0):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.source_name = source_name
        self.length = length

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, self.length
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, self.length))

    def error(self, message: str, position: int) -> LioSyntaxError:
        return LioSyntaxError(message, position, self.source_name)

    def parse_expr(self) -> Node:
        tok_type, tok_val, pos = self.advance()
        if tok_type is None:
            raise self.error("Unexpected end of input", pos)

        if tok_type == "number":
            return Node(Tag.NUMBER, tok_val, position=pos)

        if tok_type == "symbol":
            return Node(Tag.SYMBOL, tok_val, position=pos)

        if tok_type in LIST_TAGS:
            closer = CLOSERS[tok_type]
            node = Node(LIST_TAGS[tok_type], position=pos)
            node.children.append(Node(Tag.CHAR, tok_val, position=pos))
            while True:
                next_type, next_val, next_pos = self.peek()
                if next_type is None:
                    raise self.error(f"Unmatched {tok_val!r}", pos)
                if next_type == closer:
                    self.advance()
                    node.children.append(Node(Tag.CHAR, next_val, position=next_pos))
                    return node
                if next_type in ("rparen", "rbrace"):
                    expected = ")" if closer == "rparen" else "}"
                    raise self.error(f"Expected {expected!r} but found {next_val!r}", next_pos)
                node.children.append(self.parse_expr())

        raise self.error(f"Unexpected {tok_val!r}", pos)

    def parse_all(self) -> Iterator[Node]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()

    def parse_root(self) -> Node:
        root = Node(Tag.ROOT)
        root.children.append(Node(Tag.REGEX, position=0))
        root.children.extend(self.parse_all())
        root.children.append(Node(Tag.REGEX, position=self.length))
        return root


def parse(source: str, source_name: str = "<stdin>") -> Node:
    """Parse a whole line into a ROOT node. Raises LioSyntaxError on bad input."""
    stream = TokenStream(lex(source, source_name), source_name, len(source))
    return stream.parse_root()
