from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Tag(Enum):
    """Grammar rule a parse tree node was produced by."""
    ROOT = ">"
    NUMBER = "number"
    SYMBOL = "symbol"
    SEXPR = "sexpr"
    QEXPR = "qexpr"
    CHAR = "char"     # literal delimiter: ( ) { }
    REGEX = "regex"   # zero-width anchor match, carries no content


@dataclass
class Node:
    tag: Tag
    contents: str = ""
    children: list[Node] = field(default_factory=list)
    position: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def pretty(self, indent: int = 0) -> str:
        """Indented dump of the tree, one node per line."""
        pad = "  " * indent
        head = f"{pad}{self.tag.value}"
        if self.contents:
            head += f": '{self.contents}'"
        lines = [head]
        for child in self.children:
            lines.append(child.pretty(indent + 1))
        return "\n".join(lines)
