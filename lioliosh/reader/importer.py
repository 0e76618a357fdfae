"""Conversion of reader parse trees into Values."""

from __future__ import annotations

import math

from loguru import logger

from lioliosh.config import get_int_range
from lioliosh.errors import ErrorMessage
from lioliosh.reader.ast import Node, Tag
from lioliosh.types.value import Value

DELIMITERS = frozenset("(){}")


def max_digits(hi: int) -> int:
    """Upper bound on the decimal digits of any number in [-hi - 1, hi]."""
    return int(hi.bit_length() * math.log10(2)) + 1


def read_number(node: Node) -> Value:
    lo, hi = get_int_range()
    # Reject by length first: int() refuses very long digit strings outright.
    digits = node.contents.lstrip("-").lstrip("0")
    if len(digits) > max_digits(hi):
        logger.debug("number literal of {} digits outside [{}, {}]", len(digits), lo, hi)
        return Value.error(ErrorMessage.INVALID_NUMBER)
    n = int(digits or "0", 10)
    if node.contents.startswith("-"):
        n = -n
    if not lo <= n <= hi:
        logger.debug("number literal {} outside [{}, {}]", node.contents, lo, hi)
        return Value.error(ErrorMessage.INVALID_NUMBER)
    return Value.number(n)


def import_tree(node: Node) -> Value:
    """Build a Value tree from `node`. The caller owns the result."""
    if node.tag is Tag.NUMBER:
        return read_number(node)
    if node.tag is Tag.SYMBOL:
        return Value.symbol(node.contents)

    # Root and ( ) read as sexpr, { } as qexpr
    x = Value.qexpr() if node.tag is Tag.QEXPR else Value.sexpr()

    for child in node.children:
        if child.tag is Tag.REGEX:
            continue
        if child.contents in DELIMITERS:
            continue
        x.append(import_tree(child))
    return x
