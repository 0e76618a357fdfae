"""Builtin arithmetic over Number operands.

`apply_operator` folds an operand list left to right with one of + - * /.
Results are kept inside the configured signed integer width by wrapping in
two's complement, and division truncates toward zero.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from lioliosh.config import get_int_bits
from lioliosh.errors import ErrorMessage
from lioliosh.types.value import Kind, Value


def wrap(n: int) -> int:
    """Reduce `n` to the configured signed integer width."""
    bits = get_int_bits()
    mask = (1 << bits) - 1
    n &= mask
    return n - (1 << bits) if n >> (bits - 1) else n


def truncdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": truncdiv,
}


def apply_operator(a: Value, op: str) -> Value:
    """Fold the operands in `a` with `op`. Consumes `a`; returns a Number or an Error."""

    # Ensure all arguments are numbers
    if any(cell.kind is not Kind.NUM for cell in a.cells):
        a.release()
        return Value.error(ErrorMessage.NON_NUMBER)

    if op not in OPERATORS:
        a.release()
        return Value.error(ErrorMessage.UNKNOWN_OPERATOR)

    if not a.cells:
        a.release()
        return Value.error(ErrorMessage.EMPTY_OPERANDS)

    fn = OPERATORS[op]
    x = a.pop(0)

    # Unary negation: (- 5) is -5
    if op == "-" and not a.cells:
        x.num = wrap(-x.num)

    while a.cells:
        y = a.pop(0)
        if op == "/" and y.num == 0:
            logger.debug("division by zero folding {}", x.num)
            x.release()
            y.release()
            x = Value.error(ErrorMessage.DIVISION_BY_ZERO)
            break
        x.num = wrap(fn(x.num, y.num))
        y.release()

    # Releases any operands left behind by an early stop
    a.release()
    return x
