"""Core evaluator for Lioliosh.

A single-pass, eager, recursive walk over a Value tree. Every call consumes
the Value it is given and returns the Value that replaces it:

- Numbers, Symbols, Errors and Qexprs evaluate to themselves.
- An Sexpr evaluates its children in place, then reduces: the first Error
  among them wins, `()` stays `()`, `(x)` becomes `x`, and anything longer
  is an operator application handed to the arithmetic builtins.
"""

from __future__ import annotations

from loguru import logger

from lioliosh.errors import ErrorMessage
from lioliosh.evaluation.arithmetic import apply_operator
from lioliosh.types.value import Kind, Value


def evaluate(v: Value) -> Value:
    if v.kind is Kind.SEXPR:
        return evaluate_sexpr(v)
    # Atoms and qexprs return as-is
    return v


def evaluate_sexpr(v: Value) -> Value:
    cells = v.cells
    for i, cell in enumerate(cells):
        cells[i] = evaluate(cell)

    for i, cell in enumerate(cells):
        if cell.is_error:
            logger.trace("error {!r} at position {} aborts reduction", cell.err, i)
            return v.take(i)

    if not cells:
        return v

    if len(cells) == 1:
        return v.take(0)

    f = v.pop(0)
    if f.kind is not Kind.SYM:
        f.release()
        v.release()
        return Value.error(ErrorMessage.MISSING_SYMBOL)

    logger.trace("apply {} to {} operand(s)", f.sym, len(cells))
    result = apply_operator(v, f.sym)
    f.release()
    return result
