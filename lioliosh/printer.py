"""Rendering of Values as text.

`render` produces the canonical form the REPL prints:

    Number   -> decimal digits
    Error    -> Error: <message>
    Symbol   -> its name
    Sexpr    -> ( children separated by spaces )
    Qexpr    -> { children separated by spaces }

`colorize` produces the same text wrapped in ANSI colors per variant, for
interactive terminals.
"""

from __future__ import annotations

from lioliosh.types.value import Kind, Value

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[96m"
COLOR_ERROR = "\033[91m"
COLOR_SYMBOL = "\033[94m"
COLOR_SEXPR = "\033[90m"
COLOR_QEXPR = "\033[93m"

BRACKETS = {Kind.SEXPR: ("(", ")"), Kind.QEXPR: ("{", "}")}

DEFAULT_COLORS = {
    Kind.NUM: COLOR_NUMBER,
    Kind.ERR: COLOR_ERROR,
    Kind.SYM: COLOR_SYMBOL,
    Kind.SEXPR: COLOR_SEXPR,
    Kind.QEXPR: COLOR_QEXPR,
}


def _render_leaf(v: Value) -> str:
    if v.kind is Kind.NUM:
        return str(v.num)
    if v.kind is Kind.ERR:
        return f"Error: {v.err}"
    return v.sym


def render(v: Value) -> str:
    if v.is_list:
        open_, close = BRACKETS[v.kind]
        return open_ + " ".join(render(cell) for cell in v.cells) + close
    return _render_leaf(v)


def colorize(v: Value, colors: dict[Kind, str] | None = None) -> str:
    if colors is None:
        colors = DEFAULT_COLORS
    color = colors.get(v.kind)
    if v.is_list:
        open_, close = BRACKETS[v.kind]
        inner = " ".join(colorize(cell, colors) for cell in v.cells)
        if color:
            return f"{color}{open_}{RESET}{inner}{color}{close}{RESET}"
        return open_ + inner + close
    text = _render_leaf(v)
    return f"{color}{text}{RESET}" if color else text
