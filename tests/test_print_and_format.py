import re

import pytest

from lioliosh.printer import colorize, render, COLOR_ERROR, COLOR_NUMBER, RESET
from lioliosh.types.value import Kind, Value

ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def _sample():
    return (
        Value.sexpr()
        .append(Value.symbol("+"))
        .append(Value.number(-1))
        .append(Value.qexpr().append(Value.number(2)).append(Value.error("bad")))
        .append(Value.sexpr())
    )


@pytest.mark.parametrize(
    "value,expected",
    [
        (Value.number(42), "42"),
        (Value.number(-42), "-42"),
        (Value.error("Division By Zero."), "Error: Division By Zero."),
        (Value.symbol("/"), "/"),
        (Value.sexpr(), "()"),
        (Value.qexpr(), "{}"),
        (_sample(), "(+ -1 {2 Error: bad} ())"),
    ]
)
def test_render(value, expected):
    assert render(value) == expected


def test_str_uses_render():
    assert str(_sample()) == "(+ -1 {2 Error: bad} ())"


def test_colorize_leaves():
    assert colorize(Value.number(3)) == f"{COLOR_NUMBER}3{RESET}"
    assert colorize(Value.error("x")) == f"{COLOR_ERROR}Error: x{RESET}"


def test_colorize_strips_to_render():
    v = _sample()
    colored = colorize(v)
    assert colored != render(v)
    assert ANSI_RE.sub("", colored) == render(v)


def test_colorize_without_colors():
    assert colorize(_sample(), colors={}) == render(_sample())


def test_colorize_partial_palette():
    v = Value.qexpr().append(Value.number(1))
    assert colorize(v, colors={Kind.NUM: COLOR_NUMBER}) == f"{{{COLOR_NUMBER}1{RESET}}}"
