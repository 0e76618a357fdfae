import math
from fractions import Fraction
from functools import reduce

import pytest
from hypothesis import given, strategies as st

from lioliosh.errors import ErrorMessage
from lioliosh.evaluation.arithmetic import apply_operator, truncdiv, wrap, OPERATORS
from lioliosh.types.ledger import tracking
from lioliosh.types.value import Value


def operands(*ns):
    lst = Value.sexpr()
    for n in ns:
        lst.append(Value.number(n))
    return lst


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(* -2 3)", "-6"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(/ 0 5)", "0"),
        ("(- 5)", "-5"),
        ("(- -5)", "5"),
        ("(- (+ 2 3))", "-5"),
        ("(+ 5)", "5"),
        ("(* 7)", "7"),
        ("(/ 9)", "9"),
        ("(/ 10 0)", "Error: Division By Zero."),
        ("(/ 100 5 0 2)", "Error: Division By Zero."),
        ("(+ 1 (/ 1 0))", "Error: Division By Zero."),
        ("(+ 1 foo)", "Error: Cannot operate on non-number!"),
        ("(+ 1 {2})", "Error: Cannot operate on non-number!"),
        ("(* 2 +)", "Error: Cannot operate on non-number!"),
        ("(foo 1 2)", "Error: Unknown operator!"),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval_to_string(source) == expected


def test_truncating_division():
    assert apply_operator(operands(7, 2), "/") == Value.number(3)
    assert apply_operator(operands(-7, 2), "/") == Value.number(-3)


def test_unary_minus():
    assert apply_operator(operands(5), "-") == Value.number(-5)


@pytest.mark.parametrize("op", ["+", "*", "/"])
def test_unary_other_operators_return_operand(op):
    assert apply_operator(operands(5), op) == Value.number(5)


def test_empty_operands():
    assert apply_operator(Value.sexpr(), "+") == Value.error(ErrorMessage.EMPTY_OPERANDS)


def test_non_number_releases_every_operand(ledger):
    a = operands(1, 2)
    a.append(Value.symbol("x")).append(Value.qexpr().append(Value.number(3)))
    result = apply_operator(a, "+")
    assert result == Value.error(ErrorMessage.NON_NUMBER)
    assert a.released
    assert ledger.live == 1
    result.release()
    assert ledger.live == 0


def test_division_by_zero_releases_unfolded_operands(ledger):
    a = operands(100, 5, 0, 3, 4)
    result = apply_operator(a, "/")
    assert result == Value.error(ErrorMessage.DIVISION_BY_ZERO)
    assert ledger.live == 1
    result.release()
    assert ledger.live == 0
    assert ledger.released == ledger.allocated


def test_unknown_operator_releases_operands(ledger):
    result = apply_operator(operands(1, 2), "%")
    assert result == Value.error(ErrorMessage.UNKNOWN_OPERATOR)
    result.release()
    assert ledger.live == 0


def test_overflow_wraps_at_64_bits(monkeypatch):
    monkeypatch.delenv("LIOLIOSH_INT_BITS", raising=False)
    top = (1 << 63) - 1
    assert apply_operator(operands(top, 1), "+") == Value.number(-(1 << 63))
    assert apply_operator(operands(-(1 << 63)), "-") == Value.number(-(1 << 63))
    assert apply_operator(operands(-(1 << 63), -1), "/") == Value.number(-(1 << 63))


def test_overflow_follows_configured_width(interp, monkeypatch):
    monkeypatch.setenv("LIOLIOSH_INT_BITS", "8")
    assert interp.eval_to_string("(+ 127 1)") == "-128"
    assert interp.eval_to_string("(* 16 16)") == "0"


@pytest.mark.parametrize(
    "n,expected",
    [(0, 0), (5, 5), (-5, -5), (1 << 63, -(1 << 63)), (1 << 64, 0), ((1 << 64) - 1, -1)]
)
def test_wrap(n, expected):
    assert wrap(n) == expected


@given(st.integers(min_value=-10**9, max_value=10**9), st.integers(min_value=-10**9, max_value=10**9).filter(bool))
def test_truncdiv_rounds_toward_zero(a, b):
    assert truncdiv(a, b) == math.trunc(Fraction(a, b))


@given(
    st.lists(st.integers(min_value=-10**4, max_value=10**4), min_size=2, max_size=8),
    st.sampled_from(["+", "-", "*"]),
)
def test_fold_matches_left_reduce(ns, op):
    with tracking() as ledger:
        result = apply_operator(operands(*ns), op)
        assert result == Value.number(wrap(reduce(OPERATORS[op], ns)))
        result.release()
        assert ledger.live == 0


@given(
    st.lists(st.integers(min_value=-10**4, max_value=10**4), min_size=1, max_size=6),
    st.integers(min_value=0, max_value=5),
)
def test_zero_divisor_anywhere_is_an_error(ns, at):
    divisors = [n or 1 for n in ns[1:]]
    divisors.insert(min(at, len(divisors)), 0)
    assert apply_operator(operands(ns[0], *divisors), "/") == Value.error(ErrorMessage.DIVISION_BY_ZERO)
