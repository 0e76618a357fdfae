"""The Value type: every parsed and evaluated entity in Lioliosh.

A Value is a closed sum of five variants, discriminated by `kind`:

    NUM    signed integer in `num`
    ERR    failure message in `err`, carried as data rather than raised
    SYM    operator name in `sym`
    SEXPR  ordered children in `cells`, evaluated as an application
    QEXPR  ordered children in `cells`, literal data that is never evaluated

Ownership: a Value owns its children exclusively. `append` moves a child in,
`pop` moves one out, `take` moves one out and releases the rest, and
`release` retires a whole tree. Each Value is released exactly once along
every path; using or releasing it afterwards raises LioOwnershipError.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from lioliosh.errors import LioOwnershipError, LioTypeError
from lioliosh.types import ledger


class Kind(Enum):
    NUM = "number"
    ERR = "error"
    SYM = "symbol"
    SEXPR = "sexpr"
    QEXPR = "qexpr"


_LIST_KINDS = (Kind.SEXPR, Kind.QEXPR)


class Value:
    __slots__ = ("kind", "num", "err", "sym", "cells", "released")

    def __init__(self, kind: Kind, num: int = 0, err: str | None = None, sym: str | None = None):
        self.kind = kind
        self.num = num
        self.err = err
        self.sym = sym
        self.cells: list[Value] = []
        self.released = False
        active = ledger.current()
        if active is not None:
            active.record_alloc(self)

    # ----------------- Constructors -----------------
    @classmethod
    def number(cls, n: int) -> Value:
        return cls(Kind.NUM, num=n)

    @classmethod
    def error(cls, message: str) -> Value:
        return cls(Kind.ERR, err=message)

    @classmethod
    def symbol(cls, name: str) -> Value:
        return cls(Kind.SYM, sym=name)

    @classmethod
    def sexpr(cls) -> Value:
        return cls(Kind.SEXPR)

    @classmethod
    def qexpr(cls) -> Value:
        return cls(Kind.QEXPR)

    # ----------------- Predicates -----------------
    @property
    def is_list(self) -> bool:
        return self.kind in _LIST_KINDS

    @property
    def is_error(self) -> bool:
        return self.kind is Kind.ERR

    # ----------------- Ownership -----------------
    def _check_alive(self) -> None:
        if self.released:
            raise LioOwnershipError(f"{self!r} used after release")

    def _check_list(self, op: str) -> None:
        self._check_alive()
        if not self.is_list:
            raise LioTypeError(f"Cannot {op} on {self.kind.value}, expected sexpr or qexpr")

    def append(self, child: Value) -> Value:
        """Move `child` to the end of this list. Returns the list."""
        self._check_list("append")
        child._check_alive()
        if child is self:
            raise LioOwnershipError("A list cannot contain itself")
        self.cells.append(child)
        return self

    def pop(self, index: int) -> Value:
        """Remove the child at `index` and hand its ownership to the caller."""
        self._check_list("pop")
        if not 0 <= index < len(self.cells):
            raise IndexError(f"pop index {index} out of range for list of {len(self.cells)}")
        return self.cells.pop(index)

    def take(self, index: int) -> Value:
        """Pop the child at `index`, then release this list and what remains in it."""
        x = self.pop(index)
        self.release()
        return x

    def release(self) -> None:
        self._check_alive()
        for cell in self.cells:
            cell.release()
        self.cells.clear()
        self.released = True
        active = ledger.current()
        if active is not None:
            active.record_release(self)

    # ----------------- Container protocol -----------------
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value) or self.kind is not other.kind:
            return False
        if self.kind is Kind.NUM:
            return self.num == other.num
        if self.kind is Kind.ERR:
            return self.err == other.err
        if self.kind is Kind.SYM:
            return self.sym == other.sym
        return self.cells == other.cells

    __hash__ = None

    def __repr__(self) -> str:
        if self.kind is Kind.NUM:
            return f"Number({self.num})"
        if self.kind is Kind.ERR:
            return f"Error({self.err!r})"
        if self.kind is Kind.SYM:
            return f"Symbol({self.sym!r})"
        name = "Sexpr" if self.kind is Kind.SEXPR else "Qexpr"
        return f"{name}({self.cells!r})"

    def __str__(self) -> str:
        # Lazy import: the printer depends on this module
        from lioliosh.printer import render
        return render(self)
