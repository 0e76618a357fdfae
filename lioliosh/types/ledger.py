"""Allocation accounting for Values.

Python frees memory on its own, but the evaluator still follows a strict
single-owner discipline: every Value is released exactly once, by whoever
owns it last. A Ledger makes that discipline observable. While one is
active, each constructed Value is recorded as live and each release retires
it, so a caller can assert that nothing leaked once the final result has
been released.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from lioliosh import LispValue

_active: list[Ledger] = []


class Ledger:
    def __init__(self):
        self.allocated = 0
        self.released = 0
        self._live: dict[int, LispValue] = {}

    def record_alloc(self, value: LispValue) -> None:
        self.allocated += 1
        self._live[id(value)] = value

    def record_release(self, value: LispValue) -> None:
        # Values built before this ledger was activated are not ours to count.
        if self._live.pop(id(value), None) is not None:
            self.released += 1

    @property
    def live(self) -> int:
        return len(self._live)

    def leaked(self) -> list[LispValue]:
        return list(self._live.values())

    def __repr__(self) -> str:
        return f"<Ledger allocated={self.allocated} released={self.released} live={self.live}>"


def current() -> Ledger | None:
    return _active[-1] if _active else None


@contextmanager
def tracking() -> Iterator[Ledger]:
    """Record every Value created and released inside the block."""
    ledger = Ledger()
    _active.append(ledger)
    try:
        yield ledger
    finally:
        _active.remove(ledger)
