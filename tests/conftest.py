import pytest

from lioliosh.interpreter import Interpreter
from lioliosh.types.ledger import tracking


# Fixtures shared across the suite:
# - interp: a plain (uncolored) Interpreter, one per test.
# - ledger: an active allocation ledger; every Value built inside the test
#   is recorded, so tests can assert nothing is left live at the end.
# Property tests under hypothesis open their own ledger with `tracking()`
# instead, since hypothesis rejects function-scoped fixtures.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def ledger():
    with tracking() as active:
        yield active
