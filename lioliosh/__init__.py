# Core type aliases and package metadata for Lioliosh.
#
# Naming guidance:
# - LispValue: a lioliosh.types.value.Value, the runtime representation of every
#   parsed and evaluated entity. Kept as a plain alias so modules below the
#   value layer (the ledger) can annotate without an import cycle.

from typing import Any, Callable

__version__ = "0.0.1"

# Runtime value alias
LispValue = Any

# Evaluator function type: consumes a value and returns its reduction
EvaluatorFn = Callable[[LispValue], LispValue]
