from __future__ import annotations

from loguru import logger

from lioliosh import LispValue, EvaluatorFn
from lioliosh.evaluation.evaluator import evaluate
from lioliosh.printer import colorize, render
from lioliosh.reader.importer import import_tree
from lioliosh.reader.parser import parse


class Interpreter:
    """
    Runs one read-eval-print cycle per input line.
    Nothing carries over between lines: each cycle owns its Value tree from
    import until the rendered result has been produced.
    """

    def __init__(self, eval_fn: EvaluatorFn | None = None, *, color: bool = False, source_name: str = "<stdin>"):
        self.eval_fn = eval_fn or evaluate
        self.color = color
        self.source_name = source_name

    def read(self, code: str) -> LispValue:
        """Parse `code` and import it. Raises LioSyntaxError on bad input."""
        tree = parse(code, self.source_name)
        return import_tree(tree)

    def eval(self, code: str) -> LispValue:
        """Evaluate one line. The caller owns (and must release) the result."""
        value = self.read(code)
        logger.debug("read {!r}", value)
        return self.eval_fn(value)

    def eval_to_string(self, code: str) -> str:
        result = self.eval(code)
        try:
            return colorize(result) if self.color else render(result)
        finally:
            result.release()
