"""Interactive shell for Lioliosh."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from lioliosh import __version__
from lioliosh.errors import LioError
from lioliosh.interpreter import Interpreter

BANNER = (f"Lioliosh Version {__version__}", "Press Ctrl+c to Exit")


def evaluate_line(interp: Interpreter, line: str) -> str:
    """Evaluate one line for display; syntax and ownership errors become text."""
    try:
        return interp.eval_to_string(line)
    except LioError as ex:
        logger.debug("rejected input {!r}: {}", line, ex)
        return str(ex)
    except RecursionError:
        logger.warning("input nested too deeply: {} chars", len(line))
        return "Error: Expression nested too deeply."


class Repl:
    def __init__(self, interp: Interpreter, *, prompt: str = ">>> ", history_path: Path | None = None):
        self.interp = interp
        self.prompt = prompt
        self.history_path = history_path
        self._session: PromptSession[str] | None = None

    def _build_session(self) -> PromptSession[str]:
        if self.history_path is None:
            return PromptSession(history=InMemoryHistory())
        self.history_path.parent.mkdir(parents=True, exist_ok=True)
        return PromptSession(history=FileHistory(str(self.history_path)))

    def run(self) -> None:
        for line in BANNER:
            print(line)
        self._session = self._build_session()
        while True:
            try:
                line = self._session.prompt(self.prompt)
            except (KeyboardInterrupt, EOFError):
                break
            print(evaluate_line(self.interp, line))
