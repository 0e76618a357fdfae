from __future__ import annotations

import argparse
import sys

from lioliosh import __version__
from lioliosh.config import color_enabled, get_history_path, get_int_bits, get_prompt
from lioliosh.errors import LioConfigError
from lioliosh.interpreter import Interpreter
from lioliosh.logging_utils import configure_logging
from lioliosh.repl import Repl, evaluate_line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lioliosh", description="Lioliosh arithmetic REPL")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR, print the result and exit")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--no-history", action="store_true", help="do not persist input history")
    parser.add_argument("--log-level", help="loguru level (default: LIOLIOSH_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        get_int_bits()
    except LioConfigError as ex:
        print(f"lioliosh: {ex}", file=sys.stderr)
        return 2

    if args.expr is not None:
        print(evaluate_line(Interpreter(), args.expr))
        return 0

    color = color_enabled() and not args.no_color and sys.stdout.isatty()
    history = None if args.no_history else get_history_path()
    Repl(Interpreter(color=color), prompt=get_prompt(), history_path=history).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
