"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from lioliosh.config import get_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once per level.

    The level defaults to LIOLIOSH_LOG_LEVEL (WARNING when unset). Output goes
    to stderr so it never interleaves with rendered results on stdout.
    """
    global _CONFIGURED_LEVEL
    level = (level or get_log_level()).upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )

    _CONFIGURED_LEVEL = level
