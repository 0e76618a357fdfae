from __future__ import annotations
import os
from pathlib import Path

from lioliosh.errors import LioConfigError


_TRUTHY = {'1', 'true', 'yes', 'on'}

# Defaults
_DEFAULT_INT_BITS = 64
_DEFAULT_HISTORY = Path.home() / '.lioliosh_history'
_DEFAULT_PROMPT = '>>> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_int_bits() -> int:
    raw = os.environ.get('LIOLIOSH_INT_BITS')
    if not raw:
        return _DEFAULT_INT_BITS
    try:
        bits = int(raw)
    except ValueError:
        raise LioConfigError(f'LIOLIOSH_INT_BITS must be an integer, got {raw!r}') from None
    if bits < 2:
        raise LioConfigError(f'LIOLIOSH_INT_BITS must be at least 2, got {bits}')
    return bits


def get_int_range() -> tuple[int, int]:
    """Inclusive (min, max) of the signed integer type numbers live in."""
    bits = get_int_bits()
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def get_history_path() -> Path:
    raw = os.environ.get('LIOLIOSH_HISTORY')
    return Path(raw).expanduser() if raw else _DEFAULT_HISTORY


def get_prompt() -> str:
    return os.environ.get('LIOLIOSH_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('LIOLIOSH_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def color_enabled() -> bool:
    return flag_from_env('LIOLIOSH_COLOR', True)
