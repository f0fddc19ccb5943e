from __future__ import annotations
import os
from typing import Optional


# Defaults
_DEFAULT_SYMBOL_MAX_LENGTH = 128


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_symbol_max_length() -> int:
    return int_from_env('MINILISP_SYMBOL_MAX_LENGTH', _DEFAULT_SYMBOL_MAX_LENGTH)


def get_recursion_limit() -> Optional[int]:
    # None leaves the interpreter's own limit in place
    return int_from_env('MINILISP_RECURSION_LIMIT', None)
