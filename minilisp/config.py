from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = '>>>'
_DEFAULT_LOG_LEVEL = 'WARNING'

_FALSE_VALUES = ('0', 'false', 'no', 'off')


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> Optional[int]:
    # unset means closures may recurse until Python's own limit
    return int_from_env('MINILISP_MAX_DEPTH', None)


def get_set_evaluates_in_global() -> bool:
    return flag_from_env('MINILISP_SET_IN_GLOBAL', True)


def get_prompt() -> str:
    return os.environ.get('MINILISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    level = os.environ.get('MINILISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"MINILISP_LOG_LEVEL must be a logging level name, got {level!r}")
    return level
