from __future__ import annotations
import logging
import os


_DEFAULT_TABLE = 'mytable1'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = 'felisp> '


def default_table_name() -> str:
    return os.environ.get('FELISP_DEFAULT_TABLE') or _DEFAULT_TABLE


def log_level() -> int:
    raw = (os.environ.get('FELISP_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    # unknown names fall back to the default rather than failing startup
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def prompt() -> str:
    return os.environ.get('FELISP_PROMPT', _DEFAULT_PROMPT)
