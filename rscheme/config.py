from __future__ import annotations
import logging
import os
import sys

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = ">>>"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_recursion_limit() -> int:
    return max(int_from_env('RSCHEME_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 100)


def get_log_level() -> int:
    name = os.environ.get('RSCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_prompt() -> str:
    return os.environ.get('RSCHEME_PROMPT', _DEFAULT_PROMPT)


def apply_recursion_limit() -> None:
    # Only ever raise the limit; never lower what the host process configured.
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


def configure_logging(level: int | None = None) -> None:
    """Configure the root handler for command-line entry points."""
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
