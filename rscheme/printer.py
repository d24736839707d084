# Printer for RScheme values and expressions.

from __future__ import annotations

from enum import Enum

from rscheme import LispValue
from rscheme.types.nil import NilType


def to_string(value: LispValue) -> str:
    """Render a value or expression back into S-expression text."""
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return "(" + " ".join(to_string(item) for item in value) + ")"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, NilType):
        return "nil"
    return str(value)
