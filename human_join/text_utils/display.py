"""Display-string coercion shared by the joiner, options and mirroring."""

from __future__ import annotations

from typing import Any


def display_string(value: Any) -> str:
    """Return the display form of a value."""
    return value if isinstance(value, str) else str(value)


def is_stringy(value: Any) -> bool:
    """Return True for strings and numbers (booleans excluded)."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)
