"""Mirror-image character mapping for closing quote sequences.

This module provides MIRROR_MAP, which maps a character to the character that
faces the opposite way. Characters absent from the map mirror to themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

MIRROR_MAP: Mapping[str, str] = MappingProxyType(
    {
        # Inverted punctuation (one-way: the inverted forms stay as they are)
        "!": "¡",  # INVERTED EXCLAMATION MARK
        "?": "¿",  # INVERTED QUESTION MARK
        # Paired brackets
        "(": ")",
        ")": "(",
        "{": "}",
        "}": "{",
        "[": "]",
        "]": "[",
        "<": ">",
        ">": "<",
    }
)
