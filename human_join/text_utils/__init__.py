"""Text utilities for mirroring quote sequences.

A quote string wraps each joined item on both sides. When mirroring is on,
the closing side is the mirror image of the opening side: the character order
is reversed and bracket-like characters are swapped for their counterparts,
so ``<<`` closes with ``>>`` and ``-(`` closes with ``)-``.
"""

from __future__ import annotations

from .display import display_string
from .mirror_map import MIRROR_MAP
from .mirroring import mirror_char, mirror_character, mirror_string

__all__ = [
    "MIRROR_MAP",
    "display_string",
    "mirror_char",
    "mirror_character",
    "mirror_string",
]
