"""Join lists of values into human-friendly strings.

``["apples", "oranges", "pears"]`` becomes ``"apples, oranges & pears"``,
``"apples, oranges and pears"``, or, for fans of the Oxford comma,
``"apples, oranges, and pears"``. Items can optionally be quoted, with
multi-character quotes closed by their mirror image (``<<`` ... ``>>``).
"""

from __future__ import annotations

from .config import (
    DEFAULTS,
    DISABLED,
    UNSET,
    JoinConfig,
    JoinDefaults,
    JoinOptions,
    create_defaults,
    reset_defaults,
)
from .joiner import human_join, human_join_preset, resolve_config
from .text_utils import (
    MIRROR_MAP,
    display_string,
    mirror_char,
    mirror_character,
    mirror_string,
)

__all__ = [
    "DEFAULTS",
    "DISABLED",
    "MIRROR_MAP",
    "UNSET",
    "JoinConfig",
    "JoinDefaults",
    "JoinOptions",
    "create_defaults",
    "display_string",
    "human_join",
    "human_join_preset",
    "mirror_char",
    "mirror_character",
    "mirror_string",
    "reset_defaults",
    "resolve_config",
]
