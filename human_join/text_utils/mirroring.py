"""Functions for mirroring characters and strings.

Mirroring a string reverses its character order and then swaps each character
for its mirror image from MIRROR_MAP, so an opening quote sequence such as
``<(`` becomes the matching closing sequence ``)>``.

Both functions accept strings and numbers. Any other value, including
booleans, mirrors to the empty string rather than raising.
"""

from __future__ import annotations

from typing import Any

from .display import display_string, is_stringy
from .mirror_map import MIRROR_MAP


def mirror_character(char: Any) -> str:
    """Mirror a single character.

    Strings longer than one character are truncated to their first character
    before mirroring.

    Args:
        char: Character to mirror. Numbers are converted to text first.

    Returns:
        The mirrored character, the character itself when it has no mirror,
        or an empty string for empty or unusable input.
    """
    if not is_stringy(char):
        return ""
    text = display_string(char)
    if not text:
        return ""
    first = text[0]
    return MIRROR_MAP.get(first, first)


def mirror_string(text: Any) -> str:
    """Mirror a string: reverse it, then mirror each character.

    Args:
        text: String to mirror. Numbers are converted to text first.

    Returns:
        The mirrored string, or an empty string for unusable input.
    """
    if not is_stringy(text):
        return ""
    return "".join(mirror_character(char) for char in reversed(display_string(text)))


mirror_char = mirror_character
