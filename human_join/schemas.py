"""Validation schemas for join options.

Every raw option value is reduced to one of a small set of kinds before the
joiner sees it: literal text, the DISABLED sentinel, UNSET, or a boolean flag.
Validation happens one field at a time so that a single unusable value never
discards the rest of an options record.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

import voluptuous as vol

from .config import DISABLED, UNSET, FlagOption, TextOption
from .const import (
    OPT_CONJUNCTION,
    OPT_MIRROR_QUOTE,
    OPT_QUOTE_WITH,
    OPT_SEPARATOR,
    OPTION_ALIASES,
    SHORTCUT_OPTIONS,
)
from .text_utils.display import display_string, is_stringy

_LOGGER = logging.getLogger(__name__)


def text(value: Any) -> str:
    """Validate a string or number and coerce it to text."""
    if not is_stringy(value):
        raise vol.Invalid(f"expected a string or number, got {type(value).__name__}")
    return display_string(value)


def disabled(value: Any) -> TextOption:
    """Validate the explicit disabled marker: boolean False or DISABLED itself."""
    if value is not False and value is not DISABLED:
        raise vol.Invalid("expected False to disable")
    return DISABLED


def flag(value: Any) -> bool:
    """Coerce any value to a flag by truthiness."""
    return bool(value)


TEXT_SCHEMA = vol.Schema(text)
DISABLEABLE_TEXT_SCHEMA = vol.Schema(vol.Any(text, disabled))
FLAG_SCHEMA = vol.Schema(flag)

OPTION_SCHEMAS: dict[str, vol.Schema] = {
    OPT_SEPARATOR: TEXT_SCHEMA,
    OPT_CONJUNCTION: DISABLEABLE_TEXT_SCHEMA,
    OPT_QUOTE_WITH: DISABLEABLE_TEXT_SCHEMA,
    OPT_MIRROR_QUOTE: FLAG_SCHEMA,
    **{key: FLAG_SCHEMA for key in SHORTCUT_OPTIONS},
}


def canonical_key(key: Any) -> Any:
    """Map a camelCase option alias to its snake_case key."""
    return OPTION_ALIASES.get(key, key)


def validate_option(key: str, value: Any) -> TextOption | FlagOption:
    """Validate a single option value.

    Args:
        key: Canonical option key.
        value: Raw value supplied by the caller.

    Returns:
        The coerced value, or UNSET when the value is missing or unusable.
    """
    if value is None or value is UNSET:
        return UNSET
    schema = OPTION_SCHEMAS.get(key)
    if schema is None:
        return UNSET
    try:
        return schema(value)  # type: ignore[no-any-return]
    except vol.Invalid as err:
        _LOGGER.debug("Ignoring option %s=%r: %s", key, value, err)
        return UNSET


def normalize_options(options: Mapping[Any, Any]) -> dict[str, TextOption | FlagOption]:
    """Validate a whole options mapping.

    Unknown keys are dropped. When both a camelCase alias and its snake_case
    key are given with usable values, the later one in the mapping wins.

    Returns:
        Canonical option keys mapped to validated values, UNSET entries omitted.
    """
    result: dict[str, TextOption | FlagOption] = {}
    for raw_key, raw_value in options.items():
        key = canonical_key(raw_key)
        if key not in OPTION_SCHEMAS:
            _LOGGER.debug("Ignoring unknown option %r", raw_key)
            continue
        value = validate_option(key, raw_value)
        if value is not UNSET:
            result[key] = value
    return result
