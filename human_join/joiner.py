"""Join sequences of values into human-friendly strings.

``human_join(["apples", "oranges", "pears"])`` gives
``"apples, oranges & pears"``. The separator, the conjunction before the last
item and optional per-item quoting are configurable per call, through a
shared defaults record, or through shortcut flags such as ``oxford``.

Configuration is resolved in this order, later steps winning:

1. baseline values from const.py
2. the defaults record (the process-wide DEFAULTS unless one is passed in)
3. explicit per-call options
4. shortcut flags, in SHORTCUT_CONJUNCTIONS order

Joining never raises. Unusable input degrades to a sensible string.
"""

from __future__ import annotations

from collections import UserString
from collections.abc import Mapping, Sequence
from dataclasses import fields
import logging
from typing import Any

from .config import DEFAULTS, UNSET, JoinConfig, JoinDefaults, JoinOptions
from .const import (
    DEFAULT_CONJUNCTION,
    DEFAULT_MIRROR_QUOTE,
    DEFAULT_SEPARATOR,
    OPT_CONJUNCTION,
    OPT_MIRROR_QUOTE,
    OPT_QUOTE_WITH,
    OPT_SEPARATOR,
    SHORTCUT_CONJUNCTIONS,
)
from .schemas import (
    OPTION_SCHEMAS,
    canonical_key,
    normalize_options,
    validate_option,
)
from .text_utils import display_string, mirror_string

_LOGGER = logging.getLogger(__name__)

_BASELINE: dict[str, Any] = {
    OPT_SEPARATOR: DEFAULT_SEPARATOR,
    OPT_CONJUNCTION: DEFAULT_CONJUNCTION,
    OPT_QUOTE_WITH: None,
    OPT_MIRROR_QUOTE: DEFAULT_MIRROR_QUOTE,
}


def _is_item_sequence(items: Any) -> bool:
    """Return True for ordered sequences other than string and byte types."""
    return isinstance(items, Sequence) and not isinstance(
        items, (str, UserString, bytes, bytearray, memoryview)
    )


def _options_to_dict(options: Any) -> dict[str, Any]:
    """Reduce any accepted options shape to a validated options dict."""
    if options is None:
        return {}
    if isinstance(options, str):
        return normalize_options({options: True})
    if isinstance(options, JoinOptions):
        return normalize_options(options.as_dict())
    if isinstance(options, Mapping):
        return normalize_options(options)
    _LOGGER.debug("Ignoring options of type %s", type(options).__name__)
    return {}


def _defaults_to_dict(defaults: JoinDefaults) -> dict[str, Any]:
    """Validate the fields of a defaults record, dropping unusable ones."""
    result: dict[str, Any] = {}
    for item in fields(defaults):
        value = validate_option(item.name, getattr(defaults, item.name))
        if value is not UNSET:
            result[item.name] = value
    return result


def resolve_config(
    options: Any = None, defaults: JoinDefaults | None = None
) -> JoinConfig:
    """Resolve options against a defaults record.

    Args:
        options: A shortcut name, a mapping, a JoinOptions, or None.
        defaults: Defaults record to use. The process-wide DEFAULTS when omitted.

    Returns:
        The resolved JoinConfig. DISABLED values resolve to None.
    """
    record = DEFAULTS if defaults is None else defaults
    settings: dict[str, Any] = dict(_BASELINE)
    settings.update(_defaults_to_dict(record))

    call_options = _options_to_dict(options)
    for key in _BASELINE:
        if key in call_options:
            settings[key] = call_options[key]

    for keys, conjunction in SHORTCUT_CONJUNCTIONS:
        if any(call_options.get(key) is True for key in keys):
            settings[OPT_CONJUNCTION] = conjunction

    return JoinConfig(
        separator=settings[OPT_SEPARATOR],
        conjunction=(
            settings[OPT_CONJUNCTION]
            if isinstance(settings[OPT_CONJUNCTION], str)
            else None
        ),
        quote_with=(
            settings[OPT_QUOTE_WITH]
            if isinstance(settings[OPT_QUOTE_WITH], str)
            else None
        ),
        mirror_quote=bool(settings[OPT_MIRROR_QUOTE]),
    )


def _quote(text: str, config: JoinConfig) -> str:
    """Wrap one item in the configured quote string."""
    if not config.quote_with:
        return text
    closer = mirror_string(config.quote_with) if config.mirror_quote else config.quote_with
    return f"{config.quote_with}{text}{closer}"


def _assemble(strings: list[str], config: JoinConfig) -> str:
    """Join prepared item strings with separator and conjunction."""
    if len(strings) == 1:
        return strings[0]
    head = config.separator.join(strings[:-1])
    last_sep = config.separator if config.conjunction is None else config.conjunction
    return f"{head}{last_sep}{strings[-1]}"


def human_join(
    items: Any, options: Any = None, *, defaults: JoinDefaults | None = None
) -> str:
    """Join items into a human-friendly string.

    Args:
        items: An ordered sequence of values. Anything else (a string, a
            generator, None, ...) is returned as ``str(items)``.
        options: A mapping of options, a JoinOptions, or the name of one
            shortcut flag such as ``"oxford"``. Keys may be snake_case or the
            camelCase aliases (``quoteWith``, ``oxfordOr``, ...).
        defaults: Defaults record to resolve against instead of DEFAULTS.

    Returns:
        The joined string. Empty sequences give an empty string.

    Examples:
        >>> human_join(["apples", "oranges", "pears"])
        'apples, oranges & pears'
        >>> human_join(["apples", "oranges", "pears"], "oxford")
        'apples, oranges, and pears'
        >>> human_join(["a", "b"], {"quote_with": "<<"})
        '<<a>> & <<b>>'
    """
    if not _is_item_sequence(items):
        _LOGGER.debug("Not a sequence, returning as text: %r", items)
        return display_string(items)
    if not items:
        return ""

    config = resolve_config(options, defaults)
    strings = [_quote(display_string(item), config) for item in items]
    return _assemble(strings, config)


def human_join_preset(
    items: Any, *presets: str, defaults: JoinDefaults | None = None
) -> str:
    """Join items using named shortcut presets.

    Each preset name is treated as a shortcut flag set to True, so
    ``human_join_preset(items, "and", "or")`` behaves like
    ``human_join(items, {"and": True, "or": True})``.

    Unknown preset names are ignored.
    """
    options: dict[str, bool] = {}
    for preset in presets:
        key = canonical_key(preset) if isinstance(preset, str) else None
        if key not in OPTION_SCHEMAS or key in _BASELINE:
            _LOGGER.debug("Ignoring unknown preset %r", preset)
            continue
        options[key] = True
    return human_join(items, options, defaults=defaults)
