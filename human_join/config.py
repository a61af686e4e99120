"""Configuration dataclasses and the shared defaults record."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from .const import DEFAULT_CONJUNCTION, DEFAULT_MIRROR_QUOTE, DEFAULT_SEPARATOR


class Sentinel(Enum):
    """Non-text option kinds."""

    UNSET = "unset"
    DISABLED = "disabled"

    def __repr__(self) -> str:
        return self.name


UNSET = Sentinel.UNSET
DISABLED = Sentinel.DISABLED

# A text option is literal text, explicitly disabled, or not given at all
TextOption = str | Sentinel
FlagOption = bool | Sentinel


@dataclass
class JoinDefaults:
    """Mutable defaults read by every join call that uses this record.

    Fields accept the same values as per-call options. A field set to
    something unusable falls back to the baseline value.
    """

    separator: Any = DEFAULT_SEPARATOR
    conjunction: Any = DEFAULT_CONJUNCTION
    quote_with: Any = DISABLED
    mirror_quote: Any = DEFAULT_MIRROR_QUOTE


@dataclass
class JoinOptions:
    """Per-call options. Fields left as UNSET fall through to the defaults."""

    separator: Any = UNSET
    conjunction: Any = UNSET
    quote_with: Any = UNSET
    mirror_quote: Any = UNSET
    no_conjunction: Any = UNSET
    and_: Any = UNSET
    or_: Any = UNSET
    oxford: Any = UNSET
    oxford_and: Any = UNSET
    oxford_or: Any = UNSET

    def as_dict(self) -> dict[str, Any]:
        """Return the options that were set, keyed by option name."""
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not UNSET:
                result[item.name.rstrip("_")] = value
        return result


@dataclass(frozen=True)
class JoinConfig:
    """Fully resolved configuration for a single join."""

    separator: str = DEFAULT_SEPARATOR
    conjunction: str | None = DEFAULT_CONJUNCTION
    quote_with: str | None = None
    mirror_quote: bool = DEFAULT_MIRROR_QUOTE


def create_defaults() -> JoinDefaults:
    """Return a new defaults record holding the baseline values."""
    return JoinDefaults()


def reset_defaults(defaults: JoinDefaults | None = None) -> JoinDefaults:
    """Restore baseline values on a defaults record in place.

    Args:
        defaults: Record to reset. The process-wide DEFAULTS when omitted.

    Returns:
        The reset record.
    """
    record = DEFAULTS if defaults is None else defaults
    baseline = JoinDefaults()
    for item in fields(baseline):
        setattr(record, item.name, getattr(baseline, item.name))
    return record


# Process-wide defaults. Not locked; callers mutating it from several
# threads must synchronize themselves.
DEFAULTS = JoinDefaults()
