"""Constants for the human_join package."""

# Option keys
OPT_SEPARATOR = "separator"
OPT_CONJUNCTION = "conjunction"
OPT_QUOTE_WITH = "quote_with"
OPT_MIRROR_QUOTE = "mirror_quote"

# Shortcut flag keys
OPT_NO_CONJUNCTION = "no_conjunction"
OPT_AND = "and"
OPT_OR = "or"
OPT_OXFORD = "oxford"
OPT_OXFORD_AND = "oxford_and"
OPT_OXFORD_OR = "oxford_or"

# camelCase spellings accepted for option keys
OPTION_ALIASES: dict[str, str] = {
    "noConjunction": OPT_NO_CONJUNCTION,
    "quoteWith": OPT_QUOTE_WITH,
    "mirrorQuote": OPT_MIRROR_QUOTE,
    "oxfordAnd": OPT_OXFORD_AND,
    "oxfordOr": OPT_OXFORD_OR,
}

# Default values
DEFAULT_SEPARATOR = ", "
DEFAULT_CONJUNCTION = " & "
DEFAULT_MIRROR_QUOTE = True

CONJUNCTION_AND = " and "
CONJUNCTION_OR = " or "
CONJUNCTION_OXFORD_AND = ", and "
CONJUNCTION_OXFORD_OR = ", or "

# Shortcut flags in evaluation order. Every truthy flag overwrites the
# conjunction, so the last truthy one wins. None disables the conjunction.
SHORTCUT_CONJUNCTIONS: tuple[tuple[tuple[str, ...], str | None], ...] = (
    ((OPT_NO_CONJUNCTION,), None),
    ((OPT_AND,), CONJUNCTION_AND),
    ((OPT_OR,), CONJUNCTION_OR),
    ((OPT_OXFORD, OPT_OXFORD_AND), CONJUNCTION_OXFORD_AND),
    ((OPT_OXFORD_OR,), CONJUNCTION_OXFORD_OR),
)

SHORTCUT_OPTIONS: tuple[str, ...] = tuple(
    key for keys, _ in SHORTCUT_CONJUNCTIONS for key in keys
)
