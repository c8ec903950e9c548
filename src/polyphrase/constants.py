"""Shared constants for polyphrase.

Centralizes the fixed syntax of phrase templates and the defaults used
when a caller does not configure them. Placing constants here avoids
circular imports between the runtime and localization packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "PLURAL_DELIMITER",
    "DEFAULT_TOKEN_PREFIX",
    "DEFAULT_TOKEN_SUFFIX",
    # Substitution keys
    "SMART_COUNT_KEY",
    "DEFAULT_PHRASE_KEY",
    # Locale defaults
    "DEFAULT_LOCALE",
    "LOCALE_SUBTAG_SEPARATOR",
    # Phrase dictionary
    "KEY_PATH_SEPARATOR",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Separates the plural variants of a phrase template. Never configurable:
# token syntax construction rejects a prefix or suffix equal to it.
PLURAL_DELIMITER: str = "||||"

# Default placeholder delimiters: "%{name}".
DEFAULT_TOKEN_PREFIX: str = "%{"
DEFAULT_TOKEN_SUFFIX: str = "}"

# ============================================================================
# SUBSTITUTION KEYS
# ============================================================================

# Drives plural variant selection; also interpolated like any other key.
SMART_COUNT_KEY: str = "smart_count"

# Fallback template used by PhraseBook.t() when the key has no phrase.
DEFAULT_PHRASE_KEY: str = "_"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Last step of the locale fallback chain, and the locale used when none is given.
DEFAULT_LOCALE: str = "en"

# BCP-47 subtag separator; only the first split matters for fallback.
LOCALE_SUBTAG_SEPARATOR: str = "-"

# ============================================================================
# PHRASE DICTIONARY
# ============================================================================

# Joins nested phrase keys: {"nav": {"hello": ...}} -> "nav.hello".
KEY_PATH_SEPARATOR: str = "."
