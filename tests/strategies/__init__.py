"""Hypothesis strategies for polyphrase property-based testing.

Usage:
    from tests.strategies import counts, locale_tags, placeholder_names
"""

from .phrases import (
    KNOWN_LOCALES,
    counts,
    fractional_counts,
    locale_tags,
    placeholder_names,
    plain_text,
    plural_templates,
    token_delimiters,
)

__all__ = [
    "KNOWN_LOCALES",
    "counts",
    "fractional_counts",
    "locale_tags",
    "placeholder_names",
    "plain_text",
    "plural_templates",
    "token_delimiters",
]
