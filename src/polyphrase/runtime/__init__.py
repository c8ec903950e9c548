"""Phrase runtime package.

Provides the plural rule table, locale resolution, token syntax, and the
transform_phrase() operation that combines them.

Python 3.13+.
"""

from .cldr import cldr_plural_forms, cldr_rule_registry
from .locale_resolver import plural_index, resolve_plural_category
from .plural_rules import (
    DEFAULT_RULE_REGISTRY,
    PluralCategory,
    RuleRegistry,
    build_rule_registry,
)
from .token_syntax import DEFAULT_TOKEN_SYNTAX, TokenSyntax, build_token_syntax
from .transformer import Substitutions, SubstitutionValue, transform_phrase

__all__ = [
    "DEFAULT_RULE_REGISTRY",
    "DEFAULT_TOKEN_SYNTAX",
    "PluralCategory",
    "RuleRegistry",
    "SubstitutionValue",
    "Substitutions",
    "TokenSyntax",
    "build_rule_registry",
    "build_token_syntax",
    "cldr_plural_forms",
    "cldr_rule_registry",
    "plural_index",
    "resolve_plural_category",
    "transform_phrase",
]
