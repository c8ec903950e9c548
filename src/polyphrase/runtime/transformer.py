"""Phrase transformation: plural variant selection plus interpolation.

transform_phrase() is a pure function of its inputs. Token syntax and rule
registry are immutable, so concurrent calls need no locking.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import TypeAlias

from polyphrase.constants import DEFAULT_LOCALE, PLURAL_DELIMITER, SMART_COUNT_KEY
from polyphrase.diagnostics import ErrorTemplate, InvalidArgumentError

from .locale_resolver import plural_index
from .plural_rules import PluralCount, RuleRegistry
from .token_syntax import DEFAULT_TOKEN_SYNTAX, TokenSyntax

__all__ = ["SubstitutionValue", "Substitutions", "transform_phrase"]

_NAN = float("nan")

SubstitutionValue: TypeAlias = str | int | float | Decimal | None
"""Value interpolated into a placeholder; None leaves the placeholder as-is."""

Substitutions: TypeAlias = int | float | Decimal | Mapping[str, SubstitutionValue]
"""Bare number (shorthand for {"smart_count": n}) or name -> value mapping."""


def _is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _coerce_count(value: object) -> PluralCount:
    """Return smart_count as a number for plural selection.

    Numeric strings are parsed and booleans count as 0 or 1. Non-finite
    Decimals become floats so selectors compare them without signalling.
    Anything else becomes NaN, which fails every rule comparison.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Decimal):
        if value.is_finite():
            return value
        return _NAN if value.is_nan() else float(value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        for parse in (int, float):
            try:
                return parse(value)
            except ValueError:
                continue
    return _NAN


def _pick_variant(variants: list[str], index: PluralCount) -> str:
    """Return variants[index], or variants[0] for unusable indices or empty text."""
    try:
        position = int(index)
    except (OverflowError, ValueError):
        return variants[0]
    if position == index and 0 <= position < len(variants) and variants[position]:
        return variants[position]
    return variants[0]


def transform_phrase(
    template: str,
    substitutions: Substitutions | None = None,
    locale: str | None = None,
    token_syntax: TokenSyntax | None = None,
    rule_registry: RuleRegistry | None = None,
) -> str:
    """Choose the plural variant of template and interpolate substitutions.

    Plural selection happens only when substitutions carries a smart_count
    (or is a bare number). The template is then split on "||||", the
    variant for the locale's plural category is chosen and stripped of
    surrounding whitespace. An index the template has no variant for
    selects the first variant.

    A smart_count that is not a number is parsed when it is a numeric
    string; otherwise it selects like NaN and never raises.

    Placeholders whose name is missing from substitutions, or maps to None,
    are left verbatim. Other values are rendered with str(), so 2.0 renders
    as "2.0" and True as "True". Substituted values are not escaped and not
    rescanned.

    Args:
        template: Phrase template text
        substitutions: Bare number or mapping of placeholder values;
            None returns template unchanged
        locale: Locale tag for plural rules (default: "en")
        token_syntax: Placeholder delimiters (default: "%{" and "}")
        rule_registry: Plural rules (default: built-in rule table)

    Returns:
        Transformed text

    Raises:
        InvalidArgumentError: If template is not a string, or substitutions
            is neither a number nor a mapping

    Example:
        >>> transform_phrase("Hello, %{name}!", {"name": "Spike"})
        'Hello, Spike!'
        >>> phrase = "%{smart_count} new message |||| %{smart_count} new messages"
        >>> transform_phrase(phrase, 1, "en")
        '1 new message'
        >>> transform_phrase(phrase, {"smart_count": 5}, "en")
        '5 new messages'
    """
    if not isinstance(template, str):
        raise InvalidArgumentError(ErrorTemplate.template_not_string(template))

    if substitutions is None:
        return template

    if _is_number(substitutions):
        options: Mapping[str, SubstitutionValue] = {SMART_COUNT_KEY: substitutions}  # type: ignore[dict-item]
    elif isinstance(substitutions, Mapping):
        options = substitutions
    else:
        raise InvalidArgumentError(ErrorTemplate.substitutions_invalid(substitutions))

    result = template
    smart_count = options.get(SMART_COUNT_KEY)
    if smart_count is not None and result:
        count = _coerce_count(smart_count)
        variants = result.split(PLURAL_DELIMITER)
        index = plural_index(count, locale or DEFAULT_LOCALE, rule_registry)
        result = _pick_variant(variants, index).strip()

    syntax = token_syntax if token_syntax is not None else DEFAULT_TOKEN_SYNTAX

    def _interpolate(match: re.Match[str]) -> str:
        value = options.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return syntax.pattern.sub(_interpolate, result)
