"""Locale resolution: map any locale tag to a plural category.

Fallback chain, first match wins:
    1. Exact tag ("pt-br")
    2. Primary language subtag ("fr-FR" -> "fr")
    3. The category bound to "en"

Python 3.13+. Zero external dependencies.
"""

from polyphrase.constants import DEFAULT_LOCALE
from polyphrase.diagnostics import ErrorTemplate, InvalidConfigurationError
from polyphrase.locale_utils import primary_subtag

from .plural_rules import DEFAULT_RULE_REGISTRY, PluralCategory, PluralCount, RuleRegistry

__all__ = ["plural_index", "resolve_plural_category"]


def resolve_plural_category(
    locale: str, rule_registry: RuleRegistry | None = None
) -> PluralCategory:
    """Return the plural category that applies to locale.

    Args:
        locale: Locale tag (case-sensitive, hyphen-separated)
        rule_registry: Registry to consult (default: built-in rule table)

    Returns:
        The matching PluralCategory; never None for the default registry

    Raises:
        InvalidConfigurationError: If a custom registry has neither a match
            for locale nor an "en" binding to fall back to

    Example:
        >>> resolve_plural_category("fr-FR").name
        'french'
        >>> resolve_plural_category("xx").name
        'german'
    """
    registry = rule_registry if rule_registry is not None else DEFAULT_RULE_REGISTRY
    name = (
        registry.category_name(locale)
        or registry.category_name(primary_subtag(locale))
        or registry.category_name(DEFAULT_LOCALE)
    )
    if name is None:
        raise InvalidConfigurationError(ErrorTemplate.fallback_locale_unbound(locale))
    return registry.category(name)


def plural_index(
    count: PluralCount, locale: str, rule_registry: RuleRegistry | None = None
) -> PluralCount:
    """Return the variant index for count under locale's plural rules."""
    return resolve_plural_category(locale, rule_registry).select(count)
