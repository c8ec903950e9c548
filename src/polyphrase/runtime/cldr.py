"""CLDR plural rules from Babel, packaged as a RuleRegistry.

The built-in rule table covers a fixed set of locales. cldr_rule_registry()
builds a replacement registry for any locales Babel knows, with one
category per requested tag. Variant order follows the CLDR category order
(zero, one, two, few, many, other) restricted to the categories the locale
actually uses, so a Russian template is "one |||| few |||| many |||| other".

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Iterable

from babel.core import UnknownLocaleError

from polyphrase.constants import DEFAULT_LOCALE
from polyphrase.diagnostics import ErrorTemplate, InvalidConfigurationError
from polyphrase.locale_utils import get_babel_locale

from .plural_rules import PluralCategory, PluralCount, RuleRegistry, build_rule_registry

__all__ = ["CLDR_CATEGORY_ORDER", "cldr_plural_forms", "cldr_rule_registry"]

CLDR_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")


def cldr_plural_forms(locale: str) -> tuple[str, ...]:
    """Return the CLDR categories locale uses, in variant order.

    Raises:
        InvalidConfigurationError: If Babel does not know the locale

    Example:
        >>> cldr_plural_forms("en")
        ('one', 'other')
        >>> cldr_plural_forms("ru")
        ('one', 'few', 'many', 'other')
    """
    try:
        rule = get_babel_locale(locale).plural_form
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidConfigurationError(ErrorTemplate.locale_unknown(locale, str(e))) from e
    tags = rule.tags | {"other"}
    return tuple(tag for tag in CLDR_CATEGORY_ORDER if tag in tags)


def _cldr_category(locale: str) -> PluralCategory:
    forms = cldr_plural_forms(locale)
    rule = get_babel_locale(locale).plural_form

    def select(n: PluralCount) -> int:
        return forms.index(rule(n))

    return PluralCategory(name=locale, selector=select)


def cldr_rule_registry(locales: Iterable[str]) -> RuleRegistry:
    """Build a RuleRegistry from Babel's CLDR plural rules.

    "en" is always bound so unmatched locales still resolve.

    Args:
        locales: Locale tags (BCP-47 or POSIX) to build categories for

    Returns:
        RuleRegistry with one category per tag, named after the tag

    Raises:
        InvalidConfigurationError: If Babel does not know one of the locales

    Example:
        >>> registry = cldr_rule_registry(["uk", "lv"])
        >>> transform_phrase("%{smart_count} zero |||| one |||| other", 10, "lv", rule_registry=registry)
        '10 zero'
    """
    tags = list(dict.fromkeys(locales))
    if DEFAULT_LOCALE not in tags:
        tags.append(DEFAULT_LOCALE)

    categories = {tag: _cldr_category(tag) for tag in tags}
    return build_rule_registry(categories, {tag: (tag,) for tag in tags})
