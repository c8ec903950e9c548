"""Plural rule table: category selectors and the locales that use them.

Each plural category is a pure function from a count to a zero-based
variant index. Locale bindings name the locale tags that use each
category; together they form a RuleRegistry with a reverse index from
locale tag to category.

The selectors use truncated remainder arithmetic (the sign of the result
follows the count), so fractional and negative counts go through the same
rules as integers without special-casing.

Python 3.13+. Zero external dependencies.

Reference: http://docs.translatehouse.org/projects/localization-guide/en/latest/l10n/pluralforms.html
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import TypeAlias

from polyphrase.constants import DEFAULT_LOCALE
from polyphrase.diagnostics import ErrorTemplate, InvalidConfigurationError

__all__ = [
    "DEFAULT_LOCALE_BINDINGS",
    "DEFAULT_PLURAL_SELECTORS",
    "DEFAULT_RULE_REGISTRY",
    "PluralCategory",
    "PluralCount",
    "RuleRegistry",
    "Selector",
    "build_rule_registry",
]

logger = logging.getLogger(__name__)

PluralCount: TypeAlias = int | float | Decimal
"""Numeric smart_count value accepted by plural selectors."""

Selector: TypeAlias = Callable[[PluralCount], PluralCount]
"""Plural selector: count -> variant index (an integral value)."""


def _rem(n: PluralCount, m: int) -> PluralCount:
    """Remainder with the sign of the dividend."""
    if n < 0:
        return -_rem(-n, m)
    if isinstance(n, Decimal) and n >= m:
        return _decimal_rem(n, m)
    return n % m


def _decimal_rem(n: Decimal, m: int) -> Decimal:
    """n % m for finite n >= m of any magnitude, computed on the coefficient."""
    _, digits, raw_exponent = n.as_tuple()
    exponent = int(raw_exponent)
    coefficient = int("".join(map(str, digits)))
    if exponent >= 0:
        return Decimal(coefficient % m * pow(10, exponent, m) % m)
    scale = 10**-exponent
    return Decimal(coefficient % (m * scale)).scaleb(exponent)


# ============================================================================
# CATEGORY SELECTORS
# ============================================================================


def _arabic(n: PluralCount) -> PluralCount:
    # http://www.arabeyes.org/Plural_Forms
    if n < 3:
        return n
    last_two = _rem(n, 100)
    if 3 <= last_two <= 10:
        return 3
    return 4 if last_two >= 11 else 5


def _slavic(n: PluralCount) -> int:
    last_two = _rem(n, 100)
    end = _rem(last_two, 10)
    if last_two != 11 and end == 1:
        return 0
    if 2 <= end <= 4 and not 12 <= last_two <= 14:
        return 1
    return 2


def _chinese(n: PluralCount) -> int:  # noqa: ARG001 - single form
    return 0


def _french(n: PluralCount) -> int:
    return 1 if n >= 2 else 0


def _german(n: PluralCount) -> int:
    return 1 if n != 1 else 0


def _lithuanian(n: PluralCount) -> int:
    end = _rem(n, 10)
    last_two = _rem(n, 100)
    if end == 1 and last_two != 11:
        return 0
    return 1 if 2 <= end <= 9 and (last_two < 11 or last_two > 19) else 2


def _czech(n: PluralCount) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _polish(n: PluralCount) -> int:
    if n == 1:
        return 0
    end = _rem(n, 10)
    last_two = _rem(n, 100)
    return 1 if 2 <= end <= 4 and (last_two < 10 or last_two >= 20) else 2


def _icelandic(n: PluralCount) -> int:
    return 1 if _rem(n, 10) != 1 or _rem(n, 100) == 11 else 0


def _slovenian(n: PluralCount) -> int:
    last_two = _rem(n, 100)
    if last_two == 1:
        return 0
    if last_two == 2:
        return 1
    if last_two in (3, 4):
        return 2
    return 3


DEFAULT_PLURAL_SELECTORS: Mapping[str, Selector] = MappingProxyType({
    "arabic": _arabic,
    "bosnian_serbian": _slavic,
    "chinese": _chinese,
    "croatian": _slavic,
    "french": _french,
    "german": _german,
    "russian": _slavic,
    "lithuanian": _lithuanian,
    "czech": _czech,
    "polish": _polish,
    "icelandic": _icelandic,
    "slovenian": _slovenian,
})

# Exact, case-sensitive tags. Lookup falls back to the primary subtag, then "en".
DEFAULT_LOCALE_BINDINGS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "arabic": ("ar",),
    "bosnian_serbian": ("bs-Latn-BA", "bs-Cyrl-BA", "srl-RS", "sr-RS"),
    "chinese": ("id", "id-ID", "ja", "ko", "ko-KR", "lo", "ms", "th", "th-TH", "zh"),
    "croatian": ("hr", "hr-HR"),
    "german": (
        "fa", "da", "de", "en", "es", "fi", "el", "he", "hi-IN",
        "hu", "hu-HU", "it", "nl", "no", "pt", "sv", "tr",
    ),
    "french": ("fr", "tl", "pt-br"),
    "russian": ("ru", "ru-RU"),
    "lithuanian": ("lt",),
    "czech": ("cs", "cs-CZ", "sk"),
    "polish": ("pl",),
    "icelandic": ("is",),
    "slovenian": ("sl-SL",),
})


# ============================================================================
# REGISTRY
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralCategory:
    """Named plural rule shared by a group of locales.

    Attributes:
        name: Category identifier (e.g. "russian")
        selector: Pure function mapping a count to a variant index
    """

    name: str
    selector: Selector

    def select(self, count: PluralCount) -> PluralCount:
        """Return the variant index for count."""
        return self.selector(count)


@dataclass(frozen=True, slots=True, eq=False)
class RuleRegistry:
    """Immutable set of plural categories plus a locale -> category index.

    Build with build_rule_registry(); do not construct directly.

    Attributes:
        categories: Category identifier -> PluralCategory
        locale_bindings: Category identifier -> locale tags, in given order
        locale_index: Locale tag -> category identifier
    """

    categories: Mapping[str, PluralCategory]
    locale_bindings: Mapping[str, tuple[str, ...]]
    locale_index: Mapping[str, str]

    def category_name(self, locale: str) -> str | None:
        """Return the category bound to exactly this tag, or None."""
        return self.locale_index.get(locale)

    def category(self, name: str) -> PluralCategory:
        """Return the category with this identifier.

        Raises:
            KeyError: If no such category exists
        """
        return self.categories[name]

    @property
    def locales(self) -> frozenset[str]:
        """All locale tags with an exact binding."""
        return frozenset(self.locale_index)


def build_rule_registry(
    categories: Mapping[str, Selector | PluralCategory],
    locale_bindings: Mapping[str, Iterable[str]],
) -> RuleRegistry:
    """Build an immutable RuleRegistry.

    A custom registry replaces the default one entirely; nothing is merged.

    Args:
        categories: Category identifier -> selector function (or PluralCategory)
        locale_bindings: Category identifier -> locale tags using that category

    Returns:
        RuleRegistry with a reverse locale index

    Raises:
        InvalidConfigurationError: If a selector is not callable or a binding
            names a category that is not defined

    Example:
        >>> registry = build_rule_registry(
        ...     {"one_other": lambda n: 0 if n == 1 else 1},
        ...     {"one_other": ["en", "x1"]},
        ... )
        >>> registry.category_name("x1")
        'one_other'
    """
    built: dict[str, PluralCategory] = {}
    for name, selector in categories.items():
        if isinstance(selector, PluralCategory):
            built[name] = selector
            continue
        if not callable(selector):
            raise InvalidConfigurationError(ErrorTemplate.selector_not_callable(name, selector))
        built[name] = PluralCategory(name=name, selector=selector)

    bindings: dict[str, tuple[str, ...]] = {}
    index: dict[str, str] = {}
    for name, locales in locale_bindings.items():
        if name not in built:
            raise InvalidConfigurationError(ErrorTemplate.category_undefined(name))
        bindings[name] = tuple(locales)
        for locale in bindings[name]:
            previous = index.get(locale)
            if previous is not None and previous != name:
                logger.warning(ErrorTemplate.locale_bound_twice(locale, previous, name).message)
            index[locale] = name

    if DEFAULT_LOCALE not in index:
        logger.debug(
            "Rule registry has no '%s' binding; unmatched locales will fail to resolve",
            DEFAULT_LOCALE,
        )

    logger.debug(
        "Rule registry built: %d categories, %d locale tags", len(built), len(index)
    )
    return RuleRegistry(
        categories=MappingProxyType(built),
        locale_bindings=MappingProxyType(bindings),
        locale_index=MappingProxyType(index),
    )


DEFAULT_RULE_REGISTRY: RuleRegistry = build_rule_registry(
    DEFAULT_PLURAL_SELECTORS, DEFAULT_LOCALE_BINDINGS
)
