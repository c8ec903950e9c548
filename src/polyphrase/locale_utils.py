"""Locale tag utilities.

Plural category lookup works on the caller's locale tags verbatim
(case-sensitive, hyphen-separated). Babel is only consulted when a caller
hands in a ``babel.Locale`` or asks for CLDR-derived rules.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from polyphrase.constants import LOCALE_SUBTAG_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "locale_tag",
    "normalize_locale",
    "primary_subtag",
]


def primary_subtag(tag: str) -> str:
    """Return the language part of a locale tag.

    Splits on the first hyphen only; underscores are not separators here.

    Example:
        >>> primary_subtag("fr-FR")
        'fr'
        >>> primary_subtag("bs-Latn-BA")
        'bs'
        >>> primary_subtag("en")
        'en'
    """
    return tag.split(LOCALE_SUBTAG_SEPARATOR, 1)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


def locale_tag(locale: str | Locale) -> str:
    """Return a hyphen-separated locale tag for a string or Babel Locale.

    Strings are returned unchanged. Babel ``Locale`` objects are rendered as
    ``language[-script][-territory][-variant]``, e.g. ``Locale("pt", "BR")``
    becomes ``"pt-BR"``.
    """
    if isinstance(locale, str):
        return locale
    parts = (locale.language, locale.script, locale.territory, locale.variant)
    return LOCALE_SUBTAG_SEPARATOR.join(part for part in parts if part)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop cached Babel Locale objects."""
    get_babel_locale.cache_clear()
