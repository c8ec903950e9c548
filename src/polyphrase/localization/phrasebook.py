"""PhraseBook - phrase dictionary and lookup API.

Owns the key -> template dictionary and the per-instance configuration
(locale, token syntax, plural rules, missing-key policy). Every lookup
delegates the template to transform_phrase().

Python 3.13+. Optional Babel integration (locale may be a babel.Locale).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from polyphrase.constants import DEFAULT_LOCALE, DEFAULT_PHRASE_KEY
from polyphrase.diagnostics import ErrorTemplate
from polyphrase.locale_utils import locale_tag
from polyphrase.runtime.plural_rules import DEFAULT_RULE_REGISTRY, RuleRegistry
from polyphrase.runtime.rwlock import RWLock
from polyphrase.runtime.token_syntax import TokenSyntax, build_token_syntax
from polyphrase.runtime.transformer import Substitutions, transform_phrase

from .phrases import iter_phrases, prefixed_key

if TYPE_CHECKING:
    from babel import Locale

    from .types import LocaleCode, MissingKeyHandler, PhraseKey, PhraseTree, WarnHandler

__all__ = ["PhraseBook"]

logger = logging.getLogger(__name__)


class PhraseBook:
    """Phrase dictionary with pluralization and interpolation.

    Thread Safety:
        Lookups run concurrently; extend(), unset(), clear(), replace() and
        locale changes are serialized against them with a readers-writer
        lock. Missing-key handlers and warn callables run outside the lock,
        so they may call back into the book.

    Examples:
        >>> book = PhraseBook({
        ...     "hello_name": "Hello, %{name}!",
        ...     "num_cars": "%{smart_count} car |||| %{smart_count} cars",
        ... })
        >>> book.t("hello_name", {"name": "Spike"})
        'Hello, Spike!'
        >>> book.t("num_cars", 2)
        '2 cars'
        >>> book.t("missing", {"_": "Default %{x}", "x": 1})
        'Default 1'
    """

    __slots__ = (
        "_locale",
        "_lock",
        "_on_missing_key",
        "_phrases",
        "_rule_registry",
        "_token_syntax",
        "_warn",
    )

    def __init__(
        self,
        phrases: PhraseTree | None = None,
        *,
        locale: LocaleCode | Locale | None = None,
        allow_missing: bool = False,
        on_missing_key: MissingKeyHandler | None = None,
        interpolation: TokenSyntax | Mapping[str, str] | None = None,
        plural_rules: RuleRegistry | None = None,
        warn: WarnHandler | None = None,
    ) -> None:
        """Initialize phrase book.

        Args:
            phrases: Initial phrases, possibly nested
            locale: Locale tag or babel.Locale for plural rules (default: "en")
            allow_missing: Transform the key itself when no phrase exists
            on_missing_key: Handler for unknown keys; overrides allow_missing
            interpolation: TokenSyntax, or mapping with "prefix"/"suffix"
                          (default: "%{" and "}")
            plural_rules: Custom RuleRegistry replacing the built-in table
            warn: Called with a message for unknown keys when no handler
                  applies (default: log a warning)

        Raises:
            InvalidConfigurationError: If interpolation prefix or suffix is "||||"

        Example:
            >>> book = PhraseBook({}, interpolation={"prefix": "{{", "suffix": "}}"})
            >>> book = PhraseBook({"n": "..."}, locale="ru", allow_missing=True)
        """
        self._token_syntax = build_token_syntax(interpolation)
        self._rule_registry = plural_rules if plural_rules is not None else DEFAULT_RULE_REGISTRY
        self._locale: LocaleCode = locale_tag(locale) if locale else DEFAULT_LOCALE
        if on_missing_key is not None:
            self._on_missing_key: MissingKeyHandler | None = on_missing_key
        else:
            self._on_missing_key = transform_phrase if allow_missing else None
        self._warn = warn
        self._phrases: dict[PhraseKey, object] = {}
        self._lock = RWLock()

        if phrases:
            self.extend(phrases)

        logger.info(
            "PhraseBook initialized for locale: %s (%d phrases, token syntax %s...%s)",
            self._locale,
            len(self._phrases),
            self._token_syntax.prefix,
            self._token_syntax.suffix,
        )

    transform_phrase = staticmethod(transform_phrase)

    @property
    def locale(self) -> LocaleCode:
        """Locale tag used for plural rules.

        Accepts a tag or a babel.Locale on assignment.

        Raises:
            ValueError: If assigned an empty locale

        Example:
            >>> book = PhraseBook()
            >>> book.locale
            'en'
            >>> book.locale = "fr"
            >>> book.locale
            'fr'
        """
        return self._locale

    @locale.setter
    def locale(self, new_locale: LocaleCode | Locale) -> None:
        if not new_locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        with self._lock.write():
            self._locale = locale_tag(new_locale)

    @property
    def phrases(self) -> Mapping[PhraseKey, object]:
        """Read-only snapshot of the flat phrase dictionary."""
        with self._lock.read():
            return MappingProxyType(dict(self._phrases))

    @property
    def token_syntax(self) -> TokenSyntax:
        """Placeholder delimiters used by t()."""
        return self._token_syntax

    @property
    def plural_rules(self) -> RuleRegistry:
        """Plural rule registry used by t()."""
        return self._rule_registry

    def extend(self, phrases: PhraseTree, prefix: str | None = None) -> None:
        """Add phrases, overriding existing keys and keeping all others.

        Nested mappings are flattened with '.'; prefix is prepended to
        every key the same way.

        Example:
            >>> book = PhraseBook()
            >>> book.extend({"nav": {"hello": "Hello"}})
            >>> book.extend({"click": "Click"}, "sidebar")
            >>> sorted(book.phrases)
            ['nav.hello', 'sidebar.click']
        """
        flat = dict(iter_phrases(phrases, prefix))
        with self._lock.write():
            self._phrases.update(flat)
        logger.debug("Extended phrase book with %d phrases", len(flat))

    def unset(self, phrases: PhraseTree | PhraseKey, prefix: str | None = None) -> None:
        """Remove one key, or every key named by a (nested) phrase mapping.

        Only the keys of a mapping matter; its values are ignored except
        for nesting. Unknown keys are skipped.

        Example:
            >>> book = PhraseBook({"a": "A", "b": {"c": "C"}})
            >>> book.unset("a")
            >>> book.unset({"b": {"c": ""}})
            >>> book.has("b.c")
            False
        """
        if isinstance(phrases, str):
            keys = [prefixed_key(phrases, prefix)]
        else:
            keys = [key for key, _ in iter_phrases(phrases, prefix)]
        with self._lock.write():
            for key in keys:
                self._phrases.pop(key, None)
        logger.debug("Unset %d phrase keys", len(keys))

    def clear(self) -> None:
        """Remove all phrases."""
        with self._lock.write():
            self._phrases.clear()
        logger.debug("Phrase book cleared")

    def replace(self, phrases: PhraseTree) -> None:
        """Replace all phrases with a new set."""
        flat = dict(iter_phrases(phrases))
        with self._lock.write():
            self._phrases = flat
        logger.debug("Phrase book replaced with %d phrases", len(flat))

    def has(self, key: PhraseKey) -> bool:
        """Return True if a phrase is stored under key."""
        with self._lock.read():
            return self._phrases.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._phrases)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> PhraseBook({"a": "A"}, locale="fr")
            PhraseBook(locale='fr', phrases=1)
        """
        return f"PhraseBook(locale={self._locale!r}, phrases={len(self)})"

    def t(self, key: PhraseKey, substitutions: Substitutions | None = None) -> str:
        """Translate key.

        Resolution order:
            1. Phrase stored under key (a string, possibly empty)
            2. substitutions["_"] when it is a string
            3. on_missing_key(key, substitutions, locale, token_syntax, plural_rules)
            4. warn about the missing key and return key unchanged

        Args:
            key: Phrase key (nested keys joined with '.')
            substitutions: Bare number (smart_count) or mapping of placeholder values

        Returns:
            Translated, pluralized and interpolated text

        Raises:
            InvalidArgumentError: If substitutions or its smart_count is unusable

        Example:
            >>> book = PhraseBook({"hi": "Hi, %{name}"})
            >>> book.t("hi", {"name": "Raph"})
            'Hi, Raph'
            >>> book.t("nope")
            'nope'
        """
        options: Substitutions = {} if substitutions is None else substitutions
        with self._lock.read():
            phrase = self._phrases.get(key)
            locale = self._locale

        if not isinstance(phrase, str):
            fallback = options.get(DEFAULT_PHRASE_KEY) if isinstance(options, Mapping) else None
            if isinstance(fallback, str):
                phrase = fallback
            elif self._on_missing_key is not None:
                return self._on_missing_key(
                    key, options, locale, self._token_syntax, self._rule_registry
                )
            else:
                self._report_missing(key)
                return key

        return transform_phrase(phrase, options, locale, self._token_syntax, self._rule_registry)

    def _report_missing(self, key: PhraseKey) -> None:
        message = ErrorTemplate.translation_missing(key).message
        if self._warn is not None:
            self._warn(message)
        else:
            logger.warning(message)
