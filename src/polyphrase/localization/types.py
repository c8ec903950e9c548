"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from polyphrase.runtime.plural_rules import RuleRegistry
from polyphrase.runtime.token_syntax import TokenSyntax
from polyphrase.runtime.transformer import Substitutions

__all__ = [
    "LocaleCode",
    "MissingKeyHandler",
    "PhraseKey",
    "PhraseTree",
    "WarnHandler",
]

PhraseKey: TypeAlias = str
"""Flat phrase key; nested keys are joined with '.' (e.g. 'nav.sign_in')."""

LocaleCode: TypeAlias = str
"""Locale tag used for plural rules (e.g. 'en', 'fr-FR', 'bs-Latn-BA')."""

PhraseTree: TypeAlias = Mapping[str, Any]
"""Phrase dictionary whose values are templates or nested PhraseTrees."""

MissingKeyHandler: TypeAlias = Callable[
    [PhraseKey, Substitutions, LocaleCode, TokenSyntax, RuleRegistry], str
]
"""Called by PhraseBook.t() for unknown keys; the return value is the translation."""

WarnHandler: TypeAlias = Callable[[str], object]
"""Receives the warning message for an unknown key when no handler is set."""
