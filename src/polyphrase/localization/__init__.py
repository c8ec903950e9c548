"""Phrase dictionary package.

Provides PhraseBook (key lookup, nested-key flattening, default phrases,
missing-key policy) on top of the runtime transform.

Submodules:
    types      - PEP 695 type aliases (PhraseKey, LocaleCode, PhraseTree, ...)
    phrases    - Nested phrase mapping flattening
    phrasebook - PhraseBook

Python 3.13+.
"""

from polyphrase.localization.phrasebook import PhraseBook
from polyphrase.localization.phrases import iter_phrases, prefixed_key
from polyphrase.localization.types import (
    LocaleCode,
    MissingKeyHandler,
    PhraseKey,
    PhraseTree,
    WarnHandler,
)

__all__ = [
    "LocaleCode",
    "MissingKeyHandler",
    "PhraseBook",
    "PhraseKey",
    "PhraseTree",
    "WarnHandler",
    "iter_phrases",
    "prefixed_key",
]
