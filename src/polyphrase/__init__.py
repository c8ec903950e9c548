"""polyphrase - locale-aware phrase lookup, pluralization and interpolation.

Resolves translation keys to phrase templates, picks the plural variant a
locale needs for a count, and fills in named placeholders.

Public API:
    PhraseBook - Phrase dictionary with t() lookup
    transform_phrase - Pluralize and interpolate a single template
    TokenSyntax - Custom placeholder delimiters
    build_rule_registry - Custom plural rule tables
    cldr_rule_registry - Plural rule tables from Babel's CLDR data

Exceptions:
    PhraseError - Base exception class
    InvalidArgumentError - Unusable argument to transform_phrase
    InvalidConfigurationError - Unusable token syntax or rule registry

Submodules:
    polyphrase.runtime - Plural rules, locale resolution, token syntax, transform
    polyphrase.localization - PhraseBook and phrase flattening
    polyphrase.diagnostics - Error types and structured diagnostics
"""

from .diagnostics import InvalidArgumentError, InvalidConfigurationError, PhraseError
from .localization import PhraseBook
from .runtime import (
    DEFAULT_RULE_REGISTRY,
    PluralCategory,
    RuleRegistry,
    TokenSyntax,
    build_rule_registry,
    cldr_rule_registry,
    resolve_plural_category,
    transform_phrase,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("polyphrase")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_RULE_REGISTRY",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "PhraseBook",
    "PhraseError",
    "PluralCategory",
    "RuleRegistry",
    "TokenSyntax",
    "__version__",
    "build_rule_registry",
    "cldr_rule_registry",
    "resolve_plural_category",
    "transform_phrase",
]
