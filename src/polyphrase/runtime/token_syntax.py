"""Interpolation token syntax.

A TokenSyntax is the literal prefix/suffix pair around a placeholder name,
compiled once into a regular expression. Prefix and suffix are escaped, so
any literal text works as a delimiter, including regex metacharacters.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from polyphrase.constants import DEFAULT_TOKEN_PREFIX, DEFAULT_TOKEN_SUFFIX, PLURAL_DELIMITER
from polyphrase.diagnostics import ErrorTemplate, InvalidConfigurationError

__all__ = ["DEFAULT_TOKEN_SYNTAX", "TokenSyntax", "build_token_syntax"]


@dataclass(frozen=True, slots=True)
class TokenSyntax:
    """Placeholder delimiters plus their compiled matcher.

    Empty prefix or suffix fall back to the defaults ("%{" and "}").

    Attributes:
        prefix: Literal text opening a placeholder
        suffix: Literal text closing a placeholder
        pattern: Compiled non-greedy matcher; group 1 is the placeholder name

    Raises:
        InvalidConfigurationError: If prefix or suffix equals "||||"

    Example:
        >>> syntax = TokenSyntax("{{", "}}")
        >>> syntax.pattern.findall("Hi {{name}}, {{place}}")
        ['name', 'place']
    """

    prefix: str = DEFAULT_TOKEN_PREFIX
    suffix: str = DEFAULT_TOKEN_SUFFIX
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        prefix = self.prefix or DEFAULT_TOKEN_PREFIX
        suffix = self.suffix or DEFAULT_TOKEN_SUFFIX
        if prefix == PLURAL_DELIMITER:
            raise InvalidConfigurationError(ErrorTemplate.token_reserved("prefix"))
        if suffix == PLURAL_DELIMITER:
            raise InvalidConfigurationError(ErrorTemplate.token_reserved("suffix"))
        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "suffix", suffix)
        object.__setattr__(
            self, "pattern", re.compile(re.escape(prefix) + "(.*?)" + re.escape(suffix))
        )


DEFAULT_TOKEN_SYNTAX: TokenSyntax = TokenSyntax()


def build_token_syntax(
    interpolation: TokenSyntax | Mapping[str, str] | None = None,
) -> TokenSyntax:
    """Build a TokenSyntax from constructor-style options.

    Args:
        interpolation: Existing TokenSyntax, a mapping with optional "prefix"
            and "suffix" keys, or None for the default syntax

    Returns:
        Compiled TokenSyntax

    Raises:
        InvalidConfigurationError: If prefix or suffix equals "||||"
    """
    if interpolation is None:
        return DEFAULT_TOKEN_SYNTAX
    if isinstance(interpolation, TokenSyntax):
        return interpolation
    return TokenSyntax(
        prefix=interpolation.get("prefix") or DEFAULT_TOKEN_PREFIX,
        suffix=interpolation.get("suffix") or DEFAULT_TOKEN_SUFFIX,
    )
