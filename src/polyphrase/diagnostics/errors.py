"""Phrase exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
The concrete errors also derive from the matching builtin (TypeError,
ValueError) so callers can catch them without importing this package.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "PhraseError",
]


class PhraseError(Exception):
    """Base exception for all polyphrase errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PhraseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(PhraseError, TypeError):
    """A value passed to transform_phrase cannot be used.

    Raised before any other processing, e.g. for a template that is not
    a string. Not recoverable locally.
    """


class InvalidConfigurationError(PhraseError, ValueError):
    """Configuration that cannot produce a usable transformer.

    Examples:
    - Token prefix or suffix equal to the "||||" plural delimiter
    - Locale binding that names an undefined plural category
    - Rule registry with no match for a locale and no "en" fallback
    """
