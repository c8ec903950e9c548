"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (bad values passed to transform_phrase)
        2000-2999: Configuration errors (token syntax, rule registries)
        3000-3999: Warnings (missing translations, ambiguous registry data)
    """

    # Argument errors (1000-1999)
    TEMPLATE_NOT_STRING = 1001
    SUBSTITUTIONS_INVALID = 1002

    # Configuration errors (2000-2999)
    TOKEN_RESERVED = 2001
    SELECTOR_NOT_CALLABLE = 2002
    CATEGORY_UNDEFINED = 2003
    FALLBACK_LOCALE_UNBOUND = 2004
    LOCALE_UNKNOWN = 2005

    # Warnings (3000-3999)
    TRANSLATION_MISSING = 3001
    LOCALE_BOUND_TWICE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        argument_name: Argument name that caused the error
        expected_type: Expected type for the argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TEMPLATE_NOT_STRING]: transform_phrase expects argument #1 to be str
              = argument: template
              = expected: str
              = received: int
              = help: Look the phrase up first and pass the template text

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
