"""Diagnostic system for polyphrase errors.

Provides structured error diagnostics with codes, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidArgumentError, InvalidConfigurationError, PhraseError
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "PhraseError",
]
