"""Diagnostic formatting service.

Renders diagnostics in Rust compiler style for exception messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


class DiagnosticFormatter:
    """Rust compiler-style diagnostic renderer.

    Example:
        >>> print(DiagnosticFormatter().format(ErrorTemplate.translation_missing("hello")))
        warning[TRANSLATION_MISSING]: Missing translation for key: "hello"
          = help: Add the key with extend(), or pass a '_' default
    """

    __slots__ = ()

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Header line followed by one "  = label: value" line per detail
        """
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.argument_name:
            parts.append(f"  = argument: {diagnostic.argument_name}")

        if diagnostic.expected_type:
            parts.append(f"  = expected: {diagnostic.expected_type}")

        if diagnostic.received_type:
            parts.append(f"  = received: {diagnostic.received_type}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)
