"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from polyphrase.constants import DEFAULT_LOCALE, PLURAL_DELIMITER

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def template_not_string(received: object) -> Diagnostic:
        """Template argument is not a string.

        Args:
            received: The value passed as the template

        Returns:
            Diagnostic for TEMPLATE_NOT_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_NOT_STRING,
            message="transform_phrase expects argument #1 to be str",
            hint="Look the phrase up first and pass the template text",
            argument_name="template",
            expected_type="str",
            received_type=type(received).__name__,
        )

    @staticmethod
    def substitutions_invalid(received: object) -> Diagnostic:
        """Substitutions is neither a number nor a mapping.

        Args:
            received: The value passed as substitutions

        Returns:
            Diagnostic for SUBSTITUTIONS_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.SUBSTITUTIONS_INVALID,
            message="transform_phrase expects argument #2 to be a number or a mapping",
            argument_name="substitutions",
            expected_type="int | float | Decimal | Mapping[str, object]",
            received_type=type(received).__name__,
        )

    @staticmethod
    def token_reserved(position: str) -> Diagnostic:
        """Token prefix or suffix collides with the plural delimiter.

        Args:
            position: "prefix" or "suffix"

        Returns:
            Diagnostic for TOKEN_RESERVED
        """
        return Diagnostic(
            code=DiagnosticCode.TOKEN_RESERVED,
            message=f'"{PLURAL_DELIMITER}" token is reserved for pluralization',
            hint=f"Choose a different interpolation {position}",
            argument_name=position,
        )

    @staticmethod
    def selector_not_callable(category: str, received: object) -> Diagnostic:
        """Plural category selector is not a function.

        Args:
            category: Category identifier
            received: The value supplied as selector

        Returns:
            Diagnostic for SELECTOR_NOT_CALLABLE
        """
        return Diagnostic(
            code=DiagnosticCode.SELECTOR_NOT_CALLABLE,
            message=f"Selector for plural category '{category}' is not callable",
            hint="Selectors take a count and return a variant index",
            argument_name=category,
            expected_type="Callable[[count], int]",
            received_type=type(received).__name__,
        )

    @staticmethod
    def category_undefined(category: str) -> Diagnostic:
        """Locale binding refers to an unknown plural category.

        Args:
            category: Category identifier used by the binding

        Returns:
            Diagnostic for CATEGORY_UNDEFINED
        """
        return Diagnostic(
            code=DiagnosticCode.CATEGORY_UNDEFINED,
            message=f"Locales are bound to undefined plural category '{category}'",
            hint="Define a selector for every category named in locale_bindings",
            argument_name=category,
        )

    @staticmethod
    def fallback_locale_unbound(locale: str) -> Diagnostic:
        """No category for a locale and no default-locale fallback.

        Args:
            locale: The locale that failed to resolve

        Returns:
            Diagnostic for FALLBACK_LOCALE_UNBOUND
        """
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_LOCALE_UNBOUND,
            message=(
                f"No plural category for locale '{locale}' and the rule registry "
                f"has no '{DEFAULT_LOCALE}' fallback"
            ),
            hint=f"Bind '{DEFAULT_LOCALE}' to a category in the custom registry",
        )

    @staticmethod
    def locale_unknown(locale: str, reason: str) -> Diagnostic:
        """Babel does not know a locale requested for CLDR rules.

        Args:
            locale: The locale tag
            reason: Underlying parse error

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale '{locale}': {reason}",
            hint="Use a language tag from the CLDR locale list",
            help_url="https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code",
        )

    @staticmethod
    def translation_missing(key: str) -> Diagnostic:
        """Phrase dictionary has no translation for a key.

        Args:
            key: The missing key

        Returns:
            Diagnostic for TRANSLATION_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_MISSING,
            message=f'Missing translation for key: "{key}"',
            hint="Add the key with extend(), or pass a '_' default",
            severity="warning",
        )

    @staticmethod
    def locale_bound_twice(locale: str, first: str, second: str) -> Diagnostic:
        """Locale tag bound to two plural categories.

        Args:
            locale: The locale tag
            first: Category it was bound to first
            second: Category that replaces the first

        Returns:
            Diagnostic for LOCALE_BOUND_TWICE
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_BOUND_TWICE,
            message=(
                f"Locale '{locale}' bound to both '{first}' and '{second}'; "
                f"'{second}' wins"
            ),
            severity="warning",
        )
