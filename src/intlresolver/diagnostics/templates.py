"""Error and warning message templates.

Centralized message templates for testable, consistent error messages.
ErrorTemplate builds Diagnostic objects for exceptions; WarningTemplate
builds the texts routed to the configurable warning channel.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from intlresolver.constants import WARNING_PREFIX
from intlresolver.enums import WarningKind

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "LocalizationWarning", "WarningTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception constructors!
    """

    # ------------------------------------------------------------------
    # Contract violations
    # ------------------------------------------------------------------

    @staticmethod
    def key_required() -> Diagnostic:
        """Message key missing or empty."""
        return Diagnostic(
            code=DiagnosticCode.KEY_REQUIRED,
            message="key is required",
            hint="Pass a non-empty message key",
        )

    @staticmethod
    def option_required(option: str) -> Diagnostic:
        """Required init() option missing.

        Args:
            option: Name of the missing option
        """
        return Diagnostic(
            code=DiagnosticCode.OPTION_REQUIRED,
            message=f"options.{option} is required",
            hint=f"Pass '{option}' to Localizer.init()",
        )

    @staticmethod
    def invalid_descriptor(received_type: str) -> Diagnostic:
        """Message descriptor lacks an id or has the wrong shape."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_DESCRIPTOR,
            message="message descriptor requires a non-empty 'id'",
            expected_type="MessageDescriptor or Mapping with 'id'",
            received_type=received_type,
        )

    @staticmethod
    def invalid_catalog(locale: str, received_type: str) -> Diagnostic:
        """Locale catalog value is not a mapping."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_CATALOG,
            message=f"catalog for locale '{locale}' must be a mapping",
            expected_type="Mapping[str, str | Mapping]",
            received_type=received_type,
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def value_not_provided(name: str) -> Diagnostic:
        """Template variable missing from the variables mapping."""
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_PROVIDED,
            message=f"The intl string context variable '{name}' was not provided",
            argument_name=name,
            hint=f"Pass '{name}' in the variables mapping",
        )

    @staticmethod
    def invalid_value(name: str, expected: str, value: object) -> Diagnostic:
        """Variable value incompatible with its argument type."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=f"Invalid value {value!r} for argument '{name}': expected {expected}",
            argument_name=name,
            expected_type=expected,
            received_type=type(value).__name__,
        )

    @staticmethod
    def formatting_failed(name: str, reason: str) -> Diagnostic:
        """Babel rejected a value or pattern."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"Formatting argument '{name}' failed: {reason}",
            argument_name=name,
        )

    @staticmethod
    def unknown_format(kind: str, style: str) -> Diagnostic:
        """Argument style that is neither built-in, named, nor a valid pattern."""
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FORMAT,
            message=f"Unknown {kind} format '{style}'",
            hint=f"Define '{style}' under formats['{kind}'] or use a CLDR pattern",
        )

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int, expected: str) -> Diagnostic:
        """Template ended before a construct was closed."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected end of template at offset {position}: expected {expected}",
            position=position,
        )

    @staticmethod
    def unexpected_character(char: str, position: int, expected: str) -> Diagnostic:
        """Character that cannot start or continue the current construct."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=f"Unexpected character {char!r} at offset {position}: expected {expected}",
            position=position,
        )

    @staticmethod
    def empty_argument(position: int) -> Diagnostic:
        """Placeholder without a name: ``{}``."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_ARGUMENT,
            message=f"Empty argument at offset {position}",
            position=position,
            hint="Placeholders need a name, e.g. {name}",
        )

    @staticmethod
    def invalid_argument_type(type_name: str, position: int) -> Diagnostic:
        """Argument type keyword not in number/date/time/plural/selectordinal/select."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT_TYPE,
            message=f"Invalid argument type '{type_name}' at offset {position}",
            position=position,
            hint="Use one of: number, date, time, plural, selectordinal, select",
        )

    @staticmethod
    def missing_other_clause(name: str, position: int) -> Diagnostic:
        """plural/select argument without the mandatory ``other`` branch."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_CLAUSE,
            message=f"Argument '{name}' is missing the 'other' clause",
            position=position,
            argument_name=name,
        )

    @staticmethod
    def duplicate_selector(selector: str, position: int) -> Diagnostic:
        """Same selector used twice in one plural/select argument."""
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_SELECTOR,
            message=f"Duplicate selector '{selector}' at offset {position}",
            position=position,
        )

    @staticmethod
    def invalid_offset(position: int) -> Diagnostic:
        """``offset:`` not followed by an integer."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_OFFSET,
            message=f"Invalid plural offset at offset {position}",
            position=position,
            hint="Write offset:N with an integer N",
        )

    @staticmethod
    def expected_selector(position: int) -> Diagnostic:
        """plural/select argument with no branches."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_SELECTOR,
            message=f"Expected a selector at offset {position}",
            position=position,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, position: int) -> Diagnostic:
        """Sub-messages nested deeper than MAX_DEPTH."""
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"Template nesting exceeds {max_depth} levels at offset {position}",
            position=position,
        )


@dataclass(frozen=True, slots=True)
class LocalizationWarning:
    """One report on the warning channel.

    Attributes:
        kind: Category of the localization data issue
        messages: Positional arguments handed to the warning handler
    """

    kind: WarningKind
    messages: tuple[str, ...]


class WarningTemplate:
    """Texts for localization data issues.

    These never become exceptions; the orchestrator hands
    ``warning.messages`` to the configured warning handler.
    """

    @staticmethod
    def locale_not_configured() -> LocalizationWarning:
        return LocalizationWarning(
            WarningKind.LOCALE_NOT_CONFIGURED,
            (f"{WARNING_PREFIX} current locale is not configured. Call init() first.",),
        )

    @staticmethod
    def locale_data_missing(locale: str) -> LocalizationWarning:
        return LocalizationWarning(
            WarningKind.LOCALE_DATA_MISSING,
            (f'{WARNING_PREFIX} locales data "{locale}" not exists.',),
        )

    @staticmethod
    def message_missing(key: str, locale: str) -> LocalizationWarning:
        return LocalizationWarning(
            WarningKind.MESSAGE_MISSING,
            (f'{WARNING_PREFIX} key "{key}" not defined in {locale}',),
        )

    @staticmethod
    def message_missing_in_fallback(key: str, locale: str, fallback: str) -> LocalizationWarning:
        return LocalizationWarning(
            WarningKind.MESSAGE_MISSING_IN_FALLBACK,
            (
                f'{WARNING_PREFIX} key "{key}" not defined in {locale} '
                f"or the fallback locale, {fallback}",
            ),
        )

    @staticmethod
    def used_fallback(key: str, locale: str, fallback: str) -> LocalizationWarning:
        return LocalizationWarning(
            WarningKind.USED_FALLBACK,
            (
                f'{WARNING_PREFIX} key "{key}" not defined in {locale}, '
                f"used fallback locale {fallback}",
            ),
        )

    @staticmethod
    def format_failed(key: str, reason: str) -> LocalizationWarning:
        """Two-part report: which key, then the underlying failure."""
        return LocalizationWarning(
            WarningKind.FORMAT_FAILED,
            (f"{WARNING_PREFIX} format message failed for key='{key}'.", reason),
        )

    @staticmethod
    def locale_switch_rejected(locale: str, *, catalog_loaded: bool) -> LocalizationWarning:
        text = f'{WARNING_PREFIX} locales data "{locale}" not exists.'
        if not catalog_loaded:
            text += " You should call init function first."
        return LocalizationWarning(WarningKind.LOCALE_SWITCH_REJECTED, (text,))
