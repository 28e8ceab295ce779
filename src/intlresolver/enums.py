"""Enumerations for intlresolver type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentType(StrEnum):
    """Type keyword of an ICU argument: ``{name, <type>, ...}``.

    StrEnum provides automatic string conversion: str(ArgumentType.PLURAL) == "plural"
    """

    NUMBER = "number"
    """Locale number: {count, number, percent}"""

    DATE = "date"
    """Locale date: {when, date, short}"""

    TIME = "time"
    """Locale time: {when, time, short}"""

    PLURAL = "plural"
    """Cardinal plural selection: {count, plural, one{...} other{...}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural selection: {place, selectordinal, one{#st} other{#th}}"""

    SELECT = "select"
    """Keyword selection: {gender, select, female{...} other{...}}"""


class PluralType(StrEnum):
    """CLDR plural rule family."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"


class WarningKind(StrEnum):
    """Kind of localization data issue routed to the warning channel.

    StrEnum provides automatic string conversion: str(WarningKind.FORMAT_FAILED) == "format_failed"
    """

    LOCALE_NOT_CONFIGURED = "locale_not_configured"
    """No current locale has been configured at all."""

    LOCALE_DATA_MISSING = "locale_data_missing"
    """The configured locale has no catalog."""

    MESSAGE_MISSING = "message_missing"
    """Key absent from the current locale and no fallback configured."""

    MESSAGE_MISSING_IN_FALLBACK = "message_missing_in_fallback"
    """Key absent from both the current and the fallback locale."""

    USED_FALLBACK = "used_fallback"
    """Key resolved from the fallback locale."""

    FORMAT_FAILED = "format_failed"
    """Template formatting raised; raw template returned."""

    LOCALE_SWITCH_REJECTED = "locale_switch_rejected"
    """change_current_locale() targeted a locale without a catalog."""


__all__ = [
    "ArgumentType",
    "PluralType",
    "WarningKind",
]
