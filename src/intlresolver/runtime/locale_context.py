"""Locale context for thread-safe, locale-scoped number and date formatting.

Provides the locale-aware sub-formats of ICU templates
(``{n, number, ...}``, ``{d, date, ...}``, ``{t, time, ...}``, ``#``)
without global state mutation. Uses Babel for CLDR-compliant output.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from intlresolver.constants import DEFAULT_CURRENCY, FALLBACK_LOCALE_CODE, MAX_LOCALE_CACHE_SIZE
from intlresolver.diagnostics import FormatError
from intlresolver.locale_utils import normalize_locale

__all__ = ["DateTimeValue", "LocaleContext", "NumberStyle", "NumberValue"]

logger = logging.getLogger(__name__)

type NumberValue = int | float | Decimal
type DateTimeValue = datetime | date | time | str | int | float
type NumberStyle = Literal["decimal", "percent", "currency"]
type DateTimeStyle = Literal["short", "medium", "long", "full"]

_BABEL_ERRORS = (ValueError, TypeError, InvalidOperation, AttributeError, KeyError, OverflowError)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it caches one
    instance per normalized locale code.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5)
        '1.234,5'

        >>> # Unknown locales fall back to en_US with a logged warning
        >>> LocaleContext.create('xx-UNKNOWN').is_fallback
        True
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache (tests, memory release)."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        Always succeeds. For unknown or malformed locale codes, logs a
        warning and formats with en_US rules while preserving the original
        locale_code.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            Cached LocaleContext instance
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE_CODE
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE_CODE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    def format_number(
        self,
        value: NumberValue,
        *,
        style: NumberStyle = "decimal",
        currency: str | None = None,
        currency_display: Literal["symbol", "code", "name"] = "symbol",
        minimum_fraction_digits: int | None = None,
        maximum_fraction_digits: int | None = None,
        use_grouping: bool = True,
        pattern: str | None = None,
    ) -> str:
        """Format number with locale-specific separators.

        Implements the ICU ``number`` argument using Babel. With no digit
        options, the locale's own decimal/percent/currency pattern is used
        (decimal: up to 3 fraction digits, percent: none, currency: the
        currency's ISO 4217 digits).

        Args:
            value: Number to format
            style: "decimal", "percent" or "currency"
            currency: ISO 4217 code for style="currency" (default USD)
            currency_display: "symbol", "code" or "name"
            minimum_fraction_digits: Minimum decimal places
            maximum_fraction_digits: Maximum decimal places
            use_grouping: Use thousands separator
            pattern: CLDR number pattern (overrides every other option)

        Returns:
            Formatted number string

        Raises:
            FormatError: If Babel rejects the value or the pattern

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_number(0.25, style="percent")
            '25%'
            >>> ctx.format_number(1234.5, style="currency", currency="EUR")
            '€1,234.50'
            >>> ctx.format_number(-1234.56, pattern="#,##0.00;(#,##0.00)")
            '(1,234.56)'
        """
        try:
            if pattern is not None:
                return str(babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale))

            custom_digits = minimum_fraction_digits is not None or maximum_fraction_digits is not None
            match style:
                case "percent":
                    if not custom_digits and use_grouping:
                        return str(babel_numbers.format_percent(value, locale=self.babel_locale))
                    digits = self._digits_pattern(
                        minimum_fraction_digits or 0, maximum_fraction_digits or 0, use_grouping
                    )
                    return str(
                        babel_numbers.format_percent(value, format=f"{digits}%", locale=self.babel_locale)
                    )
                case "currency":
                    return self._format_currency(
                        value,
                        currency or DEFAULT_CURRENCY,
                        currency_display,
                        minimum_fraction_digits,
                        maximum_fraction_digits,
                        use_grouping,
                    )
                case _:
                    if not custom_digits and use_grouping:
                        return str(babel_numbers.format_decimal(value, locale=self.babel_locale))
                    minimum = minimum_fraction_digits or 0
                    maximum = maximum_fraction_digits if maximum_fraction_digits is not None else max(3, minimum)
                    digits = self._digits_pattern(minimum, maximum, use_grouping)
                    return str(babel_numbers.format_decimal(value, format=digits, locale=self.babel_locale))
        except _BABEL_ERRORS as e:
            msg = f"Number formatting failed for '{value}': {e}"
            raise FormatError(msg, cause=e) from e

    def _format_currency(
        self,
        value: NumberValue,
        currency: str,
        currency_display: str,
        minimum_fraction_digits: int | None,
        maximum_fraction_digits: int | None,
        use_grouping: bool,
    ) -> str:
        if currency_display == "name":
            return str(
                babel_numbers.format_currency(
                    value, currency, locale=self.babel_locale, format_type="name"
                )
            )

        sign = "\xa4\xa4" if currency_display == "code" else "\xa4"
        if minimum_fraction_digits is None and maximum_fraction_digits is None and use_grouping:
            standard = self.babel_locale.currency_formats.get("standard")
            raw_pattern = getattr(standard, "pattern", None)
            if currency_display == "code" and raw_pattern and "\xa4" in raw_pattern:
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        format=raw_pattern.replace("\xa4", sign),
                        locale=self.babel_locale,
                        currency_digits=True,
                    )
                )
            return str(
                babel_numbers.format_currency(
                    value, currency, locale=self.babel_locale, currency_digits=True
                )
            )

        minimum = minimum_fraction_digits or 0
        maximum = maximum_fraction_digits if maximum_fraction_digits is not None else max(2, minimum)
        digits = self._digits_pattern(minimum, maximum, use_grouping)
        return str(
            babel_numbers.format_currency(
                value,
                currency,
                format=f"{sign}{digits}",
                locale=self.babel_locale,
                currency_digits=False,
            )
        )

    @staticmethod
    def _digits_pattern(minimum: int, maximum: int, use_grouping: bool) -> str:
        """Build a CLDR pattern such as '#,##0.0##' from digit bounds."""
        integer_part = "#,##0" if use_grouping else "0"
        maximum = max(maximum, minimum)
        if maximum == 0:
            return integer_part
        return f"{integer_part}.{'0' * minimum}{'#' * (maximum - minimum)}"

    def format_date(
        self,
        value: DateTimeValue,
        *,
        style: DateTimeStyle = "medium",
        pattern: str | None = None,
    ) -> str:
        """Format the date part of a value (ICU ``date`` argument).

        Args:
            value: datetime/date, ISO 8601 string, or POSIX timestamp in seconds
            style: CLDR date length
            pattern: CLDR date pattern such as 'yyyy-MM-dd' (overrides style)

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_date(date(2025, 10, 27), style='short')
            '10/27/25'
            >>> ctx.format_date("2025-10-27", pattern='yyyy/MM/dd')
            '2025/10/27'
        """
        moment = self._coerce_datetime(value)
        try:
            return str(babel_dates.format_date(moment, format=pattern or style, locale=self.babel_locale))
        except _BABEL_ERRORS as e:
            msg = f"Date formatting failed for '{value}': {e}"
            raise FormatError(msg, cause=e) from e

    def format_time(
        self,
        value: DateTimeValue,
        *,
        style: DateTimeStyle = "medium",
        pattern: str | None = None,
    ) -> str:
        """Format the time part of a value (ICU ``time`` argument).

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_time(time(14, 30), style='short')
            '2:30 PM'
        """
        moment = value if isinstance(value, time) else self._coerce_datetime(value)
        try:
            return str(babel_dates.format_time(moment, format=pattern or style, locale=self.babel_locale))
        except _BABEL_ERRORS as e:
            msg = f"Time formatting failed for '{value}': {e}"
            raise FormatError(msg, cause=e) from e

    @staticmethod
    def _coerce_datetime(value: DateTimeValue) -> datetime | date:
        """Normalize accepted date inputs.

        Raises:
            FormatError: For strings that are not ISO 8601 and for other types
        """
        match value:
            case datetime() | date():
                return value
            case bool():
                msg = f"Expected a date value, got {value!r}"
                raise FormatError(msg)
            case int() | float():
                try:
                    return datetime.fromtimestamp(value, tz=UTC)
                except (OverflowError, OSError, ValueError) as e:
                    msg = f"Timestamp out of range: {value!r}"
                    raise FormatError(msg, cause=e) from e
            case str():
                try:
                    return datetime.fromisoformat(value)
                except ValueError as e:
                    msg = f"Invalid datetime string '{value}': not ISO 8601 format"
                    raise FormatError(msg, cause=e) from e
            case _:
                msg = f"Expected a date value, got {type(value).__name__}"
                raise FormatError(msg)
