"""Tests for the Babel-backed runtime: LocaleContext and plural rules."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlresolver.constants import MAX_LOCALE_CACHE_SIZE
from intlresolver.diagnostics import FormatError
from intlresolver.enums import PluralType
from intlresolver.runtime import LocaleContext, select_plural_category

# ============================================================================
# LocaleContext cache
# ============================================================================


class TestLocaleContextCache:
    """LocaleContext.create() caching."""

    def test_cache_returns_same_instance(self) -> None:
        assert LocaleContext.create("en-US") is LocaleContext.create("en-US")

    def test_bcp47_and_posix_share_cache_entry(self) -> None:
        assert LocaleContext.create("en-US") is LocaleContext.create("en_US")

    def test_clear_cache(self) -> None:
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        assert LocaleContext.cache_size() == 2
        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_cache_is_bounded(self) -> None:
        for i in range(MAX_LOCALE_CACHE_SIZE + 5):
            LocaleContext.create(f"xx-{i}")
        assert LocaleContext.cache_size() == MAX_LOCALE_CACHE_SIZE

    def test_unknown_locale_falls_back_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="intlresolver.runtime.locale_context"):
            ctx = LocaleContext.create("xx-UNKNOWN")
        assert ctx.is_fallback
        assert ctx.locale_code == "xx-UNKNOWN"
        assert ctx.format_number(1234.5) == "1,234.5"
        assert "xx-UNKNOWN" in caplog.text


# ============================================================================
# Number formatting
# ============================================================================


class TestFormatNumber:
    """LocaleContext.format_number()."""

    def test_decimal_grouping_per_locale(self) -> None:
        assert LocaleContext.create("en-US").format_number(1234.5) == "1,234.5"
        assert LocaleContext.create("de-DE").format_number(1234.5) == "1.234,5"

    def test_percent(self) -> None:
        assert LocaleContext.create("en-US").format_number(0.25, style="percent") == "25%"

    def test_percent_with_fraction_digits(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(0.1234, style="percent", maximum_fraction_digits=1) == "12.3%"

    def test_currency_symbol_and_code(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(1234.5, style="currency", currency="EUR") == "€1,234.50"
        assert "EUR" in ctx.format_number(5, style="currency", currency="EUR", currency_display="code")

    def test_currency_uses_iso_digits(self) -> None:
        assert LocaleContext.create("en-US").format_number(5, style="currency", currency="JPY") == "¥5"

    def test_fraction_digit_bounds(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(3, minimum_fraction_digits=2) == "3.00"
        assert ctx.format_number(3.14159, maximum_fraction_digits=2) == "3.14"

    def test_without_grouping(self) -> None:
        assert LocaleContext.create("en-US").format_number(1234567, use_grouping=False) == "1234567"

    def test_pattern_overrides_style(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(-1234.56, pattern="#,##0.00;(#,##0.00)") == "(1,234.56)"

    def test_decimal_input(self) -> None:
        assert LocaleContext.create("en-US").format_number(Decimal("1234.50"), minimum_fraction_digits=2) == "1,234.50"

    def test_invalid_value_raises_format_error(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            LocaleContext.create("en-US").format_number("abc")  # type: ignore[arg-type]
        assert exc_info.value.cause is not None


# ============================================================================
# Date and time formatting
# ============================================================================


class TestFormatDateTime:
    """LocaleContext.format_date() / format_time()."""

    def test_date_styles(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_date(date(2025, 10, 27), style="short") == "10/27/25"
        assert ctx.format_date(date(2025, 10, 27), style="long") == "October 27, 2025"

    def test_german_date(self) -> None:
        assert LocaleContext.create("de-DE").format_date(date(2025, 10, 27), style="medium") == "27.10.2025"

    def test_timestamp_is_utc_seconds(self) -> None:
        ctx = LocaleContext.create("en-US")
        stamp = datetime(2025, 1, 2, 12, 0, tzinfo=UTC).timestamp()
        assert ctx.format_date(stamp, pattern="yyyy-MM-dd") == "2025-01-02"

    def test_iso_datetime_string(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_time("2025-01-02T09:05:00", pattern="HH:mm") == "09:05"

    @pytest.mark.parametrize("value", ["yesterday", True, None, 10**20])
    def test_invalid_values_raise(self, value: object) -> None:
        with pytest.raises(FormatError):
            LocaleContext.create("en-US").format_date(value)  # type: ignore[arg-type]


# ============================================================================
# Plural rules
# ============================================================================


class TestPluralRules:
    """select_plural_category()."""

    @pytest.mark.parametrize(
        ("n", "locale", "expected"),
        [
            (1, "en-US", "one"),
            (0, "en-US", "other"),
            (2, "en-US", "other"),
            (1, "ru-RU", "one"),
            (3, "ru-RU", "few"),
            (5, "ru-RU", "many"),
            (0, "lv-LV", "zero"),
            (42, "ja-JP", "other"),
            (2, "ar-SA", "two"),
        ],
    )
    def test_cardinal(self, n: int, locale: str, expected: str) -> None:
        assert select_plural_category(n, locale) == expected

    def test_ordinal(self) -> None:
        assert select_plural_category(2, "en-US", PluralType.ORDINAL) == "two"
        assert select_plural_category(13, "en-US", PluralType.ORDINAL) == "other"

    def test_unknown_locale_uses_one_other(self) -> None:
        assert select_plural_category(1, "xx-UNKNOWN") == "one"
        assert select_plural_category(7, "xx-UNKNOWN") == "other"
        assert select_plural_category(1, "xx-UNKNOWN", PluralType.ORDINAL) == "other"

    @given(st.integers(min_value=0, max_value=10**6), st.sampled_from(["en-US", "ru-RU", "ar-SA", "pl-PL", "ja-JP"]))
    def test_category_is_always_cldr_keyword(self, n: int, locale: str) -> None:
        assert select_plural_category(n, locale) in {"zero", "one", "two", "few", "many", "other"}
