"""Tests for locale detection helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from intlresolver.localization import (
    Localizer,
    determine_locale,
    locale_from_cookie,
    locale_from_environment,
    locale_from_storage,
    locale_from_url,
)


class TestLocaleFromUrl:
    def test_query_parameter(self) -> None:
        assert locale_from_url("https://example.com/page?lang=fr-FR&x=1", "lang") == "fr-FR"

    def test_relative_url(self) -> None:
        assert locale_from_url("/page?lang=de-DE", "lang") == "de-DE"

    def test_first_value_wins(self) -> None:
        assert locale_from_url("/?lang=de-DE&lang=fr-FR", "lang") == "de-DE"

    def test_percent_encoded_value(self) -> None:
        assert locale_from_url("/?lang=zh%2DCN", "lang") == "zh-CN"

    @pytest.mark.parametrize(
        ("url", "key"),
        [("/page", "lang"), ("/page?other=1", "lang"), (None, "lang"), ("/?lang=en", None), ("/?lang=en", "")],
    )
    def test_absent(self, url: str | None, key: str | None) -> None:
        assert locale_from_url(url, key) is None


class TestLocaleFromCookie:
    def test_trims_and_decodes(self) -> None:
        assert locale_from_cookie("theme=dark;   lang=zh%2DCN  ; x=1", "lang") == "zh-CN"

    def test_value_containing_equals(self) -> None:
        """Only the first '=' separates name and value."""
        assert locale_from_cookie("token=a=b; lang=en-US", "token") == "a=b"

    def test_missing_key(self) -> None:
        assert locale_from_cookie("theme=dark", "lang") is None

    def test_no_cookie_header(self) -> None:
        assert locale_from_cookie(None, "lang") is None
        assert locale_from_cookie("", "lang") is None

    def test_pair_without_equals_is_ignored_as_value(self) -> None:
        assert locale_from_cookie("flag; lang=en-GB", "lang") == "en-GB"


class TestLocaleFromStorage:
    def test_lookup(self) -> None:
        assert locale_from_storage({"lang": "ja-JP"}, "lang") == "ja-JP"

    def test_missing_or_empty(self) -> None:
        assert locale_from_storage({"lang": ""}, "lang") is None
        assert locale_from_storage({}, "lang") is None
        assert locale_from_storage(None, "lang") is None


class TestLocaleFromEnvironment:
    def test_converts_to_bcp47(self) -> None:
        with patch(
            "intlresolver.localization.detection.get_system_locale", return_value="pt_BR"
        ):
            assert locale_from_environment() == "pt-BR"

    def test_none_when_undetectable(self) -> None:
        with patch(
            "intlresolver.localization.detection.get_system_locale",
            side_effect=RuntimeError("no locale"),
        ):
            assert locale_from_environment() is None


class TestDetermineLocale:
    """Precedence: URL > cookie > storage > environment."""

    SOURCES = {
        "url": "/?lang=de-DE",
        "url_locale_key": "lang",
        "cookie_header": "lang=fr-FR",
        "cookie_locale_key": "lang",
        "storage": {"lang": "ja-JP"},
        "storage_locale_key": "lang",
    }

    def test_url_first(self) -> None:
        assert determine_locale(**self.SOURCES) == "de-DE"  # type: ignore[arg-type]

    def test_cookie_second(self) -> None:
        sources = {**self.SOURCES, "url": "/"}
        assert determine_locale(**sources) == "fr-FR"  # type: ignore[arg-type]

    def test_storage_third(self) -> None:
        sources = {**self.SOURCES, "url": "/", "cookie_header": ""}
        assert determine_locale(**sources) == "ja-JP"  # type: ignore[arg-type]

    def test_environment_last(self) -> None:
        with patch(
            "intlresolver.localization.detection.get_system_locale", return_value="ko_KR"
        ):
            assert determine_locale() == "ko-KR"

    def test_environment_can_be_disabled(self) -> None:
        assert determine_locale(use_environment=False) is None

    def test_localizer_delegates(self) -> None:
        assert Localizer.determine_locale(cookie_header="lang=fr-FR", cookie_locale_key="lang") == "fr-FR"
