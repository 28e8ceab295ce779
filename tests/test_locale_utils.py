"""Tests for locale_utils: BCP-47/POSIX conversion and system locale detection.

Python 3.13+.
"""

from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from intlresolver.locale_utils import (
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    to_bcp47,
)


class TestConversion:
    """normalize_locale() and to_bcp47()."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_language_only_unchanged(self) -> None:
        assert normalize_locale("en") == "en"

    def test_posix_to_bcp47_strips_encoding_and_modifier(self) -> None:
        assert to_bcp47("de_DE.UTF-8") == "de-DE"
        assert to_bcp47("ca_ES@valencia") == "ca-ES"

    @given(st.from_regex(r"[a-z]{2,3}(-[A-Z]{2})?", fullmatch=True))
    def test_round_trip(self, code: str) -> None:
        assert to_bcp47(normalize_locale(code)) == code


class TestGetBabelLocale:
    def test_returns_babel_locale(self) -> None:
        locale = get_babel_locale("de-DE")
        assert isinstance(locale, Locale)
        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_is_cached(self) -> None:
        assert get_babel_locale("fr-FR") is get_babel_locale("fr-FR")


class TestGetSystemLocale:
    """get_system_locale() detection order."""

    def test_uses_os_locale_first(self) -> None:
        with patch("locale.getlocale", return_value=("fr_FR", "UTF-8")):
            assert get_system_locale() == "fr_FR"

    def test_os_locale_with_encoding_suffix(self) -> None:
        with patch("locale.getlocale", return_value=("pt_BR.UTF-8", None)):
            assert get_system_locale() == "pt_BR"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX", "C.UTF-8", None])
    def test_pseudo_locales_fall_through_to_environment(
        self, pseudo: str | None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "es_ES.UTF-8")
        with patch("locale.getlocale", return_value=(pseudo, None)):
            assert get_system_locale() == "es_ES"

    def test_environment_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LC_ALL", "it_IT.UTF-8")
        monkeypatch.setenv("LANG", "es_ES.UTF-8")
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "it_IT"

    def test_default_when_nothing_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "en_US"

    def test_raise_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.setenv(var, "C")
        with patch("locale.getlocale", return_value=("C", None)), pytest.raises(RuntimeError):
            get_system_locale(raise_on_failure=True)
