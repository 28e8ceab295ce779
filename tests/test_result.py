"""Tests for Localized and RichMessage result values."""

from __future__ import annotations

from intlresolver.localization import Localized, RichMessage, wrap_message


class TestLocalized:
    """Plain result with default-message chaining."""

    def test_is_a_string(self) -> None:
        result = Localized("Hello")
        assert isinstance(result, str)
        assert result == "Hello"
        assert result.text == "Hello"

    def test_with_default_keeps_non_empty_text(self) -> None:
        assert Localized("Hallo").with_default("Hello") == "Hallo"

    def test_with_default_substitutes_empty_text(self) -> None:
        result = Localized("").with_default("Hello")
        assert result == "Hello"
        assert isinstance(result, Localized)

    def test_with_default_none_gives_empty(self) -> None:
        assert Localized("").with_default(None) == ""
        assert Localized("").with_default() == ""

    def test_d_alias(self) -> None:
        assert Localized("").d("x") == "x"


class TestWrapMessage:
    """wrap_message() markup."""

    def test_plain_wrap(self) -> None:
        wrapped = wrap_message("hi", "<b>Hi</b>", debug=False, debug_attribute="data-i18n-key")
        assert wrapped == "<span><b>Hi</b></span>"
        assert wrapped.attributes == ()

    def test_debug_wrap_adds_key_attribute(self) -> None:
        wrapped = wrap_message("menu.open", "Open", debug=True, debug_attribute="data-i18n-key")
        assert wrapped == '<span data-i18n-key="menu.open">Open</span>'
        assert wrapped.attributes == (("data-i18n-key", "menu.open"),)

    def test_custom_attribute_name(self) -> None:
        wrapped = wrap_message("k", "v", debug=True, debug_attribute="data-key")
        assert wrapped == '<span data-key="k">v</span>'

    def test_attribute_value_is_escaped(self) -> None:
        wrapped = wrap_message('a"b<c', "v", debug=True, debug_attribute="data-i18n-key")
        assert wrapped == '<span data-i18n-key="a&quot;b&lt;c">v</span>'

    def test_message_content_is_raw(self) -> None:
        wrapped = wrap_message("k", "<i>&amp;</i>", debug=False, debug_attribute="x")
        assert wrapped.text == "<i>&amp;</i>"
        assert "<i>&amp;</i>" in wrapped


class TestRichMessage:
    """RichMessage as a drop-in string."""

    def test_html_protocol(self) -> None:
        wrapped = RichMessage("k", "<b>x</b>")
        assert wrapped.__html__() == "<span><b>x</b></span>"

    def test_metadata(self) -> None:
        wrapped = RichMessage("k", "text", (("data-i18n-key", "k"),))
        assert wrapped.key == "k"
        assert wrapped.text == "text"

    def test_with_default_returns_itself(self) -> None:
        wrapped = RichMessage("k", "text")
        assert wrapped.with_default("fallback") is wrapped
        assert wrapped.d("fallback") is wrapped

    def test_with_default_fills_empty_message(self) -> None:
        wrapped = RichMessage("k", "", (("data-i18n-key", "k"),))
        filled = wrapped.with_default("fallback")
        assert filled == '<span data-i18n-key="k">fallback</span>'
        assert filled.key == "k"
        assert filled.attributes == wrapped.attributes
        assert wrapped.with_default(None) is wrapped

    def test_usable_as_string(self) -> None:
        wrapped = RichMessage("k", "text")
        assert f"<p>{wrapped}</p>" == "<p><span>text</span></p>"
        assert wrapped.startswith("<span")
