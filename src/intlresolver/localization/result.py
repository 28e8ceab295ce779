"""Result values returned by Localizer lookups.

Both types subclass ``str`` so they drop into any place that expects a
plain string. Default-message chaining is an explicit method on the
result instead of a patched built-in.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import html

from intlresolver.constants import DEBUG_ELEMENT_TAG

__all__ = ["Localized", "RichMessage", "wrap_message"]


class Localized(str):
    """Resolved message text.

    Example:
        >>> Localized("").with_default("Hello")
        'Hello'
        >>> Localized("Hallo").d("Hello")
        'Hallo'
    """

    @property
    def text(self) -> str:
        return str(self)

    def with_default(self, fallback: str | None = None) -> Localized:
        """This text, or ``fallback`` when the text is empty."""
        return Localized(self or fallback or "")

    d = with_default


class RichMessage(str):
    """Message wrapped in one inline element, rendered as markup.

    The string value is the element's markup; the message inside it is
    raw HTML and is not escaped. Objects exposing ``__html__`` are treated
    as safe markup by Jinja2 and MarkupSafe.

    Attributes:
        key: Message key the element was built for
        text: Unwrapped message
        attributes: Attribute name/value pairs on the element
    """

    key: str
    text: str
    attributes: tuple[tuple[str, str], ...]

    def __new__(
        cls, key: str, text: str, attributes: tuple[tuple[str, str], ...] = ()
    ) -> RichMessage:
        rendered_attributes = "".join(
            f' {name}="{html.escape(value, quote=True)}"' for name, value in attributes
        )
        markup = f"<{DEBUG_ELEMENT_TAG}{rendered_attributes}>{text}</{DEBUG_ELEMENT_TAG}>"
        instance = super().__new__(cls, markup)
        instance.key = key
        instance.text = text
        instance.attributes = attributes
        return instance

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"RichMessage(key={self.key!r}, text={self.text!r}, attributes={self.attributes!r})"

    def with_default(self, fallback: str | None = None) -> RichMessage:
        """This message, or ``fallback`` in the same element when the text is empty."""
        if self.text or not fallback:
            return self
        return RichMessage(self.key, fallback, self.attributes)

    d = with_default


def wrap_message(key: str, message: str, *, debug: bool, debug_attribute: str) -> RichMessage:
    """Wrap ``message`` for rendering as markup.

    In debug mode the element carries ``debug_attribute="key"`` so
    inspection tooling can trace rendered text back to its key.

    Example:
        >>> wrap_message("hi", "<b>Hi</b>", debug=True, debug_attribute="data-i18n-key")
        RichMessage(key='hi', text='<b>Hi</b>', attributes=(('data-i18n-key', 'hi'),))
        >>> str(wrap_message("hi", "<b>Hi</b>", debug=False, debug_attribute="data-i18n-key"))
        '<span><b>Hi</b></span>'
    """
    attributes = ((debug_attribute, key),) if debug else ()
    return RichMessage(key, message, attributes)
