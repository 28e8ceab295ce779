"""Locale detection from request and environment signals.

Each helper returns a locale identifier or None. determine_locale()
combines them with precedence URL > cookie > storage > environment.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping
from urllib.parse import parse_qs, unquote, urlsplit

from intlresolver.locale_utils import get_system_locale, to_bcp47

__all__ = [
    "determine_locale",
    "locale_from_cookie",
    "locale_from_environment",
    "locale_from_storage",
    "locale_from_url",
]

logger = logging.getLogger(__name__)


def locale_from_url(url: str | None, key: str | None) -> str | None:
    """Read the locale from a URL query parameter.

    Example:
        >>> locale_from_url("https://example.com/?lang=fr-FR", "lang")
        'fr-FR'
    """
    if not url or not key:
        return None
    params = parse_qs(urlsplit(url).query, keep_blank_values=True)
    values = params.get(key)
    return values[0] if values else None


def locale_from_cookie(cookie_header: str | None, key: str | None) -> str | None:
    """Read the locale from a ``Cookie`` header value.

    Pairs are split on ``;`` and trimmed; each pair splits at its first
    ``=`` and the value is percent-decoded.

    Example:
        >>> locale_from_cookie("theme=dark; lang=zh%2DCN", "lang")
        'zh-CN'
    """
    if not cookie_header or not key:
        return None
    cookies: dict[str, str] = {}
    for pair in cookie_header.split(";"):
        name, _, value = pair.strip().partition("=")
        if name:
            cookies[name] = unquote(value)
    return cookies.get(key)


def locale_from_storage(storage: Mapping[str, object] | None, key: str | None) -> str | None:
    """Read the locale from a persisted key/value store (session, profile, ...)."""
    if storage is None or not key:
        return None
    value = storage.get(key)
    return str(value) if value else None


def locale_from_environment() -> str | None:
    """Ambient runtime language in BCP-47 form (from the OS locale or LC_*/LANG)."""
    try:
        return to_bcp47(get_system_locale(raise_on_failure=True))
    except RuntimeError:
        logger.debug("No ambient locale found in the environment")
        return None


def determine_locale(
    *,
    url: str | None = None,
    url_locale_key: str | None = None,
    cookie_header: str | None = None,
    cookie_locale_key: str | None = None,
    storage: Mapping[str, object] | None = None,
    storage_locale_key: str | None = None,
    use_environment: bool = True,
) -> str | None:
    """First locale found, in order: URL, cookie, storage, environment.

    Example:
        >>> determine_locale(
        ...     url="/?lang=de-DE", url_locale_key="lang",
        ...     cookie_header="lang=fr-FR", cookie_locale_key="lang",
        ... )
        'de-DE'
    """
    return (
        locale_from_url(url, url_locale_key)
        or locale_from_cookie(cookie_header, cookie_locale_key)
        or locale_from_storage(storage, storage_locale_key)
        or (locale_from_environment() if use_environment else None)
    )
