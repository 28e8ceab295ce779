"""Locale utilities for BCP-47 and POSIX locale codes.

Catalogs are keyed by whatever identifiers the application uses (usually
BCP-47, e.g. ``en-US``), while Babel expects POSIX form (``en_US``). This
module converts between the two at the Babel boundary.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from intlresolver.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "to_bcp47",
]

# Pseudo-locales reported by POSIX systems that carry no language.
_PSEUDO_LOCALES = ("C", "POSIX", "")


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert a POSIX locale code to BCP-47 form.

    Strips any encoding or modifier suffix ("de_DE.UTF-8@euro").

    Example:
        >>> to_bcp47("de_DE.UTF-8")
        'de-DE'
    """
    base = locale_code.split(".")[0].split("@")[0]
    return base.replace("_", "-")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the ambient runtime language from the OS and environment.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_MESSAGES, LANG environment variables

    Args:
        raise_on_failure: Raise RuntimeError instead of returning "en_US"
            when nothing usable is found.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        base = (system_locale or "").split(".")[0]
        if base not in _PSEUDO_LOCALES:
            return normalize_locale(base)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "").split(".")[0]
        if value not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
