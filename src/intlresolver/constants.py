"""Shared constants for intlresolver.

Centralizes defaults used by the catalog, the ICU formatter and the
localization orchestrator. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Warning channel
    "WARNING_PREFIX",
    # Debug carrier
    "DEFAULT_DEBUG_ATTRIBUTE",
    "DEBUG_ELEMENT_TAG",
    # Limits
    "MAX_DEPTH",
    "MAX_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Formatting
    "DEFAULT_CURRENCY",
    "FALLBACK_LOCALE_CODE",
]

# ============================================================================
# WARNING CHANNEL
# ============================================================================

# Every warning text starts with this prefix so that aggregated logs can be
# filtered down to localization problems.
WARNING_PREFIX: str = "intlresolver"

# ============================================================================
# DEBUG CARRIER
# ============================================================================

DEFAULT_DEBUG_ATTRIBUTE: str = "data-i18n-key"

# Inline element used by RichMessage markup.
DEBUG_ELEMENT_TAG: str = "span"

# ============================================================================
# LIMITS
# ============================================================================

# Maximum nesting of plural/select sub-messages inside one template.
# Real templates rarely nest more than 3 levels.
MAX_DEPTH: int = 100

# Parsed templates kept by ICUMessageFormatter (LRU).
MAX_PATTERN_CACHE_SIZE: int = 512

# Babel Locale objects kept by get_babel_locale / LocaleContext.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FORMATTING
# ============================================================================

# Used by `{n, number, currency}` when no named format supplies a currency.
DEFAULT_CURRENCY: str = "USD"

# Babel locale used when the requested locale is unknown to CLDR.
FALLBACK_LOCALE_CODE: str = "en_US"
