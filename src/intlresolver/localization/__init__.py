"""Localization: the message resolution pipeline and its collaborators.

Submodules:
    types        - type aliases, MessageDescriptor, HookOutcome
    options      - IntlOptions configuration snapshot
    sanitizer    - HTML escaping of variables
    result       - Localized and RichMessage result values
    detection    - locale detection from URL, cookie, storage, environment
    orchestrator - Localizer

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .detection import (
    determine_locale,
    locale_from_cookie,
    locale_from_environment,
    locale_from_storage,
    locale_from_url,
)
from .options import IntlOptions, log_warning
from .orchestrator import Localizer
from .result import Localized, RichMessage, wrap_message
from .sanitizer import sanitize_variables
from .types import HookOutcome, LocaleCode, MessageDescriptor, MessageKey, Variables

__all__ = [
    # Orchestrator and configuration
    "Localizer",
    "IntlOptions",
    "log_warning",
    # Results
    "Localized",
    "RichMessage",
    "wrap_message",
    # Pipeline helpers
    "sanitize_variables",
    "HookOutcome",
    "MessageDescriptor",
    # Locale detection
    "determine_locale",
    "locale_from_cookie",
    "locale_from_environment",
    "locale_from_storage",
    "locale_from_url",
    # Type aliases
    "LocaleCode",
    "MessageKey",
    "Variables",
]
