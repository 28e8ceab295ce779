"""intlresolver - message-key resolution and ICU MessageFormat formatting.

Resolves a symbolic message key plus an active locale into a final string:
nested or flat key lookup in an in-memory catalog, fallback-locale
chaining, HTML escaping of variables, and ICU MessageFormat formatting
(plurals, select, number/date/time) backed by Babel's CLDR data.
Missing translations never raise; they are reported on a configurable
warning channel.

Public API:
    Localizer - Owns the configuration and resolves messages
    IntlOptions - Immutable configuration snapshot
    Localized, RichMessage - Result values with default-message chaining
    MessageDescriptor - Key plus default message
    ICUMessageFormatter - Default template formatter
    MessageFormatter - Protocol for replacement formatters
    determine_locale - Locale detection from URL, cookie, storage, environment

Exceptions:
    IntlError - Base exception class
    ContractViolationError - Programmer errors (empty key, missing init options)
    FormatError - Template formatting failures
    MessageSyntaxError - Malformed templates

Submodules:
    intlresolver.catalog - Catalog entry types, key resolution, deep-merge
    intlresolver.messageformat - ICU MessageFormat parser and formatter
    intlresolver.localization - Localizer and its collaborators
    intlresolver.runtime - Babel-backed locale formatting and plural rules
    intlresolver.diagnostics - Error codes, templates and exceptions
"""

from .diagnostics import (
    ContractViolationError,
    FormatError,
    IntlError,
    MessageSyntaxError,
)
from .localization import (
    IntlOptions,
    Localized,
    Localizer,
    MessageDescriptor,
    RichMessage,
    determine_locale,
)
from .messageformat import ICUMessageFormatter, MessageFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intlresolver")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContractViolationError",
    "FormatError",
    "ICUMessageFormatter",
    "IntlError",
    "IntlOptions",
    "Localized",
    "Localizer",
    "MessageDescriptor",
    "MessageFormatter",
    "MessageSyntaxError",
    "RichMessage",
    "__version__",
    "determine_locale",
]
