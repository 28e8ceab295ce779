"""Immutable configuration snapshot owned by a Localizer.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from intlresolver.constants import DEFAULT_DEBUG_ATTRIBUTE
from intlresolver.messageformat.formats import DEFAULT_FORMATS, FormatOptions

if TYPE_CHECKING:
    from intlresolver.catalog import Group

__all__ = ["GetHook", "IntlOptions", "WarningHandler", "log_warning"]

# Fixed name so applications can route localization warnings independently
# of the module layout.
warning_logger = logging.getLogger("intlresolver.localization")

type WarningHandler = Callable[..., None]
"""Warning sink: called with one or more message strings."""

type GetHook = Callable[[str, str | None], object]
"""Pre-lookup hook: called with (key, current_locale)."""


def log_warning(*messages: str) -> None:
    """Default warning handler: one WARNING record per report."""
    warning_logger.warning(" ".join(messages))


@dataclass(frozen=True, slots=True)
class IntlOptions:
    """Configuration captured by every resolution call.

    Never mutated: Localizer publishes a new instance on init(), load()
    and change_current_locale(), so a call that captured a snapshot sees
    one consistent configuration from start to finish.

    Attributes:
        current_locale: Locale used for lookup and formatting
        fallback_locale: Locale consulted when a key is missing
        locales: Locale identifier to that locale's root group
        formats: Named number/date/time formats (defaults merged in)
        escape_html: HTML-escape string variables containing '<'
        debug: Wrap plain results in debug markup carrying the key
        debug_attribute: Attribute name for the key in debug markup
        warning_handler: Sink for localization data issues
        get_hook: Optional instrumentation hook run before each lookup
    """

    current_locale: str | None = None
    fallback_locale: str | None = None
    locales: Mapping[str, Group] = field(default_factory=lambda: MappingProxyType({}))
    formats: FormatOptions = DEFAULT_FORMATS
    escape_html: bool = True
    debug: bool = False
    debug_attribute: str = DEFAULT_DEBUG_ATTRIBUTE
    warning_handler: WarningHandler = log_warning
    get_hook: GetHook | None = None

    def catalog_for(self, locale: str | None) -> Group | None:
        """Root group for ``locale``, or None if it has no catalog."""
        if locale is None:
            return None
        return self.locales.get(locale)

    def evolve(self, **changes: object) -> IntlOptions:
        """Copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]
