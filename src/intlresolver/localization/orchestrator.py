"""Message resolution with locale fallback.

Localizer owns one IntlOptions snapshot and composes the pipeline:

    key resolver (current locale)
      -> [miss] key resolver (fallback locale)
      -> variable sanitizer
      -> message formatter (always the current locale)

Missing locales, missing keys and formatting failures are localization
data issues: they never raise. Each is reported once through the
configured warning handler and degrades to a safe result (``""`` for an
unresolvable key, the raw template for a formatting failure). Only
contract violations (empty key, missing init options) raise.

Thread safety:
    The options snapshot is replaced, never mutated. Readers capture the
    current snapshot under the RWLock read lock and resolve without
    holding it; init(), load() and change_current_locale() build a new
    snapshot and publish it under the write lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import Future
from types import MappingProxyType
from typing import TYPE_CHECKING

from intlresolver.catalog import build_catalog, merge_catalogs, resolve_key
from intlresolver.constants import DEFAULT_DEBUG_ATTRIBUTE
from intlresolver.diagnostics import (
    ContractViolationError,
    ErrorTemplate,
    LocalizationWarning,
    WarningTemplate,
)
from intlresolver.messageformat import ICUMessageFormatter, merge_formats
from intlresolver.runtime.rwlock import RWLock

from .detection import determine_locale
from .options import IntlOptions, log_warning
from .result import Localized, RichMessage, wrap_message
from .sanitizer import sanitize_variables
from .types import HookOutcome, MessageDescriptor, as_descriptor

if TYPE_CHECKING:
    from intlresolver.messageformat import FormatOptions, MessageFormatter

    from .options import GetHook, WarningHandler
    from .types import LocaleCode, MessageKey, Variables

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Resolves message keys against in-memory locale catalogs.

    Example:
        >>> l10n = Localizer()
        >>> _ = l10n.init("en-US", {"en-US": {"greeting": "Hello, {name}!"}})
        >>> l10n.get_message("greeting", {"name": "Ann"})
        'Hello, Ann!'
        >>> l10n.get("missing").with_default("Hi")
        'Hi'
    """

    __slots__ = ("_formatter", "_lock", "_options")

    def __init__(
        self,
        options: IntlOptions | None = None,
        *,
        formatter: MessageFormatter | None = None,
    ) -> None:
        """Create a Localizer.

        Args:
            options: Initial configuration; init() replaces it
            formatter: Template formatter (default: ICUMessageFormatter)
        """
        self._options = options if options is not None else IntlOptions()
        self._formatter: MessageFormatter = formatter if formatter is not None else ICUMessageFormatter()
        self._lock = RWLock()

    def __repr__(self) -> str:
        options = self._snapshot()
        return (
            f"Localizer(current_locale={options.current_locale!r}, "
            f"fallback_locale={options.fallback_locale!r}, locales={sorted(options.locales)!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def init(
        self,
        current_locale: LocaleCode | None,
        locales: Mapping[LocaleCode, Mapping[str, object]] | None,
        *,
        fallback_locale: LocaleCode | None = None,
        formats: FormatOptions | None = None,
        escape_html: bool = True,
        debug: bool = False,
        debug_attribute: str = DEFAULT_DEBUG_ATTRIBUTE,
        warning_handler: WarningHandler | None = None,
        get_hook: GetHook | None = None,
    ) -> Future[IntlOptions]:
        """Install a new configuration.

        Args:
            current_locale: Active locale (required)
            locales: ``{locale: nested messages}`` catalog (required)
            fallback_locale: Locale consulted when a key is missing
            formats: Named formats merged over the built-in defaults
            escape_html: HTML-escape string variables containing '<'
            debug: Wrap get() results in markup carrying the key
            debug_attribute: Attribute name used for the key in debug markup
            warning_handler: Sink for localization warnings (default: logging)
            get_hook: Called as ``get_hook(key, current_locale)`` before lookups

        Returns:
            Already-completed Future holding the installed options

        Raises:
            ContractViolationError: If current_locale or locales is missing,
                or a locale's messages are not a mapping
        """
        if not current_locale:
            raise ContractViolationError(ErrorTemplate.option_required("current_locale"))
        if locales is None:
            raise ContractViolationError(ErrorTemplate.option_required("locales"))

        options = IntlOptions(
            current_locale=current_locale,
            fallback_locale=fallback_locale,
            locales=MappingProxyType(build_catalog(locales)),
            formats=merge_formats(formats),
            escape_html=escape_html,
            debug=debug,
            debug_attribute=debug_attribute,
            warning_handler=warning_handler if warning_handler is not None else log_warning,
            get_hook=get_hook,
        )
        with self._lock.write():
            self._options = options
        logger.debug(
            "Initialized localizer: current=%s fallback=%s locales=%s",
            current_locale,
            fallback_locale,
            sorted(options.locales),
        )

        future: Future[IntlOptions] = Future()
        future.set_result(options)
        return future

    def get_init_options(self) -> IntlOptions:
        """Current configuration snapshot."""
        return self._snapshot()

    def load(self, locales: Mapping[LocaleCode, Mapping[str, object]]) -> None:
        """Deep-merge more messages into the catalog.

        Incoming values win where both sides define the same path; keys
        present on only one side are kept.

        Raises:
            ContractViolationError: If a locale's messages are not a mapping
        """
        incoming = build_catalog(locales)
        with self._lock.write():
            merged = merge_catalogs(self._options.locales, incoming)
            self._options = self._options.evolve(locales=MappingProxyType(merged))
        logger.debug("Loaded messages for locales: %s", sorted(incoming))

    def change_current_locale(self, locale: LocaleCode) -> bool:
        """Switch the active locale.

        A locale without a catalog is rejected with a warning and the
        current locale stays unchanged.

        Returns:
            True if the locale was switched
        """
        with self._lock.write():
            options = self._options
            if options.catalog_for(locale) is not None:
                self._options = options.evolve(current_locale=locale)
                logger.debug("Switched current locale %s -> %s", options.current_locale, locale)
                return True
        self._warn(
            options,
            WarningTemplate.locale_switch_rejected(locale, catalog_loaded=bool(options.locales)),
        )
        return False

    @staticmethod
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
        """See intlresolver.localization.detection.determine_locale."""
        return determine_locale(
            url=url,
            url_locale_key=url_locale_key,
            cookie_header=cookie_header,
            cookie_locale_key=cookie_locale_key,
            storage=storage,
            storage_locale_key=storage_locale_key,
            use_environment=use_environment,
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def get_message(self, key: MessageKey, variables: Variables | None = None) -> str:
        """Resolve and format a message.

        Args:
            key: Flat or dotted message key
            variables: Placeholder values; with None the raw template is
                returned without a formatting pass

        Returns:
            Formatted message, the raw template if formatting failed, or
            ``""`` if the key could not be resolved

        Raises:
            ContractViolationError: If key is empty
        """
        return self._resolve(self._snapshot(), key, variables)

    def get(self, key: MessageKey, variables: Variables | None = None) -> Localized | RichMessage:
        """Plain-text lookup; wrapped in debug markup when ``debug`` is on."""
        options = self._snapshot()
        message = self._resolve(options, key, variables)
        if options.debug:
            return wrap_message(
                key, message, debug=True, debug_attribute=options.debug_attribute
            )
        return Localized(message)

    def get_html(self, key: MessageKey, variables: Variables | None = None) -> Localized | RichMessage:
        """Lookup whose template is markup to be rendered as-is.

        Returns:
            RichMessage, or an empty Localized if nothing was resolved
        """
        options = self._snapshot()
        message = self._resolve(options, key, variables)
        if not message:
            return Localized("")
        return wrap_message(
            key, message, debug=options.debug, debug_attribute=options.debug_attribute
        )

    def format_message(
        self,
        descriptor: MessageDescriptor | Mapping[str, object],
        variables: Variables | None = None,
    ) -> Localized | RichMessage:
        """get() by descriptor id, substituting its default message when empty."""
        resolved = as_descriptor(descriptor)
        return self.get(resolved.id, variables).with_default(resolved.default_message)

    def format_html_message(
        self,
        descriptor: MessageDescriptor | Mapping[str, object],
        variables: Variables | None = None,
    ) -> Localized | RichMessage:
        """get_html() by descriptor id, substituting its default message when empty."""
        resolved = as_descriptor(descriptor)
        return self.get_html(resolved.id, variables).with_default(resolved.default_message)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _snapshot(self) -> IntlOptions:
        with self._lock.read():
            return self._options

    def _resolve(self, options: IntlOptions, key: MessageKey, variables: Variables | None) -> str:
        if not isinstance(key, str) or not key:
            raise ContractViolationError(ErrorTemplate.key_required())

        self._run_hook(options, key)

        current = options.current_locale
        group = options.catalog_for(current)
        if group is None:
            if not current:
                self._warn(options, WarningTemplate.locale_not_configured())
            else:
                self._warn(options, WarningTemplate.locale_data_missing(current))
            return ""

        template = resolve_key(group, key)
        if template is None:
            fallback = options.fallback_locale
            if not fallback:
                self._warn(options, WarningTemplate.message_missing(key, current))
                return ""
            fallback_group = options.catalog_for(fallback)
            template = resolve_key(fallback_group, key) if fallback_group is not None else None
            if template is None:
                self._warn(options, WarningTemplate.message_missing_in_fallback(key, current, fallback))
                return ""
            self._warn(options, WarningTemplate.used_fallback(key, current, fallback))

        if variables is None:
            return template

        sanitized = sanitize_variables(variables, escape_html=options.escape_html)
        try:
            # Formatting follows the current locale even for fallback templates.
            return self._formatter.format(template, current, options.formats, sanitized)
        except Exception as e:  # noqa: BLE001
            self._warn(options, WarningTemplate.format_failed(key, str(e)))
            return template

    @staticmethod
    def _run_hook(options: IntlOptions, key: MessageKey) -> HookOutcome | None:
        if options.get_hook is None:
            return None
        try:
            options.get_hook(key, options.current_locale)
        except Exception as e:  # noqa: BLE001
            logger.warning("get_hook failed for key '%s'", key, exc_info=True)
            return HookOutcome(ok=False, error=e)
        return HookOutcome(ok=True)

    @staticmethod
    def _warn(options: IntlOptions, warning: LocalizationWarning) -> None:
        options.warning_handler(*warning.messages)
