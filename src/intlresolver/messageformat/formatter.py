"""ICU MessageFormat formatting.

MessageFormatter is the capability boundary the localization orchestrator
depends on: any object with a matching ``format`` method can replace the
bundled ICUMessageFormatter.

Semantics of ICUMessageFormatter:
    - ``{name}``: ``str(value)``; None renders as an empty string and
      booleans as ``true``/``false``
    - ``{name, number[, style]}``: Babel number formatting (style is a
      named format or a CLDR pattern)
    - ``{name, date|time[, style]}``: Babel date/time formatting
      (default style: medium); values are datetime/date/time
      objects, ISO 8601 strings, or POSIX timestamps in seconds
    - ``{name, plural|selectordinal, ...}``: ``=N`` exact matches first
      (compared against the raw value), then the CLDR category of
      ``value - offset``; ``#`` renders ``value - offset`` as a number
    - ``{name, select, ...}``: branch named like ``{name}`` renders the
      value, else ``other``

Every failure surfaces as FormatError (or a subclass): missing variables,
values of the wrong type, malformed templates, Babel errors.

Python 3.13+. Uses Babel via LocaleContext and plural_rules.
"""

import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Protocol, runtime_checkable

from intlresolver.diagnostics import (
    ErrorTemplate,
    FormatError,
    InvalidValueError,
    MissingValueError,
)
from intlresolver.enums import ArgumentType
from intlresolver.runtime.locale_context import LocaleContext, NumberValue
from intlresolver.runtime.plural_rules import select_plural_category

from .ast import (
    Argument,
    DateTimeArgument,
    Literal,
    NumberArgument,
    Pattern,
    PluralArgument,
    Pound,
    SelectArgument,
)
from .formats import DEFAULT_FORMATS, FormatOptions, datetime_options, number_options
from .parser import parse_message, parse_message_cached

__all__ = ["ICUMessageFormatter", "MessageFormatter", "format_message"]


@runtime_checkable
class MessageFormatter(Protocol):
    """Formats a raw template for a locale with the given variables."""

    def format(
        self,
        template: str,
        locale: str,
        formats: FormatOptions,
        variables: Mapping[str, object],
    ) -> str:
        """Return the formatted message.

        Raises:
            FormatError: If the template is malformed or a variable is
                missing or incompatible with its argument type
        """
        ...


class ICUMessageFormatter:
    """Default MessageFormatter implementing ICU MessageFormat with Babel.

    Example:
        >>> formatter = ICUMessageFormatter()
        >>> formatter.format(
        ...     "{count, plural, one{1 item} other{{count} items}}", "en-US", {}, {"count": 5}
        ... )
        '5 items'
    """

    __slots__ = ("_cache_patterns",)

    def __init__(self, *, cache_patterns: bool = True) -> None:
        """Initialize formatter.

        Args:
            cache_patterns: Reuse parsed templates across calls (LRU)
        """
        self._cache_patterns = cache_patterns

    def parse(self, template: str) -> Pattern:
        """Parse a template, using the shared LRU cache when enabled."""
        if self._cache_patterns:
            return parse_message_cached(template)
        return parse_message(template)

    def format(
        self,
        template: str,
        locale: str,
        formats: FormatOptions,
        variables: Mapping[str, object],
    ) -> str:
        pattern = self.parse(template)
        context = _FormatContext(LocaleContext.create(locale), locale, formats, variables)
        return context.render(pattern, pound=None)


class _FormatContext:
    """Per-call state for rendering one pattern."""

    __slots__ = ("formats", "locale", "locale_context", "variables")

    def __init__(
        self,
        locale_context: LocaleContext,
        locale: str,
        formats: FormatOptions,
        variables: Mapping[str, object],
    ) -> None:
        self.locale_context = locale_context
        self.locale = locale
        self.formats = formats
        self.variables = variables

    def render(self, pattern: Pattern, *, pound: NumberValue | None) -> str:
        parts: list[str] = []
        for element in pattern.elements:
            match element:
                case Literal(value=value):
                    parts.append(value)
                case Argument(name=name):
                    parts.append(_stringify(self._value(name)))
                case Pound():
                    parts.append("#" if pound is None else self.locale_context.format_number(pound))
                case NumberArgument(name=name, style=style):
                    parts.append(self._format_number(name, style))
                case DateTimeArgument(name=name, kind=kind, style=style):
                    parts.append(self._format_datetime(name, kind, style))
                case PluralArgument():
                    parts.append(self._format_plural(element))
                case SelectArgument(name=name, options=options):
                    selected = options.get(_stringify(self._value(name)), options["other"])
                    parts.append(self.render(selected, pound=pound))
        return "".join(parts)

    def _value(self, name: str) -> object:
        if name not in self.variables:
            raise MissingValueError(ErrorTemplate.value_not_provided(name))
        return self.variables[name]

    def _number(self, name: str) -> NumberValue:
        """Read a variable as a number; numeric strings are accepted."""
        value = self._value(name)
        match value:
            case bool():
                pass
            case int() | float() | Decimal():
                return value
            case str():
                try:
                    return Decimal(value.strip())
                except InvalidOperation:
                    pass
        raise InvalidValueError(ErrorTemplate.invalid_value(name, "number", value))

    def _named_format(self, kind: str, style: str) -> Mapping[str, object] | None:
        named = self.formats.get(kind, {})
        if style in named:
            return named[style]
        return DEFAULT_FORMATS[kind].get(style)

    def _format_number(self, name: str, style: str | None) -> str:
        value = self._number(name)
        if style is None:
            return self.locale_context.format_number(value)
        options = self._named_format("number", style)
        if options is not None:
            return self.locale_context.format_number(value, **number_options(options))  # type: ignore[arg-type]
        if style.startswith("::"):
            raise FormatError(ErrorTemplate.unknown_format("number", style))
        return self.locale_context.format_number(value, pattern=style)

    def _format_datetime(self, name: str, kind: ArgumentType, style: str | None) -> str:
        value = self._value(name)
        if style is None:
            options: dict[str, object] = {"style": "medium"}
        else:
            named = self._named_format(str(kind), style)
            options = datetime_options(named) if named is not None else {"pattern": style}
        try:
            if kind is ArgumentType.TIME:
                return self.locale_context.format_time(value, **options)  # type: ignore[arg-type]
            return self.locale_context.format_date(value, **options)  # type: ignore[arg-type]
        except FormatError as e:
            raise InvalidValueError(ErrorTemplate.formatting_failed(name, str(e)), cause=e) from e

    def _format_plural(self, element: PluralArgument) -> str:
        value = self._number(element.name)
        if not _is_finite(value):
            raise InvalidValueError(ErrorTemplate.invalid_value(element.name, "finite number", value))

        exact_key = _as_decimal(value)
        for key, pattern in element.exact_matches().items():
            if key == exact_key:
                return self.render(pattern, pound=value - element.offset)

        operand = value - element.offset
        category = select_plural_category(_plural_operand(operand), self.locale, element.plural_type)
        selected = element.options.get(category, element.options["other"])
        return self.render(selected, pound=operand)


def _is_finite(value: NumberValue) -> bool:
    match value:
        case Decimal():
            return value.is_finite()
        case float():
            return math.isfinite(value)
        case _:
            return True


def _as_decimal(value: NumberValue) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _plural_operand(value: NumberValue) -> NumberValue:
    """Integral floats select like integers ("1.0 item" is singular)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _stringify(value: object) -> str:
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case _:
            return str(value)


def format_message(
    template: str,
    locale: str,
    variables: Mapping[str, object],
    formats: FormatOptions | None = None,
) -> str:
    """Format a template with the default ICUMessageFormatter.

    Example:
        >>> format_message("Hello, {name}!", "en-US", {"name": "Ann"})
        'Hello, Ann!'
    """
    return ICUMessageFormatter().format(template, locale, formats or DEFAULT_FORMATS, variables)
