"""Named formats for ICU ``number``, ``date`` and ``time`` arguments.

A template can refer to a named format as the argument style:
``{price, number, money}`` looks up ``formats["number"]["money"]``.
Built-in names mirror ICU: ``integer``, ``percent`` and ``currency`` for
numbers, ``short``/``medium``/``long``/``full`` for dates and times.

Option keys may be written in snake_case or in the camelCase used by
ICU/JavaScript configuration (``minimumFractionDigits``); both map to
LocaleContext keyword arguments.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

__all__ = [
    "DEFAULT_FORMATS",
    "FormatOptions",
    "datetime_options",
    "merge_formats",
    "number_options",
]

logger = logging.getLogger(__name__)

type FormatOptions = Mapping[str, Mapping[str, Mapping[str, object]]]
"""``{"number" | "date" | "time": {format name: option mapping}}``."""

_STYLES = ("short", "medium", "long", "full")

DEFAULT_FORMATS: FormatOptions = MappingProxyType({
    "number": MappingProxyType({
        "integer": MappingProxyType({"maximum_fraction_digits": 0}),
        "currency": MappingProxyType({"style": "currency"}),
        "percent": MappingProxyType({"style": "percent"}),
    }),
    "date": MappingProxyType({name: MappingProxyType({"style": name}) for name in _STYLES}),
    "time": MappingProxyType({name: MappingProxyType({"style": name}) for name in _STYLES}),
})

_NUMBER_KEYS = frozenset({
    "style",
    "currency",
    "currency_display",
    "minimum_fraction_digits",
    "maximum_fraction_digits",
    "use_grouping",
    "pattern",
})
_DATETIME_KEYS = frozenset({"style", "pattern"})
_DATETIME_ALIASES = {"date_style": "style", "time_style": "style"}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    """Convert camelCase option names to snake_case.

    Example:
        >>> _to_snake_case("minimumFractionDigits")
        'minimum_fraction_digits'
        >>> _to_snake_case("style")
        'style'
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _normalize(options: Mapping[str, object]) -> dict[str, object]:
    return {_to_snake_case(str(key)): value for key, value in options.items()}


def merge_formats(custom: FormatOptions | None = None) -> dict[str, dict[str, dict[str, object]]]:
    """Merge caller formats over DEFAULT_FORMATS.

    Merging happens per named format: a caller entry for ``percent``
    overrides the keys it names and keeps the remaining built-in keys.
    Caller values always win.

    Example:
        >>> merged = merge_formats({"number": {"percent": {"maximumFractionDigits": 2}}})
        >>> merged["number"]["percent"]
        {'style': 'percent', 'maximum_fraction_digits': 2}
    """
    merged: dict[str, dict[str, dict[str, object]]] = {
        kind: {name: dict(options) for name, options in named.items()}
        for kind, named in DEFAULT_FORMATS.items()
    }
    for kind, named in (custom or {}).items():
        target = merged.setdefault(kind, {})
        for name, options in named.items():
            target[name] = {**target.get(name, {}), **_normalize(options)}
    return merged


def number_options(options: Mapping[str, object]) -> dict[str, object]:
    """Keyword arguments for LocaleContext.format_number()."""
    normalized = _normalize(options)
    ignored = normalized.keys() - _NUMBER_KEYS
    if ignored:
        logger.debug("Ignoring unsupported number format options: %s", sorted(ignored))
    return {key: value for key, value in normalized.items() if key in _NUMBER_KEYS}


def datetime_options(options: Mapping[str, object]) -> dict[str, object]:
    """Keyword arguments for LocaleContext.format_date()/format_time()."""
    normalized = {
        _DATETIME_ALIASES.get(key, key): value for key, value in _normalize(options).items()
    }
    ignored = normalized.keys() - _DATETIME_KEYS
    if ignored:
        logger.debug("Ignoring unsupported date/time format options: %s", sorted(ignored))
    return {key: value for key, value in normalized.items() if key in _DATETIME_KEYS}
