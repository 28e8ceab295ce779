"""ICU MessageFormat template AST.

A parsed template is a Pattern: a tuple of elements. Plural and select
arguments hold one sub-Pattern per selector.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from intlresolver.enums import ArgumentType, PluralType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "Pattern",
    # Elements
    "Literal",
    "Argument",
    "Pound",
    "NumberArgument",
    "DateTimeArgument",
    "PluralArgument",
    "SelectArgument",
    # Type aliases
    "Element",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text, with ICU apostrophe quoting already removed."""

    value: str


@dataclass(frozen=True, slots=True)
class Argument:
    """Simple placeholder: ``{name}``."""

    name: str


@dataclass(frozen=True, slots=True)
class Pound:
    """``#`` inside a plural sub-message: the number minus the offset."""


@dataclass(frozen=True, slots=True)
class NumberArgument:
    """``{name, number}`` or ``{name, number, style}``.

    ``style`` is a named format (``integer``, ``percent``, ``currency``,
    or a key of ``formats["number"]``) or a CLDR number pattern.
    """

    name: str
    style: str | None = None


@dataclass(frozen=True, slots=True)
class DateTimeArgument:
    """``{name, date[, style]}`` or ``{name, time[, style]}``."""

    name: str
    kind: ArgumentType
    style: str | None = None


@dataclass(frozen=True, slots=True)
class PluralArgument:
    """``{name, plural|selectordinal, [offset:N] selector{...} ...}``.

    Selectors are ``=N`` exact matches or CLDR categories
    (zero, one, two, few, many, other).
    """

    name: str
    options: Mapping[str, "Pattern"]
    offset: int = 0
    plural_type: PluralType = PluralType.CARDINAL

    def exact_matches(self) -> dict[Decimal, "Pattern"]:
        """Options keyed ``=N``, indexed by their numeric value."""
        return {Decimal(key[1:]): pattern for key, pattern in self.options.items() if key.startswith("=")}


@dataclass(frozen=True, slots=True)
class SelectArgument:
    """``{name, select, key{...} other{...}}``."""

    name: str
    options: Mapping[str, "Pattern"]


type Element = (
    Literal
    | Argument
    | Pound
    | NumberArgument
    | DateTimeArgument
    | PluralArgument
    | SelectArgument
)


@dataclass(frozen=True, slots=True)
class Pattern:
    """Parsed template or sub-message."""

    elements: tuple[Element, ...]

    def argument_names(self) -> frozenset[str]:
        """Names of every variable the pattern references, at any depth."""
        names: set[str] = set()
        for element in self.elements:
            match element:
                case PluralArgument(name=name, options=options) | SelectArgument(
                    name=name, options=options
                ):
                    names.add(name)
                    for sub in options.values():
                        names |= sub.argument_names()
                case Argument(name=name) | NumberArgument(name=name) | DateTimeArgument(
                    name=name
                ):
                    names.add(name)
                case Literal() | Pound():
                    pass
        return frozenset(names)
