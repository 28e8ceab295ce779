"""Catalog entry types: a tagged variant of templates and groups.

A locale catalog is a tree. Leaves are Template values holding raw ICU
message strings; inner nodes are Group values mapping names to further
entries. Plain nested dicts (as loaded from JSON or YAML) are converted
once with build_group() / build_catalog(), so every later lookup can match
on the entry type instead of inspecting arbitrary runtime values.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from intlresolver.diagnostics import ContractViolationError, ErrorTemplate

__all__ = [
    "CatalogEntry",
    "Group",
    "LocaleCatalog",
    "Template",
    "build_catalog",
    "build_group",
    "to_plain",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Template:
    """Leaf entry: a raw, unformatted message string."""

    text: str


@dataclass(frozen=True, slots=True, eq=True)
class Group:
    """Inner entry: named child entries.

    The mapping is exposed read-only. Groups are never mutated after
    construction; merges build new groups.
    """

    entries: Mapping[str, CatalogEntry]

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, name: str) -> CatalogEntry | None:
        return self.entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


type CatalogEntry = Template | Group
"""A catalog node: Template(text) or Group(entries)."""

type LocaleCatalog = Mapping[str, Group]
"""Locale identifier (e.g., 'en-US') to that locale's root group."""


def _build_entry(value: object, path: str) -> CatalogEntry | None:
    match value:
        case Template() | Group():
            return value
        case str():
            return Template(value)
        case Mapping():
            return build_group(value, _path=path)
        case _:
            logger.warning(
                "Skipping catalog entry '%s': unsupported value type %s",
                path,
                type(value).__name__,
            )
            return None


def build_group(data: Mapping[str, object], *, _path: str = "") -> Group:
    """Convert a nested mapping of strings into a Group.

    String leaves become Template entries, mappings become nested groups.
    Values of any other type cannot resolve to a message; they are logged
    and skipped.

    Args:
        data: Nested mapping, e.g. ``{"a": {"b": "nested"}, "a.b": "flat"}``

    Returns:
        Immutable Group

    Example:
        >>> group = build_group({"greeting": "Hello, {name}!"})
        >>> group.get("greeting")
        Template(text='Hello, {name}!')
    """
    if isinstance(data, Group):
        return data
    entries: dict[str, CatalogEntry] = {}
    for name, value in data.items():
        path = f"{_path}.{name}" if _path else str(name)
        entry = _build_entry(value, path)
        if entry is not None:
            entries[str(name)] = entry
    return Group(entries)


def build_catalog(data: Mapping[str, object]) -> dict[str, Group]:
    """Convert ``{locale: nested mapping}`` into ``{locale: Group}``.

    Args:
        data: Locale identifier to that locale's nested messages

    Returns:
        New dict of locale identifiers to groups

    Raises:
        ContractViolationError: If a locale's value is not a mapping
    """
    catalog: dict[str, Group] = {}
    for locale, messages in data.items():
        if not isinstance(messages, Mapping):
            raise ContractViolationError(
                ErrorTemplate.invalid_catalog(str(locale), type(messages).__name__)
            )
        catalog[str(locale)] = build_group(messages)
    return catalog


def to_plain(entry: CatalogEntry) -> str | dict[str, object]:
    """Convert an entry back into plain strings and dicts."""
    match entry:
        case Template(text=text):
            return text
        case Group(entries=entries):
            return {name: to_plain(child) for name, child in entries.items()}
