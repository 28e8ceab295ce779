"""In-memory locale catalogs: entry types, key resolution, deep-merge.

Python 3.13+. Zero external dependencies.
"""

from .entries import (
    CatalogEntry,
    Group,
    LocaleCatalog,
    Template,
    build_catalog,
    build_group,
    to_plain,
)
from .merge import merge_catalogs, merge_groups
from .resolver import resolve_key

__all__ = [
    "CatalogEntry",
    "Group",
    "LocaleCatalog",
    "Template",
    "build_catalog",
    "build_group",
    "merge_catalogs",
    "merge_groups",
    "resolve_key",
    "to_plain",
]
