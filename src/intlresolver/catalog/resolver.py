"""Key resolution inside one locale's catalog.

Python 3.13+. Zero external dependencies.
"""

from intlresolver.catalog.entries import CatalogEntry, Group, Template

__all__ = ["resolve_key"]


def resolve_key(group: Group, key: str) -> str | None:
    """Find the template text for a dotted or flat key.

    A key that exists literally at the top level of ``group`` wins over
    dotted-path traversal, so ``{"a.b": "flat"}`` resolves ``"a.b"`` even
    when a nested ``{"a": {"b": ...}}`` also exists.

    Otherwise the key is split on ``.`` and each segment steps into a
    nested group. Any missing segment, a segment that steps into a
    template, or a path ending on a group yields None. Nothing is raised
    for data shape issues.

    Args:
        group: Root group of one locale
        key: Message key, e.g. ``"greeting"`` or ``"menu.file.open"``

    Returns:
        Template text, or None if the key does not name a template

    Example:
        >>> from intlresolver.catalog import build_group
        >>> resolve_key(build_group({"a": {"b": "nested"}}), "a.b")
        'nested'
        >>> resolve_key(build_group({"a.b": "flat-wins", "a": {"b": "x"}}), "a.b")
        'flat-wins'
    """
    if key in group:
        return _template_text(group.entries[key])

    node: CatalogEntry = group
    for segment in key.split("."):
        match node:
            case Group() if segment in node:
                node = node.entries[segment]
            case _:
                return None
    return _template_text(node)


def _template_text(entry: CatalogEntry) -> str | None:
    match entry:
        case Template(text=text):
            return text
        case Group():
            return None
