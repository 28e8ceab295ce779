"""HTML escaping of caller-supplied variables.

Templates may be interpolated into markup, so string variables that
contain ``<`` are entity-escaped before formatting unless the Localizer
was configured with ``escape_html=False``.

Python 3.13+. Zero external dependencies.
"""

import html
from collections.abc import Mapping

__all__ = ["sanitize_variables"]


def sanitize_variables(
    variables: Mapping[str, object], *, escape_html: bool = True
) -> dict[str, object]:
    """Return a shallow copy of ``variables`` with markup-bearing strings escaped.

    Only ``str`` values containing ``<`` are touched; ``& < > " '`` are
    replaced by entities. Other values pass through unchanged and the
    input mapping is never modified.

    Args:
        variables: Placeholder values
        escape_html: Disable to pass strings through verbatim

    Returns:
        New dict

    Example:
        >>> sanitize_variables({"v": "<script>", "n": 3})
        {'v': '&lt;script&gt;', 'n': 3}
        >>> sanitize_variables({"v": "Tom & Jerry"})
        {'v': 'Tom & Jerry'}
    """
    sanitized = dict(variables)
    if not escape_html:
        return sanitized
    for name, value in sanitized.items():
        if isinstance(value, str) and "<" in value:
            sanitized[name] = html.escape(value, quote=True)
    return sanitized
