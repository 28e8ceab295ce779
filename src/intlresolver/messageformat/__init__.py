"""ICU MessageFormat: parser, AST and Babel-backed formatter.

The localization orchestrator depends only on the MessageFormatter
protocol; ICUMessageFormatter is the default implementation.

Python 3.13+. Depends on Babel through intlresolver.runtime.
"""

from .ast import Pattern
from .formats import DEFAULT_FORMATS, FormatOptions, merge_formats
from .formatter import ICUMessageFormatter, MessageFormatter, format_message
from .parser import parse_message, parse_message_cached

__all__ = [
    "DEFAULT_FORMATS",
    "FormatOptions",
    "ICUMessageFormatter",
    "MessageFormatter",
    "Pattern",
    "format_message",
    "merge_formats",
    "parse_message",
    "parse_message_cached",
]
