"""Formatting runtime: Babel-backed locale formatting, plural rules, locking.

Python 3.13+. Depends on Babel for CLDR data.
"""

from .locale_context import LocaleContext
from .plural_rules import select_plural_category
from .rwlock import RWLock

__all__ = ["LocaleContext", "RWLock", "select_plural_category"]
