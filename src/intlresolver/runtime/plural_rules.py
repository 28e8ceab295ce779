"""CLDR plural rules implementation using Babel.

Provides cardinal and ordinal plural category selection for all locales
using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from intlresolver.enums import PluralType
from intlresolver.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(
    n: int | float | Decimal,
    locale: str,
    plural_type: PluralType = PluralType.CARDINAL,
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv-LV", "en_US", "ar-SA")
        plural_type: CARDINAL ("3 items") or ORDINAL ("3rd place")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en-US")
        'one'
        >>> select_plural_category(5, "ru-RU")
        'many'
        >>> select_plural_category(2, "en-US", PluralType.ORDINAL)
        'two'
        >>> select_plural_category(42, "ja-JP")
        'other'

    Unknown or malformed locales fall back to the simple one/other rule
    (ordinals: always "other").
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        if plural_type is PluralType.ORDINAL:
            return "other"
        return "one" if abs(n) == 1 else "other"

    rule = locale_obj.ordinal_form if plural_type is PluralType.ORDINAL else locale_obj.plural_form
    return rule(n)
