"""Per-locale number symbols and currency patterns, read from the CLDR data bundled with babel.

Patterns use "¤" for the currency marker and "#,##0.00" for the number. The
formatter only reads where the marker sits relative to the number and whether
a space separates them; digit counts and grouping come from `Formatter` options.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel.numbers import get_decimal_symbol, get_group_symbol, get_minus_sign_symbol, get_plus_sign_symbol

from suite_currency.domain.locale.locale import Locale, find_cldr_locale

logger = logging.getLogger(__name__)

NBSP = "\u00a0"

# Locale whose data is used when no locale on the parent chain is known to CLDR
_FALLBACK_LOCALE = Locale("en")


@dataclass(frozen=True)
class NumberFormat:
    """Number symbols and currency pattern of one locale.

    Attributes:
        decimal_separator (str): Separates integer and fraction digits.
        grouping_separator (str): Separates groups of 3 integer digits.
        currency_pattern (str): Positive pattern such as "¤#,##0.00" or "#,##0.00 ¤".
        plus_sign (str): Sign shown before positive amounts on request.
        minus_sign (str): Sign shown before negative amounts.
    """

    decimal_separator: str
    grouping_separator: str
    currency_pattern: str
    plus_sign: str = "+"
    minus_sign: str = "-"


@functools.cache
def get_number_format(locale: Locale) -> NumberFormat:
    """Return the number format of the nearest locale on the parent chain of $locale.

    Locales unknown to CLDR (and the empty locale) use the "en" format.
    """
    cldr_locale = find_cldr_locale(locale)
    if cldr_locale is None:
        logger.debug(f"No CLDR number format along the parent chain of '{locale}'; using '{_FALLBACK_LOCALE}'")
        cldr_locale = find_cldr_locale(_FALLBACK_LOCALE)

    # "¤ #,##0.00;¤-#,##0.00" => "¤ #,##0.00"; the minus sign is placed by the formatter
    currency_pattern = cldr_locale.currency_formats["standard"].pattern.split(";")[0]
    return NumberFormat(
        decimal_separator=get_decimal_symbol(cldr_locale),
        grouping_separator=get_group_symbol(cldr_locale),
        currency_pattern=currency_pattern,
        plus_sign=get_plus_sign_symbol(cldr_locale),
        minus_sign=get_minus_sign_symbol(cldr_locale),
    )
