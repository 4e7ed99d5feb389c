"""Read-only lookups over the embedded currency tables.

None of these functions raise for unknown codes: each returns a fallback value
together with a found flag, so they can be used for non-exceptional queries.
Validating constructors (e.g. `Amount`) raise `InvalidCurrencyCodeError` instead.

Example:
    >>> get_numeric_code("USD")
    ('840', True)
    >>> get_digits("XXX")
    (0, False)
    >>> get_symbol("USD", Locale.from_str("en"))
    ('$', True)
"""

from __future__ import annotations

import logging

from bidict import bidict

from suite_currency.domain.locale.locale import Locale, find_cldr_locale
from suite_currency.domain.monetary.currency_data import CURRENCIES, CURRENCY_CODES
from suite_currency.domain.monetary.currency_info import CurrencyInfo

logger = logging.getLogger(__name__)

# Alphabetic code <-> numeric code, both directions
_NUMERIC_CODES: bidict[str, str] = bidict((code, info.numeric_code) for code, info in CURRENCIES.items())


def is_valid(currency_code: str) -> bool:
    """Return True if $currency_code is a supported ISO 4217 code (exact, uppercase)."""
    return isinstance(currency_code, str) and currency_code in CURRENCIES


def get_currency_codes() -> tuple[str, ...]:
    """Return all supported currency codes, G10 currencies first."""
    return CURRENCY_CODES


def get_currency_info(currency_code: str) -> CurrencyInfo | None:
    """Return the static data for $currency_code, or None if it is unknown."""
    if not is_valid(currency_code):
        return None
    return CURRENCIES[currency_code]


def get_numeric_code(currency_code: str) -> tuple[str, bool]:
    """Return the ISO numeric code, or ("000", False) for an unknown code."""
    if not is_valid(currency_code):
        return "000", False
    return _NUMERIC_CODES[currency_code], True


def get_currency_code(numeric_code: str) -> tuple[str, bool]:
    """Return the alphabetic code for an ISO numeric code, or ("", False) if none matches."""
    currency_code = _NUMERIC_CODES.inverse.get(numeric_code)
    if currency_code is None:
        return "", False
    return currency_code, True


def get_digits(currency_code: str) -> tuple[int, bool]:
    """Return the default number of fraction digits, or (0, False) for an unknown code."""
    if not is_valid(currency_code):
        return 0, False
    return CURRENCIES[currency_code].digits, True


def get_symbol(currency_code: str, locale: Locale | str) -> tuple[str, bool]:
    """Return the symbol of $currency_code as displayed in $locale.

    Symbols come from the CLDR data bundled with babel, taken from the first
    locale on the parent chain of $locale that CLDR ships (its data includes what
    it inherits). A supported currency with no symbol there is displayed by its
    code.

    Args:
        currency_code: ISO 4217 code, e.g. "USD".
        locale: Locale or locale ID, e.g. "en-CA".

    Returns:
        tuple[str, bool]: The symbol and True, or $currency_code and False if
            the code is unknown.
    """
    if not is_valid(currency_code):
        return currency_code, False

    if isinstance(locale, str):
        locale = Locale.from_str(locale)

    cldr_locale = find_cldr_locale(locale)
    if cldr_locale is not None:
        symbol = cldr_locale.currency_symbols.get(currency_code)
        if symbol is not None:
            return symbol, True

    logger.debug(f"No CLDR symbol for {currency_code} in locale '{locale}'; using the code")
    return currency_code, True
