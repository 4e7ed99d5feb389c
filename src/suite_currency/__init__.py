__version__ = "0.1.0"

from suite_currency.domain.numeric import DecimalValue, RoundingMode
from suite_currency.domain.locale import Locale
from suite_currency.domain.monetary import Amount, CurrencyInfo
from suite_currency.domain.monetary.currency_registry import (
    get_currency_code,
    get_currency_codes,
    get_currency_info,
    get_digits,
    get_numeric_code,
    get_symbol,
    is_valid,
)
from suite_currency.formatting import CurrencyDisplay, Formatter
from suite_currency.errors import (
    CurrencyError,
    DivisionByZeroError,
    InvalidCurrencyCodeError,
    InvalidNumberError,
    MismatchError,
)

__all__ = [
    "DecimalValue",
    "RoundingMode",
    "Locale",
    "Amount",
    "CurrencyInfo",
    "get_currency_code",
    "get_currency_codes",
    "get_currency_info",
    "get_digits",
    "get_numeric_code",
    "get_symbol",
    "is_valid",
    "CurrencyDisplay",
    "Formatter",
    "CurrencyError",
    "DivisionByZeroError",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
    "MismatchError",
]
