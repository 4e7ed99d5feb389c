"""Monetary domain package.

This package contains the currency registry (static ISO 4217 and symbol data)
and the `Amount` value type with exact decimal arithmetic, plus the binary and
JSON encodings of amounts.
"""

from suite_currency.domain.monetary.currency_info import CurrencyInfo
from suite_currency.domain.monetary.amount import Amount

__all__ = ["CurrencyInfo", "Amount"]
