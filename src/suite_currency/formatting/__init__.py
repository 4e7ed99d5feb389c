"""Locale-aware formatting and parsing of amounts."""

from suite_currency.formatting.currency_display import CurrencyDisplay
from suite_currency.formatting.number_format import NumberFormat
from suite_currency.formatting.formatter import Formatter

__all__ = ["CurrencyDisplay", "NumberFormat", "Formatter"]
