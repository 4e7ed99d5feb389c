"""Exact decimal numbers and rounding modes."""

from suite_currency.domain.numeric.rounding_mode import RoundingMode
from suite_currency.domain.numeric.decimal_value import DecimalValue

__all__ = ["RoundingMode", "DecimalValue"]
