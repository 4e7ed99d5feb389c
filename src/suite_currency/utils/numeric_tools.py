from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

from suite_currency.domain.numeric.decimal_value import DecimalValue
from suite_currency.errors import InvalidNumberError

# Use where `DecimalValue` is expected, but exact scalars are also acceptable (and will be converted).
# `float` is deliberately missing: it cannot carry an exact decimal value.
NumberLike: TypeAlias = DecimalValue | Decimal | int | str


def as_decimal_value(value: NumberLike, *, op: str) -> DecimalValue:
    """Converts input to `DecimalValue` without losing digits.

    Args:
        value: Input value as `NumberLike`.
        op: Operation name reported in the error when conversion fails.

    Returns:
        Value converted to `DecimalValue`.

    Raises:
        InvalidNumberError: If $value is a float, a bool, a non-finite Decimal or
            text that does not match the number grammar.
    """
    if isinstance(value, DecimalValue):
        return value

    if isinstance(value, str):
        return DecimalValue.from_str(value, op=op)

    if isinstance(value, Decimal):
        return DecimalValue.from_decimal(value, op=op)

    if isinstance(value, int) and not isinstance(value, bool):
        return DecimalValue(value)

    raise InvalidNumberError(op, str(value))
