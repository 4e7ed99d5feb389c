"""Exceptions raised by validating constructors and operations.

Every error carries the name of the operation that raised it (`op`), so callers
can tell `Amount.add` from `Amount.cmp` without parsing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from suite_currency.domain.monetary.amount import Amount


class CurrencyError(ValueError):
    """Base class for all errors raised by this package."""

    def __init__(self, op: str, message: str):
        super().__init__(message)
        self.op = op


class InvalidNumberError(CurrencyError):
    """Raised when text does not match the decimal number grammar.

    Attributes:
        op (str): Operation that rejected the number.
        number (str): The rejected text, as given by the caller.
    """

    def __init__(self, op: str, number: str):
        super().__init__(op, f"Cannot call `{op}` because $number ('{number}') is not a valid decimal number")
        self.number = number


class DivisionByZeroError(InvalidNumberError, ZeroDivisionError):
    """Raised when the divisor is zero."""

    def __init__(self, op: str, number: str):
        # The grammar message of `InvalidNumberError` does not apply: $number is valid, just zero
        CurrencyError.__init__(self, op, f"Cannot call `{op}` because the divisor ('{number}') is zero")
        self.number = number


class InvalidCurrencyCodeError(CurrencyError):
    """Raised when a currency code is malformed or unknown.

    Attributes:
        op (str): Operation that rejected the code.
        currency_code (str): The rejected code, as given by the caller.
    """

    def __init__(self, op: str, currency_code: str):
        super().__init__(op, f"Cannot call `{op}` because $currency_code ('{currency_code}') is not a known ISO 4217 code")
        self.currency_code = currency_code


class MismatchError(CurrencyError):
    """Raised when a binary operation receives amounts in different currencies.

    Attributes:
        op (str): Operation that was attempted.
        a (Amount): Left operand.
        b (Amount): Right operand.
    """

    def __init__(self, op: str, a: Amount, b: Amount):
        super().__init__(op, f"Cannot call `{op}` because currencies differ: {a.currency_code} and {b.currency_code}")
        self.a = a
        self.b = b
