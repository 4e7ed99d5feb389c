from __future__ import annotations

from decimal import Decimal
from functools import total_ordering
from types import NotImplementedType

from suite_currency import config
from suite_currency.domain.monetary.currency_registry import get_digits, is_valid
from suite_currency.domain.numeric.decimal_value import DecimalValue
from suite_currency.domain.numeric.rounding_mode import RoundingMode
from suite_currency.errors import DivisionByZeroError, InvalidCurrencyCodeError, InvalidNumberError, MismatchError
from suite_currency.utils.numeric_tools import NumberLike, as_decimal_value


@total_ordering
class Amount:
    """Immutable monetary amount: an exact decimal number tagged with an ISO 4217 code.

    Every operation returns a new Amount; operands are never changed. Arithmetic
    keeps full precision until `round` or `round_to` is called explicitly.

    Example:
        >>> amount = Amount("20.99", "USD")
        >>> tax = amount.mul("0.20")
        >>> str(tax), str(tax.round())
        ('4.1980 USD', '4.20 USD')

    Attributes:
        number (str): The number exactly as held, e.g. "4.1980".
        currency_code (str): ISO 4217 code, e.g. "USD".
    """

    __slots__ = ("_value", "_currency_code")

    # region Init

    def __init__(self, number: NumberLike, currency_code: str):
        """Initialize an Amount.

        The number is validated before the currency code.

        Args:
            number: Number text such as "10.99", or a DecimalValue, Decimal or int.
            currency_code: Uppercase ISO 4217 code known to the currency registry.

        Raises:
            InvalidNumberError: If $number is not a valid decimal number.
            InvalidCurrencyCodeError: If $currency_code is malformed or unknown.
        """
        self._value = as_decimal_value(number, op="Amount.__init__")

        # Raise: only codes from the registry are accepted ("usd" is rejected)
        if not is_valid(currency_code):
            raise InvalidCurrencyCodeError("Amount.__init__", currency_code)

        self._currency_code = currency_code

    @classmethod
    def from_minor_units(cls, units: int, currency_code: str) -> Amount:
        """Create an Amount from an integer count of minor units (2099 USD cents => 20.99 USD).

        Raises:
            InvalidNumberError: If $units is not an int.
            InvalidCurrencyCodeError: If $currency_code is malformed or unknown.
        """
        # Raise: minor units are whole numbers
        if not isinstance(units, int) or isinstance(units, bool):
            raise InvalidNumberError("Amount.from_minor_units", str(units))

        digits, ok = get_digits(currency_code)
        if not ok:
            raise InvalidCurrencyCodeError("Amount.from_minor_units", currency_code)

        return cls(DecimalValue(units, digits), currency_code)

    @classmethod
    def from_str(cls, value_str: str) -> Amount:
        """Parse the canonical form "<number> <currency code>", e.g. "10.99 USD".

        Raises:
            InvalidNumberError: If the string does not have two fields or the number is invalid.
            InvalidCurrencyCodeError: If the currency code is malformed or unknown.
        """
        parts = value_str.split()

        # Raise: canonical form has exactly a number and a code
        if len(parts) != 2:
            raise InvalidNumberError("Amount.from_str", value_str)

        number, currency_code = parts
        value = DecimalValue.from_str(number, op="Amount.from_str")
        if not is_valid(currency_code):
            raise InvalidCurrencyCodeError("Amount.from_str", currency_code)

        return cls(value, currency_code)

    # endregion

    # region Properties

    @property
    def number(self) -> str:
        """Get the number as text, with every digit it holds."""
        return str(self._value)

    @property
    def currency_code(self) -> str:
        """Get the ISO 4217 currency code."""
        return self._currency_code

    @property
    def value(self) -> DecimalValue:
        """Get the underlying exact decimal value."""
        return self._value

    def is_positive(self) -> bool:
        return self._value.is_positive()

    def is_negative(self) -> bool:
        return self._value.is_negative()

    def is_zero(self) -> bool:
        return self._value.is_zero()

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Amount, op: str) -> None:
        """Raise `MismatchError` for $op if $other uses a different currency."""
        # Raise: $other must be an Amount
        if not isinstance(other, Amount):
            raise TypeError(f"Cannot call `{op}` because $other is not Amount (got type '{type(other).__name__}')")

        if self._currency_code != other._currency_code:
            raise MismatchError(op, self, other)

    def add(self, other: Amount) -> Amount:
        """Return the sum of two amounts in the same currency.

        Raises:
            MismatchError: If the currencies differ.
        """
        self._check_same_currency(other, "Amount.add")
        return Amount(self._value.add(other._value), self._currency_code)

    def sub(self, other: Amount) -> Amount:
        """Return the difference of two amounts in the same currency.

        Raises:
            MismatchError: If the currencies differ.
        """
        self._check_same_currency(other, "Amount.sub")
        return Amount(self._value.sub(other._value), self._currency_code)

    def mul(self, factor: NumberLike) -> Amount:
        """Return the amount multiplied by $factor, keeping every digit of the product.

        Raises:
            InvalidNumberError: If $factor is not a valid decimal number.
        """
        value = as_decimal_value(factor, op="Amount.mul")
        return Amount(self._value.mul(value), self._currency_code)

    def div(self, divisor: NumberLike) -> Amount:
        """Return the amount divided by $divisor.

        Raises:
            InvalidNumberError: If $divisor is not a valid decimal number.
            DivisionByZeroError: If $divisor is zero.
        """
        value = as_decimal_value(divisor, op="Amount.div")

        # Raise: division by zero has no value
        if value.is_zero():
            raise DivisionByZeroError("Amount.div", divisor if isinstance(divisor, str) else str(value))

        return Amount(self._value.div(value), self._currency_code)

    def convert(self, currency_code: str, rate: NumberLike) -> Amount:
        """Return the amount converted to $currency_code using the exchange $rate.

        The target code is validated before the rate. The product is not rounded:
        20.99 USD at 0.91 gives 19.1009 EUR.

        Raises:
            InvalidCurrencyCodeError: If $currency_code is malformed or unknown.
            InvalidNumberError: If $rate is not a valid decimal number.
        """
        if not is_valid(currency_code):
            raise InvalidCurrencyCodeError("Amount.convert", currency_code)

        value = as_decimal_value(rate, op="Amount.convert")
        return Amount(self._value.mul(value), currency_code)

    def round(self) -> Amount:
        """Return the amount rounded HALF_UP to the currency's default digits (12.345 USD => 12.35 USD)."""
        digits, _ = get_digits(self._currency_code)
        return self.round_to(digits, config.DEFAULT_ROUNDING_MODE)

    def round_to(self, digits: int, mode: RoundingMode) -> Amount:
        """Return the amount rounded to $digits fraction digits using $mode."""
        return Amount(self._value.round_to(digits, mode), self._currency_code)

    def to_minor_units(self) -> int:
        """Return the amount in minor units, rounding HALF_UP first (12.3564 USD => 1236)."""
        digits, _ = get_digits(self._currency_code)
        return self._value.round_to(digits, config.DEFAULT_ROUNDING_MODE).coefficient

    def to_decimal(self) -> Decimal:
        """Return the number as a `Decimal` with the same digits."""
        return self._value.to_decimal()

    # endregion

    # region Comparison

    def cmp(self, other: Amount) -> int:
        """Compare with $other: -1 if less, 0 if equal, 1 if greater.

        Raises:
            MismatchError: If the currencies differ.
        """
        self._check_same_currency(other, "Amount.cmp")
        return self._value.cmp(other._value)

    def equal(self, other: Amount) -> bool:
        """Return True if $other has the same currency and an equal value (3.30 USD equals 3.3 USD)."""
        if not isinstance(other, Amount) or self._currency_code != other._currency_code:
            return False
        return self._value.cmp(other._value) == 0

    # endregion

    # region Magic methods

    def __eq__(self, other: object) -> bool:
        """Check equality with another Amount."""
        if not isinstance(other, Amount):
            return False
        return self.equal(other)

    def __lt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.cmp(other) < 0

    def __hash__(self) -> int:
        return hash((self._value, self._currency_code))

    def __add__(self, other: object) -> Amount | NotImplementedType:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Amount | NotImplementedType:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Amount | NotImplementedType:
        # Amount * Amount has no meaning
        if isinstance(other, Amount):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: object) -> Amount | NotImplementedType:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Amount | NotImplementedType:
        if isinstance(other, Amount):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> Amount:
        return Amount(self._value.negate(), self._currency_code)

    def __abs__(self) -> Amount:
        return Amount(abs(self._value), self._currency_code)

    def __str__(self) -> str:
        """Return string like '10.99 USD'."""
        return f"{self._value} {self._currency_code}"

    def __repr__(self) -> str:
        """Return string like "Amount('10.99', 'USD')"."""
        return f"{self.__class__.__name__}('{self._value}', '{self._currency_code}')"

    # endregion
