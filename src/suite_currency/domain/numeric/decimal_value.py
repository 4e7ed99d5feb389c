from __future__ import annotations

import logging
import re
from decimal import Decimal
from functools import total_ordering
from math import gcd
from types import NotImplementedType

from suite_currency import config
from suite_currency.domain.numeric.rounding_mode import RoundingMode
from suite_currency.errors import DivisionByZeroError, InvalidNumberError

logger = logging.getLogger(__name__)

# Optional minus, integer digits, optional fraction. No exponent, no grouping.
_NUMBER_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# Digits converted at once between int and text; must stay below the interpreter's
# int/str conversion limit (4300 digits by default)
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


@total_ordering
class DecimalValue:
    """Exact base-10 number made of a sign, a digit sequence and a scale.

    The digit sequence is held as a non-negative Python `int` (the magnitude) and
    the scale counts fractional digits. All arithmetic is carried out on integers,
    so no binary floating point approximation is introduced at any stage.

    The text form keeps every digit it was created with: "1.50" stays "1.50".
    Equality, ordering and hashing look at the mathematical value only, so
    `DecimalValue.from_str("1.50") == DecimalValue.from_str("1.5")`.

    Example:
        >>> price = DecimalValue.from_str("20.99")
        >>> str(price * DecimalValue.from_str("0.20"))
        '4.1980'
    """

    __slots__ = ("_negative", "_magnitude", "_scale")

    # region Init

    def __init__(self, coefficient: int, scale: int = 0):
        """Initialize a DecimalValue equal to $coefficient * 10 ** -$scale.

        Args:
            coefficient: Signed integer holding all digits of the number.
            scale: Number of fractional digits (>= 0).

        Raises:
            TypeError: If $coefficient or $scale is not an int.
            ValueError: If $scale is negative.
        """
        # Raise: both parts must be plain integers to keep the value exact
        if not isinstance(coefficient, int) or isinstance(coefficient, bool):
            raise TypeError(f"Cannot call `DecimalValue.__init__` because $coefficient is not int (got type '{type(coefficient).__name__}')")
        if not isinstance(scale, int) or isinstance(scale, bool):
            raise TypeError(f"Cannot call `DecimalValue.__init__` because $scale is not int (got type '{type(scale).__name__}')")

        # Raise: scale counts fractional digits, so it cannot be negative
        if scale < 0:
            raise ValueError(f"Cannot call `DecimalValue.__init__` because $scale ({scale}) < 0")

        self._negative = coefficient < 0
        self._magnitude = abs(coefficient)
        self._scale = scale

    @classmethod
    def _make(cls, negative: bool, magnitude: int, scale: int) -> DecimalValue:
        # Internal constructor that can express a negative zero ("-0.00")
        result = cls.__new__(cls)
        result._negative = negative
        result._magnitude = magnitude
        result._scale = scale
        return result

    @classmethod
    def from_str(cls, text: str, *, op: str = "DecimalValue.from_str") -> DecimalValue:
        """Parse $text in the form `-?digits(.digits)?`.

        Leading and trailing zeros are kept, so `str(DecimalValue.from_str(n)) == n`
        for every valid $text.

        Args:
            text: Number text. Grouping separators, exponents, whitespace and a
                leading "+" are rejected.
            op: Operation name reported in the error when parsing fails.

        Returns:
            DecimalValue: The parsed value.

        Raises:
            InvalidNumberError: If $text does not match the grammar.
        """
        # Raise: only strings matching the number grammar are accepted
        if not isinstance(text, str) or _NUMBER_PATTERN.fullmatch(text) is None:
            raise InvalidNumberError(op, text if isinstance(text, str) else repr(text))

        negative = text.startswith("-")
        integer_part, _, fraction_part = text.lstrip("-").partition(".")
        return cls._make(negative, _int_from_digits(integer_part + fraction_part), len(fraction_part))

    @classmethod
    def from_decimal(cls, value: Decimal, *, op: str = "DecimalValue.from_decimal") -> DecimalValue:
        """Convert a finite `Decimal` without losing digits.

        Exponent notation is expanded, e.g. `Decimal("1E+2")` becomes "100".

        Raises:
            InvalidNumberError: If $value is NaN or infinite.
        """
        # Raise: NaN and infinities have no exact digit representation
        if not value.is_finite():
            raise InvalidNumberError(op, str(value))

        return cls.from_str(format(value, "f"), op=op)

    # endregion

    # region Properties

    @property
    def scale(self) -> int:
        """Get the number of fractional digits."""
        return self._scale

    @property
    def coefficient(self) -> int:
        """Get the signed integer made of all digits (the decimal point removed)."""
        return -self._magnitude if self._negative else self._magnitude

    def is_zero(self) -> bool:
        return self._magnitude == 0

    def is_positive(self) -> bool:
        return self._magnitude != 0 and not self._negative

    def is_negative(self) -> bool:
        return self._magnitude != 0 and self._negative

    # endregion

    # region Arithmetic

    def _align(self, other: DecimalValue) -> tuple[int, int, int]:
        """Return both signed coefficients padded to the larger scale, plus that scale."""
        scale = max(self._scale, other._scale)
        a = self.coefficient * 10 ** (scale - self._scale)
        b = other.coefficient * 10 ** (scale - other._scale)
        return a, b, scale

    def add(self, other: DecimalValue) -> DecimalValue:
        """Return the exact sum; the result scale is the larger of both scales."""
        a, b, scale = self._align(other)
        return DecimalValue(a + b, scale)

    def sub(self, other: DecimalValue) -> DecimalValue:
        """Return the exact difference; the result scale is the larger of both scales."""
        a, b, scale = self._align(other)
        return DecimalValue(a - b, scale)

    def mul(self, other: DecimalValue) -> DecimalValue:
        """Return the exact product; the result scale is the sum of both scales.

        Nothing is rounded: 20.99 * 0.20 gives 4.1980.
        """
        return DecimalValue(self.coefficient * other.coefficient, self._scale + other._scale)

    def div(self, other: DecimalValue) -> DecimalValue:
        """Return the quotient of this value and $other.

        A quotient that terminates in base 10 is exact. Its scale is the smallest
        one that holds every digit, but never less than the dividend's scale minus
        the divisor's scale (99.99 / 3 gives 33.33, 10.00 / 4 gives 2.50).

        A quotient that does not terminate is cut to `config.DIVISION_PRECISION`
        significant digits and the last kept digit is rounded HALF_UP.

        Raises:
            DivisionByZeroError: If $other is zero.
        """
        # Raise: division by zero has no value
        if other.is_zero():
            raise DivisionByZeroError("DecimalValue.div", str(other))

        numerator = self._magnitude * 10**other._scale
        denominator = other._magnitude * 10**self._scale
        negative = self._negative != other._negative

        exact_scale = _terminating_scale(numerator, denominator)
        if exact_scale is not None:
            scale = max(exact_scale, self._scale - other._scale, 0)
            magnitude = numerator * 10**scale // denominator
        else:
            scale = _precision_scale(numerator, denominator, config.DIVISION_PRECISION)
            magnitude, remainder = divmod(numerator * 10**scale, denominator)
            if 2 * remainder >= denominator:
                magnitude += 1
            logger.debug(f"Quotient of {self} / {other} does not terminate; cut to scale {scale}")

        return DecimalValue._make(negative and magnitude != 0, magnitude, scale)

    def negate(self) -> DecimalValue:
        """Return the value with the opposite sign, keeping all digits."""
        return DecimalValue._make(not self._negative, self._magnitude, self._scale)

    def round_to(self, digits: int, mode: RoundingMode) -> DecimalValue:
        """Return the value rounded to $digits fractional digits.

        When $digits is not smaller than the current scale, the value is only padded
        with zeros. Otherwise the discarded digits decide, per $mode, whether the
        magnitude grows by one unit in the last kept place. The sign never changes,
        so -12.345 rounds HALF_UP to -12.35.

        Args:
            digits: Number of fractional digits to keep (>= 0).
            mode: Rounding mode; directions are relative to the magnitude.

        Returns:
            DecimalValue: Value with exactly $digits fractional digits.

        Raises:
            ValueError: If $digits is negative.
            TypeError: If $digits is not int or $mode is not a RoundingMode.
        """
        # Raise: $digits must be a non-negative int
        if not isinstance(digits, int) or isinstance(digits, bool):
            raise TypeError(f"Cannot call `DecimalValue.round_to` because $digits is not int (got type '{type(digits).__name__}')")
        if digits < 0:
            raise ValueError(f"Cannot call `DecimalValue.round_to` because $digits ({digits}) < 0")

        if digits >= self._scale:
            return DecimalValue._make(self._negative, self._magnitude * 10 ** (digits - self._scale), digits)

        unit = 10 ** (self._scale - digits)
        kept, discarded = divmod(self._magnitude, unit)
        if _rounds_away_from_zero(mode, discarded, unit):
            kept += 1

        return DecimalValue._make(self._negative, kept, digits)

    def cmp(self, other: DecimalValue) -> int:
        """Compare by value: -1 if less than $other, 0 if equal, 1 if greater."""
        a, b, _ = self._align(other)
        return (a > b) - (a < b)

    # endregion

    # region Conversions

    def to_decimal(self) -> Decimal:
        """Return the value as a `Decimal` with the same digits."""
        return Decimal(str(self))

    # endregion

    # region Magic methods

    def __add__(self, other: object) -> DecimalValue | NotImplementedType:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> DecimalValue | NotImplementedType:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> DecimalValue | NotImplementedType:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> DecimalValue | NotImplementedType:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> DecimalValue:
        return self.negate()

    def __abs__(self) -> DecimalValue:
        return DecimalValue._make(False, self._magnitude, self._scale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.cmp(other) < 0

    def __hash__(self) -> int:
        # Hash the normalized value so that 1.50 and 1.5 hash alike
        magnitude, scale = self._magnitude, self._scale
        while scale > 0 and magnitude % 10 == 0:
            magnitude //= 10
            scale -= 1
        if magnitude == 0:
            return hash((0, 0))
        return hash((-magnitude if self._negative else magnitude, scale))

    def __str__(self) -> str:
        digits = _digits_from_int(self._magnitude).rjust(self._scale + 1, "0")
        if self._scale:
            digits = f"{digits[: -self._scale]}.{digits[-self._scale :]}"
        return f"-{digits}" if self._negative else digits

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion


def _rounds_away_from_zero(mode: RoundingMode, discarded: int, unit: int) -> bool:
    """Decide whether the kept magnitude grows by one for the $discarded remainder (0 <= $discarded < $unit)."""
    if mode is RoundingMode.UP:
        return discarded > 0
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.HALF_UP:
        return 2 * discarded >= unit
    if mode is RoundingMode.HALF_DOWN:
        return 2 * discarded > unit

    raise TypeError(f"$mode must be a RoundingMode, but provided value is: {mode!r}")


def _terminating_scale(numerator: int, denominator: int) -> int | None:
    """Return the smallest scale holding $numerator / $denominator exactly, or None if it never terminates."""
    denominator //= gcd(numerator, denominator)
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1

    return max(twos, fives) if denominator == 1 else None


def _precision_scale(numerator: int, denominator: int, precision: int) -> int:
    """Return the scale at which $numerator / $denominator shows $precision significant digits."""
    integer_part = numerator // denominator
    if integer_part:
        return max(precision - len(_digits_from_int(integer_part)), 0)

    # Position of the first significant fractional digit (1 for 0.x, 2 for 0.0x, ...)
    position = max(len(_digits_from_int(denominator)) - len(_digits_from_int(numerator)), 1)
    if numerator * 10**position < denominator:
        position += 1
    return position + precision - 1


def _int_from_digits(digits: str) -> int:
    """Convert a string of ASCII digits of any length to int."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _digits_from_int(value: int) -> str:
    """Convert a non-negative int of any size to its decimal digits."""
    if value < _CHUNK_BASE:
        return str(value)

    chunks = []
    while value >= _CHUNK_BASE:
        value, chunk = divmod(value, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))
