from decimal import Decimal

import pytest

from suite_currency import config
from suite_currency.domain.numeric.decimal_value import DecimalValue
from suite_currency.domain.numeric.rounding_mode import RoundingMode
from suite_currency.errors import DivisionByZeroError, InvalidNumberError


def dv(text: str) -> DecimalValue:
    return DecimalValue.from_str(text)


@pytest.mark.parametrize("text", ["0", "-0", "10.99", "007.50", "-12.345", "4.1980", "123456789012345678901234567890.123456789"])
def test_from_str_keeps_every_digit(text: str):
    assert str(dv(text)) == text


@pytest.mark.parametrize("text", ["", "1.", ".5", "+1", "1,5", "1e5", " 1", "1 ", "abc", "--1", "1.2.3", "١٢"])
def test_from_str_rejects_invalid_text(text: str):
    with pytest.raises(InvalidNumberError) as exc_info:
        DecimalValue.from_str(text)
    assert exc_info.value.op == "DecimalValue.from_str"
    assert exc_info.value.number == text


def test_from_str_reports_caller_operation():
    with pytest.raises(InvalidNumberError) as exc_info:
        DecimalValue.from_str("INVALID", op="Amount.mul")
    assert exc_info.value.op == "Amount.mul"


def test_constructor_from_coefficient_and_scale():
    assert str(DecimalValue(2099, 2)) == "20.99"
    assert str(DecimalValue(-5, 3)) == "-0.005"
    assert str(DecimalValue(0, 2)) == "0.00"
    assert DecimalValue(-2099, 2).coefficient == -2099

    with pytest.raises(ValueError, match=r"\$scale"):
        DecimalValue(1, -1)
    with pytest.raises(TypeError):
        DecimalValue(1.5)


def test_equality_and_hash_use_the_value():
    assert dv("1.50") == dv("1.5")
    assert hash(dv("1.50")) == hash(dv("1.5"))
    assert dv("-0") == dv("0.00")
    assert hash(dv("-0")) == hash(dv("0.00"))
    assert dv("1.5") != dv("-1.5")
    assert len({dv("2"), dv("2.0"), dv("2.00")}) == 1


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ["3.33", "6.66", -1],
        ["3.33", "3.33", 0],
        ["6.66", "3.33", 1],
        ["1.10", "1.1", 0],
        ["-1", "0.5", -1],
        ["-2.5", "-2.49", -1],
        ["100", "99.999", 1],
    ],
)
def test_cmp(a: str, b: str, expected: int):
    assert dv(a).cmp(dv(b)) == expected
    assert (dv(a) < dv(b)) == (expected < 0)
    assert (dv(a) >= dv(b)) == (expected >= 0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ["20.99", "3.50", "24.49"],
        ["1.5", "0.25", "1.75"],
        ["-1.5", "0.25", "-1.25"],
        ["1", "0.10", "1.10"],
        ["-0.5", "0.5", "0.0"],
    ],
)
def test_add(a: str, b: str, expected: str):
    assert str(dv(a).add(dv(b))) == expected
    assert str(dv(a) + dv(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ["20.99", "5.00", "15.99"],
        ["1", "1.00", "0.00"],
        ["3.5", "10", "-6.5"],
    ],
)
def test_sub(a: str, b: str, expected: str):
    assert str(dv(a).sub(dv(b))) == expected
    assert str(dv(a) - dv(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ["20.99", "0.20", "4.1980"],
        ["20.99", "0.91", "19.1009"],
        ["-2", "0.5", "-1.0"],
        ["0.001", "0.001", "0.000001"],
    ],
)
def test_mul_keeps_full_precision(a: str, b: str, expected: str):
    assert str(dv(a).mul(dv(b))) == expected
    assert str(dv(a) * dv(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ["99.99", "3", "33.33"],
        ["10.00", "4", "2.50"],
        ["1", "8", "0.125"],
        ["10", "0.5", "20"],
        ["-7.5", "2.5", "-3"],
        ["0", "7", "0"],
        ["1", "3", "0." + "3" * 34],
        ["2", "3", "0." + "6" * 33 + "7"],
        ["-1", "3", "-0." + "3" * 34],
        ["1", "30", "0.0" + "3" * 34],
        ["100", "3", "33." + "3" * 32],
    ],
)
def test_div(a: str, b: str, expected: str):
    assert str(dv(a).div(dv(b))) == expected
    assert str(dv(a) / dv(b)) == expected


def test_div_non_terminating_uses_configured_precision(monkeypatch):
    monkeypatch.setattr(config, "DIVISION_PRECISION", 5)
    assert str(dv("1").div(dv("3"))) == "0.33333"
    assert str(dv("2").div(dv("3"))) == "0.66667"


def test_div_by_zero():
    with pytest.raises(DivisionByZeroError) as exc_info:
        dv("1").div(dv("0.00"))
    assert isinstance(exc_info.value, InvalidNumberError)
    assert isinstance(exc_info.value, ZeroDivisionError)
    assert exc_info.value.number == "0.00"
    assert str(exc_info.value) == "Cannot call `DecimalValue.div` because the divisor ('0.00') is zero"
    assert exc_info.value.args == (str(exc_info.value),)
    assert exc_info.value.op == "DecimalValue.div"


@pytest.mark.parametrize(
    "number, digits, mode, expected",
    [
        ["12.343", 2, RoundingMode.HALF_UP, "12.34"],
        ["12.345", 2, RoundingMode.HALF_UP, "12.35"],
        ["12.347", 2, RoundingMode.HALF_UP, "12.35"],
        ["12.343", 2, RoundingMode.HALF_DOWN, "12.34"],
        ["12.345", 2, RoundingMode.HALF_DOWN, "12.34"],
        ["12.347", 2, RoundingMode.HALF_DOWN, "12.35"],
        ["12.343", 2, RoundingMode.UP, "12.35"],
        ["12.345", 2, RoundingMode.UP, "12.35"],
        ["12.347", 2, RoundingMode.UP, "12.35"],
        ["12.343", 2, RoundingMode.DOWN, "12.34"],
        ["12.345", 2, RoundingMode.DOWN, "12.34"],
        ["12.347", 2, RoundingMode.DOWN, "12.34"],
        # Negative values round by magnitude
        ["-12.345", 2, RoundingMode.HALF_UP, "-12.35"],
        ["-12.345", 2, RoundingMode.HALF_DOWN, "-12.34"],
        ["-12.345", 2, RoundingMode.UP, "-12.35"],
        ["-12.345", 2, RoundingMode.DOWN, "-12.34"],
        # More digits than the value has
        ["12.345", 4, RoundingMode.HALF_UP, "12.3450"],
        ["12.345", 4, RoundingMode.DOWN, "12.3450"],
        # Same number of digits
        ["12.345", 3, RoundingMode.UP, "12.345"],
        ["12.345", 3, RoundingMode.DOWN, "12.345"],
        # 0 digits
        ["12.345", 0, RoundingMode.HALF_UP, "12"],
        ["12.345", 0, RoundingMode.HALF_DOWN, "12"],
        ["12.345", 0, RoundingMode.UP, "13"],
        ["12.345", 0, RoundingMode.DOWN, "12"],
        # Exact half detection looks past the first dropped digit
        ["12.3451", 2, RoundingMode.HALF_DOWN, "12.35"],
        ["12.3450", 2, RoundingMode.HALF_DOWN, "12.34"],
        ["9.995", 2, RoundingMode.HALF_UP, "10.00"],
    ],
)
def test_round_to(number: str, digits: int, mode: RoundingMode, expected: str):
    original = dv(number)
    assert str(original.round_to(digits, mode)) == expected
    # Confirm that the value is unchanged
    assert str(original) == number


def test_round_to_keeps_sign_of_rounded_zero():
    rounded = dv("-0.001").round_to(2, RoundingMode.DOWN)
    assert str(rounded) == "-0.00"
    assert rounded.is_zero()
    assert not rounded.is_negative()


def test_round_to_rejects_negative_digits():
    with pytest.raises(ValueError, match=r"\$digits"):
        dv("1.5").round_to(-1, RoundingMode.HALF_UP)


@pytest.mark.parametrize(
    "number, positive, negative, zero",
    [
        ["9.99", True, False, False],
        ["-9.99", False, True, False],
        ["0", False, False, True],
        ["-0.00", False, False, True],
    ],
)
def test_sign_predicates(number: str, positive: bool, negative: bool, zero: bool):
    value = dv(number)
    assert value.is_positive() == positive
    assert value.is_negative() == negative
    assert value.is_zero() == zero


def test_negate_and_abs():
    assert str(-dv("1.50")) == "-1.50"
    assert str(-dv("-1.50")) == "1.50"
    assert str(abs(dv("-1.50"))) == "1.50"


def test_decimal_conversions():
    assert str(DecimalValue.from_decimal(Decimal("1.50"))) == "1.50"
    assert str(DecimalValue.from_decimal(Decimal("1E+2"))) == "100"
    assert str(DecimalValue.from_decimal(Decimal("-0.000"))) == "-0.000"
    assert dv("4.1980").to_decimal() == Decimal("4.1980")
    assert str(dv("4.1980").to_decimal()) == "4.1980"

    with pytest.raises(InvalidNumberError):
        DecimalValue.from_decimal(Decimal("NaN"))


def test_repr():
    assert repr(dv("-1.50")) == "DecimalValue('-1.50')"


def test_numbers_longer_than_int_conversion_limit():
    text = "1" * 5000 + "." + "2" * 5000
    value = dv(text)
    assert str(value) == text
    assert value.scale == 5000
    assert repr(value) == f"DecimalValue('{text}')"

    # (10**n - 1) ** 2 == 99..98 00..01
    product = dv("9" * 3000).mul(dv("9" * 3000))
    assert str(product) == "9" * 2999 + "8" + "0" * 2999 + "1"
    assert product.to_decimal() == Decimal(str(product))


def test_division_of_long_numbers():
    assert str(dv("1" + "0" * 5000).div(dv("4"))) == "25" + "0" * 4998
    assert str(dv("1").div(dv("3" + "0" * 5000))) == "0." + "0" * 5000 + "3" * 34
