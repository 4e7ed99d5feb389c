import pytest

from suite_currency.domain.locale.locale import Locale
from suite_currency.domain.monetary.currency_info import CurrencyInfo
from suite_currency.domain.monetary.currency_registry import (
    get_currency_code,
    get_currency_codes,
    get_currency_info,
    get_digits,
    get_numeric_code,
    get_symbol,
    is_valid,
)


@pytest.mark.parametrize(
    "currency_code, expected",
    [
        ["USD", True],
        ["EUR", True],
        ["usd", False],
        ["XXX", False],
        ["US", False],
        ["", False],
        [840, False],
    ],
)
def test_is_valid(currency_code, expected: bool):
    assert is_valid(currency_code) == expected


def test_get_numeric_code():
    assert get_numeric_code("USD") == ("840", True)
    assert get_numeric_code("ALL") == ("008", True)
    # Non-existent currency code
    assert get_numeric_code("XXX") == ("000", False)


def test_get_currency_code_by_numeric_code():
    assert get_currency_code("840") == ("USD", True)
    assert get_currency_code("008") == ("ALL", True)
    assert get_currency_code("000") == ("", False)


@pytest.mark.parametrize(
    "currency_code, expected",
    [
        ["USD", (2, True)],
        ["JPY", (0, True)],
        ["BHD", (3, True)],
        ["UYW", (4, True)],
        ["XXX", (0, False)],
    ],
)
def test_get_digits(currency_code: str, expected: tuple[int, bool]):
    assert get_digits(currency_code) == expected


def test_get_currency_info():
    assert get_currency_info("JPY") == CurrencyInfo("392", 0)
    assert get_currency_info("XXX") is None


def test_get_currency_codes():
    codes = get_currency_codes()
    assert codes[:10] == ("AUD", "CAD", "CHF", "EUR", "GBP", "JPY", "NOK", "NZD", "SEK", "USD")
    assert len(codes) == len(set(codes)) == 158
    assert all(is_valid(code) for code in codes)


@pytest.mark.parametrize(
    "currency_code, locale_id, expected",
    [
        ["USD", "en", ("$", True)],
        ["USD", "en-US", ("$", True)],
        ["USD", "en-CA", ("US$", True)],
        # en-GB inherits from en-001
        ["USD", "en-GB", ("US$", True)],
        ["USD", "en-001", ("US$", True)],
        ["GBP", "en-GB", ("£", True)],
        ["USD", "fr-FR", ("$US", True)],
        ["EUR", "tr", ("€", True)],
        ["EUR", "de-AT", ("€", True)],
        ["JPY", "ja", ("￥", True)],
        ["MXN", "es-MX", ("$", True)],
        # Locales unknown to CLDR use their nearest known ancestor
        ["USD", "xx", ("$", True)],
        ["USD", "en-XX", ("$", True)],
        # No symbol data anywhere on the chain
        ["CHF", "de-CH", ("CHF", True)],
        ["XXX", "en", ("XXX", False)],
    ],
)
def test_get_symbol(currency_code: str, locale_id: str, expected: tuple[str, bool]):
    assert get_symbol(currency_code, Locale.from_str(locale_id)) == expected
    assert get_symbol(currency_code, locale_id) == expected


def test_get_symbol_for_empty_locale_falls_back_to_code():
    assert get_symbol("USD", Locale()) == ("USD", True)


@pytest.mark.parametrize("numeric_code, digits", [["84", 2], ["8400", 2], ["abc", 2], ["840", 5], ["840", -1]])
def test_currency_info_validation(numeric_code: str, digits: int):
    with pytest.raises(ValueError):
        CurrencyInfo(numeric_code, digits)
