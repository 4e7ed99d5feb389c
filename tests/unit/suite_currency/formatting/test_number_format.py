import pytest

from suite_currency.domain.locale.locale import Locale
from suite_currency.formatting.number_format import NumberFormat, get_number_format


@pytest.mark.parametrize(
    "locale_id, decimal_separator, grouping_separator",
    [
        ["en", ".", ","],
        ["en-GB", ".", ","],
        ["de", ",", "."],
        ["de-CH", ".", "’"],
        ["tr", ",", "."],
        ["es-MX", ".", ","],
    ],
)
def test_separators(locale_id: str, decimal_separator: str, grouping_separator: str):
    number_format = get_number_format(Locale.from_str(locale_id))
    assert number_format.decimal_separator == decimal_separator
    assert number_format.grouping_separator == grouping_separator


@pytest.mark.parametrize(
    "locale_id, currency_pattern",
    [
        ["en", "¤#,##0.00"],
        ["tr", "¤#,##0.00"],
        ["de", "#,##0.00\u00a0¤"],
        # Negative subpattern is dropped
        ["de-CH", "¤\u00a0#,##0.00"],
        ["nl", "¤\u00a0#,##0.00"],
    ],
)
def test_currency_pattern(locale_id: str, currency_pattern: str):
    assert get_number_format(Locale.from_str(locale_id)).currency_pattern == currency_pattern


def test_signs():
    assert get_number_format(Locale.from_str("en")).minus_sign == "-"
    assert get_number_format(Locale.from_str("en")).plus_sign == "+"
    assert get_number_format(Locale.from_str("sv")).minus_sign == "\u2212"


@pytest.mark.parametrize("locale_id", ["xx", "en-XX", ""])
def test_unknown_locales_use_english_format(locale_id: str):
    assert get_number_format(Locale.from_str(locale_id)) == get_number_format(Locale("en"))


def test_number_format_is_cached_per_locale():
    number_format = get_number_format(Locale.from_str("de-AT"))
    assert isinstance(number_format, NumberFormat)
    assert get_number_format(Locale.from_str("de_at")) is number_format
