from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from suite_currency import config
from suite_currency.domain.locale.locale import Locale
from suite_currency.domain.monetary.amount import Amount
from suite_currency.domain.monetary.currency_registry import get_digits, get_symbol, is_valid
from suite_currency.domain.numeric.decimal_value import DecimalValue
from suite_currency.domain.numeric.rounding_mode import RoundingMode
from suite_currency.errors import InvalidCurrencyCodeError, InvalidNumberError
from suite_currency.formatting.currency_display import CurrencyDisplay
from suite_currency.formatting.number_format import NBSP, NumberFormat, get_number_format

logger = logging.getLogger(__name__)

MARKER = "¤"

# Number part of a currency pattern, e.g. "#,##0.00"
_NUMBER_PLACEHOLDER = re.compile(r"[#0,.]+")


@dataclass(frozen=True)
class _Settings:
    """Snapshot of `Formatter` fields taken at the start of each call."""

    locale: Locale
    min_digits: int | None
    max_digits: int
    rounding_mode: RoundingMode
    no_grouping: bool
    add_plus_sign: bool
    currency_display: CurrencyDisplay
    symbol_map: dict[str, str]


class Formatter:
    """Formats amounts for a locale and parses localized text back into amounts.

    The fields are plain attributes that callers may change between calls. Each
    `format` and `parse` call reads all of them once at entry, so a call never
    mixes two configurations. Sharing one instance between threads that change
    it is still the caller's responsibility.

    Example:
        >>> formatter = Formatter(Locale.from_str("tr"))
        >>> formatter.format(Amount("1245.988", "EUR"))
        '€1.245,988'
        >>> formatter.max_digits = 2
        >>> formatter.format(Amount("1245.988", "EUR"))
        '€1.245,99'

    Attributes:
        locale (Locale): Locale whose separators, pattern and symbols are used.
        min_digits (int | None): Minimum fraction digits shown. None means the
            currency's default digits (2 for USD, 0 for JPY).
        max_digits (int): Maximum fraction digits shown; wins over $min_digits.
        rounding_mode (RoundingMode): Used when digits must be dropped.
        no_grouping (bool): Omit grouping separators ("1245" instead of "1,245").
        add_plus_sign (bool): Prefix positive amounts with the locale's plus sign.
        currency_display (CurrencyDisplay): Symbol, ISO code, or no marker.
        symbol_map (dict[str, str]): Currency code => symbol overriding the locale data.
    """

    # region Init

    def __init__(self, locale: Locale | str):
        """Initialize a Formatter with default options for $locale.

        Args:
            locale: Locale or locale ID such as "de-CH".
        """
        self.locale: Locale = Locale.from_str(locale) if isinstance(locale, str) else locale
        self.min_digits: int | None = None
        self.max_digits: int = config.DEFAULT_MAX_DIGITS
        self.rounding_mode: RoundingMode = config.DEFAULT_ROUNDING_MODE
        self.no_grouping: bool = False
        self.add_plus_sign: bool = False
        self.currency_display: CurrencyDisplay = CurrencyDisplay.SYMBOL
        self.symbol_map: dict[str, str] = {}

    def _snapshot(self) -> _Settings:
        locale = Locale.from_str(self.locale) if isinstance(self.locale, str) else self.locale
        return _Settings(
            locale=locale,
            min_digits=self.min_digits,
            max_digits=self.max_digits,
            rounding_mode=self.rounding_mode,
            no_grouping=self.no_grouping,
            add_plus_sign=self.add_plus_sign,
            currency_display=self.currency_display,
            symbol_map=dict(self.symbol_map),
        )

    # endregion

    # region Format

    def format(self, amount: Amount) -> str:
        """Return $amount as localized text, e.g. "€1.245,99" for locale "tr".

        The number of fraction digits is the amount's own scale, raised to
        $min_digits and then capped at $max_digits; the value is rounded with
        $rounding_mode when digits are dropped.
        """
        settings = self._snapshot()
        number_format = get_number_format(settings.locale)
        currency_code = amount.currency_code

        digits = _resolve_digits(amount, settings)
        value = amount.value.round_to(digits, settings.rounding_mode)
        number = _render_number(value, number_format, settings.no_grouping)

        text = _NUMBER_PLACEHOLDER.sub(lambda _: number, number_format.currency_pattern, count=1)
        text = _apply_marker(text, currency_code, settings)

        if value.is_negative():
            return f"{number_format.minus_sign}{text}"
        if settings.add_plus_sign and value.is_positive():
            return f"{number_format.plus_sign}{text}"
        return text

    # endregion

    # region Parse

    def parse(self, text: str, currency_code: str) -> Amount:
        """Parse localized $text into an Amount in $currency_code.

        An optional currency symbol or ISO code at either end is stripped, then
        the locale's grouping separators are removed and its decimal separator and
        minus sign are mapped to "." and "-". The marker is never used to pick the
        currency: $currency_code is authoritative.

        Example:
            >>> Formatter("tr").parse("EUR 1.234,59", "EUR")
            Amount('1234.59', 'EUR')

        Raises:
            InvalidCurrencyCodeError: If $currency_code is malformed or unknown.
            InvalidNumberError: If what remains after stripping the marker is not a number.
        """
        op = "Formatter.parse"

        # Raise: the expected currency must be known before anything is parsed
        if not is_valid(currency_code):
            raise InvalidCurrencyCodeError(op, currency_code)

        settings = self._snapshot()
        number_format = get_number_format(settings.locale)

        fragment, negative = _strip_sign(text.strip(), number_format)
        fragment = _strip_marker(fragment, _marker_candidates(currency_code, settings)).strip()
        if not negative:
            fragment, negative = _strip_sign(fragment, number_format)

        number = fragment
        grouping_separator = number_format.grouping_separator
        if grouping_separator.isspace():
            number = "".join(number.split())
        number = number.replace(grouping_separator, "").replace(number_format.decimal_separator, ".")
        if negative:
            number = f"-{number}"

        try:
            value = DecimalValue.from_str(number, op=op)
        except InvalidNumberError as e:
            raise InvalidNumberError(op, fragment) from e

        return Amount(value, currency_code)

    # endregion


def _resolve_digits(amount: Amount, settings: _Settings) -> int:
    """Return how many fraction digits `Formatter.format` shows for $amount."""
    min_digits = settings.min_digits
    if min_digits is None:
        min_digits, _ = get_digits(amount.currency_code)

    digits = max(amount.value.scale, min_digits)
    return min(digits, settings.max_digits)


def _render_number(value: DecimalValue, number_format: NumberFormat, no_grouping: bool) -> str:
    """Render the magnitude of $value with the locale's separators."""
    integer_part, _, fraction_part = str(abs(value)).partition(".")
    if not no_grouping:
        groups = []
        while len(integer_part) > 3:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        groups.insert(0, integer_part)
        integer_part = number_format.grouping_separator.join(groups)

    if fraction_part:
        return f"{integer_part}{number_format.decimal_separator}{fraction_part}"
    return integer_part


def _resolve_symbol(currency_code: str, settings: _Settings) -> str:
    symbol = settings.symbol_map.get(currency_code)
    if symbol is None:
        symbol, _ = get_symbol(currency_code, settings.locale)
    else:
        logger.debug(f"Using symbol_map override '{symbol}' for currency code {currency_code}")
    return symbol


def _apply_marker(text: str, currency_code: str, settings: _Settings) -> str:
    """Replace the "¤" placeholder in $text according to $settings.currency_display."""
    display = settings.currency_display
    if display is CurrencyDisplay.NONE:
        return re.sub(rf"\s*{MARKER}\s*", "", text)

    if display is CurrencyDisplay.SYMBOL:
        return text.replace(MARKER, _resolve_symbol(currency_code, settings))

    if display is CurrencyDisplay.CODE:
        # A code touching the digits is unreadable ("EUR1.234"), so keep them apart
        index = text.index(MARKER)
        if index == 0 and not text[1:2].isspace():
            return text.replace(MARKER, f"{currency_code}{NBSP}")
        if index == len(text) - 1 and not text[-2:-1].isspace():
            return text.replace(MARKER, f"{NBSP}{currency_code}")
        return text.replace(MARKER, currency_code)

    raise TypeError(f"$currency_display must be a CurrencyDisplay, but provided value is: {display!r}")


def _marker_candidates(currency_code: str, settings: _Settings) -> list[str]:
    """Return every marker that may surround the number, longest first ("US$" before "$")."""
    candidates = {currency_code, _resolve_symbol(currency_code, settings)}
    symbol, _ = get_symbol(currency_code, settings.locale)
    candidates.add(symbol)
    return sorted(candidates, key=len, reverse=True)


def _strip_marker(fragment: str, candidates: list[str]) -> str:
    for marker in candidates:
        if fragment.startswith(marker):
            return fragment[len(marker) :]
        if fragment.endswith(marker):
            return fragment[: -len(marker)]
    return fragment


def _strip_sign(fragment: str, number_format: NumberFormat) -> tuple[str, bool]:
    """Remove a leading sign from $fragment; return the rest and whether it was negative."""
    for minus_sign in (number_format.minus_sign, "-"):
        if fragment.startswith(minus_sign):
            return fragment[len(minus_sign) :].lstrip(), True
    for plus_sign in (number_format.plus_sign, "+"):
        if fragment.startswith(plus_sign):
            return fragment[len(plus_sign) :].lstrip(), False
    return fragment, False
