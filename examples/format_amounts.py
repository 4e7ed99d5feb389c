from __future__ import annotations

import logging

from suite_currency import Amount, CurrencyDisplay, Formatter, Locale, RoundingMode
from suite_currency.domain.monetary.amount_codec import from_json, to_json


logger = logging.getLogger(__name__)


def split_bill(total: Amount, people: int) -> list[Amount]:
    """Splits $total into $people shares that add up to $total exactly."""
    share = total.div(people).round_to(2, RoundingMode.DOWN)
    shares = [share] * people
    # The last share takes what rounding left over
    shares[-1] = total.sub(share.mul(people - 1))
    return shares


def run() -> None:
    # Exact arithmetic: no binary floating point anywhere
    price = Amount("20.99", "USD")
    tax = price.mul("0.0825").round()
    total = price.add(tax)
    logger.info(f"Price {price} + tax {tax} = {total}")

    # Same amount shown in several locales
    for locale_id in ("en", "de-CH", "fr", "tr", "sv"):
        formatter = Formatter(Locale.from_str(locale_id))
        logger.info(f"{locale_id:>6}: {formatter.format(total.convert('EUR', '0.91'))}")

    # Options may change between calls
    formatter = Formatter("en")
    formatter.currency_display = CurrencyDisplay.CODE
    formatter.add_plus_sign = True
    logger.info(f"With code and plus sign: {formatter.format(total)}")

    # Parsing localized text back into an Amount
    parsed = Formatter("tr").parse("€1.234,59", "EUR")
    logger.info(f"Parsed: {parsed!r}")

    for share in split_bill(Amount("100", "USD"), 3):
        logger.info(f"Share: {share}")

    # Structured round trip keeps the number text
    payload = to_json(parsed)
    logger.info(f"JSON: {payload} -> {from_json(payload)!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
