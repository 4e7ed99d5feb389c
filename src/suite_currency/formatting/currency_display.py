from __future__ import annotations

from enum import Enum


class CurrencyDisplay(Enum):
    """How `Formatter` shows the currency next to the number.

    Members:
        SYMBOL: Locale-specific symbol, e.g. "€" or "US$".
        CODE: ISO 4217 code, e.g. "EUR".
        NONE: No currency marker at all.
    """

    SYMBOL = "SYMBOL"
    CODE = "CODE"
    NONE = "NONE"
