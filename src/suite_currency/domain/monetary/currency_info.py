from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyInfo:
    """Static ISO 4217 data for one currency.

    Attributes:
        numeric_code (str): Three-digit ISO numeric code, zero padded (e.g. "008").
        digits (int): Default number of fraction digits (0-4).
    """

    numeric_code: str
    digits: int

    def __post_init__(self) -> None:
        # Raise: numeric code is always three ASCII digits
        if len(self.numeric_code) != 3 or not self.numeric_code.isascii() or not self.numeric_code.isdigit():
            raise ValueError(f"$numeric_code must be 3 digits, but provided value is: '{self.numeric_code}'")

        # Raise: ISO 4217 defines between 0 and 4 minor digits
        if not 0 <= self.digits <= 4:
            raise ValueError(f"$digits must be between 0 and 4, but provided value is: {self.digits}")
