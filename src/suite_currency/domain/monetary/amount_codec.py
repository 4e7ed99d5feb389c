"""Binary and structured (JSON) encodings of `Amount`.

Both encodings are thin wrappers over the canonical number text:

* binary: currency code followed by the number, b"USD3.45"
* structured: {"number": "3.45", "currency": "USD"}

Decoders validate the number before the currency code, like the `Amount`
constructor does.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from suite_currency.domain.monetary.amount import Amount
from suite_currency.domain.monetary.currency_registry import is_valid
from suite_currency.domain.numeric.decimal_value import DecimalValue
from suite_currency.errors import InvalidCurrencyCodeError


def encode_binary(amount: Amount) -> bytes:
    """Return $amount as b"<code><number>", e.g. b"USD3.45"."""
    return f"{amount.currency_code}{amount.number}".encode("ascii")


def decode_binary(data: bytes) -> Amount:
    """Decode the output of `encode_binary`.

    Raises:
        InvalidCurrencyCodeError: If $data is shorter than 3 bytes or the code is unknown.
        InvalidNumberError: If the bytes after the code are not a valid number.
    """
    op = "decode_binary"
    data = bytes(data)

    # Raise: the first 3 bytes are reserved for the currency code
    if len(data) < 3:
        raise InvalidCurrencyCodeError(op, data.decode("utf-8", errors="replace"))

    currency_code = data[:3].decode("utf-8", errors="replace")
    value = DecimalValue.from_str(data[3:].decode("utf-8", errors="replace"), op=op)
    if not is_valid(currency_code):
        raise InvalidCurrencyCodeError(op, currency_code)

    return Amount(value, currency_code)


def to_dict(amount: Amount) -> dict[str, str]:
    """Return $amount as {"number": ..., "currency": ...}."""
    return {"number": amount.number, "currency": amount.currency_code}


def from_dict(data: Mapping[str, Any]) -> Amount:
    """Decode the output of `to_dict`. Missing fields count as empty strings.

    Raises:
        InvalidNumberError: If "number" is not a valid number.
        InvalidCurrencyCodeError: If "currency" is malformed or unknown.
    """
    return _from_fields(data, "from_dict")


def to_json(amount: Amount) -> str:
    """Return $amount as compact JSON, e.g. '{"number":"3.45","currency":"USD"}'."""
    return json.dumps(to_dict(amount), separators=(",", ":"))


def from_json(text: str | bytes) -> Amount:
    """Decode the output of `to_json`.

    Raises:
        json.JSONDecodeError: If $text is not JSON.
        ValueError: If $text is JSON but not an object.
        InvalidNumberError: If "number" is not a valid number.
        InvalidCurrencyCodeError: If "currency" is malformed or unknown.
    """
    payload = json.loads(text)

    # Raise: the structured form is always a JSON object
    if not isinstance(payload, dict):
        raise ValueError(f"Cannot call `from_json` because $text is not a JSON object (got type '{type(payload).__name__}')")

    return _from_fields(payload, "from_json")


def _from_fields(data: Mapping[str, Any], op: str) -> Amount:
    value = DecimalValue.from_str(data.get("number", ""), op=op)
    currency_code = data.get("currency", "")
    if not is_valid(currency_code):
        raise InvalidCurrencyCodeError(op, currency_code)
    return Amount(value, currency_code)
