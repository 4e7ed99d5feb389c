"""Locale identifiers with CLDR-style parent fallback."""

from suite_currency.domain.locale.locale import Locale

__all__ = ["Locale"]
