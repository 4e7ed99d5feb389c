from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from babel import Locale as CldrLocale
from babel import UnknownLocaleError
from babel.localedata import exists

from suite_currency.domain.locale.locale_data import LIKELY_SCRIPTS, PARENT_LOCALES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locale:
    """Unicode locale identifier made of language, script and region.

    Example:
        >>> locale = Locale.from_str("sr_rs_latn")
        >>> str(locale)
        'sr-Latn-RS'
        >>> locale.language, locale.script, locale.region
        ('sr', 'Latn', 'RS')

    Attributes:
        language (str): Lowercase language subtag (e.g. "sr"). Empty only for the empty locale.
        script (str): Title-cased 4-letter script subtag (e.g. "Latn") or "".
        region (str): Uppercase 2-letter or 3-digit region subtag (e.g. "RS", "419") or "".
    """

    language: str = ""
    script: str = ""
    region: str = ""

    @classmethod
    def from_str(cls, locale_id: str) -> Locale:
        """Parse and normalize a locale ID ("SR_rs_LATN" => "sr-Latn-RS").

        The first subtag is always the language. After it, 4-character subtags are
        scripts and 2 or 3 character subtags are regions; subtags of any other
        length are ignored.

        Args:
            locale_id: Locale ID using "-" or "_" as separator, in any letter case.

        Returns:
            Locale: The normalized locale. An empty $locale_id gives the empty locale.
        """
        language = script = region = ""
        for index, part in enumerate(locale_id.lower().replace("_", "-").split("-")):
            if index == 0:
                language = part
            elif len(part) == 4:
                script = part.title()
            elif len(part) in (2, 3):
                region = part.upper()

        return cls(language, script, region)

    def is_empty(self) -> bool:
        """Return True for the empty locale, which terminates every parent chain."""
        return not (self.language or self.script or self.region)

    def get_parent(self) -> Locale:
        """Return the locale to fall back to when data for this locale is missing.

        Order:
            1. Language-Script-Region (e.g. "sr-Cyrl-RS")
            2. Language-Script (e.g. "sr-Cyrl")
            3. Language (e.g. "sr")
            4. English ("en")
            5. Empty locale ("")

        Some locales have irregular parents in CLDR: the parent of "es-AR" is
        "es-419", and a script the language is not usually written in falls back
        to English, so the parent of "sr-Latn" is "en".
        """
        locale_id = str(self)
        if locale_id in ("", "en"):
            return Locale()

        parent_id = PARENT_LOCALES.get(locale_id)
        if parent_id is not None:
            logger.debug(f"Locale '{locale_id}' has irregular parent '{parent_id}'")
            return Locale.from_str(parent_id)

        if self.region:
            return Locale(self.language, self.script)
        if self.script:
            if LIKELY_SCRIPTS.get(self.language, self.script) != self.script:
                logger.debug(f"Locale '{locale_id}' uses an unusual script for its language; its parent is 'en'")
                return Locale("en")
            return Locale(self.language)
        return Locale("en")

    def iter_chain(self) -> Iterator[Locale]:
        """Yield this locale followed by each ancestor, stopping before the empty locale."""
        locale = self
        while not locale.is_empty():
            yield locale
            locale = locale.get_parent()

    def __str__(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.region) if part)


def find_cldr_locale(locale: Locale) -> CldrLocale | None:
    """Return babel's CLDR data for the first locale on the parent chain of $locale that CLDR ships.

    babel resolves CLDR inheritance itself, so the returned data already holds
    everything the locale inherits. Returns None for the empty locale.
    """
    for candidate in locale.iter_chain():
        cldr_locale = _load_cldr_locale(str(candidate))
        if cldr_locale is not None:
            return cldr_locale
    return None


@functools.cache
def _load_cldr_locale(locale_id: str) -> CldrLocale | None:
    babel_id = locale_id.replace("-", "_")
    if not exists(babel_id):
        return None

    try:
        return CldrLocale.parse(babel_id)
    except (UnknownLocaleError, ValueError):
        logger.debug(f"babel cannot load CLDR data for locale '{locale_id}'")
        return None
