"""CLDR parent locale data, read from the CLDR release bundled with babel.

Locales in `PARENT_LOCALES` skip the structural Region -> Script -> Language
chain. CLDR's "root" is written as "en", since English is the last locale
before the empty locale in every chain.
"""

from __future__ import annotations

from babel.core import get_global


def _load_parent_locales() -> dict[str, str]:
    """Return the CLDR parentLocales exceptions as locale ID => parent locale ID."""
    parents: dict[str, str] = {}
    for child_id, parent_id in get_global("parent_exceptions").items():
        parents[child_id.replace("_", "-")] = "en" if parent_id == "root" else parent_id.replace("_", "-")
    return parents


def _load_likely_scripts() -> dict[str, str]:
    """Return language => the script it is usually written in ("sr" => "Cyrl")."""
    scripts: dict[str, str] = {}
    for language, likely_id in get_global("likely_subtags").items():
        parts = likely_id.split("_")
        if "_" not in language and len(parts) > 1 and len(parts[1]) == 4:
            scripts[language] = parts[1]
    return scripts


PARENT_LOCALES: dict[str, str] = _load_parent_locales()

# A "language-Script" locale in any other script has root as its parent ("sr-Latn" => "en")
LIKELY_SCRIPTS: dict[str, str] = _load_likely_scripts()
