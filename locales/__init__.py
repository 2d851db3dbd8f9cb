"""
i18n module: dict-based translation with fallback to German.
German is the language the club uses; English is there for guests.
"""

from locales.de import DE_STRINGS
from locales.en import EN_STRINGS

_STRINGS = {"de": DE_STRINGS, "en": EN_STRINGS}
FALLBACK_LANG = "de"


def t(key: str, lang: str = FALLBACK_LANG, **kwargs) -> str:
    """Get translated string. Falls back to DE if key missing."""
    strings = _STRINGS.get(lang, _STRINGS[FALLBACK_LANG])
    text = strings.get(key, _STRINGS[FALLBACK_LANG].get(key, key))
    return text.format(**kwargs) if kwargs else text


def add_language(code: str, strings: dict):
    """Register a new language at runtime."""
    _STRINGS[code] = strings


def available_languages() -> list:
    return list(_STRINGS)
