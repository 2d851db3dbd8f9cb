"""
Centralized language detection for the web handlers.

Default: German. Switches to English if the browser prefers "en".
"""

from typing import Optional
from config.features import features
from locales import available_languages


def detect_lang(accept_language: Optional[str] = None) -> str:
    """
    Pick a UI language from an Accept-Language header.

    Only the first (most preferred) entry is considered.

    Returns:
        Language code ("de" or "en").
    """
    default = features.DEFAULT_LANGUAGE if features.DEFAULT_LANGUAGE in available_languages() else "de"
    if not accept_language:
        return default
    first = accept_language.split(",")[0].split(";")[0].strip().lower()
    for lang in available_languages():
        if first.startswith(lang):
            return lang
    return default
