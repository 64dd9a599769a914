"""Locale utilities backed by Babel.

Centralizes locale code normalization, Babel Locale lookup and system
locale detection. Locale codes in resource file names are two-letter
language subtags; everything else (BCP-47 "ru-RU", POSIX "ru_RU.UTF-8")
is normalized at the boundary with these helpers.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_display_name",
    "get_system_locale",
    "normalize_locale",
    "primary_language",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to Babel's POSIX form.

    Strips any encoding suffix and converts hyphens to underscores.

    Example:
        >>> normalize_locale("ru-RU")
        'ru_RU'
        >>> normalize_locale("be_BY.UTF-8")
        'be_BY'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.split(".", 1)[0].strip().replace("-", "_")


def primary_language(locale_code: str) -> str:
    """Return the lowercase primary language subtag of a locale code.

    Example:
        >>> primary_language("ru_RU")
        'ru'
        >>> primary_language("EN-us")
        'en'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


@functools.lru_cache(maxsize=64)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()


def get_display_name(locale_code: str, fallback: str) -> str:
    """Return the locale's own display name, e.g. "русский" for "ru".

    Used to label languages in selectors. Returns ``fallback`` when Babel
    does not know the locale or has no name for it.
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        name = get_babel_locale(locale_code).get_display_name()
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No display name for locale '%s': %s", locale_code, e)
        return fallback
    return name or fallback


def get_system_locale() -> str | None:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_MESSAGES, LANG environment variables

    "C" and "POSIX" pseudo-locales are ignored.

    Returns:
        Locale code in POSIX form, or None when nothing usable is set.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return normalize_locale(system_locale)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value.split(".", 1)[0] not in ("C", "POSIX", ""):
            return normalize_locale(value)

    return None
