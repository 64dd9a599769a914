"""Access to the persisted active language.

The loader only needs to read the selected language and, on user
selection, write it back. Persistence belongs to the settings object, so it
is modelled as a small protocol with two implementations:

    MemoryLanguageSettings - process-local value, for tests and previews
    JsonLanguageSettings - value stored under "language" in a JSON file

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from simplelocalization.catalog import DEFAULT_CATALOG, LanguageCatalog
from simplelocalization.enums import LanguageId
from simplelocalization.locale_utils import get_system_locale

__all__ = [
    "LANGUAGE_KEY",
    "JsonLanguageSettings",
    "LanguageSettings",
    "MemoryLanguageSettings",
    "detect_language",
]

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"


class LanguageSettings(Protocol):
    """Read/write access to the active language."""

    @property
    def language(self) -> LanguageId:
        """Currently selected language."""
        ...

    @language.setter
    def language(self, value: LanguageId) -> None: ...


def detect_language(catalog: LanguageCatalog = DEFAULT_CATALOG) -> LanguageId:
    """Pick the catalog language matching the system locale.

    Returns the first catalog language when the system locale is unknown
    or not supported.
    """
    system_locale = get_system_locale()
    info = catalog.find_by_locale(system_locale) if system_locale else None
    if info is not None:
        return info.language
    return catalog.languages()[0]


class MemoryLanguageSettings:
    """Active language kept in memory only."""

    __slots__ = ("language",)

    def __init__(self, language: LanguageId = LanguageId.ENGLISH) -> None:
        self.language = language

    def __repr__(self) -> str:
        return f"MemoryLanguageSettings(language={self.language!r})"


class JsonLanguageSettings:
    """Active language persisted in a JSON settings file.

    The file is read once at construction and rewritten on every change.
    Other keys in the file are preserved. A missing file, unreadable content
    or an unknown language label all fall back to the default language.

    Example:
        >>> settings = JsonLanguageSettings("settings.json", default=LanguageId.ENGLISH)
        >>> settings.language = LanguageId.RUSSIAN
        # settings.json now contains {"language": "Russian"}
    """

    __slots__ = ("_data", "_language", "_path")

    def __init__(
        self,
        path: Path | str,
        default: LanguageId | None = None,
        *,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
    ) -> None:
        """Initialize and read the settings file.

        Args:
            path: JSON settings file
            default: Language used when the file has no valid value;
                detected from the system locale when None
            catalog: Catalog used for system locale detection
        """
        self._path = Path(path)
        self._data: dict[str, Any] = self._read()
        fallback = default if default is not None else detect_language(catalog)
        self._language = self._parse_language(self._data.get(LANGUAGE_KEY), fallback)

    @property
    def path(self) -> Path:
        """Settings file location."""
        return self._path

    @property
    def language(self) -> LanguageId:
        """Currently selected language."""
        return self._language

    @language.setter
    def language(self, value: LanguageId) -> None:
        self._language = value
        self._data[LANGUAGE_KEY] = value.label
        self._write()
        logger.debug("Persisted language %s to %s", value.label, self._path)

    def _read(self) -> dict[str, Any]:
        try:
            with self._path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self._path)
            return {}
        return data

    def _write(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
            f.write("\n")

    def _parse_language(self, label: object, fallback: LanguageId) -> LanguageId:
        if label is None:
            return fallback
        try:
            return LanguageId.from_label(str(label))
        except ValueError:
            logger.warning(
                "Unknown language %r in %s; using %s", label, self._path, fallback.label
            )
            return fallback

    def __repr__(self) -> str:
        return f"JsonLanguageSettings(path={str(self._path)!r}, language={self._language!r})"
