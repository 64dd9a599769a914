"""Supported languages and their resource files.

Maps each LanguageId to a two-letter locale code and the resource file that
holds the language's string overrides. The mapping is validated once at
construction: every language appears at most once, and no two languages
share a locale code or a file name.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from simplelocalization.constants import RESOURCE_SUFFIX
from simplelocalization.enums import LanguageId
from simplelocalization.locale_utils import get_display_name, primary_language

if TYPE_CHECKING:
    from simplelocalization.localization.types import LocaleCode, ResourceFileName

__all__ = [
    "DEFAULT_CATALOG",
    "LanguageCatalog",
    "LanguageInfo",
]


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Locale code and resource file name of one supported language.

    Attributes:
        language: The language selector
        locale_code: Two-letter ISO 639-1 code (e.g. 'ru')
        resource_file: File name under the resource directory (e.g. 'ru.xml')
    """

    language: LanguageId
    locale_code: LocaleCode
    resource_file: ResourceFileName

    def __post_init__(self) -> None:
        """Validate locale code and file name.

        Raises:
            ValueError: If either value is empty or the file name contains
                a path separator
        """
        if not self.locale_code:
            msg = f"Locale code cannot be empty for {self.language.label}"
            raise ValueError(msg)
        if not self.resource_file:
            msg = f"Resource file name cannot be empty for {self.language.label}"
            raise ValueError(msg)
        if "/" in self.resource_file or "\\" in self.resource_file:
            msg = f"Path separators not allowed in resource file name: '{self.resource_file}'"
            raise ValueError(msg)

    @classmethod
    def for_locale(cls, language: LanguageId, locale_code: LocaleCode) -> LanguageInfo:
        """Build the entry whose file is named after the locale code."""
        return cls(language, locale_code, f"{locale_code}{RESOURCE_SUFFIX}")

    @property
    def display_name(self) -> str:
        """Language name in the language itself, for selectors."""
        return get_display_name(self.locale_code, fallback=self.language.label)


class LanguageCatalog:
    """Closed mapping of LanguageId to LanguageInfo.

    Lookups are pure. A language outside the catalog resolves to None, which
    callers treat as "no override file" rather than an error.

    Example:
        >>> DEFAULT_CATALOG.resolve(LanguageId.RUSSIAN).resource_file
        'ru.xml'
    """

    __slots__ = ("_by_language", "_by_locale")

    def __init__(self, entries: Iterable[LanguageInfo]) -> None:
        """Initialize the catalog.

        Raises:
            ValueError: If the catalog is empty, or a language, locale code
                or resource file name appears twice
        """
        self._by_language: dict[LanguageId, LanguageInfo] = {}
        self._by_locale: dict[str, LanguageInfo] = {}
        files: set[str] = set()

        for info in entries:
            locale_key = primary_language(info.locale_code)
            if info.language in self._by_language:
                msg = f"Language listed twice: {info.language.label}"
                raise ValueError(msg)
            if locale_key in self._by_locale:
                msg = f"Locale code '{info.locale_code}' used by more than one language"
                raise ValueError(msg)
            if info.resource_file in files:
                msg = f"Resource file '{info.resource_file}' used by more than one language"
                raise ValueError(msg)
            self._by_language[info.language] = info
            self._by_locale[locale_key] = info
            files.add(info.resource_file)

        if not self._by_language:
            msg = "At least one language is required"
            raise ValueError(msg)

    def resolve(self, language: LanguageId) -> LanguageInfo | None:
        """Return the entry for a language, or None if it is not supported."""
        return self._by_language.get(language)

    def find_by_locale(self, locale_code: LocaleCode) -> LanguageInfo | None:
        """Return the entry for a locale code, matching on the primary subtag.

        Example:
            >>> DEFAULT_CATALOG.find_by_locale("be_BY").language
            <LanguageId.BELARUSIAN: 'Belarusian'>
        """
        if not locale_code:
            return None
        return self._by_locale.get(primary_language(locale_code))

    def languages(self) -> tuple[LanguageId, ...]:
        """Supported languages in catalog order."""
        return tuple(self._by_language)

    def __iter__(self) -> Iterator[LanguageInfo]:
        return iter(self._by_language.values())

    def __len__(self) -> int:
        return len(self._by_language)

    def __contains__(self, language: object) -> bool:
        return language in self._by_language

    def __repr__(self) -> str:
        codes = ", ".join(info.locale_code for info in self)
        return f"LanguageCatalog({codes})"


DEFAULT_CATALOG = LanguageCatalog(
    [
        LanguageInfo.for_locale(LanguageId.ENGLISH, "en"),
        LanguageInfo.for_locale(LanguageId.RUSSIAN, "ru"),
        LanguageInfo.for_locale(LanguageId.BELARUSIAN, "be"),
    ]
)
