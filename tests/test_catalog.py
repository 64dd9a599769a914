"""Tests for LanguageCatalog and LanguageInfo."""

from __future__ import annotations

from typing import get_type_hints

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from simplelocalization.catalog import DEFAULT_CATALOG, LanguageCatalog, LanguageInfo
from simplelocalization.enums import LanguageId
from simplelocalization.localization import types as localization_types


class TestDefaultCatalog:
    """Tests for the built-in language table."""

    @pytest.mark.parametrize(
        ("language", "locale_code", "resource_file"),
        [
            (LanguageId.ENGLISH, "en", "en.xml"),
            (LanguageId.RUSSIAN, "ru", "ru.xml"),
            (LanguageId.BELARUSIAN, "be", "be.xml"),
        ],
    )
    def test_resolve(self, language: LanguageId, locale_code: str, resource_file: str) -> None:
        """Each language maps to its two-letter code and file."""
        info = DEFAULT_CATALOG.resolve(language)

        assert info is not None
        assert info.locale_code == locale_code
        assert info.resource_file == resource_file

    def test_mapping_is_total(self) -> None:
        """Every LanguageId is in the default catalog."""
        assert DEFAULT_CATALOG.languages() == tuple(LanguageId)
        assert len(DEFAULT_CATALOG) == len(LanguageId)

    def test_locale_codes_and_files_unique(self) -> None:
        """No two languages share a locale code or a file name."""
        infos = list(DEFAULT_CATALOG)
        codes = [info.locale_code for info in infos]
        files = [info.resource_file for info in infos]

        assert all(codes)
        assert all(files)
        assert len(set(codes)) == len(codes)
        assert len(set(files)) == len(files)

    @given(st.sampled_from(LanguageId))
    def test_resolve_is_pure(self, language: LanguageId) -> None:
        """Property: repeated lookups return the same entry."""
        event(f"language={language.label}")
        assert DEFAULT_CATALOG.resolve(language) is DEFAULT_CATALOG.resolve(language)
        assert language in DEFAULT_CATALOG

    def test_resolve_outside_catalog_returns_none(self) -> None:
        """A language missing from a catalog resolves to None, not an error."""
        catalog = LanguageCatalog([LanguageInfo.for_locale(LanguageId.ENGLISH, "en")])

        assert catalog.resolve(LanguageId.RUSSIAN) is None
        assert LanguageId.RUSSIAN not in catalog


class TestFindByLocale:
    """Tests for reverse lookup by locale code."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("ru", LanguageId.RUSSIAN),
            ("ru_RU", LanguageId.RUSSIAN),
            ("ru-RU", LanguageId.RUSSIAN),
            ("be_BY.UTF-8", LanguageId.BELARUSIAN),
            ("EN-us", LanguageId.ENGLISH),
        ],
    )
    def test_matches_primary_subtag(self, code: str, expected: LanguageId) -> None:
        """Region and encoding suffixes are ignored."""
        info = DEFAULT_CATALOG.find_by_locale(code)

        assert info is not None
        assert info.language is expected

    @pytest.mark.parametrize("code", ["de", "fr_FR", ""])
    def test_unknown_locale_returns_none(self, code: str) -> None:
        """Unsupported or empty codes resolve to None."""
        assert DEFAULT_CATALOG.find_by_locale(code) is None


class TestCatalogValidation:
    """Construction-time validation of catalogs."""

    def test_empty_catalog_rejected(self) -> None:
        """A catalog needs at least one language."""
        with pytest.raises(ValueError, match="At least one language"):
            LanguageCatalog([])

    def test_duplicate_language_rejected(self) -> None:
        """A language may appear once."""
        with pytest.raises(ValueError, match="Language listed twice"):
            LanguageCatalog(
                [
                    LanguageInfo.for_locale(LanguageId.ENGLISH, "en"),
                    LanguageInfo.for_locale(LanguageId.ENGLISH, "ru"),
                ]
            )

    def test_duplicate_locale_rejected(self) -> None:
        """Locale codes are injective."""
        with pytest.raises(ValueError, match="Locale code 'en'"):
            LanguageCatalog(
                [
                    LanguageInfo(LanguageId.ENGLISH, "en", "en.xml"),
                    LanguageInfo(LanguageId.RUSSIAN, "en", "ru.xml"),
                ]
            )

    def test_duplicate_file_rejected(self) -> None:
        """Resource files are injective."""
        with pytest.raises(ValueError, match="Resource file 'x.xml'"):
            LanguageCatalog(
                [
                    LanguageInfo(LanguageId.ENGLISH, "en", "x.xml"),
                    LanguageInfo(LanguageId.RUSSIAN, "ru", "x.xml"),
                ]
            )

    @pytest.mark.parametrize("resource_file", ["../en.xml", "sub\\en.xml"])
    def test_path_separators_rejected(self, resource_file: str) -> None:
        """File names cannot point outside the resource directory."""
        with pytest.raises(ValueError, match="Path separators"):
            LanguageInfo(LanguageId.ENGLISH, "en", resource_file)

    def test_empty_locale_rejected(self) -> None:
        """Locale code cannot be empty."""
        with pytest.raises(ValueError, match="Locale code cannot be empty"):
            LanguageInfo(LanguageId.ENGLISH, "", "en.xml")

    def test_field_types_use_localization_aliases(self) -> None:
        """Locale code and file name are typed with the shared aliases."""
        hints = get_type_hints(LanguageInfo, localns=vars(localization_types))

        assert hints["locale_code"] is localization_types.LocaleCode
        assert hints["resource_file"] is localization_types.ResourceFileName
        assert hints["language"] is LanguageId


class TestDisplayName:
    """Tests for Babel-backed language names."""

    def test_russian_display_name(self) -> None:
        """Names come from CLDR in the language itself."""
        info = DEFAULT_CATALOG.resolve(LanguageId.RUSSIAN)

        assert info is not None
        assert info.display_name == "русский"

    def test_unknown_locale_falls_back_to_label(self) -> None:
        """Locales unknown to Babel use the enum label."""
        info = LanguageInfo(LanguageId.ENGLISH, "qq", "qq.xml")

        assert info.display_name == "English"
