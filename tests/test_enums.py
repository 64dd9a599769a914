"""Tests for enums module.

Tests all enum classes for completeness, ordering, and string conversion.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from simplelocalization.enums import LanguageId, LoadStatus, SyncStatus


class TestLanguageId:
    """Tests for the closed language selector."""

    def test_members_in_display_order(self) -> None:
        """Languages are offered in declaration order."""
        assert list(LanguageId) == [
            LanguageId.ENGLISH,
            LanguageId.RUSSIAN,
            LanguageId.BELARUSIAN,
        ]

    def test_labels(self) -> None:
        """Persisted labels match the selector names."""
        assert LanguageId.ENGLISH.label == "English"
        assert LanguageId.RUSSIAN.label == "Russian"
        assert LanguageId.BELARUSIAN.label == "Belarusian"

    @given(st.sampled_from(LanguageId))
    def test_from_label_roundtrip(self, language: LanguageId) -> None:
        """Property: from_label inverts label."""
        event(f"language={language.label}")
        assert LanguageId.from_label(language.label) is language

    def test_from_label_unknown_raises(self) -> None:
        """Unknown label raises ValueError."""
        with pytest.raises(ValueError, match="German"):
            LanguageId.from_label("German")


class TestStatusEnums:
    """Tests for LoadStatus and SyncStatus."""

    @given(st.sampled_from(LoadStatus))
    def test_load_status_str_is_value(self, status: LoadStatus) -> None:
        """Property: str() returns the value for all LoadStatus members."""
        assert str(status) == status.value

    @given(st.sampled_from(SyncStatus))
    def test_sync_status_str_is_value(self, status: SyncStatus) -> None:
        """Property: str() returns the value for all SyncStatus members."""
        assert str(status) == status.value

    def test_load_status_members(self) -> None:
        """All load outcomes are represented."""
        assert {s.value for s in LoadStatus} == {"success", "not_found", "error", "skipped"}

    def test_sync_status_members(self) -> None:
        """All sync outcomes are represented."""
        assert {s.value for s in SyncStatus} == {
            "updated",
            "unchanged",
            "missing_file",
            "error",
        }
