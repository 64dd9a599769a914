"""Tests for language settings storage."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from simplelocalization.enums import LanguageId
from simplelocalization.settings import (
    JsonLanguageSettings,
    MemoryLanguageSettings,
    detect_language,
)


class TestMemoryLanguageSettings:
    """Tests for in-memory settings."""

    def test_default_is_english(self) -> None:
        """Without an argument the language is English."""
        assert MemoryLanguageSettings().language is LanguageId.ENGLISH

    def test_assignment(self) -> None:
        """Assigned values are returned."""
        settings = MemoryLanguageSettings()
        settings.language = LanguageId.BELARUSIAN

        assert settings.language is LanguageId.BELARUSIAN


class TestJsonLanguageSettings:
    """Tests for JSON-file settings."""

    def test_missing_file_uses_default(self, tmp_path: Path) -> None:
        """No file yet means the default language, and no file is created."""
        path = tmp_path / "settings.json"

        settings = JsonLanguageSettings(path, default=LanguageId.RUSSIAN)

        assert settings.language is LanguageId.RUSSIAN
        assert not path.exists()

    def test_reads_stored_label(self, tmp_path: Path) -> None:
        """The stored label selects the language."""
        path = tmp_path / "settings.json"
        path.write_text('{"language": "Belarusian"}', encoding="utf-8")

        assert JsonLanguageSettings(path, default=LanguageId.ENGLISH).language is (
            LanguageId.BELARUSIAN
        )

    def test_persists_and_keeps_other_keys(self, tmp_path: Path) -> None:
        """Writing the language leaves unrelated settings intact."""
        path = tmp_path / "settings.json"
        path.write_text('{"theme": "dark", "language": "English"}', encoding="utf-8")
        settings = JsonLanguageSettings(path, default=LanguageId.ENGLISH)

        settings.language = LanguageId.RUSSIAN

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "theme": "dark",
            "language": "Russian",
        }
        assert JsonLanguageSettings(path).language is LanguageId.RUSSIAN

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """The settings directory is created on first write."""
        path = tmp_path / "app" / "config" / "settings.json"
        settings = JsonLanguageSettings(path, default=LanguageId.ENGLISH)

        settings.language = LanguageId.BELARUSIAN

        assert path.read_text(encoding="utf-8") == '{\n  "language": "Belarusian"\n}\n'

    def test_unknown_label_falls_back(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unsupported label is logged and replaced by the default."""
        path = tmp_path / "settings.json"
        path.write_text('{"language": "Klingon"}', encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="simplelocalization.settings"):
            settings = JsonLanguageSettings(path, default=LanguageId.ENGLISH)

        assert settings.language is LanguageId.ENGLISH
        assert "Klingon" in caplog.text

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", ""])
    def test_unreadable_content_falls_back(self, tmp_path: Path, content: str) -> None:
        """Invalid JSON or a non-object document uses the default."""
        path = tmp_path / "settings.json"
        path.write_text(content, encoding="utf-8")

        assert JsonLanguageSettings(path, default=LanguageId.RUSSIAN).language is (
            LanguageId.RUSSIAN
        )

    def test_default_detected_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without a default, the system locale picks the language."""
        monkeypatch.setattr(
            "simplelocalization.settings.get_system_locale", lambda: "be_BY"
        )

        settings = JsonLanguageSettings(tmp_path / "settings.json")

        assert settings.language is LanguageId.BELARUSIAN


class TestDetectLanguage:
    """Tests for system locale detection."""

    @pytest.mark.parametrize(
        ("system_locale", "expected"),
        [
            ("ru_RU", LanguageId.RUSSIAN),
            ("be", LanguageId.BELARUSIAN),
            ("de_DE", LanguageId.ENGLISH),
            (None, LanguageId.ENGLISH),
        ],
    )
    def test_detect(
        self,
        monkeypatch: pytest.MonkeyPatch,
        system_locale: str | None,
        expected: LanguageId,
    ) -> None:
        """Unsupported or unknown locales fall back to the first language."""
        monkeypatch.setattr(
            "simplelocalization.settings.get_system_locale", lambda: system_locale
        )

        assert detect_language() is expected
