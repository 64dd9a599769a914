"""Enumerations for simplelocalization type-safe constants.

Status enums use StrEnum (Python 3.11+) for automatic string conversion,
which keeps log lines and diagnostics readable without __str__ boilerplate.

Python 3.13+.
"""

from __future__ import annotations

from enum import Enum, StrEnum

__all__ = [
    "LanguageId",
    "LoadStatus",
    "SyncStatus",
]


class LanguageId(Enum):
    """Closed, ordered set of supported display languages.

    Member order is the order languages are offered to the user. The value
    is the label persisted in settings and shown in language selectors.
    """

    ENGLISH = "English"
    RUSSIAN = "Russian"
    BELARUSIAN = "Belarusian"

    @property
    def label(self) -> str:
        """Persisted label of the language (e.g. "Russian")."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> LanguageId:
        """Look up a language by its persisted label.

        Raises:
            ValueError: If no language carries the label
        """
        return cls(label)


class LoadStatus(StrEnum):
    """Outcome of loading one language's resource file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File found and parsed; overrides applied."""

    NOT_FOUND = "not_found"
    """No file exists for the language (defaults used, not an error)."""

    ERROR = "error"
    """File present but unreadable or malformed (defaults used)."""

    SKIPPED = "skipped"
    """No I/O attempted (defaults-only mode or language outside the catalog)."""


class SyncStatus(StrEnum):
    """Outcome of reconciling one resource file against the schema.

    StrEnum provides automatic string conversion: str(SyncStatus.UPDATED) == "updated"
    """

    UPDATED = "updated"
    """Missing keys were appended to the file."""

    UNCHANGED = "unchanged"
    """File already contained every schema key; not touched."""

    MISSING_FILE = "missing_file"
    """No file for the language; files are never created by the sync pass."""

    ERROR = "error"
    """File could not be read, parsed or written; skipped."""
