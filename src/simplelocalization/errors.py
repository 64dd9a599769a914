"""Localization exception hierarchy.

Resource-not-found is deliberately absent: a missing language file is a
normal outcome reported through LoadStatus.NOT_FOUND, never raised to the
UI layer.

Hierarchy:
    LocalizationError (base)
    ├─ MalformedResourceError (unparsable resource file)
    ├─ SchemaViolationError (invalid schema declaration, also ValueError)
    └─ UnknownStringError (name outside the schema, also KeyError)

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "LocalizationError",
    "MalformedResourceError",
    "SchemaViolationError",
    "UnknownStringError",
]


class LocalizationError(Exception):
    """Base exception for all simplelocalization errors."""


class MalformedResourceError(LocalizationError):
    """Resource file exists but its content cannot be parsed.

    Resource files are hand-edited, so the loader recovers from this error
    by using defaults; the sync pass skips the file.

    Attributes:
        path: Path of the offending file
    """

    def __init__(self, message: str, path: Path | str) -> None:
        """Initialize MalformedResourceError.

        Args:
            message: Human-readable error description
            path: Path of the offending file
        """
        super().__init__(message)
        self.path = Path(path)


class SchemaViolationError(LocalizationError, ValueError):
    """String schema declaration is invalid.

    Raised only while a StringSchema is being constructed (duplicate names,
    non-identifier names, non-text defaults). A constructed schema is valid,
    so this error cannot surface from loading or merging.
    """


class UnknownStringError(LocalizationError, KeyError):
    """String name is not a field of the schema.

    Attributes:
        name: The unknown string name
    """

    def __init__(self, name: str) -> None:
        """Initialize UnknownStringError.

        Args:
            name: The unknown string name
        """
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        """Return a readable message instead of KeyError's repr-quoting."""
        return f"Unknown string '{self.name}'"
