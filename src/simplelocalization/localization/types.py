"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "ResourceFileName",
    "StringKey",
    "StringValue",
]

StringKey: TypeAlias = str
"""Name of a UI string; a StringSchema field name (e.g., 'Title')."""

StringValue: TypeAlias = str
"""Display text of a UI string (e.g., 'Main window')."""

LocaleCode: TypeAlias = str
"""Two-letter locale code (e.g., 'en', 'ru', 'be')."""

ResourceFileName: TypeAlias = str
"""Resource file name under the resource directory (e.g., 'ru.xml')."""
