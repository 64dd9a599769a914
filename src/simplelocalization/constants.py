"""Shared constants for simplelocalization.

Centralizes the resource file format vocabulary and default locations so the
store, the loader and the sync pass agree on a single source of truth.

Constants are grouped by domain:
- Resource file format: element and attribute names, file suffix
- Locations: default resource directory
- Fallbacks: locale used when none can be detected

Python 3.13+.
"""

from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource file format
    "STRING_ELEMENT",
    "KEY_ATTRIBUTE",
    "VALUE_ATTRIBUTE",
    "RESOURCE_SUFFIX",
    "DEFAULT_ENCODING",
    # Locations
    "DEFAULT_RESOURCE_DIRECTORY",
    # Fallbacks
    "FALLBACK_LOCALE",
]

# ============================================================================
# RESOURCE FILE FORMAT
# ============================================================================
#
# One file per language, named "<locale code>.xml":
#
#     <strings>
#       <string key="Title" value="Main window"/>
#       <string key="HelloSentence" value="Hello!"/>
#     </strings>
#
# The root element name is not checked on read.

STRING_ELEMENT: str = "string"
KEY_ATTRIBUTE: str = "key"
VALUE_ATTRIBUTE: str = "value"

RESOURCE_SUFFIX: str = ".xml"

DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# LOCATIONS
# ============================================================================

# Relative to the working directory of the application.
DEFAULT_RESOURCE_DIRECTORY: Path = Path("Languages")

# ============================================================================
# FALLBACKS
# ============================================================================

FALLBACK_LOCALE: str = "en"
