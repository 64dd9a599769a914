"""simplelocalization - named UI strings with per-language file overrides.

Loads a set of named display strings for an application UI, applies the
overrides from the active language's resource file onto compiled-in
defaults, and notifies the UI when the language changes. A development-time
pass keeps resource files complete as new strings are added.

Public API:
    StringLoader - Cached, language-aware access to the current strings
    create_string_loader - Startup wiring (runs the sync pass when enabled)
    SchemaSync - Appends missing keys to existing resource files
    StringSchema, StringField, StringSet - Static string schema and values
    LanguageCatalog, LanguageInfo, LanguageId - Supported languages
    LocalizationConfig - Resource location and mode switches
    MemoryLanguageSettings, JsonLanguageSettings - Active language storage

Exceptions:
    LocalizationError - Base exception class
    MalformedResourceError - Unparsable resource file
    SchemaViolationError - Invalid schema declaration
    UnknownStringError - Name outside the schema

Submodules:
    simplelocalization.localization - Resource storage, loader and sync pass
    simplelocalization.locale_utils - Babel-backed locale helpers
"""

from .bootstrap import create_string_loader
from .catalog import DEFAULT_CATALOG, LanguageCatalog, LanguageInfo
from .config import LocalizationConfig
from .enums import LanguageId, LoadStatus, SyncStatus
from .errors import (
    LocalizationError,
    MalformedResourceError,
    SchemaViolationError,
    UnknownStringError,
)
from .localization import (
    ResourceLoadResult,
    ResourceTable,
    SchemaSync,
    StringLoader,
    SyncSummary,
    XmlResourceStore,
    merge,
)
from .schema import DEFAULT_SCHEMA, StringField, StringSchema, StringSet
from .settings import JsonLanguageSettings, LanguageSettings, MemoryLanguageSettings

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("simplelocalization")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_SCHEMA",
    "JsonLanguageSettings",
    "LanguageCatalog",
    "LanguageId",
    "LanguageInfo",
    "LanguageSettings",
    "LoadStatus",
    "LocalizationConfig",
    "LocalizationError",
    "MalformedResourceError",
    "MemoryLanguageSettings",
    "ResourceLoadResult",
    "ResourceTable",
    "SchemaSync",
    "SchemaViolationError",
    "StringField",
    "StringLoader",
    "StringSchema",
    "StringSet",
    "SyncStatus",
    "SyncSummary",
    "UnknownStringError",
    "XmlResourceStore",
    "__version__",
    "create_string_loader",
    "merge",
]
