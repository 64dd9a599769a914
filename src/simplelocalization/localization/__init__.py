"""String loading package.

Provides the full loading stack: type aliases, resource file storage, the
active-language loader, and the development-time schema sync pass.

Submodules:
    types  - PEP 695 type aliases (StringKey, StringValue, LocaleCode, ResourceFileName)
    store  - ResourceTable, ResourceStore protocol, XmlResourceStore, entries_missing
    loader - StringLoader, merge, ResourceLoadResult
    sync   - SchemaSync, SyncResult, SyncSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from simplelocalization.enums import LoadStatus, SyncStatus
from simplelocalization.localization.loader import ResourceLoadResult, StringLoader, merge
from simplelocalization.localization.store import (
    ResourceStore,
    ResourceTable,
    XmlResourceStore,
    entries_missing,
    resource_path,
)
from simplelocalization.localization.sync import SchemaSync, SyncResult, SyncSummary
from simplelocalization.localization.types import (
    LocaleCode,
    ResourceFileName,
    StringKey,
    StringValue,
)

__all__ = [
    # Loader
    "StringLoader",
    "merge",
    "LoadStatus",
    "ResourceLoadResult",
    # Storage
    "ResourceStore",
    "XmlResourceStore",
    "ResourceTable",
    "entries_missing",
    "resource_path",
    # Maintenance
    "SchemaSync",
    "SyncResult",
    "SyncStatus",
    "SyncSummary",
    # Type aliases
    "LocaleCode",
    "ResourceFileName",
    "StringKey",
    "StringValue",
]
