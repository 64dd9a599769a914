"""Development-time reconciliation of resource files with the string schema.

When a string is added to the schema, every existing language file should
gain an entry for it so translators can see what is left to translate.
SchemaSync appends each missing key with its default (usually English)
value. It never creates files, never rewrites existing entries, and a
broken file only skips that file.

Components:
    SchemaSync - The sync pass over all catalog languages
    SyncResult - Immutable outcome for one language file
    SyncSummary - Immutable aggregate of a whole pass

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from simplelocalization.catalog import DEFAULT_CATALOG, LanguageCatalog, LanguageInfo
from simplelocalization.enums import LanguageId, SyncStatus
from simplelocalization.errors import MalformedResourceError
from simplelocalization.localization.store import (
    ResourceStore,
    XmlResourceStore,
    entries_missing,
    resource_path,
)
from simplelocalization.localization.types import StringKey
from simplelocalization.schema import DEFAULT_SCHEMA, StringSchema

__all__ = [
    "SchemaSync",
    "SyncResult",
    "SyncSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Outcome of reconciling one language file.

    Attributes:
        language: Language whose file was examined
        path: Resource file path
        status: Sync status (updated, unchanged, missing_file, error)
        appended_keys: Keys appended to the file, in schema order
        error: Exception if status is ERROR, None otherwise
    """

    language: LanguageId
    path: Path
    status: SyncStatus
    appended_keys: tuple[StringKey, ...] = ()
    error: Exception | None = None

    @property
    def is_updated(self) -> bool:
        """Check if the file was modified."""
        return self.status == SyncStatus.UPDATED

    @property
    def is_error(self) -> bool:
        """Check if the file was skipped because of an error."""
        return self.status == SyncStatus.ERROR


@dataclass(frozen=True, slots=True)
class SyncSummary:
    """Immutable aggregate of one sync pass.

    Attributes:
        results: Per-language results in catalog order
    """

    results: tuple[SyncResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"SyncSummary(total={len(self.results)}, "
            f"updated={self.updated}, "
            f"missing_files={self.missing_files}, "
            f"errors={self.errors})"
        )

    @property
    def updated(self) -> int:
        """Number of files that gained entries."""
        return sum(1 for r in self.results if r.is_updated)

    @property
    def missing_files(self) -> int:
        """Number of languages without a resource file."""
        return sum(1 for r in self.results if r.status == SyncStatus.MISSING_FILE)

    @property
    def errors(self) -> int:
        """Number of files skipped because of errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def appended(self) -> int:
        """Total number of entries appended across all files."""
        return sum(len(r.appended_keys) for r in self.results)

    def get_updated(self) -> tuple[SyncResult, ...]:
        """Get all results for modified files."""
        return tuple(r for r in self.results if r.is_updated)

    def get_errors(self) -> tuple[SyncResult, ...]:
        """Get all results for skipped files."""
        return tuple(r for r in self.results if r.is_error)


class SchemaSync:
    """Appends missing schema keys to existing resource files.

    Example:
        >>> summary = SchemaSync(Path("src/app/Languages")).run()
        >>> for result in summary.get_updated():
        ...     print(f"{result.path}: +{', '.join(result.appended_keys)}")
    """

    __slots__ = ("_catalog", "_directory", "_schema", "_store")

    def __init__(
        self,
        directory: Path | str,
        *,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
        schema: StringSchema = DEFAULT_SCHEMA,
        store: ResourceStore | None = None,
    ) -> None:
        """Initialize the sync pass.

        Args:
            directory: Directory holding the resource files to update
            catalog: Languages whose files are examined
            schema: Keys and default values every file should contain
            store: Resource file reader/writer (default: XmlResourceStore)
        """
        self._directory = Path(directory)
        self._catalog = catalog
        self._schema = schema
        self._store: ResourceStore = store if store is not None else XmlResourceStore()

    @property
    def directory(self) -> Path:
        """Directory holding the resource files."""
        return self._directory

    def run(self) -> SyncSummary:
        """Reconcile every catalog language's file with the schema.

        Returns:
            SyncSummary with one result per catalog language
        """
        results = tuple(self._sync_language(info) for info in self._catalog)
        summary = SyncSummary(results)
        if summary.updated or summary.errors:
            logger.info("Resource sync in %s: %r", self._directory, summary)
        else:
            logger.debug("Resource sync in %s: %r", self._directory, summary)
        return summary

    def _sync_language(self, info: LanguageInfo) -> SyncResult:
        path = resource_path(self._directory, info)
        if not path.is_file():
            return SyncResult(info.language, path, SyncStatus.MISSING_FILE)

        try:
            table = self._store.load(path)
            missing = entries_missing(table, self._schema.names)
            if not missing:
                return SyncResult(info.language, path, SyncStatus.UNCHANGED)
            self._store.append_entries(
                path, {key: self._schema.default(key) for key in missing}
            )
        except (MalformedResourceError, OSError) as e:
            logger.warning("Skipping resource sync for %s: %s", path, e)
            return SyncResult(info.language, path, SyncStatus.ERROR, error=e)

        logger.info("Added %d missing strings to %s: %s", len(missing), path, ", ".join(missing))
        return SyncResult(info.language, path, SyncStatus.UPDATED, appended_keys=missing)
