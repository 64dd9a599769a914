"""Active string set loading, caching and change notification.

StringLoader turns the selected language into a fully populated StringSet:

    settings.language -> catalog entry -> <resource_directory>/<locale>.xml
        -> ResourceTable -> merge onto schema defaults -> cached StringSet

State machine:
    Uninitialized --strings--> Loaded      (resolve, read file, merge, cache)
    Loaded        --strings--> Loaded      (cached value, no disk access)
    Loaded        --invalidate--> Uninitialized, then subscribers notified

The read path never raises to its caller. A missing file means "no
overrides yet"; an unreadable or malformed file is logged and treated the
same way. The outcome of the latest load is kept in ``last_load_result``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TypeAlias
from dataclasses import dataclass
from pathlib import Path

from simplelocalization.catalog import DEFAULT_CATALOG, LanguageCatalog
from simplelocalization.config import LocalizationConfig
from simplelocalization.constants import FALLBACK_LOCALE
from simplelocalization.enums import LanguageId, LoadStatus
from simplelocalization.errors import MalformedResourceError
from simplelocalization.localization.store import (
    ResourceStore,
    ResourceTable,
    XmlResourceStore,
    resource_path,
)
from simplelocalization.localization.types import LocaleCode, StringKey
from simplelocalization.schema import DEFAULT_SCHEMA, StringSchema, StringSet
from simplelocalization.settings import LanguageSettings

__all__ = [
    "ResourceLoadResult",
    "StringLoader",
    "merge",
]

logger = logging.getLogger(__name__)

ChangeCallback: TypeAlias = Callable[[], None]


def merge(defaults: StringSet, table: ResourceTable) -> StringSet:
    """Apply a table's overrides onto a string set.

    Every schema field whose name is a key of ``table`` takes the table's
    value; all other fields keep their value from ``defaults``. Keys the
    schema does not know are ignored. Never raises.

    Example:
        >>> strings = DEFAULT_SCHEMA.defaults()
        >>> table = ResourceTable.from_pairs([("HelloSentence", "Привет!"), ("Stale", "x")])
        >>> merge(strings, table).HelloSentence
        'Привет!'
    """
    schema = defaults.schema
    overrides = {key: value for key, value in table if key in schema}
    if not overrides:
        return defaults
    return StringSet(schema, {**defaults.as_dict(), **overrides})


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Outcome of loading the active language's resource file.

    Attributes:
        language: Language that was requested
        status: Load status (success, not_found, error, skipped)
        path: Resource file path, None when no file was considered
        error: Exception if status is ERROR, None otherwise
        ignored_keys: File keys that are not schema fields
        duplicate_keys: Keys that appeared more than once in the file
    """

    language: LanguageId
    status: LoadStatus
    path: Path | None = None
    error: Exception | None = None
    ignored_keys: tuple[StringKey, ...] = ()
    duplicate_keys: tuple[StringKey, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if overrides were read from a file."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the language has no resource file yet."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the resource file could not be used."""
        return self.status == LoadStatus.ERROR


class StringLoader:
    """Loads, caches and refreshes the UI strings for the active language.

    Construct one loader per application and pass it to the components that
    display strings or change the language.

    Thread safety:
        The cache is guarded by a lock; concurrent first accesses load the
        file once. Subscribers are called outside the lock, in subscription
        order, on the thread that invalidated.

    Example:
        >>> loader = StringLoader(MemoryLanguageSettings(LanguageId.RUSSIAN))
        >>> loader.subscribe(window.refresh_labels)
        >>> loader.strings.Title
        'Главное окно'
        >>> loader.set_language(LanguageId.ENGLISH)  # window.refresh_labels() runs
    """

    __slots__ = (
        "_cached",
        "_catalog",
        "_config",
        "_last_result",
        "_lock",
        "_schema",
        "_settings",
        "_store",
        "_subscribers",
    )

    def __init__(
        self,
        settings: LanguageSettings,
        config: LocalizationConfig | None = None,
        *,
        catalog: LanguageCatalog = DEFAULT_CATALOG,
        schema: StringSchema = DEFAULT_SCHEMA,
        store: ResourceStore | None = None,
    ) -> None:
        """Initialize the loader. No file is read until strings are accessed.

        Args:
            settings: Source of the active language
            config: Resource location and defaults-only switch
                (default: ``LocalizationConfig()``)
            catalog: Supported languages and their files
            schema: String names and compiled-in defaults
            store: Resource file reader (default: XmlResourceStore using the
                configured encoding)
        """
        self._settings = settings
        self._config = config if config is not None else LocalizationConfig()
        self._catalog = catalog
        self._schema = schema
        self._store: ResourceStore = (
            store if store is not None else XmlResourceStore(encoding=self._config.encoding)
        )
        self._cached: tuple[StringSet, ResourceLoadResult] | None = None
        self._last_result: ResourceLoadResult | None = None
        self._lock = threading.Lock()
        self._subscribers: list[ChangeCallback] = []

    @property
    def strings(self) -> StringSet:
        """Strings for the active language, loaded on first access."""
        return self._ensure_loaded()[0]

    @property
    def is_loaded(self) -> bool:
        """Check if a string set is cached."""
        return self._cached is not None

    @property
    def last_load_result(self) -> ResourceLoadResult | None:
        """Outcome of the most recent load, None before the first one."""
        return self._last_result

    @property
    def language(self) -> LanguageId:
        """Language of the current strings (loads them if needed)."""
        return self._ensure_loaded()[1].language

    @property
    def locale_code(self) -> LocaleCode:
        """Locale code of the current strings' language."""
        info = self._catalog.resolve(self.language)
        return info.locale_code if info is not None else FALLBACK_LOCALE

    @property
    def schema(self) -> StringSchema:
        """Schema the loaded strings conform to."""
        return self._schema

    @property
    def config(self) -> LocalizationConfig:
        """Loader configuration."""
        return self._config

    def invalidate(self) -> None:
        """Drop the cached strings and notify subscribers.

        The cache is cleared before any subscriber runs, so subscribers that
        read ``strings`` see the set for the current language.
        """
        with self._lock:
            self._cached = None
        logger.debug("String cache invalidated")
        self._notify()

    def update_strings(self) -> None:
        """Reload the strings and refresh subscribers. Same as invalidate()."""
        self.invalidate()

    def set_language(self, language: LanguageId) -> None:
        """Store a newly selected language and refresh subscribers."""
        self._settings.language = language
        logger.info("Display language changed to %s", language.label)
        self.invalidate()

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a callback run after every invalidation.

        Returns:
            Function that removes this subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: ChangeCallback) -> bool:
        """Remove one registration of a callback.

        Returns:
            True if the callback was registered
        """
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    def _notify(self) -> None:
        for callback in tuple(self._subscribers):
            try:
                callback()
            except Exception:  # noqa: BLE001
                logger.exception("String change subscriber %r failed", callback)

    def _ensure_loaded(self) -> tuple[StringSet, ResourceLoadResult]:
        cached = self._cached
        if cached is not None:
            return cached

        with self._lock:
            # Double-check: another thread may have loaded while we waited.
            if self._cached is None:
                self._cached = self._load()
                self._last_result = self._cached[1]
            return self._cached

    def _load(self) -> tuple[StringSet, ResourceLoadResult]:
        defaults = self._schema.defaults()
        language = self._settings.language

        if self._config.defaults_only:
            logger.debug("Defaults-only mode; not reading resources for %s", language.label)
            return defaults, ResourceLoadResult(language, LoadStatus.SKIPPED)

        info = self._catalog.resolve(language)
        if info is None:
            logger.warning("No resource file registered for %s; using defaults", language.label)
            return defaults, ResourceLoadResult(language, LoadStatus.SKIPPED)

        path = resource_path(self._config.resource_directory, info)
        try:
            table = self._store.load(path)
        except FileNotFoundError:
            logger.debug("No resource file %s; using defaults", path)
            return defaults, ResourceLoadResult(language, LoadStatus.NOT_FOUND, path)
        except (MalformedResourceError, OSError, ValueError) as e:
            logger.warning("Cannot use resource file %s, using defaults: %s", path, e)
            return defaults, ResourceLoadResult(language, LoadStatus.ERROR, path, error=e)

        ignored = tuple(key for key in table.keys() if key not in self._schema)
        if ignored:
            logger.debug("Ignoring unknown keys in %s: %s", path, ", ".join(ignored))

        logger.debug("Loaded %d overrides for %s from %s", len(table), language.label, path)
        result = ResourceLoadResult(
            language,
            LoadStatus.SUCCESS,
            path,
            ignored_keys=ignored,
            duplicate_keys=table.duplicates,
        )
        return merge(defaults, table), result

    def __repr__(self) -> str:
        state = "loaded" if self._cached is not None else "uninitialized"
        return f"StringLoader(directory={str(self._config.resource_directory)!r}, {state})"
