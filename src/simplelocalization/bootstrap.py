"""Application wiring for the string loader.

Builds a StringLoader from explicit configuration and settings, and runs
the schema sync pass once when development sync is enabled. Call it once
at startup and hand the loader to the UI.

Python 3.13+.
"""

from __future__ import annotations

import logging

from simplelocalization.catalog import DEFAULT_CATALOG, LanguageCatalog
from simplelocalization.config import LocalizationConfig
from simplelocalization.localization.loader import StringLoader
from simplelocalization.localization.store import ResourceStore, XmlResourceStore
from simplelocalization.localization.sync import SchemaSync, SyncSummary
from simplelocalization.schema import DEFAULT_SCHEMA, StringSchema
from simplelocalization.settings import LanguageSettings

__all__ = ["create_string_loader", "run_startup_sync"]

logger = logging.getLogger(__name__)


def run_startup_sync(
    config: LocalizationConfig,
    *,
    catalog: LanguageCatalog = DEFAULT_CATALOG,
    schema: StringSchema = DEFAULT_SCHEMA,
    store: ResourceStore | None = None,
) -> SyncSummary | None:
    """Run SchemaSync if the configuration asks for it.

    Skipped (returns None) when ``sync_resources`` is off, in defaults-only
    mode, and when Python runs optimized (``-O``), which is how release
    builds are started.
    """
    if not config.sync_resources or config.defaults_only:
        return None
    if not __debug__:
        logger.debug("Resource sync disabled in optimized mode")
        return None

    sync = SchemaSync(
        config.effective_sync_directory,
        catalog=catalog,
        schema=schema,
        store=store if store is not None else XmlResourceStore(encoding=config.encoding),
    )
    return sync.run()


def create_string_loader(
    settings: LanguageSettings,
    config: LocalizationConfig | None = None,
    *,
    catalog: LanguageCatalog = DEFAULT_CATALOG,
    schema: StringSchema = DEFAULT_SCHEMA,
    store: ResourceStore | None = None,
) -> StringLoader:
    """Create the application's StringLoader, syncing resources first if enabled.

    Example:
        >>> config = LocalizationConfig("Languages", sync_resources=True)
        >>> loader = create_string_loader(JsonLanguageSettings("settings.json"), config)
        >>> loader.strings.CurrentLanguage
        'Current language'
    """
    config = config if config is not None else LocalizationConfig()
    store = store if store is not None else XmlResourceStore(encoding=config.encoding)
    run_startup_sync(config, catalog=catalog, schema=schema, store=store)
    return StringLoader(settings, config, catalog=catalog, schema=schema, store=store)
