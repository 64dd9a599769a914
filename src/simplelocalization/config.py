"""Configuration for string loading and resource maintenance.

Provides a single frozen dataclass that carries every setting the loader,
the sync pass and the bootstrap helper need, so components receive their
configuration explicitly instead of reading process-wide constants.

Python 3.13+.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

from simplelocalization.constants import DEFAULT_ENCODING, DEFAULT_RESOURCE_DIRECTORY

__all__ = ["LocalizationConfig"]


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Immutable configuration for StringLoader and SchemaSync.

    All fields have sensible defaults; ``LocalizationConfig()`` reads
    resource files from ``./Languages`` and never modifies them.

    Attributes:
        resource_directory: Directory holding ``<locale>.xml`` files read at
            runtime (default: ``Languages``).
        defaults_only: Serve compiled-in defaults without any file I/O
            (default: False). For design-time tooling and previews.
        sync_resources: Reconcile resource files with the string schema once
            at startup (default: False). Development builds only; ignored when
            Python runs with ``-O``.
        sync_directory: Directory whose files the sync pass updates, e.g. the
            source tree rather than a build output copy (default: None, meaning
            ``resource_directory``).
        encoding: Text encoding of resource files (default: utf-8).

    Example:
        >>> config = LocalizationConfig("assets/lang", sync_resources=True)
        >>> config.effective_sync_directory
        PosixPath('assets/lang')
    """

    resource_directory: Path = DEFAULT_RESOURCE_DIRECTORY
    defaults_only: bool = False
    sync_resources: bool = False
    sync_directory: Path | None = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Normalize paths and validate the encoding at construction time.

        Raises:
            ValueError: If the encoding is unknown to Python's codec registry
        """
        object.__setattr__(self, "resource_directory", Path(self.resource_directory))
        if self.sync_directory is not None:
            object.__setattr__(self, "sync_directory", Path(self.sync_directory))
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            msg = f"Unknown resource file encoding: '{self.encoding}'"
            raise ValueError(msg) from e

    @property
    def effective_sync_directory(self) -> Path:
        """Directory the sync pass works on."""
        return self.sync_directory if self.sync_directory is not None else self.resource_directory
