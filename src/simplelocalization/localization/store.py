"""Resource file storage for per-language string overrides.

Provides the protocol for resource stores, the XML file implementation, and
the immutable table a resource file is read into.

Components:
    ResourceTable - Ordered, immutable key/value pairs from one file
    ResourceStore - Protocol for reading and appending resource files
    XmlResourceStore - Store for ``<string key=".." value=".."/>`` files
    entries_missing - Schema keys absent from a table
    resource_path - Location of a language's file under a directory

File format:
    <strings>
      <string key="Title" value="Main window"/>
      <string key="HelloSentence" value="Hello!"/>
    </strings>

Appending never re-serializes the document: new elements are spliced in
as text just before the root's closing tag, so hand-edited formatting,
comments and entry order survive byte for byte.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol
from xml.sax.saxutils import quoteattr

from simplelocalization.constants import (
    DEFAULT_ENCODING,
    KEY_ATTRIBUTE,
    STRING_ELEMENT,
    VALUE_ATTRIBUTE,
)
from simplelocalization.errors import MalformedResourceError
from simplelocalization.localization.types import StringKey, StringValue

if TYPE_CHECKING:
    from simplelocalization.catalog import LanguageInfo

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data
    "ResourceTable",
    # Protocol
    "ResourceStore",
    # Concrete store
    "XmlResourceStore",
    # Helpers
    "entries_missing",
    "resource_path",
]

logger = logging.getLogger(__name__)

_DEFAULT_INDENT = "  "
_ENTRY_INDENT_PATTERN = re.compile(rf"(?:^|\n)([ \t]*)<{STRING_ELEMENT}\b")
_MARKUP_HIDDEN_PATTERN = re.compile(r"<!--.*?-->|<!\[CDATA\[.*?\]\]>|<\?.*?\?>", re.DOTALL)
_NON_NEWLINE_PATTERN = re.compile(r"[^\n]")


@dataclass(frozen=True, slots=True)
class ResourceTable:
    """Key/value overrides loaded from one resource file.

    Keys are unique. Values are plain text and are not parsed further.
    Build tables from raw file entries with ``from_pairs``, which resolves
    repeated keys with last-entry-wins.

    Attributes:
        entries: (key, value) pairs in file order
        duplicates: Keys that appeared more than once in the source file
    """

    entries: tuple[tuple[StringKey, StringValue], ...] = ()
    duplicates: tuple[StringKey, ...] = ()

    def __post_init__(self) -> None:
        """Validate key uniqueness.

        Raises:
            ValueError: If a key appears in more than one entry
        """
        keys = [key for key, _ in self.entries]
        if len(keys) != len(set(keys)):
            msg = "ResourceTable keys must be unique; build from raw entries with from_pairs()"
            raise ValueError(msg)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[StringKey, StringValue]]) -> ResourceTable:
        """Build a table from raw entries; the last value of a repeated key wins.

        A repeated key keeps the position of its first occurrence.

        Example:
            >>> table = ResourceTable.from_pairs([("A", "1"), ("B", "2"), ("A", "3")])
            >>> table.as_dict()
            {'A': '3', 'B': '2'}
            >>> table.duplicates
            ('A',)
        """
        values: dict[StringKey, StringValue] = {}
        duplicates: dict[StringKey, None] = {}
        for key, value in pairs:
            if key in values:
                duplicates[key] = None
            values[key] = value
        return cls(tuple(values.items()), tuple(duplicates))

    @classmethod
    def empty(cls) -> ResourceTable:
        """Table with no entries."""
        return cls()

    def keys(self) -> tuple[StringKey, ...]:
        """Keys in file order."""
        return tuple(key for key, _ in self.entries)

    def get(self, key: StringKey, default: StringValue | None = None) -> StringValue | None:
        """Value for a key, or ``default`` when absent."""
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return default

    def as_dict(self) -> dict[StringKey, StringValue]:
        """Entries as a dict in file order."""
        return dict(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[StringKey, StringValue]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class ResourceStore(Protocol):
    """Protocol for reading and appending language resource files.

    This is a Protocol (structural typing) so tests and applications can
    substitute in-memory or alternative-format stores.
    """

    def load(self, path: Path) -> ResourceTable:
        """Read a resource file into a table.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedResourceError: If the file content cannot be parsed
            OSError: If the file cannot be read
        """

    def append_entries(
        self, path: Path, entries: Mapping[StringKey, StringValue]
    ) -> None:
        """Append entries after the file's existing ones.

        Must not touch the file when ``entries`` is empty.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedResourceError: If the file content cannot be parsed
            OSError: If the file cannot be read or written
        """


@dataclass(frozen=True, slots=True)
class XmlResourceStore:
    """Resource store for XML files of ``<string key=".." value=".."/>`` elements.

    ``<string>`` elements are collected from anywhere below the root element
    in document order. Elements without a ``key`` attribute are skipped; a
    missing ``value`` reads as the empty string.

    Attributes:
        encoding: Text encoding used to read and write files
    """

    encoding: str = DEFAULT_ENCODING

    def load(self, path: Path) -> ResourceTable:
        """Read a resource file into a table.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedResourceError: If the file is not well-formed XML or
                cannot be decoded
            OSError: If the file cannot be read
        """
        path = Path(path)
        table = _collect_entries(path, self._parse(path, self._read(path)))
        if table.duplicates:
            logger.warning(
                "Duplicate keys in %s (last entry wins): %s",
                path,
                ", ".join(table.duplicates),
            )
        return table

    def append_entries(
        self, path: Path, entries: Mapping[StringKey, StringValue]
    ) -> None:
        """Append ``<string>`` elements just before the root's closing tag.

        Text outside the inserted region is preserved byte for byte. New
        elements copy the indentation of the last existing entry and the
        file's line ending. A self-closing empty root is expanded into an
        open/close pair.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedResourceError: If the file is not well-formed XML or the
                root's closing tag cannot be located
            OSError: If the file cannot be read or written
        """
        if not entries:
            return

        path = Path(path)
        text = self._read(path)
        root = self._parse(path, text)
        local_name = root.tag.rpartition("}")[2]

        # Comments, CDATA and processing instructions are blanked out so tag
        # lookups only see markup. Offsets stay valid for the original text.
        markup = _blank_non_markup(text)

        newline = "\r\n" if "\r\n" in text else "\n"
        indent = self._entry_indent(markup)
        elements = [_format_entry(key, value) for key, value in entries.items()]

        closing = _find_closing_tag(markup, local_name)
        if closing is not None:
            line_start = text.rfind("\n", 0, closing) + 1
            if text[line_start:closing].strip():
                # Closing tag shares a line with content: <strings>...</strings>
                block = "".join(f"{newline}{indent}{e}" for e in elements) + newline
                updated = text[:closing] + block + text[closing:]
            else:
                block = "".join(f"{indent}{e}{newline}" for e in elements)
                updated = text[:line_start] + block + text[line_start:]
        else:
            self_closing = _find_self_closing_root(markup, local_name)
            if self_closing is None:
                msg = f"Cannot locate closing </{local_name}> tag in {path}"
                raise MalformedResourceError(msg, path)
            start, end, opening = self_closing
            block = "".join(f"{newline}{indent}{e}" for e in elements)
            updated = f"{text[:start]}{opening}>{block}{newline}</{local_name}>{text[end:]}"

        # The splice must leave a well-formed document whose entries include
        # every appended value.
        spliced = _collect_entries(path, self._parse(path, updated))
        lost = [key for key, value in entries.items() if spliced.get(key) != value]
        if lost:
            msg = f"Appended entries would not be readable from {path}: {', '.join(lost)}"
            raise MalformedResourceError(msg, path)

        with path.open("w", encoding=self.encoding, newline="") as f:
            f.write(updated)
        logger.debug("Appended %d entries to %s", len(elements), path)

    def _read(self, path: Path) -> str:
        try:
            with path.open(encoding=self.encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            msg = f"Resource file {path} is not valid {self.encoding}: {e}"
            raise MalformedResourceError(msg, path) from e

    @staticmethod
    def _parse(path: Path, text: str) -> ET.Element:
        # A BOM is kept in the text so writes reproduce it; expat must not see it.
        try:
            return ET.fromstring(text.removeprefix("\ufeff"))
        except ET.ParseError as e:
            msg = f"Malformed resource file {path}: {e}"
            raise MalformedResourceError(msg, path) from e

    @staticmethod
    def _entry_indent(text: str) -> str:
        matches = _ENTRY_INDENT_PATTERN.findall(text)
        return matches[-1] if matches else _DEFAULT_INDENT


def _blank_non_markup(text: str) -> str:
    return _MARKUP_HIDDEN_PATTERN.sub(lambda m: _NON_NEWLINE_PATTERN.sub(" ", m.group()), text)


def _collect_entries(path: Path, root: ET.Element) -> ResourceTable:
    """Table of the <string> elements below root, last entry winning."""
    pairs: list[tuple[StringKey, StringValue]] = []
    for element in root.iter(STRING_ELEMENT):
        if element is root:
            continue
        key = element.get(KEY_ATTRIBUTE)
        if key is None:
            logger.debug("Skipping <%s> without key in %s", STRING_ELEMENT, path)
            continue
        pairs.append((key, element.get(VALUE_ATTRIBUTE, "")))
    return ResourceTable.from_pairs(pairs)


def _format_entry(key: StringKey, value: StringValue) -> str:
    key_attr = f"{KEY_ATTRIBUTE}={quoteattr(key)}"
    value_attr = f"{VALUE_ATTRIBUTE}={quoteattr(value)}"
    return f"<{STRING_ELEMENT} {key_attr} {value_attr}/>"


def _find_closing_tag(text: str, local_name: str) -> int | None:
    """Offset of the last ``</[prefix:]name>`` in text, or None."""
    pattern = re.compile(rf"</(?:[\w.-]+:)?{re.escape(local_name)}\s*>")
    last = None
    for match in pattern.finditer(text):
        last = match
    return last.start() if last is not None else None


def _find_self_closing_root(text: str, local_name: str) -> tuple[int, int, str] | None:
    """Locate a self-closing root ``<name .../>``.

    Returns:
        (start, end, opening tag text without the trailing "/>") or None
    """
    pattern = re.compile(rf"<((?:[\w.-]+:)?{re.escape(local_name)}\b[^>]*?)\s*/>")
    match = pattern.search(text)
    if match is None:
        return None
    return match.start(), match.end(), f"<{match.group(1)}"


def entries_missing(
    table: ResourceTable, schema_keys: Iterable[StringKey]
) -> tuple[StringKey, ...]:
    """Schema keys absent from the table, in schema order.

    Example:
        >>> entries_missing(ResourceTable.from_pairs([("Title", "x")]), ["Title", "Hello"])
        ('Hello',)
    """
    present = set(table.keys())
    return tuple(key for key in schema_keys if key not in present)


def resource_path(directory: Path, info: LanguageInfo) -> Path:
    """Path of a language's resource file under ``directory``."""
    return Path(directory) / info.resource_file
