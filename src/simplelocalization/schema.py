"""String schema and immutable string sets.

The schema is a statically declared, ordered table of (name, default) pairs.
It is validated once when constructed, so a StringSet built from it always
has exactly one text value per field and merging overrides onto it cannot
fail.

    >>> schema = StringSchema([("Title", "Main window"), ("Hello", "Hello!")])
    >>> strings = schema.defaults()
    >>> strings.Title
    'Main window'
    >>> strings.replace(Hello="Привет!")["Hello"]
    'Привет!'

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import NoReturn

from simplelocalization.errors import SchemaViolationError, UnknownStringError

__all__ = [
    "DEFAULT_SCHEMA",
    "StringField",
    "StringSchema",
    "StringSet",
]


@dataclass(frozen=True, slots=True)
class StringField:
    """One named UI string and its compiled-in default.

    Attributes:
        name: Field name; also the key used in resource files
        default: Text shown when no resource file overrides the field
    """

    name: str
    default: str

    def __post_init__(self) -> None:
        """Validate the declaration.

        Raises:
            SchemaViolationError: If the name is not a public Python
                identifier or the default is not text
        """
        if not isinstance(self.name, str) or not self.name.isidentifier():
            msg = f"String name must be a Python identifier, got {self.name!r}"
            raise SchemaViolationError(msg)
        if self.name.startswith("_"):
            msg = f"String name must not start with an underscore: '{self.name}'"
            raise SchemaViolationError(msg)
        if not isinstance(self.default, str):
            msg = (
                f"Only text strings are supported: '{self.name}' has a "
                f"{type(self.default).__name__} default"
            )
            raise SchemaViolationError(msg)


class StringSchema:
    """Ordered, validated collection of StringFields.

    Field names are unique and are the only legal override keys. Names that
    would shadow StringSet's own API (``replace``, ``get``, ...) are
    rejected so every field stays reachable as an attribute.
    """

    __slots__ = ("_fields", "_index")

    def __init__(self, fields: Iterable[StringField | tuple[str, str]]) -> None:
        """Initialize the schema.

        Args:
            fields: StringField instances or (name, default) pairs, in
                display order

        Raises:
            SchemaViolationError: If the schema is empty, a name repeats or
                a name collides with the StringSet API
        """
        field_list = [f if isinstance(f, StringField) else StringField(*f) for f in fields]
        if not field_list:
            msg = "A string schema needs at least one field"
            raise SchemaViolationError(msg)

        index: dict[str, StringField] = {}
        for string_field in field_list:
            if string_field.name in index:
                msg = f"Duplicate string name: '{string_field.name}'"
                raise SchemaViolationError(msg)
            if string_field.name in _RESERVED_NAMES:
                msg = f"String name '{string_field.name}' is reserved by StringSet"
                raise SchemaViolationError(msg)
            index[string_field.name] = string_field

        self._fields: tuple[StringField, ...] = tuple(field_list)
        self._index = index

    @classmethod
    def from_mapping(cls, defaults: Mapping[str, str]) -> StringSchema:
        """Build a schema from a name -> default mapping (insertion order)."""
        return cls(StringField(name, default) for name, default in defaults.items())

    @property
    def fields(self) -> tuple[StringField, ...]:
        """Fields in declaration order."""
        return self._fields

    @property
    def names(self) -> tuple[str, ...]:
        """Field names in declaration order."""
        return tuple(f.name for f in self._fields)

    def default(self, name: str) -> str:
        """Default value of a field.

        Raises:
            UnknownStringError: If the name is not a field
        """
        try:
            return self._index[name].default
        except KeyError:
            raise UnknownStringError(name) from None

    def defaults(self) -> StringSet:
        """StringSet holding every field's default value."""
        return StringSet(self)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[StringField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringSchema):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"StringSchema({', '.join(self.names)})"


class StringSet(Mapping[str, str]):
    """Immutable set of UI strings conforming to a StringSchema.

    Fields are readable as attributes (``strings.Title``) and as mapping
    items (``strings["Title"]``). Iteration follows schema order. Two sets
    are equal when their schemas and all values are equal.
    """

    __slots__ = ("_schema", "_values")

    _schema: StringSchema
    _values: dict[str, str]

    def __init__(
        self, schema: StringSchema, values: Mapping[str, str] | None = None
    ) -> None:
        """Initialize a string set.

        Args:
            schema: Schema the set conforms to
            values: Values replacing the defaults for some fields

        Raises:
            UnknownStringError: If a value is given for a name outside the schema
            TypeError: If a value is not text
        """
        merged = {f.name: f.default for f in schema}
        for name, value in (values or {}).items():
            if name not in merged:
                raise UnknownStringError(name)
            if not isinstance(value, str):
                msg = f"String '{name}' must be text, got {type(value).__name__}"
                raise TypeError(msg)
            merged[name] = value
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_values", merged)

    @property
    def schema(self) -> StringSchema:
        """Schema this set conforms to."""
        return self._schema

    def replace(self, /, **overrides: str) -> StringSet:
        """Return a copy with some fields replaced.

        Raises:
            UnknownStringError: If a name is outside the schema
        """
        return StringSet(self._schema, {**self._values, **overrides})

    def as_dict(self) -> dict[str, str]:
        """Plain dict copy in schema order."""
        return dict(self._values)

    def __getattr__(self, name: str) -> str:
        # Only reached when normal lookup fails, i.e. for field names.
        if not name.startswith("_"):
            try:
                return self._values[name]
            except KeyError:
                pass
        msg = f"'{type(self).__name__}' object has no attribute '{name}'"
        raise AttributeError(msg)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = f"StringSet is immutable; use replace({name}=...)"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = "StringSet is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[StringSet], tuple[StringSchema, dict[str, str]]]:
        # Rebuild through __init__; slot state cannot be restored via setattr.
        return (StringSet, (self._schema, self._values))

    def __getitem__(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise UnknownStringError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringSet):
            return NotImplemented
        return self._schema == other._schema and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._schema, tuple(self._values.items())))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"StringSet({body})"


# Names a field may not take because StringSet already uses them.
_RESERVED_NAMES: frozenset[str] = frozenset(dir(StringSet))


DEFAULT_SCHEMA = StringSchema(
    [
        StringField("Title", "Main window"),
        StringField("HelloSentence", "Hello!"),
        StringField("CurrentLanguage", "Current language"),
    ]
)
