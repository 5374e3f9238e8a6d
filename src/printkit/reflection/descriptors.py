# topmark:header:start
#
#   project      : Printkit
#   file         : descriptors.py
#   file_relpath : src/printkit/reflection/descriptors.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Per-field column metadata for records.

A *record* is a dataclass instance or a `typing.NamedTuple` instance. Each of its
fields becomes a column, labelled and flagged from declarative metadata:

- ``header``: the override tag, ``"LABEL[,inline]"``. The label is used verbatim;
  a label of ``"-"`` omits the field.
- ``json``: the serialization-name tag; its first comma-delimited token is the name,
  normalized to screaming words. ``"-"`` omits the field.
- ``embedded``: marks the field as the record's embedded part. Embedded records are
  flattened into the parent row unless tagged otherwise.

Dataclasses declare this metadata on the field itself:

    ```python
    @dataclass
    class Pod:
        meta: Meta = embedded()
        name: str = header("Pod Name")
        node_name: str = json_name("nodeName")  # -> "NODE NAME"
        secret: str = header("-")
    ```

Any record class (including NamedTuples, whose fields cannot carry metadata) may
instead receive an explicit schema through `table_schema`; schema entries take
precedence over field metadata.

Label precedence per field: header tag, then json tag, then the field name.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, TypeVar

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.reflection.naming import to_screaming_words

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

logger: PrintkitLogger = get_logger(__name__)

HEADER_TAG: Final[str] = "header"
JSON_TAG: Final[str] = "json"
EMBEDDED_TAG: Final[str] = "embedded"

OMIT_MARKER: Final[str] = "-"
INLINE_MODIFIER: Final[str] = "inline"

SCHEMA_ATTR: Final[str] = "__printkit_schema__"

# Marks a field attribute that was never assigned.
_UNSET: Final[object] = object()

_C = TypeVar("_C", bound=type)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Explicit column metadata for one record field.

    Attributes:
        header: Override tag (``"LABEL[,inline]"`` or ``"-"``).
        json: Serialization-name tag (``"name[,...]"`` or ``"-"``).
        embedded: Whether the field is the record's embedded part.
    """

    header: str | None = None
    json: str | None = None
    embedded: bool = False

    def as_metadata(self) -> dict[str, object]:
        """Return the tags as dataclass field metadata."""
        meta: dict[str, object] = {}
        if self.header is not None:
            meta[HEADER_TAG] = self.header
        if self.json is not None:
            meta[JSON_TAG] = self.json
        if self.embedded:
            meta[EMBEDDED_TAG] = True
        return meta


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Resolved column metadata of a record field.

    Attributes:
        name: The declared field name.
        label: Column label (before any inline prefixing).
        skip: True when the field is omitted from the table.
        inline: True when a record value is flattened into the parent row.
        source_is_embedded: True when the field is the record's embedded part.
    """

    name: str
    label: str
    skip: bool
    inline: bool
    source_is_embedded: bool


@dataclass(frozen=True, slots=True)
class RecordField:
    """A declared record field together with its raw tags."""

    name: str
    tags: Mapping[str, Any]

    @property
    def embedded(self) -> bool:
        """Whether the field is tagged as embedded."""
        return bool(self.tags.get(EMBEDDED_TAG, False))

    def tag(self, key: str) -> str:
        """Return the string tag ``key`` ('' when absent)."""
        value = self.tags.get(key)
        return value if isinstance(value, str) else ""


# --- Field metadata helpers -----------------------------------------------------


def tags(
    *,
    header: str | None = None,
    json: str | None = None,
    embedded: bool = False,
) -> dict[str, object]:
    """Build a metadata mapping for ``dataclasses.field(metadata=...)``.

    Useful when a field already carries other metadata that must be merged.
    """
    return FieldSpec(header=header, json=json, embedded=embedded).as_metadata()


def header(label: str, *, inline: bool = False, **field_kwargs: Any) -> Any:
    """Declare a dataclass field with an explicit column label.

    Args:
        label: Column label, used verbatim. ``"-"`` omits the field.
        inline: Flatten a record value into the parent row under this label.
        **field_kwargs: Forwarded to `dataclasses.field` (``default``, ``default_factory``...).

    Returns:
        A dataclass field carrying the header tag.
    """
    tag = f"{label},{INLINE_MODIFIER}" if inline else label
    return _field_with(FieldSpec(header=tag), field_kwargs)


def json_name(name: str, **field_kwargs: Any) -> Any:
    """Declare a dataclass field with a serialization name (normalized for labels)."""
    return _field_with(FieldSpec(json=name), field_kwargs)


def embedded(label: str | None = None, **field_kwargs: Any) -> Any:
    """Declare a dataclass field as the record's embedded part.

    Args:
        label: Optional header label used as the prefix of the flattened columns.
        **field_kwargs: Forwarded to `dataclasses.field`.

    Returns:
        A dataclass field carrying the embedded tag.
    """
    return _field_with(FieldSpec(header=label, embedded=True), field_kwargs)


def _field_with(spec: FieldSpec, field_kwargs: dict[str, Any]) -> Any:
    metadata: dict[str, object] = dict(field_kwargs.pop("metadata", None) or {})
    metadata.update(spec.as_metadata())
    return dataclasses.field(metadata=metadata, **field_kwargs)


def table_schema(**specs: FieldSpec) -> Callable[[_C], _C]:
    """Class decorator attaching an explicit column schema to a record class.

    Args:
        **specs: Field name to `FieldSpec`.

    Returns:
        A decorator returning the class unchanged apart from the attached schema.

    Raises:
        TypeError: If a key does not name a field of the decorated record class.
    """

    def _decorate(cls: _C) -> _C:
        declared = set(_declared_field_names(cls))
        unknown = sorted(set(specs) - declared)
        if unknown:
            raise TypeError(f"{cls.__name__} has no field(s) named: {', '.join(unknown)}")
        setattr(cls, SCHEMA_ATTR, MappingProxyType(dict(specs)))
        _describe_type.cache_clear()
        return cls

    return _decorate


# --- Record introspection -------------------------------------------------------


def is_namedtuple(value: object) -> bool:
    """Return True for NamedTuple / collections.namedtuple instances."""
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def is_record(value: object) -> bool:
    """Return True if ``value`` is a record instance (dataclass or NamedTuple)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or is_namedtuple(value)


def _declared_field_names(cls: type) -> list[str]:
    if dataclasses.is_dataclass(cls):
        return [f.name for f in dataclasses.fields(cls)]
    fields_attr = getattr(cls, "_fields", None)
    if isinstance(fields_attr, tuple):
        return [str(name) for name in fields_attr]
    return []


def record_fields(cls: type) -> list[RecordField]:
    """Return the declared fields of a record class with their effective tags."""
    schema: Mapping[str, FieldSpec] = getattr(cls, SCHEMA_ATTR, None) or {}
    result: list[RecordField] = []
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            spec = schema.get(f.name)
            result.append(
                RecordField(name=f.name, tags=spec.as_metadata() if spec else dict(f.metadata))
            )
        return result
    for name in _declared_field_names(cls):
        spec = schema.get(name)
        result.append(RecordField(name=name, tags=spec.as_metadata() if spec else {}))
    return result


# --- Descriptor resolution ------------------------------------------------------


def _split_tag(tag: str) -> tuple[str, list[str]]:
    primary, *modifiers = tag.split(",")
    return primary, [m.strip() for m in modifiers if m.strip()]


def is_skipped(field: RecordField) -> bool:
    """Return True if the field is omitted through its header or json tag."""
    header_tag = field.tag(HEADER_TAG)
    if header_tag:
        return _split_tag(header_tag)[0] == OMIT_MARKER
    json_tag = field.tag(JSON_TAG)
    if json_tag:
        return _split_tag(json_tag)[0] == OMIT_MARKER
    return False


def resolve_label(field: RecordField) -> str:
    """Return the column label of a field (header tag > json tag > name)."""
    header_tag = field.tag(HEADER_TAG)
    if header_tag:
        # A header tag with an empty label (",inline") still shadows the json tag.
        return _split_tag(header_tag)[0] or to_screaming_words(field.name)
    json_tag = field.tag(JSON_TAG)
    if json_tag:
        primary = _split_tag(json_tag)[0]
        if primary:
            return to_screaming_words(primary)
    return to_screaming_words(field.name)


def is_inline(field: RecordField) -> bool:
    """Return True if a record value of this field is flattened into the parent row.

    Explicit ``inline`` modifiers always inline; embedded fields inline unless their
    header tag carries some other modifier.
    """
    modifiers = _split_tag(field.tag(HEADER_TAG))[1]
    if INLINE_MODIFIER in modifiers:
        return True
    return field.embedded and not modifiers


def describe(field: RecordField) -> FieldDescriptor:
    """Resolve all column metadata of a field."""
    return FieldDescriptor(
        name=field.name,
        label=resolve_label(field),
        skip=is_skipped(field),
        inline=is_inline(field),
        source_is_embedded=field.embedded,
    )


@lru_cache(maxsize=1024)
def _describe_type(cls: type) -> tuple[FieldDescriptor, ...]:
    descriptors = tuple(describe(f) for f in record_fields(cls))
    logger.trace(
        "Described %s: %s",
        cls.__qualname__,
        [(d.name, d.label, d.skip, d.inline) for d in descriptors],
    )
    return descriptors


def describe_record(record: object) -> tuple[FieldDescriptor, ...]:
    """Return the (cached) field descriptors of a record's class."""
    return _describe_type(type(record))


def iter_record_values(record: object) -> Iterator[tuple[FieldDescriptor, object]]:
    """Yield each field descriptor of ``record`` with the field's current value.

    Fields that were never assigned (``field(init=False)`` without a default) yield
    ``None``, i.e. an absent value.
    """
    for descriptor in describe_record(record):
        value = getattr(record, descriptor.name, _UNSET)
        if value is _UNSET:
            logger.trace("Field %r of %s is unset", descriptor.name, type(record).__name__)
            value = None
        yield descriptor, value
