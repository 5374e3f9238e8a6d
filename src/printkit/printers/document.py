# topmark:header:start
#
#   project      : Printkit
#   file         : document.py
#   file_relpath : src/printkit/printers/document.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Structured-document printers (JSON and YAML).

Document printers bypass the table converter: the raw value is normalized into
plain mappings, lists and scalars, then serialized.

Normalization (`normalize_document`):
  - absent values (``None``, empty `Ref`, dead weak reference) -> ``None``
  - record -> ``dict`` keyed by the field's ``json`` name (field name otherwise),
    skipping fields tagged ``"-"`` and empty ``omitempty`` fields; embedded records
    without a ``json`` name are merged into the parent mapping
  - object with callable ``.to_dict()`` -> normalize(``.to_dict()``)
  - object with callable ``.to_json()`` -> the parsed JSON document it returns
  - object with callable ``.marshal_text()`` -> its text
  - `Enum` -> normalize(``.value``)
  - `Path` -> ``str``; `datetime`/`date`/`time` -> ISO 8601 text
  - ``bytes`` -> UTF-8 text
  - `Mapping` -> ``dict[str, normalized value]``
  - ``list``/``tuple``/other sequences -> ``list``; sets -> sorted ``list`` when the
    items are orderable
Anything else is handed to the serializer unchanged; values it cannot encode raise
`EncodingError`.
"""

from __future__ import annotations

import datetime as dt
import json
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Final, cast

import yaml

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.printers.base import write_text
from printkit.printers.errors import EncodingError
from printkit.reflection.descriptors import (
    JSON_TAG,
    OMIT_MARKER,
    is_record,
    record_fields,
)
from printkit.reflection.indirection import resolve

if TYPE_CHECKING:
    from collections.abc import Callable

    from printkit.reflection.descriptors import RecordField

logger: PrintkitLogger = get_logger(__name__)

OMITEMPTY_MODIFIER: Final[str] = "omitempty"

YAML_INDENT: Final[int] = 4
JSON_INDENT: Final[int] = 2


def _is_empty(value: object) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float, complex)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, Mapping, Sequence, Set)):
        return len(value) == 0
    return False


def _json_tag(field: RecordField) -> tuple[str, list[str]]:
    name, *modifiers = field.tag(JSON_TAG).split(",")
    return name, [m.strip() for m in modifiers]


def _record_to_dict(record: object) -> dict[str, object]:
    out: dict[str, object] = {}
    for field in record_fields(type(record)):
        name, modifiers = _json_tag(field)
        if name == OMIT_MARKER and not modifiers:
            continue
        value, present = resolve(getattr(record, field.name, None))
        if OMITEMPTY_MODIFIER in modifiers and (not present or _is_empty(value)):
            continue
        if field.embedded and not name and present and is_record(value):
            out.update(_record_to_dict(value))
            continue
        out[name or field.name] = normalize_document(value) if present else None
    return out


def _call_hook(value: object, name: str, hook: Callable[[], object]) -> object:
    try:
        return hook()
    except EncodingError:
        raise
    except Exception as exc:
        raise EncodingError(f"{type(value).__name__}.{name}() failed: {exc}") from exc


def _marshaled_json(value: object) -> tuple[object, bool]:
    to_json = getattr(value, "to_json", None)
    if not callable(to_json):
        return None, False
    raw = _call_hook(value, "to_json", to_json)
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    if not isinstance(raw, str):
        return normalize_document(raw), True
    try:
        return json.loads(raw), True
    except ValueError as exc:
        raise EncodingError(
            f"{type(value).__name__}.to_json() returned invalid JSON: {exc}"
        ) from exc


def normalize_document(obj: object) -> object:
    """Normalize a value into plain, serializer-friendly structures.

    Args:
        obj: The value to normalize.

    Returns:
        A structure made of ``dict``, ``list`` and scalars (see module docstring).

    Raises:
        EncodingError: If a ``to_dict``, ``to_json`` or ``marshal_text`` method fails.
    """
    value, present = resolve(obj)
    if not present:
        return None

    if is_record(value):
        return _record_to_dict(value)

    to_dict: Any | None = getattr(value, "to_dict", None)
    if callable(to_dict):
        return normalize_document(_call_hook(value, "to_dict", to_dict))

    parsed, ok = _marshaled_json(value)
    if ok:
        return parsed

    marshal_text: Any | None = getattr(value, "marshal_text", None)
    if callable(marshal_text):
        text = _call_hook(value, "marshal_text", marshal_text)
        return text.decode("utf-8") if isinstance(text, (bytes, bytearray)) else text

    if isinstance(value, Enum):
        return normalize_document(value.value)

    if isinstance(value, Path):
        return str(value)

    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", value)
        return {str(k): normalize_document(v) for k, v in mapping.items()}

    if isinstance(value, Set):
        items = [normalize_document(v) for v in cast("Set[object]", value)]
        try:
            return sorted(items)  # type: ignore[type-var]
        except TypeError:
            return items

    if isinstance(value, Sequence):
        return [normalize_document(v) for v in cast("Sequence[object]", value)]

    return value


def _normalize_root(obj: object) -> object:
    try:
        return normalize_document(obj)
    except RecursionError as exc:
        logger.error("Document normalization failed: %s", exc)
        raise EncodingError("value contains a reference cycle") from exc


class JsonPrinter:
    """Print values as a single JSON document.

    Attributes:
        indent: Indent nested structures by two spaces; compact output otherwise.
    """

    def __init__(self, indent: bool = False) -> None:
        self.indent: bool = indent

    def render(self, obj: object) -> str:
        """Return the JSON text for ``obj`` (newline-terminated).

        Raises:
            EncodingError: If the value cannot be represented as JSON.
        """
        document = _normalize_root(obj)
        try:
            if self.indent:
                text = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
            else:
                text = json.dumps(
                    document, separators=(",", ":"), ensure_ascii=False, allow_nan=False
                )
        except (TypeError, ValueError) as exc:
            logger.error("JSON encoding failed: %s", exc)
            raise EncodingError(f"json: unsupported value: {exc}") from exc
        return text + "\n"

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Print ``obj`` to ``sink`` as JSON."""
        write_text(sink, self.render(obj))


class YamlPrinter:
    """Print values as a single YAML document (4-space indentation, insertion order)."""

    def render(self, obj: object) -> str:
        """Return the YAML text for ``obj``.

        Raises:
            EncodingError: If the value cannot be represented as YAML.
        """
        document = _normalize_root(obj)
        try:
            return yaml.safe_dump(
                document,
                indent=YAML_INDENT,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as exc:
            logger.error("YAML encoding failed: %s", exc)
            raise EncodingError(f"yaml: cannot marshal type: {type(document).__name__}") from exc

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Print ``obj`` to ``sink`` as YAML."""
        write_text(sink, self.render(obj))
