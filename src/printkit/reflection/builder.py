# topmark:header:start
#
#   project      : Printkit
#   file         : builder.py
#   file_relpath : src/printkit/reflection/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Flatten a single record into a header row and a data row.

Fields are visited in declaration order. For each field:

- omitted fields contribute nothing;
- absent values (``None``, empty `Ref`, dead weak reference, unassigned fields) and
  inlined references back to an enclosing record contribute nothing, so an
  absent embedded record contributes zero columns;
- record values are flattened in place when the field is embedded or tagged
  ``inline`` (their labels prefixed with the field's label); other record values
  only produce a column when they support a text capability;
- strings always produce a column, even when empty;
- any other value produces a column when its text is non-empty.
"""

from __future__ import annotations

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.reflection.descriptors import is_record, iter_record_values
from printkit.reflection.indirection import resolve
from printkit.reflection.stringify import capability_text, to_text

logger: PrintkitLogger = get_logger(__name__)


def extract(
    record: object,
    prefix: str = "",
    inline: bool = False,
    *,
    ancestors: set[int] | None = None,
) -> tuple[list[str], list[str]]:
    """Flatten ``record`` into aligned headers and cells.

    Args:
        record: A dataclass or NamedTuple instance.
        prefix: Label of the containing field when flattening an inlined record.
        inline: True when ``record`` is being flattened into a parent row; labels are
            then prefixed with ``prefix``.
        ancestors: Ids of the records currently being flattened; a field referring
            back to one of them is treated as absent.

    Returns:
        tuple[list[str], list[str]]: The header labels and the matching cells;
        both lists always have the same length.
    """
    headers: list[str] = []
    row: list[str] = []
    path: set[int] = ancestors if ancestors is not None else set()
    path.add(id(record))

    for descriptor, raw in iter_record_values(record):
        if descriptor.skip:
            logger.trace("Skipping omitted field %r", descriptor.name)
            continue

        value, present = resolve(raw)
        if not present:
            logger.trace("Skipping absent field %r", descriptor.name)
            continue

        label = f"{prefix} {descriptor.label}" if inline else descriptor.label

        if isinstance(value, str):
            headers.append(label)
            row.append(str.__str__(value))
        elif is_record(value):
            if descriptor.inline:
                if id(value) in path:
                    logger.debug(
                        "Skipping field %r: refers back to an enclosing record", descriptor.name
                    )
                    continue
                sub_headers, sub_row = extract(value, label, True, ancestors=path)
                headers.extend(sub_headers)
                row.extend(sub_row)
                continue
            text = capability_text(value)
            if text is None:
                logger.trace("Dropping nested record field %r (not inline)", descriptor.name)
                continue
            headers.append(label)
            row.append(text)
        else:
            text = to_text(value)
            if text:
                headers.append(label)
                row.append(text)

    path.discard(id(record))
    return headers, row
