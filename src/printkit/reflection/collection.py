# topmark:header:start
#
#   project      : Printkit
#   file         : collection.py
#   file_relpath : src/printkit/reflection/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tabulate a sequence of values, one row per present element."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Final

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.reflection.builder import extract
from printkit.reflection.descriptors import is_record
from printkit.reflection.indirection import resolve
from printkit.reflection.stringify import to_text

logger: PrintkitLogger = get_logger(__name__)

# Header of the single column used for collections of scalars.
SCALAR_COLUMN: Final[str] = ""

_TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


def is_sequence(value: object) -> bool:
    """Return True for sequence-shaped values (text and records excluded)."""
    return (
        isinstance(value, Sequence)
        and not isinstance(value, _TEXT_TYPES)
        and not is_record(value)
    )


# A cell keyed by its label and the label's occurrence count within the row.
LabeledCells = dict[tuple[str, int], str]


def _label_keys(labels: list[str]) -> list[tuple[str, int]]:
    seen: Counter[str] = Counter()
    keys: list[tuple[str, int]] = []
    for label in labels:
        keys.append((label, seen[label]))
        seen[label] += 1
    return keys


def _align(row: list[str], width: int) -> list[str]:
    if len(row) >= width:
        return row[:width]
    return row + [""] * (width - len(row))


def extract_collection(seq: Sequence[object]) -> tuple[list[str], list[list[str]]]:
    """Build headers and rows from the elements of ``seq``.

    Absent elements are skipped. Record elements are flattened; the first record that
    yields headers fixes the header row. Every record row is then laid out by label
    against that header row: cells whose label is missing from it are dropped, and
    headers the record did not produce get an empty cell. Strings and other scalars
    fill a single, unnamed column. Nested sequences are not tabulated recursively;
    they render as the text of the whole nested value.

    Args:
        seq: The sequence to tabulate.

    Returns:
        tuple[list[str], list[list[str]]]: Headers (``[""]`` when no record element
        provided any) and one row per present element.
    """
    headers: list[str] = [SCALAR_COLUMN]
    established = False
    entries: list[list[str] | LabeledCells] = []

    for index, item in enumerate(seq):
        value, present = resolve(item)
        if not present:
            logger.trace("Skipping absent element #%d", index)
            continue

        if isinstance(value, str):
            entries.append([str.__str__(value)])
        elif is_record(value):
            item_headers, item_row = extract(value)
            if not established and item_headers:
                headers = item_headers
                established = True
            entries.append(dict(zip(_label_keys(item_headers), item_row)))
        else:
            entries.append([to_text(value)])

    rows: list[list[str]] = []
    keys = _label_keys(headers)
    for entry in entries:
        if isinstance(entry, dict):
            rows.append([entry.get(key, "") for key in keys] if established else [])
        elif established:
            rows.append(_align(entry, len(headers)))
        else:
            rows.append(entry)

    logger.trace("Collection of %d element(s) produced %d row(s)", len(seq), len(rows))
    return headers, rows
