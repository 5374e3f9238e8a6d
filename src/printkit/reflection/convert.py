# topmark:header:start
#
#   project      : Printkit
#   file         : convert.py
#   file_relpath : src/printkit/reflection/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Convert arbitrary values into tabular data.

`convert_to_table` is the single entry point of the reflection subsystem. It accepts
any value and never raises: shapes it cannot interpret produce an empty result.

Every record field is a column. Labels come from field metadata (see
`printkit.reflection.descriptors`):

1. the ``header`` tag, verbatim:

       my_field: str = header("MY FIELD")           # -> "MY FIELD"

2. the ``json`` tag, normalized to screaming words:

       my_field: str = json_name("myField")         # -> "MY FIELD"

3. the field name, normalized the same way:

       my_field: str                                # -> "MY FIELD"

Embedded records are flattened into the same row:

    ```python
    @dataclass
    class Inner:
        field1: str = header("Field 1")
        field2: int = header("Field 2")

    @dataclass
    class Outer:
        inner: Inner = embedded("Inner")
        field3: bool = header("Field 3", default=False)

    convert_to_table(Outer(Inner("value1", 42), True))
    # headers == ["Inner Field 1", "Inner Field 2", "Field 3"]
    # rows == [["value1", "42", "true"]]
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.reflection.builder import extract
from printkit.reflection.collection import extract_collection, is_sequence
from printkit.reflection.descriptors import is_record
from printkit.reflection.indirection import resolve
from printkit.reflection.stringify import default_text, to_text

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: PrintkitLogger = get_logger(__name__)

# Header of the single column used for a bare scalar value.
VALUE_COLUMN: Final[str] = "Value"


@dataclass(frozen=True)
class TableResult:
    """Headers and rows produced by the converter.

    Unpacks like a pair: ``headers, rows = convert_to_table(value)``.

    Attributes:
        headers: Column labels, in column order.
        rows: Data rows; each is aligned with ``headers`` for record input. When
            ``headers`` is empty, rows hold a single cell (text input) or nothing.
    """

    headers: list[str] = field(default_factory=lambda: [])
    rows: list[list[str]] = field(default_factory=lambda: [])

    def __iter__(self) -> Iterator[object]:
        """Iterate over ``(headers, rows)`` to support tuple unpacking."""
        yield self.headers
        yield self.rows

    def is_empty(self) -> bool:
        """Return True when there is nothing to render."""
        return not self.headers and not self.rows


def convert_to_table(value: object) -> TableResult:
    """Resolve tabular data from any value.

    Dispatch on the unwrapped value:

    - absent (``None``, empty reference) -> no headers, no rows;
    - text (``str``/``bytes``) -> no headers, a single one-cell row;
    - record -> one row, one column per rendered field;
    - sequence -> one row per present element;
    - anything else -> a single ``"Value"`` column when the value has a non-empty
      text form, else an empty result.

    Args:
        value: The value to convert.

    Returns:
        TableResult: The headers and rows; never raises.
    """
    concrete, present = resolve(value)
    if not present:
        return TableResult()

    if isinstance(concrete, str):
        return TableResult(headers=[], rows=[[str.__str__(concrete)]])
    if isinstance(concrete, (bytes, bytearray)):
        return TableResult(headers=[], rows=[[default_text(concrete)]])
    if is_record(concrete):
        headers, row = extract(concrete)
        return TableResult(headers=headers, rows=[row])
    if is_sequence(concrete):
        headers, rows = extract_collection(concrete)
        return TableResult(headers=headers, rows=rows)

    text = to_text(concrete)
    if not text:
        logger.debug("No tabular representation for %s", type(concrete).__name__)
        return TableResult()
    return TableResult(headers=[VALUE_COLUMN], rows=[[text]])
