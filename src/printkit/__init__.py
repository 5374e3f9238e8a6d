# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Printkit package.

Printkit turns arbitrary in-memory values (records, references, sequences and
scalars) into tables, and prints them as CSV, bordered tables, JSON or YAML. A
small format registry binds the output selection to Click commands.

Example:
    ```python
    from dataclasses import dataclass

    import printkit

    @dataclass
    class Pod:
        name: str = printkit.header("Pod Name")
        ready: bool = False

    headers, rows = printkit.convert_to_table([Pod("web", True)])
    # headers == ["Pod Name", "READY"]; rows == [["web", "true"]]
    ```
"""

from __future__ import annotations

from printkit.constants import PRINTKIT_VERSION
from printkit.printers.base import ObjectPrinter, ObjectPrinterFunc, PrintOptions
from printkit.printers.csv import CsvPrinter
from printkit.printers.document import JsonPrinter, YamlPrinter
from printkit.printers.errors import (
    ConfigError,
    EncodingError,
    PrinterError,
    PrinterIOError,
    UnsupportedFormatError,
    is_unsupported_format_error,
)
from printkit.printers.flags import (
    DocumentPrinterFlags,
    FormatProvider,
    PrintFlags,
    TableCsvPrinterFlags,
    new_print_flags,
    new_table_print_flags,
)
from printkit.printers.table import TablePrinter
from printkit.reflection import (
    FieldSpec,
    Ref,
    TableResult,
    convert_to_table,
    embedded,
    header,
    json_name,
    table_schema,
    tags,
)

__version__ = PRINTKIT_VERSION

__all__ = [
    "ConfigError",
    "CsvPrinter",
    "DocumentPrinterFlags",
    "EncodingError",
    "FieldSpec",
    "FormatProvider",
    "JsonPrinter",
    "ObjectPrinter",
    "ObjectPrinterFunc",
    "PrintFlags",
    "PrintOptions",
    "PrinterError",
    "PrinterIOError",
    "Ref",
    "TableCsvPrinterFlags",
    "TablePrinter",
    "TableResult",
    "UnsupportedFormatError",
    "YamlPrinter",
    "convert_to_table",
    "embedded",
    "header",
    "is_unsupported_format_error",
    "json_name",
    "new_print_flags",
    "new_table_print_flags",
    "table_schema",
    "tags",
]
