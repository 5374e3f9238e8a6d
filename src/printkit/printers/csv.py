# topmark:header:start
#
#   project      : Printkit
#   file         : csv.py
#   file_relpath : src/printkit/printers/csv.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Delimited-text (CSV) printer.

Output is a header line (unless suppressed) followed by one line per row, quoted by
the `csv` module and terminated with ``\\n``.
"""

from __future__ import annotations

import csv
import io
from typing import IO, TYPE_CHECKING

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.printers.base import (
    DEFAULT_TABLE_REFLECTOR,
    PrintOptions,
    reflect,
    write_text,
)

if TYPE_CHECKING:
    from printkit.printers.base import TableReflectorFunc

logger: PrintkitLogger = get_logger(__name__)


class CsvPrinter:
    """Print values as comma-separated values.

    Attributes:
        options: Tabular print options (``no_headers``).
        reflector: Converts the value into headers and rows.
    """

    def __init__(
        self,
        options: PrintOptions | None = None,
        *,
        reflector: TableReflectorFunc | None = None,
    ) -> None:
        self.options: PrintOptions = options or PrintOptions()
        self.reflector: TableReflectorFunc = reflector or DEFAULT_TABLE_REFLECTOR

    def render(self, obj: object) -> str:
        """Return the CSV text for ``obj``."""
        headers, rows = reflect(self.reflector, obj)
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        if not self.options.no_headers:
            writer.writerow(headers)
        writer.writerows(rows)
        logger.trace("CSV: %d header(s), %d row(s)", len(headers), len(rows))
        return buffer.getvalue()

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Print ``obj`` to ``sink`` as CSV."""
        write_text(sink, self.render(obj))
