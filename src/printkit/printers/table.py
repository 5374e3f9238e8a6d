# topmark:header:start
#
#   project      : Printkit
#   file         : table.py
#   file_relpath : src/printkit/printers/table.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Bordered-text (box-drawn table) printer, rendered with `rich`.

Layout:
    - column width is the widest (in terminal cells) of the header and every cell
      in the column;
    - every cell is centered and padded with one space on each side;
    - the header row is separated from the data rows by a rule;
    - nothing at all is printed when the value yields no headers or no rows.

Example:
    ```text
    ┌───────┬─────┐
    │ NAME  │ AGE │
    ├───────┼─────┤
    │ alice │ 30  │
    └───────┴─────┘
    ```

Styles are applied only when the printer is constructed with ``color=True``; see
`printkit.rendering.color.resolve_color_mode`.
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING, Final

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.printers.base import (
    DEFAULT_TABLE_REFLECTOR,
    PrintOptions,
    reflect,
    write_text,
)
from printkit.rendering.styles import PLAIN_STYLES, BorderStyle, TableStyles

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from rich.style import StyleType

    from printkit.printers.base import TableReflectorFunc

    CellStyleFunc = Callable[[StyleType, int, int, str], StyleType]

logger: PrintkitLogger = get_logger(__name__)

CELL_PADDING: Final[int] = 1

# Wide enough that rich never wraps or shrinks a column.
CONSOLE_WIDTH: Final[int] = 1 << 16


def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Return the display width of each column (widest header or cell)."""
    widths: list[int] = [cell_len(h) for h in headers]
    for row in rows:
        for idx, cell in enumerate(row[: len(widths)]):
            widths[idx] = max(widths[idx], cell_len(cell))
    return widths


class TablePrinter:
    """Print values as a bordered table.

    Attributes:
        options: Tabular print options (``no_headers``).
        styles: Header, cell and border styles.
        border: The border style of the frame.
        cell_style_func: Optional hook ``(style, row, col, value) -> style`` returning
            the style of a data cell; receives the base cell style, the 1-based
            row index, the 0-based column index and the cell text.
        color: Whether styles are rendered at all.
        reflector: Converts the value into headers and rows.
    """

    def __init__(
        self,
        options: PrintOptions | None = None,
        *,
        styles: TableStyles | None = None,
        border: BorderStyle | str = BorderStyle.NORMAL,
        cell_style_func: CellStyleFunc | None = None,
        color: bool = False,
        reflector: TableReflectorFunc | None = None,
    ) -> None:
        self.options: PrintOptions = options or PrintOptions()
        self.styles: TableStyles = styles or TableStyles()
        self.border: BorderStyle = (
            border if isinstance(border, BorderStyle) else BorderStyle.parse(border)
        )
        self.cell_style_func: CellStyleFunc | None = cell_style_func
        self.color: bool = color
        self.reflector: TableReflectorFunc = reflector or DEFAULT_TABLE_REFLECTOR

    def _build(self, headers: list[str], rows: list[list[str]]) -> Table:
        styles = self.styles if self.color else PLAIN_STYLES
        table = Table(
            box=self.border.box,
            show_header=not self.options.no_headers,
            header_style=styles.header,
            border_style=styles.border,
            padding=(0, CELL_PADDING),
            highlight=False,
        )
        # Fixed widths: hidden headers still count towards the column width.
        for header, width in zip(headers, column_widths(headers, rows)):
            table.add_column(Text(header), justify="center", no_wrap=True, width=width)

        for row_idx, row in enumerate(rows, start=1):
            cells: list[Text] = []
            for col in range(len(headers)):
                value = row[col] if col < len(row) else ""
                style: StyleType = styles.cell
                if self.cell_style_func is not None:
                    style = self.cell_style_func(style, row_idx, col, value)
                cells.append(Text(value, style=style if self.color else ""))
            table.add_row(*cells)
        return table

    def render(self, obj: object) -> str:
        """Return the table text for ``obj`` ('' when there is nothing to show)."""
        headers, rows = reflect(self.reflector, obj)
        if not headers or not rows:
            logger.debug("Nothing to tabulate (%d header(s), %d row(s))", len(headers), len(rows))
            return ""

        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=CONSOLE_WIDTH,
            force_terminal=self.color,
            color_system="standard" if self.color else None,
            no_color=False,
            highlight=False,
            markup=False,
            emoji=False,
            legacy_windows=False,
        )
        console.print(self._build(headers, rows))
        logger.trace(
            "Table: %d column(s), %d row(s), border %s",
            len(headers),
            len(rows),
            self.border.value,
        )
        return buffer.getvalue()

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Print ``obj`` to ``sink`` as a bordered table."""
        text = self.render(obj)
        if text:
            write_text(sink, text)
