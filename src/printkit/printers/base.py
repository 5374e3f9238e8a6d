# topmark:header:start
#
#   project      : Printkit
#   file         : base.py
#   file_relpath : src/printkit/printers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Printer contract shared by all output format strategies.

A printer renders one value to a text sink. Tabular printers reflect the value into
headers and rows first (see `printkit.reflection.convert`); document printers
serialize the raw value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Protocol, runtime_checkable

from printkit.printers.errors import PrinterIOError
from printkit.reflection.convert import TableResult, convert_to_table

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    TableData = TableResult | tuple[Sequence[str], Sequence[Sequence[str]]]
    TableReflectorFunc = Callable[[object], TableData]

DEFAULT_TABLE_REFLECTOR: TableReflectorFunc = convert_to_table


@dataclass(frozen=True)
class PrintOptions:
    """Options shared by the tabular printers.

    Attributes:
        no_headers: Skip the header row.
        wide: Include additional columns where a printer supports them.
    """

    no_headers: bool = False
    wide: bool = False


@runtime_checkable
class ObjectPrinter(Protocol):
    """Renders a value to a text sink according to the printer's configuration."""

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Print ``obj`` to ``sink``.

        Raises:
            PrinterError: When the value cannot be rendered or the sink fails.
        """
        ...


class ObjectPrinterFunc:
    """Adapt a plain ``(obj, sink)`` callable to the `ObjectPrinter` protocol."""

    def __init__(self, func: Callable[[object, IO[str]], None]) -> None:
        self._func = func

    def print_obj(self, obj: object, sink: IO[str]) -> None:
        """Delegate to the wrapped callable."""
        self._func(obj, sink)

    def __repr__(self) -> str:
        return f"ObjectPrinterFunc({getattr(self._func, '__qualname__', self._func)!r})"


def write_text(sink: IO[str], text: str) -> None:
    """Write ``text`` to ``sink``, mapping `OSError` to `PrinterIOError`."""
    try:
        sink.write(text)
    except OSError as exc:
        raise PrinterIOError(f"cannot write output: {exc}") from exc


def reflect(reflector: TableReflectorFunc, obj: object) -> tuple[list[str], list[list[str]]]:
    """Run ``reflector`` on ``obj`` and return plain header and row lists.

    Reflectors may return a `TableResult` or any ``(headers, rows)`` pair.
    """
    result = reflector(obj)
    if isinstance(result, TableResult):
        return result.headers, result.rows
    headers, rows = result
    return [str(h) for h in headers], [[str(c) for c in row] for row in rows]
