# topmark:header:start
#
#   project      : Printkit
#   file         : test_csv.py
#   file_relpath : tests/printers/test_csv.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for the delimited-text printer."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from printkit.printers.base import PrintOptions
from printkit.printers.csv import CsvPrinter
from printkit.printers.errors import PrinterIOError
from printkit.reflection import header


@dataclass
class KeyValue:
    key: str
    value: str


@dataclass
class Quoted:
    text: str = header("Text, quoted")


def test_prints_headers_and_rows(sink: io.StringIO) -> None:
    """A record prints a header line and a data line."""
    CsvPrinter().print_obj(KeyValue("key", "value"), sink)
    assert sink.getvalue() == "KEY,VALUE\nkey,value\n"


def test_no_headers(sink: io.StringIO) -> None:
    """``no_headers`` suppresses the header line."""
    CsvPrinter(PrintOptions(no_headers=True)).print_obj(
        [KeyValue("a", "1"), KeyValue("b", "2")], sink
    )
    assert sink.getvalue() == "a,1\nb,2\n"


def test_quoting(sink: io.StringIO) -> None:
    """Cells with delimiters or quotes are quoted."""
    CsvPrinter().print_obj(Quoted('say "hi", twice'), sink)
    assert sink.getvalue() == '"Text, quoted"\n"say ""hi"", twice"\n'


def test_string_prints_empty_header_line(sink: io.StringIO) -> None:
    """A bare string has no headers; its empty header line is still written."""
    CsvPrinter().print_obj("hello", sink)
    assert sink.getvalue() == "\nhello\n"


def test_scalar_collection(sink: io.StringIO) -> None:
    """Scalar collections use a single unnamed column."""
    CsvPrinter().print_obj([1, 2], sink)
    assert sink.getvalue() == '""\n1\n2\n'


def test_unsupported_value_prints_single_newline(sink: io.StringIO) -> None:
    """A value without any text form prints only the empty header line."""
    CsvPrinter().print_obj(len, sink)
    assert sink.getvalue() == "\n"


def test_custom_reflector(sink: io.StringIO) -> None:
    """A custom reflector may return a plain ``(headers, rows)`` pair."""
    printer = CsvPrinter(reflector=lambda obj: (["N"], [[str(obj)], ["second"]]))
    printer.print_obj(5, sink)
    assert sink.getvalue() == "N\n5\nsecond\n"


def test_sink_failure_raises_io_error() -> None:
    """Sink write failures surface as `PrinterIOError`."""

    class FailingSink(io.StringIO):
        def write(self, s: str) -> int:
            raise OSError("disk full")

    with pytest.raises(PrinterIOError, match="disk full"):
        CsvPrinter().print_obj(KeyValue("k", "v"), FailingSink())
