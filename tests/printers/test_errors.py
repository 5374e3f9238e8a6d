# topmark:header:start
#
#   project      : Printkit
#   file         : test_errors.py
#   file_relpath : tests/printers/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for printer exceptions and their exit codes."""

from __future__ import annotations

import click
import pytest

from printkit.core.exit_codes import ExitCode
from printkit.printers.errors import (
    ConfigError,
    EncodingError,
    PrinterError,
    PrinterIOError,
    UnsupportedFormatError,
    is_unsupported_format_error,
)


def test_unsupported_format_message_lists_sorted_formats() -> None:
    """The message names the requested format and the sorted allowed formats."""
    err = UnsupportedFormatError("xml", ["yaml", "csv", "table", "json"])
    assert err.message == (
        'no compatible printer found for output format "xml". '
        "Allowed formats: csv, json, table, yaml"
    )
    assert err.allowed_formats == ["csv", "json", "table", "yaml"]


def test_unsupported_format_with_empty_name() -> None:
    """A missing format name is reported as an empty string."""
    err = UnsupportedFormatError(None, [])
    assert err.output_format == ""
    assert 'output format "".' in err.message


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (PrinterError("boom"), ExitCode.FAILURE),
        (UnsupportedFormatError("x", ["json"]), ExitCode.USAGE_ERROR),
        (EncodingError("bad"), ExitCode.ENCODING_ERROR),
        (PrinterIOError("eof"), ExitCode.IO_ERROR),
        (ConfigError("key"), ExitCode.CONFIG_ERROR),
    ],
)
def test_exit_codes(exc: PrinterError, code: ExitCode) -> None:
    """Each error carries its exit code and is a Click exception."""
    assert isinstance(exc, click.ClickException)
    assert exc.exit_code == code


def test_is_unsupported_format_error_walks_causes() -> None:
    """Wrapped unsupported-format errors are still recognized."""
    inner = UnsupportedFormatError("xml", ["json"])
    try:
        try:
            raise inner
        except UnsupportedFormatError as exc:
            raise RuntimeError("wrapped") from exc
    except RuntimeError as outer:
        assert is_unsupported_format_error(outer)


def test_is_unsupported_format_error_negative() -> None:
    """Other errors and ``None`` are not unsupported-format errors."""
    assert not is_unsupported_format_error(None)
    assert not is_unsupported_format_error(EncodingError("bad"))
    assert not is_unsupported_format_error(ValueError("x"))
