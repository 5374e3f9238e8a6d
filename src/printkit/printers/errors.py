# topmark:header:start
#
#   project      : Printkit
#   file         : errors.py
#   file_relpath : src/printkit/printers/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Exceptions raised by printers and the format registry.

Usage:
    Printers raise these exceptions to signal rendering failures with standardized
    messages and exit codes. Since they derive from `click.ClickException`, a Click
    command that lets them propagate exits with the matching `ExitCode`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from printkit.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterable


class PrinterError(click.ClickException):
    """Base class for all Printkit errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class UnsupportedFormatError(PrinterError):
    """No registered provider serves the requested output format.

    Attributes:
        output_format: The requested format name.
        allowed_formats: The format names the registry does serve, sorted.
    """

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, output_format: str | None, allowed_formats: Iterable[str]) -> None:
        self.output_format: str = output_format or ""
        self.allowed_formats: list[str] = sorted(allowed_formats)
        allowed = ", ".join(self.allowed_formats)
        super().__init__(
            f'no compatible printer found for output format "{self.output_format}". '
            f"Allowed formats: {allowed}"
        )


class EncodingError(PrinterError):
    """A value could not be encoded into the requested document format."""

    exit_code = ExitCode.ENCODING_ERROR


class PrinterIOError(PrinterError):
    """Writing to the output sink failed."""

    exit_code = ExitCode.IO_ERROR


class ConfigError(PrinterError):
    """Invalid printer configuration (malformed file, unknown key or bad value)."""

    exit_code = ExitCode.CONFIG_ERROR


def is_unsupported_format_error(err: BaseException | None) -> bool:
    """Return True if ``err`` (or an exception in its cause chain) is an
    `UnsupportedFormatError`."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, UnsupportedFormatError):
            return True
        seen.add(id(err))
        err = err.__cause__ or err.__context__
    return False
