# topmark:header:start
#
#   project      : Printkit
#   file         : formats.py
#   file_relpath : src/printkit/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Shared output format definitions.

This module centralizes the names of the built-in output formats so the format
providers, the configuration layer and color resolution agree on the same
vocabulary without introducing `Click` dependencies.

Machine formats (CSV, JSON, YAML) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Built-in output format names.

    Attributes:
        TABLE: Bordered, human-friendly table; may include ANSI color if enabled.
        CSV: Comma-separated values, one line per row.
        JSON: A single JSON document (raw value, no tabular conversion).
        YAML: A single YAML document (raw value, no tabular conversion).
    """

    # Tabular formats:
    TABLE = "table"
    CSV = "csv"

    # Document formats:
    JSON = "json"
    YAML = "yaml"


def is_machine_format(fmt: OutputFormat | str | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt: the output format (or its name) to be checked.

    Returns:
        `True` if the format provided is a machine format, else `False`.
    """
    if fmt is None:
        return False
    name = fmt.value if isinstance(fmt, OutputFormat) else str(fmt).lower()
    return name in {OutputFormat.CSV.value, OutputFormat.JSON.value, OutputFormat.YAML.value}
