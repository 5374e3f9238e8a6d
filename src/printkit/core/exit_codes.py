# topmark:header:start
#
#   project      : Printkit
#   file         : exit_codes.py
#   file_relpath : src/printkit/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Exit codes carried by Printkit errors.

Printkit aligns with the BSD `sysexits` convention so that a command-line frontend
surfacing a `PrinterError` can hand its `exit_code` straight to the process.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for printer failures.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid invocation, e.g. an unknown output format. Mirrors BSD
            ``EX_USAGE (64)``.
        ENCODING_ERROR: A value could not be encoded into the requested document
            format. Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: Writing to the output sink failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid printer configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
