# topmark:header:start
#
#   project      : Printkit
#   file         : constants.py
#   file_relpath : src/printkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Printkit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    PRINTKIT_VERSION: str = get_version("printkit")
except PackageNotFoundError:  # running from a source checkout
    PRINTKIT_VERSION = "0.0.0"
