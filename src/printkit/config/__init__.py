# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Configuration handling for Printkit.

Public modules:
    - printkit.config.logging: the Printkit logger, TRACE level and setup helpers.
    - printkit.config.model: the `PrinterConfig` snapshot and its mutable builder.
    - printkit.config.io: TOML loading from ``printkit.toml`` or ``pyproject.toml``.
"""

from __future__ import annotations
