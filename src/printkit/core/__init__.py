# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Core, frontend-agnostic definitions shared across Printkit.

Public modules:
    - printkit.core.exit_codes
    - printkit.core.formats
"""

from __future__ import annotations
