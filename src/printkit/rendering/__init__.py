# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Rendering helpers for Printkit.

This package provides terminal-facing helpers (colors, borders) that are kept
separate from the reflection core.

Public modules:
    - printkit.rendering.color
    - printkit.rendering.styles
"""

from __future__ import annotations
