# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/printers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Output format strategies and the format registry.

Public modules:
    - printkit.printers.base: the `ObjectPrinter` contract and `PrintOptions`.
    - printkit.printers.csv: delimited text.
    - printkit.printers.table: bordered text.
    - printkit.printers.document: JSON and YAML documents.
    - printkit.printers.flags: format providers and the `PrintFlags` registry.
    - printkit.printers.errors: the printer exception hierarchy.
"""

from __future__ import annotations
