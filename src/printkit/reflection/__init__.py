# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/reflection/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Reflection-based conversion of arbitrary values into tables.

Public modules:
    - printkit.reflection.convert: the `convert_to_table` entry point.
    - printkit.reflection.descriptors: field metadata helpers and schemas.
    - printkit.reflection.indirection: the `Ref` box and reference unwrapping.
    - printkit.reflection.stringify: cell text conversion.
"""

from __future__ import annotations

from printkit.reflection.convert import TableResult, convert_to_table
from printkit.reflection.descriptors import (
    FieldSpec,
    embedded,
    header,
    json_name,
    table_schema,
    tags,
)
from printkit.reflection.indirection import Ref

__all__ = [
    "FieldSpec",
    "Ref",
    "TableResult",
    "convert_to_table",
    "embedded",
    "header",
    "json_name",
    "table_schema",
    "tags",
]
