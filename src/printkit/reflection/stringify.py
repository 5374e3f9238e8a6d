# topmark:header:start
#
#   project      : Printkit
#   file         : stringify.py
#   file_relpath : src/printkit/reflection/stringify.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Text conversion of concrete values for table cells.

A value is turned into text by trying the following capabilities in order; the first
one the value supports wins:

1. display text: the value's class (or one of its bases) defines its own ``__str__``
   outside of the Python builtins;
2. error description: exceptions render as their message;
3. text marshaling: a ``marshal_text()`` method returning ``str`` or ``bytes``;
4. document marshaling: a ``to_json()`` method whose output is embedded verbatim.

Values without any of these capabilities fall back to default formatting, which
prints booleans as ``true``/``false``, integral floats without a fractional part and
complex numbers as ``(re+imi)``. Callables, generators and queues have no textual form
and render as the empty string.
"""

from __future__ import annotations

import asyncio
import decimal
import inspect
import math
import queue
from enum import Enum
from typing import Final

from printkit.config.logging import PrintkitLogger, get_logger

logger: PrintkitLogger = get_logger(__name__)

# Modules whose ``__str__`` implementations are default formatting, not display text.
_DEFAULT_STR_MODULES: Final[frozenset[str]] = frozenset({"builtins", "enum"})

# Python's float repr switches to exponent notation earlier than the table format does.
_MAX_PLAIN_EXPONENT: Final[int] = 21

_UNSUPPORTED_KINDS: Final[tuple[type, ...]] = (queue.Queue, asyncio.Queue)


def has_display_text(value: object) -> bool:
    """Return True if the value's class provides its own ``__str__``."""
    for klass in type(value).__mro__:
        method = vars(klass).get("__str__")
        if method is None:
            continue
        # Enum copies its own __str__ onto mixed-in subclasses; judge by the function.
        owner = getattr(method, "__objclass__", None)
        module = getattr(method, "__module__", None) or getattr(owner, "__module__", None)
        return (module or klass.__module__) not in _DEFAULT_STR_MODULES
    return False


def _decode(data: bytes | bytearray | memoryview) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _marshaled(value: object, method_name: str) -> str | None:
    method = getattr(value, method_name, None)
    if not callable(method):
        return None
    try:
        out = method()
    except Exception as exc:  # marshaling failure means "capability not usable"
        logger.debug("%s.%s() failed: %s", type(value).__name__, method_name, exc)
        return None
    if isinstance(out, (bytes, bytearray, memoryview)):
        return _decode(out)
    if isinstance(out, str):
        return out
    return None


def capability_text(value: object) -> str | None:
    """Return the text produced by the first capability ``value`` supports.

    Args:
        value: A concrete (already unwrapped) value.

    Returns:
        str | None: The capability's text, or ``None`` when the value supports
        none of the display, error, text-marshaling or document-marshaling
        capabilities.
    """
    if has_display_text(value):
        return _safe_str(value)
    if isinstance(value, BaseException):
        return _safe_str(value) or type(value).__name__
    text = _marshaled(value, "marshal_text")
    if text is not None:
        return text
    return _marshaled(value, "to_json")


def format_float(number: float, *, signed: bool = False) -> str:
    """Format a float in its shortest form.

    Integral values print without a fractional part, exponent notation is only used
    for very large or very small magnitudes, and non-finite values print as
    ``+Inf``, ``-Inf`` and ``NaN``.

    Args:
        number: The float to format.
        signed: Always print a leading sign (used for imaginary parts).

    Returns:
        The formatted number.
    """
    if math.isnan(number):
        text = "NaN"
        return f"+{text}" if signed else text
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"

    text = repr(number)
    if "e" in text:
        exponent = int(text.split("e", 1)[1])
        if -4 <= exponent < _MAX_PLAIN_EXPONENT:
            text = format(decimal.Decimal(text), "f")
    elif text.endswith(".0"):
        text = text[:-2]

    if signed and not text.startswith("-"):
        text = f"+{text}"
    return text


def format_complex(number: complex) -> str:
    """Format a complex number as ``(real+imagi)``."""
    return f"({format_float(number.real)}{format_float(number.imag, signed=True)}i)"


def is_unsupported_kind(value: object) -> bool:
    """Return True for values that have no textual representation at all."""
    return (
        inspect.isroutine(value)
        or inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
        or isinstance(value, _UNSUPPORTED_KINDS)
    )


def default_text(value: object) -> str:
    """Return the default textual formatting of a concrete value."""
    if isinstance(value, Enum):
        return default_text(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, complex):
        return format_complex(value)
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _decode(value)
    if is_unsupported_kind(value):
        return ""
    return _safe_str(value)


def to_text(value: object) -> str:
    """Convert a concrete value to cell text.

    Args:
        value: A concrete (already unwrapped) value.

    Returns:
        str: The capability text when one matches, else the default formatting.
        May be empty.
    """
    text = capability_text(value)
    if text is not None:
        return text
    return default_text(value)


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception as exc:  # a broken __str__/__repr__ degrades to an empty cell
        logger.warning("Cannot convert %s to text: %s", type(value).__name__, exc)
        return ""
