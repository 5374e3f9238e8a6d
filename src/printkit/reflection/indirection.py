# topmark:header:start
#
#   project      : Printkit
#   file         : indirection.py
#   file_relpath : src/printkit/reflection/indirection.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Reference unwrapping for the table converter.

Values handed to the converter may be wrapped in any number of reference layers:
explicit `Ref` boxes (an optional reference that may be empty) and `weakref.ref`
objects (which go dead when their referent is collected). `resolve` collapses these
layers down to the concrete value, or reports that the value is absent.

Absence is never an error: callers drop absent values from their output.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Generic, TypeVar

from printkit.config.logging import PrintkitLogger, get_logger

logger: PrintkitLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class Ref(Generic[T]):
    """Mutable reference box around a value.

    ``Ref(None)`` (or ``Ref()``) is an empty reference. References may be nested
    (``Ref(Ref(x))``); the converter unwraps every layer.

    Attributes:
        value: The referenced value, or ``None`` for an empty reference.
    """

    value: T | None = None

    def is_empty(self) -> bool:
        """Return True when this reference points at nothing."""
        return self.value is None


def is_indirection(value: object) -> bool:
    """Return True if ``value`` is a reference layer understood by `resolve`."""
    return isinstance(value, (Ref, weakref.ReferenceType))


def resolve(value: object) -> tuple[object, bool]:
    """Unwrap every reference layer around ``value``.

    Args:
        value: Any value, possibly wrapped in `Ref` / `weakref.ref` layers.

    Returns:
        tuple[object, bool]: ``(concrete, True)`` when a concrete value was reached,
        or ``(None, False)`` as soon as any layer is ``None``, empty or dead. A
        reference chain that loops back onto itself is treated as absent.
    """
    seen: set[int] = set()
    current: object = value
    while True:
        if current is None:
            return None, False
        if isinstance(current, Ref):
            if id(current) in seen:
                logger.debug("Reference cycle detected while resolving %r", type(value).__name__)
                return None, False
            seen.add(id(current))
            current = current.value
            continue
        if isinstance(current, weakref.ReferenceType):
            current = current()
            continue
        return current, True
