# topmark:header:start
#
#   project      : Printkit
#   file         : test_stringify.py
#   file_relpath : tests/reflection/test_stringify.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for cell text conversion (`printkit.reflection.stringify`)."""

from __future__ import annotations

import asyncio
import queue
from enum import Enum, IntEnum

import pytest

from printkit.reflection.stringify import (
    capability_text,
    default_text,
    format_complex,
    format_float,
    has_display_text,
    to_text,
)


class Color(Enum):
    RED = "red"


class Level(IntEnum):
    HIGH = 3


class Shouty(str, Enum):
    LOUD = "loud"

    def __str__(self) -> str:
        return self.value.upper()


class Display:
    def __str__(self) -> str:
        return "display"


class DisplayChild(Display):
    pass


class Marshals:
    def marshal_text(self) -> bytes:
        return b"marshaled"


class MarshalsJson:
    def to_json(self) -> str:
        return '{"k": 1}'


class FailingMarshal:
    def marshal_text(self) -> str:
        raise RuntimeError("boom")


class Everything(Display):
    def marshal_text(self) -> str:
        return "never used"


class BrokenStr:
    def __str__(self) -> str:
        raise RuntimeError("broken")


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (3.14, "3.14"),
        (42.0, "42"),
        (-0.5, "-0.5"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1e-5, "1e-05"),
        (0.0001, "0.0001"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
        (float("nan"), "NaN"),
    ],
)
def test_format_float(number: float, expected: str) -> None:
    """Floats use their shortest form, without a trailing ``.0``."""
    assert format_float(number) == expected


def test_format_complex() -> None:
    """Complex numbers render as ``(real+imagi)``."""
    assert format_complex(3.14j) == "(0+3.14i)"
    assert format_complex(complex(1.5, -2)) == "(1.5-2i)"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (ord("b"), "98"),
        (3.14, "3.14"),
        (3.14j, "(0+3.14i)"),
        ("hello", "hello"),
        (b"bytes", "bytes"),
        (Color.RED, "red"),
        (Level.HIGH, "3"),
        ([1, 2], "[1, 2]"),
    ],
)
def test_default_formatting(value: object, expected: str) -> None:
    """Values without capabilities use default formatting."""
    assert to_text(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        len,
        lambda: None,
        (x for x in ()),
        queue.Queue(),
    ],
)
def test_unsupported_kinds_render_empty(value: object) -> None:
    """Callables, generators and queues have no text form."""
    assert default_text(value) == ""


def test_asyncio_queue_renders_empty() -> None:
    """Asynchronous queues are unsupported kinds too."""
    assert default_text(asyncio.Queue()) == ""


def test_display_text_capability() -> None:
    """A user-defined ``__str__`` (own or inherited) is the display text."""
    assert has_display_text(Display())
    assert has_display_text(DisplayChild())
    assert capability_text(DisplayChild()) == "display"
    assert not has_display_text(42)
    assert not has_display_text(Color.RED)
    assert not has_display_text(Level.HIGH)
    assert has_display_text(Shouty.LOUD)
    assert to_text(Shouty.LOUD) == "LOUD"


def test_error_capability() -> None:
    """Exceptions render as their message, or their class name when empty."""
    assert capability_text(ValueError("bad value")) == "bad value"
    assert capability_text(KeyError()) == "KeyError"


def test_marshal_capabilities() -> None:
    """Text marshaling is tried before document marshaling."""
    assert capability_text(Marshals()) == "marshaled"
    assert capability_text(MarshalsJson()) == '{"k": 1}'
    assert capability_text(Everything()) == "display"


def test_failing_marshal_is_not_a_capability() -> None:
    """A marshal method that raises counts as no capability."""
    assert capability_text(FailingMarshal()) is None


def test_plain_object_has_no_capability() -> None:
    """Objects relying on builtin formatting have no capability."""
    assert capability_text(object()) is None
    assert capability_text(3) is None


def test_broken_str_degrades_to_empty(caplog: pytest.LogCaptureFixture) -> None:
    """A ``__str__`` that raises yields an empty cell and a warning."""
    assert to_text(BrokenStr()) == ""
    assert "BrokenStr" in caplog.text
