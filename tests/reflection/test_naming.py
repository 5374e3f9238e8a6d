# topmark:header:start
#
#   project      : Printkit
#   file         : test_naming.py
#   file_relpath : tests/reflection/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for label normalization (`printkit.reflection.naming`)."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from printkit.reflection.naming import split_words, to_screaming_words

SNAKE_IDENTIFIERS = st.from_regex(r"[a-z][a-z0-9_]{0,20}", fullmatch=True)
CAMEL_IDENTIFIERS = st.from_regex(r"[a-z]+([A-Z][a-z]+){0,4}[0-9]{0,3}", fullmatch=True)


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("myField", "MY FIELD"),
        ("my_field", "MY FIELD"),
        ("MyField", "MY FIELD"),
        ("my-field", "MY FIELD"),
        ("my.field", "MY FIELD"),
        ("field1", "FIELD 1"),
        ("Field2", "FIELD 2"),
        ("nodeName", "NODE NAME"),
        ("HTTPServer", "HTTP SERVER"),
        ("HTTPServer2", "HTTP SERVER 2"),
        ("userID", "USER ID"),
        ("ID", "ID"),
        ("value", "VALUE"),
    ],
)
def test_to_screaming_words(identifier: str, expected: str) -> None:
    """Identifiers in any common convention normalize to upper-case words."""
    assert to_screaming_words(identifier) == expected


def test_custom_delimiter() -> None:
    """The word delimiter is configurable."""
    assert to_screaming_words("myFieldName", "_") == "MY_FIELD_NAME"


def test_identifier_without_words_is_upper_cased() -> None:
    """Identifiers without word characters pass through upper-cased."""
    assert to_screaming_words("") == ""
    assert to_screaming_words("__") == "__"


def test_split_words_drops_separators() -> None:
    """Separators never become words."""
    assert split_words("a__b--c  d") == ["a", "b", "c", "d"]


@given(SNAKE_IDENTIFIERS)
def test_result_is_upper_case_and_single_spaced(identifier: str) -> None:
    """Labels are upper-case, trimmed and single-spaced."""
    label = to_screaming_words(identifier)
    assert label == label.upper()
    assert label == label.strip()
    assert "  " not in label
    assert "_" not in label


@given(st.one_of(SNAKE_IDENTIFIERS, CAMEL_IDENTIFIERS))
def test_normalization_is_idempotent(identifier: str) -> None:
    """Normalizing a label a second time leaves it unchanged."""
    once = to_screaming_words(identifier)
    assert to_screaming_words(once) == once


@given(CAMEL_IDENTIFIERS)
def test_camel_and_snake_spellings_agree(identifier: str) -> None:
    """``fooBar`` and ``foo_bar`` produce the same label."""
    snake = "_".join(word.lower() for word in split_words(identifier))
    assert to_screaming_words(identifier) == to_screaming_words(snake)
