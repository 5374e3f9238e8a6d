# topmark:header:start
#
#   project      : Printkit
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for border styles and table styles."""

from __future__ import annotations

import pytest
from rich import box
from rich.style import Style

from printkit.rendering.styles import PLAIN_STYLES, BorderStyle


def test_border_style_is_str() -> None:
    """Members compare equal to their configuration names."""
    assert BorderStyle.ROUNDED == "rounded"
    assert BorderStyle.NORMAL.box is box.SQUARE
    assert BorderStyle("ascii").box is box.ASCII
    assert BorderStyle.HIDDEN.box is None


@pytest.mark.parametrize("name", ["ascii", " ASCII ", "Ascii"])
def test_parse_is_case_insensitive(name: str) -> None:
    """`BorderStyle.parse` ignores case and surrounding blanks."""
    assert BorderStyle.parse(name) is BorderStyle.ASCII


def test_parse_unknown_lists_styles() -> None:
    """Unknown names list every style."""
    with pytest.raises(ValueError, match="normal, rounded, thick, double, ascii, hidden"):
        BorderStyle.parse("dotted")


def test_plain_styles_are_null() -> None:
    """Plain styles carry no attributes."""
    for style in (PLAIN_STYLES.header, PLAIN_STYLES.cell, PLAIN_STYLES.border):
        assert style == Style.null()
