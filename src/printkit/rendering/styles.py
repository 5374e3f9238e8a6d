# topmark:header:start
#
#   project      : Printkit
#   file         : styles.py
#   file_relpath : src/printkit/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Styles and border sets for the bordered table printer.

Key types:
    - `BorderStyle`: `str, Enum` naming the built-in borders; each member carries its
      `rich.box.Box` via `.box`, while `.value` remains the plain name used in
      configuration files.
    - `TableStyles`: header, cell and border styles, as `rich` style definitions
      (``"bold magenta"``, `rich.style.Style` instances...).

Example:
    ```python
    styles = TableStyles(header="green bold", border="grey50")
    TablePrinter(styles=styles, border=BorderStyle.ROUNDED)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich import box as boxes
from rich.style import Style, StyleType


class BorderStyle(str, Enum):
    """Named border sets.

    The enum member remains a `str` (its configuration name); the box characters
    are stored separately and exposed through `.box`. ``HIDDEN`` draws no frame.
    """

    _value_: str
    _box: boxes.Box | None

    def __new__(cls, text: str, frame: boxes.Box | None) -> BorderStyle:
        """Construct a border style member from its name and box."""
        obj: BorderStyle = str.__new__(cls, text)
        obj._value_ = text
        obj._box = frame
        return obj

    NORMAL = ("normal", boxes.SQUARE)
    ROUNDED = ("rounded", boxes.ROUNDED)
    THICK = ("thick", boxes.HEAVY)
    DOUBLE = ("double", boxes.DOUBLE)
    ASCII = ("ascii", boxes.ASCII)
    HIDDEN = ("hidden", None)

    @property
    def box(self) -> boxes.Box | None:
        """Return the `rich` box of this style (``None`` for no frame)."""
        return self._box

    @classmethod
    def parse(cls, name: str) -> BorderStyle:
        """Return the member named ``name`` (case-insensitive).

        Raises:
            ValueError: If no border style has that name.
        """
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown border style {name!r}. Allowed styles: {allowed}")


@dataclass(frozen=True)
class TableStyles:
    """Styles applied by the table printer when color is enabled.

    Attributes:
        header: Style of header cells (bold magenta by default).
        cell: Base style of data cells (bright white by default).
        border: Style of the frame characters (blue by default).
    """

    header: StyleType = "bold magenta"
    cell: StyleType = "bright_white"
    border: StyleType = "blue"


PLAIN_STYLES = TableStyles(header=Style.null(), cell=Style.null(), border=Style.null())
