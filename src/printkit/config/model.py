# topmark:header:start
#
#   project      : Printkit
#   file         : model.py
#   file_relpath : src/printkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Printer configuration model.

`PrinterConfig` is the immutable snapshot handed to the format registry;
`MutablePrinterConfig` is the builder used while reading TOML tables. Prefer
thaw→edit→freeze over mutating a runtime snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.printers.errors import ConfigError
from printkit.rendering.color import ColorMode
from printkit.rendering.styles import BorderStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: PrintkitLogger = get_logger(__name__)

KEY_OUTPUT: Final[str] = "output"
KEY_NO_HEADERS: Final[str] = "no_headers"
KEY_WIDE: Final[str] = "wide"
KEY_JSON_INDENT: Final[str] = "json_indent"
KEY_COLOR: Final[str] = "color"
KEY_BORDER: Final[str] = "border"

_BOOL_KEYS: Final[tuple[str, ...]] = (KEY_NO_HEADERS, KEY_WIDE, KEY_JSON_INDENT)


@dataclass(frozen=True, slots=True)
class PrinterConfig:
    """Immutable printer configuration.

    Attributes:
        output: Default output format name; ``None`` leaves the registry default.
        no_headers: Default of the ``--no-headers`` option.
        wide: Request additional columns from tabular printers.
        json_indent: Default of the ``--json-indent`` option.
        color: Color intent for the table printer.
        border: Border style of the table printer.
        config_files: The files the values were read from, in load order.
    """

    output: str | None = None
    no_headers: bool = False
    wide: bool = False
    json_indent: bool = False
    color: ColorMode = ColorMode.AUTO
    border: BorderStyle = BorderStyle.NORMAL
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutablePrinterConfig:
        """Return a mutable copy of this frozen config."""
        return MutablePrinterConfig(
            output=self.output,
            no_headers=self.no_headers,
            wide=self.wide,
            json_indent=self.json_indent,
            color=self.color,
            border=self.border,
            config_files=list(self.config_files),
        )


@dataclass
class MutablePrinterConfig:
    """Mutable builder for `PrinterConfig`."""

    output: str | None = None
    no_headers: bool = False
    wide: bool = False
    json_indent: bool = False
    color: ColorMode = ColorMode.AUTO
    border: BorderStyle = BorderStyle.NORMAL
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> PrinterConfig:
        """Freeze this builder into an immutable `PrinterConfig`."""
        return PrinterConfig(
            output=self.output,
            no_headers=self.no_headers,
            wide=self.wide,
            json_indent=self.json_indent,
            color=self.color,
            border=self.border,
            config_files=tuple(self.config_files),
        )

    def apply_table(
        self,
        table: Mapping[str, object],
        *,
        source: Path | None = None,
        strict: bool = False,
    ) -> MutablePrinterConfig:
        """Merge the keys of a ``[printkit]`` TOML table into this builder.

        Unknown keys and values of the wrong type are logged and ignored, unless
        ``strict`` is set.

        Args:
            table: The (unwrapped) TOML table.
            source: The file the table was read from, recorded in ``config_files``.
            strict: Raise instead of ignoring invalid entries.

        Returns:
            MutablePrinterConfig: ``self``, for chaining.

        Raises:
            ConfigError: If ``strict`` and the table holds an invalid entry.
        """
        where = f" in {source}" if source else ""

        def _invalid(message: str) -> None:
            if strict:
                raise ConfigError(f"{message}{where}")
            logger.warning("Ignoring %s%s", message, where)

        for key, value in table.items():
            if key == KEY_OUTPUT:
                if isinstance(value, str) and value.strip():
                    self.output = value.strip()
                else:
                    _invalid(f"invalid '{key}' value {value!r}")
            elif key in _BOOL_KEYS:
                if isinstance(value, bool):
                    setattr(self, key, value)
                else:
                    _invalid(f"non-boolean '{key}' value {value!r}")
            elif key == KEY_COLOR:
                try:
                    self.color = ColorMode(str(value).lower())
                except ValueError:
                    _invalid(f"invalid '{key}' value {value!r}")
            elif key == KEY_BORDER:
                try:
                    self.border = BorderStyle.parse(str(value))
                except ValueError:
                    _invalid(f"invalid '{key}' value {value!r}")
            else:
                _invalid(f"unknown key '{key}'")

        if source is not None:
            self.config_files.append(source)
        return self
