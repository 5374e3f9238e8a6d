# topmark:header:start
#
#   project      : Printkit
#   file         : flags.py
#   file_relpath : src/printkit/printers/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Format providers and the `PrintFlags` registry.

A *format provider* serves a fixed set of format names, builds the matching printer
and registers the Click options its printers need. `PrintFlags` aggregates providers,
adds ``-o/--output`` and resolves the selected format to a printer.

Options are bound on an existing `click.Command`; their values are stored on the
provider (``expose_value=False``), so the command callback signature is unaffected:

    ```python
    flags = new_table_print_flags()

    @click.command()
    def get() -> None:
        flags.to_printer().print_obj(fetch_items(), sys.stdout)

    flags.add_options(get)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import click
from click.core import ParameterSource

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.config.model import PrinterConfig
from printkit.core.formats import OutputFormat
from printkit.printers.base import PrintOptions
from printkit.printers.csv import CsvPrinter
from printkit.printers.document import JsonPrinter, YamlPrinter
from printkit.printers.errors import UnsupportedFormatError
from printkit.printers.table import TablePrinter
from printkit.rendering.color import ColorMode, resolve_color_mode
from printkit.rendering.styles import BorderStyle

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from printkit.printers.base import ObjectPrinter
    from printkit.printers.table import CellStyleFunc
    from printkit.rendering.styles import TableStyles

logger: PrintkitLogger = get_logger(__name__)


@runtime_checkable
class FormatProvider(Protocol):
    """Serves a set of output formats and registers their options."""

    def allowed_formats(self) -> list[str]:
        """Return the format names `to_printer` accepts."""
        ...

    def to_printer(self, output_format: str) -> ObjectPrinter:
        """Return the printer for ``output_format``.

        Raises:
            UnsupportedFormatError: If this provider does not serve the format.
        """
        ...

    def add_options(self, command: click.Command) -> None:
        """Register the options specific to this provider's printers on ``command``."""
        ...


class TableCsvPrinterFlags:
    """Provider of the tabular formats (``csv`` and ``table``).

    Attributes:
        no_headers: Skip header rows; ``None`` disables the ``--no-headers`` option.
        wide: Request additional columns.
        color_mode: Color intent for the table printer.
        border: Border style of the table printer.
        styles: Styles of the table printer (library defaults when ``None``).
        cell_style_func: Per-cell style hook of the table printer.
        stdout_isatty: TTY override used when resolving ``ColorMode.AUTO``.
    """

    def __init__(
        self,
        no_headers: bool | None = False,
        *,
        wide: bool = False,
        color_mode: ColorMode = ColorMode.AUTO,
        border: BorderStyle = BorderStyle.NORMAL,
        styles: TableStyles | None = None,
        cell_style_func: CellStyleFunc | None = None,
        stdout_isatty: bool | None = None,
    ) -> None:
        self.no_headers: bool | None = no_headers
        self.wide: bool = wide
        self.color_mode: ColorMode = color_mode
        self.border: BorderStyle = border
        self.styles: TableStyles | None = styles
        self.cell_style_func: CellStyleFunc | None = cell_style_func
        self.stdout_isatty: bool | None = stdout_isatty

    def allowed_formats(self) -> list[str]:
        """Return ``["csv", "table"]``."""
        return [OutputFormat.CSV.value, OutputFormat.TABLE.value]

    def _bind_no_headers(self, _ctx: click.Context, _param: click.Parameter, value: bool) -> bool:
        self.no_headers = bool(value)
        return self.no_headers

    def add_options(self, command: click.Command) -> None:
        """Register ``--no-headers`` unless ``no_headers`` is ``None``."""
        if self.no_headers is None:
            return
        command.params.append(
            click.Option(
                ["--no-headers"],
                is_flag=True,
                default=self.no_headers,
                expose_value=False,
                callback=self._bind_no_headers,
                help="When using the default table output, don't print headers "
                "(default print headers).",
            )
        )

    def to_printer(self, output_format: str) -> ObjectPrinter:
        """Return a `CsvPrinter` or `TablePrinter` configured from this provider."""
        options = PrintOptions(no_headers=bool(self.no_headers), wide=self.wide)
        if output_format == OutputFormat.CSV.value:
            return CsvPrinter(options)
        if output_format == OutputFormat.TABLE.value:
            color = resolve_color_mode(
                color_mode_override=self.color_mode,
                output_format=OutputFormat.TABLE,
                stdout_isatty=self.stdout_isatty,
            )
            return TablePrinter(
                options,
                styles=self.styles,
                border=self.border,
                cell_style_func=self.cell_style_func,
                color=color,
            )
        raise UnsupportedFormatError(output_format, self.allowed_formats())


class DocumentPrinterFlags:
    """Provider of the structured-document formats (``json`` and ``yaml``).

    Attributes:
        json_indent: Indent JSON output; ``None`` disables the ``--json-indent`` option.
    """

    def __init__(self, json_indent: bool | None = False) -> None:
        self.json_indent: bool | None = json_indent

    def allowed_formats(self) -> list[str]:
        """Return ``["json", "yaml"]``."""
        return [OutputFormat.JSON.value, OutputFormat.YAML.value]

    def _bind_json_indent(self, _ctx: click.Context, _param: click.Parameter, value: bool) -> bool:
        self.json_indent = bool(value)
        return self.json_indent

    def add_options(self, command: click.Command) -> None:
        """Register ``--json-indent`` unless ``json_indent`` is ``None``."""
        if self.json_indent is None:
            return
        command.params.append(
            click.Option(
                ["--json-indent"],
                is_flag=True,
                default=self.json_indent,
                expose_value=False,
                callback=self._bind_json_indent,
                help='When using the "json" output format, indent it for better readability '
                "(default no indent).",
            )
        )

    def to_printer(self, output_format: str) -> ObjectPrinter:
        """Return a `JsonPrinter` or `YamlPrinter`."""
        if output_format == OutputFormat.JSON.value:
            return JsonPrinter(indent=bool(self.json_indent))
        if output_format == OutputFormat.YAML.value:
            return YamlPrinter()
        raise UnsupportedFormatError(output_format, self.allowed_formats())


class PrintFlags:
    """Registry of format providers plus the ``-o/--output`` selection.

    Attributes:
        providers: Registered providers, asked in order.
        output_format: Selected format name; ``None`` disables the ``--output`` option.
        output_flag_specified_func: Optional override of `output_flag_specified`.
    """

    def __init__(
        self,
        providers: Sequence[FormatProvider] = (),
        output_format: str | None = "",
    ) -> None:
        self.providers: list[FormatProvider] = list(providers)
        self.output_format: str | None = output_format
        self.output_flag_specified_func: Callable[[], bool] | None = None
        self._output_source: ParameterSource | None = None

    def allowed_formats(self) -> list[str]:
        """Return the formats of every provider, in provider order."""
        formats: list[str] = []
        for provider in self.providers:
            formats.extend(provider.allowed_formats())
        return formats

    def to_printer(self) -> ObjectPrinter:
        """Return the printer of the first provider serving the selected format.

        Errors other than `UnsupportedFormatError` raised by a provider propagate.

        Raises:
            UnsupportedFormatError: If no provider serves the selected format; the
                error lists every allowed format.
        """
        name = self.output_format or ""
        for provider in self.providers:
            try:
                printer = provider.to_printer(name)
            except UnsupportedFormatError:
                continue
            logger.debug("Output format %r served by %s", name, type(provider).__name__)
            return printer
        logger.debug("No provider serves output format %r", name)
        raise UnsupportedFormatError(name, self.allowed_formats())

    def _bind_output(self, ctx: click.Context, param: click.Parameter, value: str | None) -> str:
        self.output_format = value or ""
        self._output_source = ctx.get_parameter_source(param.name) if param.name else None
        return self.output_format

    def add_options(self, command: click.Command) -> None:
        """Register every provider's options, then ``-o/--output``.

        ``--output`` is only added when ``output_format`` is not ``None``.
        """
        for provider in self.providers:
            provider.add_options(command)
        if self.output_format is None:
            return
        command.params.append(
            click.Option(
                ["-o", "--output"],
                type=str,
                default=self.output_format,
                show_default=bool(self.output_format),
                expose_value=False,
                callback=self._bind_output,
                help=f"Output format. One of: ({', '.join(self.allowed_formats())}).",
            )
        )

    def output_flag_specified(self) -> bool:
        """Return True if the user explicitly requested an output format."""
        if self.output_flag_specified_func is not None:
            return self.output_flag_specified_func()
        return self._output_source is ParameterSource.COMMANDLINE

    def with_default_output(self, output_format: str) -> PrintFlags:
        """Set the default output format and return ``self``."""
        self.output_format = output_format
        return self


def new_print_flags(config: PrinterConfig | None = None) -> PrintFlags:
    """Return a registry serving the document formats (``json``, ``yaml``).

    Args:
        config: Supplies the default output format and ``--json-indent`` default.

    Returns:
        PrintFlags: The registry; its default output format is empty unless configured.
    """
    cfg = config or PrinterConfig()
    return PrintFlags(
        providers=[DocumentPrinterFlags(json_indent=cfg.json_indent)],
        output_format=cfg.output or "",
    )


def new_table_print_flags(config: PrinterConfig | None = None) -> PrintFlags:
    """Return a registry serving the tabular and document formats.

    The tabular provider is registered first; the default output format is
    ``table`` unless configured otherwise.

    Args:
        config: Supplies output defaults, color intent and border style.

    Returns:
        PrintFlags: The registry.
    """
    cfg = config or PrinterConfig()
    return PrintFlags(
        providers=[
            TableCsvPrinterFlags(
                no_headers=cfg.no_headers,
                wide=cfg.wide,
                color_mode=cfg.color,
                border=cfg.border,
            ),
            DocumentPrinterFlags(json_indent=cfg.json_indent),
        ],
        output_format=cfg.output or OutputFormat.TABLE.value,
    )
