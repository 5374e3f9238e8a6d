# topmark:header:start
#
#   project      : Printkit
#   file         : io.py
#   file_relpath : src/printkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Load printer configuration from TOML files.

Two sources are recognized:
- ``printkit.toml``, with settings in a top-level ``[printkit]`` table, and
- ``pyproject.toml``, with settings in ``[tool.printkit]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.config.model import MutablePrinterConfig, PrinterConfig
from printkit.printers.errors import ConfigError

logger: PrintkitLogger = get_logger(__name__)

CONFIG_FILE_NAME: Final[str] = "printkit.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
SECTION: Final[str] = "printkit"

TomlTable = dict[str, Any]


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``printkit.toml`` or ``pyproject.toml``).
        strict: Raise `ConfigError` instead of logging failures.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        if strict:
            raise ConfigError(f"cannot read {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ConfigError(f"cannot parse {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the printkit table of a parsed TOML document, if present."""
    if path.name == PYPROJECT_FILE_NAME:
        tool = data.get("tool")
        section = tool.get(SECTION) if isinstance(tool, dict) else None
    else:
        section = data.get(SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        logger.warning("Ignoring non-table '%s' entry in %s", SECTION, path)
        return None
    return cast("TomlTable", section)


def load_config(
    path: Path | None,
    *,
    base: PrinterConfig | None = None,
    strict: bool = False,
) -> PrinterConfig:
    """Build a `PrinterConfig` from a TOML file.

    Args:
        path: ``printkit.toml`` or ``pyproject.toml``; ``None`` yields ``base``.
        base: Values to start from (defaults when omitted).
        strict: Raise on unreadable files and invalid entries instead of logging them.

    Returns:
        PrinterConfig: ``base`` overlaid with the file's printkit table.

    Raises:
        ConfigError: If ``strict`` and the file or one of its entries is invalid.
    """
    builder: MutablePrinterConfig = (base or PrinterConfig()).thaw()
    if path is None:
        return builder.freeze()

    section = extract_section(path, load_toml_dict(path, strict=strict))
    if section is None:
        logger.debug("No [%s] settings in %s", SECTION, path)
        return builder.freeze()

    logger.debug("Loading printer settings from %s", path)
    return builder.apply_table(section, source=path, strict=strict).freeze()


def discover_config(start: Path | None = None) -> Path | None:
    """Find the nearest configuration file, walking up from ``start``.

    In each directory ``printkit.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.printkit]`` table.

    Args:
        start: Directory (or file) to start from; defaults to the working directory.

    Returns:
        Path | None: The configuration file, or ``None`` if none was found.
    """
    here = (start or Path.cwd()).resolve()
    if here.is_file():
        here = here.parent
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILE_NAME
        if (
            pyproject.is_file()
            and extract_section(pyproject, load_toml_dict(pyproject)) is not None
        ):
            return pyproject
    return None
