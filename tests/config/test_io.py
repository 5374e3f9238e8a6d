# topmark:header:start
#
#   project      : Printkit
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Tests for loading and discovering TOML configuration files."""

from __future__ import annotations

from pathlib import Path

import pytest

from printkit.config.io import discover_config, extract_section, load_config, load_toml_dict
from printkit.config.model import PrinterConfig
from printkit.printers.errors import ConfigError
from printkit.rendering.styles import BorderStyle


def write(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_printkit_toml(tmp_path: Path) -> None:
    """``printkit.toml`` settings live in ``[printkit]``."""
    path = write(tmp_path / "printkit.toml", '[printkit]\noutput = "json"\njson_indent = true\n')
    cfg = load_config(path)
    assert cfg.output == "json"
    assert cfg.json_indent is True
    assert cfg.config_files == (path,)


def test_load_pyproject_section(tmp_path: Path) -> None:
    """``pyproject.toml`` settings live in ``[tool.printkit]``."""
    path = write(tmp_path / "pyproject.toml", '[tool.printkit]\nborder = "ascii"\n')
    assert load_config(path).border is BorderStyle.ASCII


def test_missing_section_keeps_base(tmp_path: Path) -> None:
    """Files without a printkit table return the base config unchanged."""
    path = write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    base = PrinterConfig(output="csv")
    assert load_config(path, base=base) == base
    assert load_config(None, base=base) == base


def test_extract_section_rejects_non_tables(tmp_path: Path) -> None:
    """A scalar ``printkit`` entry is not a settings table."""
    assert extract_section(tmp_path / "printkit.toml", {"printkit": 3}) is None
    assert extract_section(tmp_path / "pyproject.toml", {"tool": {"printkit": {}}}) == {}


def test_malformed_toml(tmp_path: Path) -> None:
    """Parse errors are logged by default and raised in strict mode."""
    path = write(tmp_path / "printkit.toml", "[printkit\n")
    assert load_toml_dict(path) == {}
    with pytest.raises(ConfigError, match="cannot parse"):
        load_toml_dict(path, strict=True)


def test_unreadable_file(tmp_path: Path) -> None:
    """Missing files yield an empty table, or `ConfigError` in strict mode."""
    missing = tmp_path / "printkit.toml"
    assert load_toml_dict(missing) == {}
    with pytest.raises(ConfigError, match="cannot read"):
        load_config(missing, strict=True)


def test_discover_walks_up(tmp_path: Path) -> None:
    """The nearest configuration file above the start directory is found."""
    config = write(tmp_path / "printkit.toml", "[printkit]\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config(nested) == config.resolve()


def test_discover_prefers_printkit_toml(tmp_path: Path) -> None:
    """``printkit.toml`` wins over ``pyproject.toml`` in the same directory."""
    write(tmp_path / "pyproject.toml", "[tool.printkit]\n")
    config = write(tmp_path / "printkit.toml", "[printkit]\n")
    assert discover_config(tmp_path) == config.resolve()


def test_discover_skips_unrelated_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.printkit]`` does not stop the search."""
    outer = write(tmp_path / "pyproject.toml", "[tool.printkit]\nwide = true\n")
    write(tmp_path / "pkg" / "pyproject.toml", '[project]\nname = "pkg"\n')
    found = discover_config(tmp_path / "pkg")
    assert found == outer.resolve()
    assert found is not None
    assert load_config(found).wide is True
