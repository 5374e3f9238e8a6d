# topmark:header:start
#
#   project      : Printkit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Pytest configuration for the Printkit test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `printkit.config.model.MutablePrinterConfig`, then
      `freeze()` into a `printkit.config.model.PrinterConfig`.
    - Do **not** mutate a frozen `PrinterConfig`. If you need to tweak one,
      call `PrinterConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from printkit.config import logging
from printkit.config.model import MutablePrinterConfig, PrinterConfig

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_printkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Printkit's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def neutral_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color-forcing variables so color resolution only sees test inputs."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> io.StringIO:
    """Return an in-memory text sink for printer output."""
    return io.StringIO()


def make_config(**overrides: Any) -> PrinterConfig:
    """Return a frozen `PrinterConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute values set on the mutable builder before freezing.

    Returns:
        PrinterConfig: The frozen configuration.
    """
    builder = MutablePrinterConfig()
    for key, value in overrides.items():
        setattr(builder, key, value)
    return builder.freeze()


@pytest.fixture
def config_factory() -> Callable[..., PrinterConfig]:
    """Return `make_config` for tests that need a tailored configuration."""
    return make_config
