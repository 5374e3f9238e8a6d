# topmark:header:start
#
#   project      : Printkit
#   file         : color.py
#   file_relpath : src/printkit/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Click-independent color-mode resolution.

- ColorMode enum.
- Color-mode resolution based on explicit intent, environment, and output format.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.core.formats import OutputFormat, is_machine_format

logger: PrintkitLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: OutputFormat | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: CSV, JSON and YAML are never colored.
        2. **Override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Requested `ColorMode`; `None` means “not provided”.
        output_format: The selected output format.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER, output_format="table")
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json")
        False
    """
    if is_machine_format(output_format):
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.debug("Color mode resolved from TTY detection: %s", stdout_isatty)
    return bool(stdout_isatty)
