"""Colored console output helpers.

Provides consistent, colored status lines for CLI applications. Color is
applied only when :func:`should_colorize` allows it, so redirected output
stays free of escape sequences.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import Any, TextIO

import structlog
from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.text import Text

logger = structlog.get_logger()


class ColorRole(StrEnum):
    """Semantic roles for colored output."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DIMMED = "dimmed"
    BOLD = "bold"


ROLE_STYLES: dict[ColorRole, str] = {
    ColorRole.SUCCESS: "green",
    ColorRole.ERROR: "red",
    ColorRole.WARNING: "yellow",
    ColorRole.INFO: "blue",
    ColorRole.DIMMED: "dim",
    ColorRole.BOLD: "bold",
}


def _color_enabled(stream: TextIO) -> bool:
    # Only the color settings are read, other output settings may be invalid
    from bel7_cli.config import COLOR_MODES, color_mode_from_env, stream_color_enabled

    mode = color_mode_from_env() or "auto"
    if mode not in COLOR_MODES:
        logger.debug("Ignoring unknown color mode", color=mode)
        mode = "auto"
    return stream_color_enabled(mode, stream)  # type: ignore[arg-type]


def should_colorize() -> bool:
    """Return True if output written to stdout should be colored."""
    return _color_enabled(sys.stdout)


def should_colorize_stderr() -> bool:
    """Return True if output written to stderr should be colored."""
    return _color_enabled(sys.stderr)


def colorize(text: str, role: ColorRole | str, enabled: bool | None = None) -> str:
    """Wrap ``text`` in the ANSI codes for ``role``.

    Args:
        text: Text to color.
        role: One of the :class:`ColorRole` values.
        enabled: Force color on or off. Defaults to :func:`should_colorize`.

    Returns:
        The styled text, or ``text`` unchanged when color is disabled.
    """
    if enabled is None:
        enabled = should_colorize()
    if not enabled:
        return text
    style = Style.parse(ROLE_STYLES[ColorRole(role)])
    return style.render(text, color_system=ColorSystem.STANDARD)


def format_success(value: Any) -> str:
    """Format a value as success (green)."""
    return colorize(str(value), ColorRole.SUCCESS)


def format_error(value: Any) -> str:
    """Format a value as error (red)."""
    return colorize(str(value), ColorRole.ERROR)


def format_warning(value: Any) -> str:
    """Format a value as warning (yellow)."""
    return colorize(str(value), ColorRole.WARNING)


def format_info(value: Any) -> str:
    """Format a value as info (blue)."""
    return colorize(str(value), ColorRole.INFO)


def format_dimmed(value: Any) -> str:
    """Format a value as dimmed/muted."""
    return colorize(str(value), ColorRole.DIMMED)


def format_bold(value: Any) -> str:
    """Format a value as bold."""
    return colorize(str(value), ColorRole.BOLD)


def get_console(stderr: bool = False) -> Console:
    """Create a console for the given stream honoring the color settings."""
    enabled = should_colorize_stderr() if stderr else should_colorize()
    return Console(
        stderr=stderr,
        highlight=False,
        force_terminal=enabled,
        no_color=not enabled,
    )


def _print_status(symbol: str, style: str, message: Any, stderr: bool = False) -> None:
    line = Text.assemble((symbol, style), " ", str(message))
    get_console(stderr=stderr).print(line, soft_wrap=True)


def print_success(message: Any) -> None:
    """Print a success message with a green checkmark prefix.

    Output: ``✓ Operation completed``
    """
    _print_status("✓", "bold green", message)


def print_error(message: Any) -> None:
    """Print an error message to stderr with a red X prefix.

    Output: ``✗ Something went wrong``
    """
    _print_status("✗", "bold red", message, stderr=True)


def print_warning(message: Any) -> None:
    """Print a warning message with a yellow exclamation prefix."""
    _print_status("!", "bold yellow", message)


def print_info(message: Any) -> None:
    """Print an info message with a blue arrow prefix."""
    _print_status("→", "bold blue", message)


def print_dimmed(message: Any) -> None:
    """Print a dimmed message, for secondary information or hints."""
    get_console().print(Text(str(message), style="dim"), soft_wrap=True)
