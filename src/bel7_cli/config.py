"""Output configuration with environment variable overrides."""

from __future__ import annotations

import os
from typing import Any, Literal, TextIO, get_args

from pydantic import BaseModel, ConfigDict, field_validator

from bel7_cli.output.table import DEFAULT_TERMINAL_WIDTH, TableStyle

ColorMode = Literal["auto", "always", "never"]
COLOR_MODES: tuple[str, ...] = get_args(ColorMode)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable, ``None`` when unset or empty."""
    value = os.environ.get(name)
    if not value:
        return None
    return value.strip().lower() in _TRUTHY


def color_mode_from_env() -> str | None:
    """Read the color override from the environment.

    ``BEL7_COLOR`` wins, then ``NO_COLOR`` (never), then ``FORCE_COLOR`` or
    ``CLICOLOR_FORCE`` (always, unless "0"). The ``BEL7_COLOR`` value is
    returned lowercased but unvalidated. Returns ``None`` when nothing is set.
    """
    if color := os.environ.get("BEL7_COLOR"):
        return color.strip().lower()
    if os.environ.get("NO_COLOR"):
        return "never"
    if any(
        os.environ.get(var) not in (None, "", "0") for var in ("FORCE_COLOR", "CLICOLOR_FORCE")
    ):
        return "always"
    return None


def stream_color_enabled(mode: ColorMode, stream: TextIO) -> bool:
    """Resolve a color mode for ``stream``.

    ``auto`` enables color only when the stream is a terminal.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class OutputConfig(BaseModel):
    """Console output configuration."""

    model_config = ConfigDict(extra="forbid")

    color: ColorMode = "auto"
    table_style: TableStyle = TableStyle.MODERN
    fallback_width: int = DEFAULT_TERMINAL_WIDTH
    width_utilization: float = 0.85
    quiet: bool = False
    non_interactive: bool = False

    @field_validator("fallback_width")
    @classmethod
    def validate_fallback_width(cls, v: int) -> int:
        """Validate fallback width is positive."""
        if v <= 0:
            raise ValueError("fallback_width must be positive")
        return v

    @field_validator("width_utilization")
    @classmethod
    def validate_width_utilization(cls, v: float) -> float:
        """Validate utilization is a fraction of the terminal width."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("width_utilization must be between 0.0 and 1.0")
        return v

    @field_validator("table_style", mode="before")
    @classmethod
    def normalize_table_style(cls, v: Any) -> Any:
        """Accept table style names case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> OutputConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            BEL7_COLOR: Color mode (auto, always, never)
            NO_COLOR: Any non-empty value disables color
            FORCE_COLOR / CLICOLOR_FORCE: Any non-empty value other than "0"
                forces color (ignored when NO_COLOR is set)
            BEL7_TABLE_STYLE: Default table style name
            BEL7_QUIET: Suppress progress output
            BEL7_NON_INTERACTIVE: Use line based progress output
            CI: Any non-empty value implies non-interactive output
        """
        config_dict = base_config.copy() if base_config else {}

        if (color := color_mode_from_env()) is not None:
            config_dict["color"] = color

        if table_style := os.environ.get("BEL7_TABLE_STYLE"):
            config_dict["table_style"] = table_style

        if (quiet := _env_flag("BEL7_QUIET")) is not None:
            config_dict["quiet"] = quiet

        if (non_interactive := _env_flag("BEL7_NON_INTERACTIVE")) is not None:
            config_dict["non_interactive"] = non_interactive
        elif os.environ.get("CI"):
            config_dict["non_interactive"] = True

        return cls.model_validate(config_dict)

    def color_enabled(self, stream: TextIO) -> bool:
        """Resolve the color mode for ``stream``."""
        return stream_color_enabled(self.color, stream)
