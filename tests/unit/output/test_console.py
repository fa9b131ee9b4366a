"""Tests for colored console output helpers."""

from __future__ import annotations

import pytest

from bel7_cli.output import console as console_module
from bel7_cli.output.console import (
    ColorRole,
    colorize,
    format_bold,
    format_dimmed,
    format_error,
    format_info,
    format_success,
    format_warning,
    get_console,
    print_dimmed,
    print_error,
    print_info,
    print_success,
    print_warning,
    should_colorize,
    should_colorize_stderr,
)


@pytest.mark.unit
class TestShouldColorize:
    """Tests for color mode resolution."""

    def test_not_a_terminal_by_default(self) -> None:
        """Captured output is not a terminal, so auto mode disables color."""
        assert should_colorize() is False
        assert should_colorize_stderr() is False

    def test_forced_on(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEL7_COLOR", "always")
        assert should_colorize() is True
        assert should_colorize_stderr() is True

    def test_no_color_wins_over_force_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert should_colorize() is False

    def test_force_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert should_colorize() is True

    def test_ignores_invalid_table_style(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEL7_TABLE_STYLE", "fancy")
        monkeypatch.setenv("BEL7_COLOR", "always")
        assert should_colorize() is True

    def test_unknown_color_mode_falls_back_to_auto(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BEL7_COLOR", "rainbow")
        assert should_colorize() is False
        assert colorize("hi", ColorRole.SUCCESS) == "hi"


@pytest.mark.unit
class TestColorize:
    """Tests for colorize and the format_* helpers."""

    def test_disabled_returns_text_unchanged(self) -> None:
        assert colorize("ok", ColorRole.SUCCESS, enabled=False) == "ok"

    @pytest.mark.parametrize(
        ("role", "code"),
        [
            (ColorRole.SUCCESS, "32"),
            (ColorRole.ERROR, "31"),
            (ColorRole.WARNING, "33"),
            (ColorRole.INFO, "34"),
            (ColorRole.DIMMED, "2"),
            (ColorRole.BOLD, "1"),
        ],
    )
    def test_enabled_wraps_in_ansi_codes(self, role: ColorRole, code: str) -> None:
        result = colorize("text", role, enabled=True)
        assert result.startswith(f"\x1b[{code}m")
        assert "text" in result
        assert result.endswith("\x1b[0m")

    def test_role_by_name(self) -> None:
        assert colorize("x", "error", enabled=True) == colorize("x", ColorRole.ERROR, enabled=True)

    def test_unknown_role(self) -> None:
        with pytest.raises(ValueError):
            colorize("x", "sparkly", enabled=True)

    def test_format_helpers_plain_without_terminal(self) -> None:
        for formatter in (
            format_success,
            format_error,
            format_warning,
            format_info,
            format_dimmed,
            format_bold,
        ):
            assert formatter(42) == "42"

    def test_format_helpers_colored_when_forced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEL7_COLOR", "always")
        assert format_success("done") == colorize("done", ColorRole.SUCCESS, enabled=True)
        assert format_error("failed") == colorize("failed", ColorRole.ERROR, enabled=True)


@pytest.mark.unit
class TestPrintHelpers:
    """Tests for the status line printers."""

    def test_print_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_success("Operation completed")
        assert capsys.readouterr().out == "✓ Operation completed\n"

    def test_print_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Something went wrong")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✗ Something went wrong\n"

    def test_print_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_warning("Careful")
        assert capsys.readouterr().out == "! Careful\n"

    def test_print_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_info("Processing")
        assert capsys.readouterr().out == "→ Processing\n"

    def test_print_dimmed(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_dimmed("hint")
        assert capsys.readouterr().out == "hint\n"

    def test_invalid_table_style_does_not_break_printing(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BEL7_TABLE_STYLE", "fancy")
        assert colorize("hi", ColorRole.SUCCESS) == "hi"
        print_success("done")
        print_error("failed")
        captured = capsys.readouterr()
        assert captured.out == "✓ done\n"
        assert captured.err == "✗ failed\n"

    def test_markup_is_not_interpreted(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_info("[bold]literal[/bold]")
        assert "[bold]literal[/bold]" in capsys.readouterr().out

    def test_get_console_honors_color_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert get_console().no_color is True
        monkeypatch.setenv("BEL7_COLOR", "always")
        assert get_console(stderr=True).no_color is False
        assert get_console(stderr=True).stderr is True

    def test_role_styles_cover_all_roles(self) -> None:
        assert set(console_module.ROLE_STYLES) == set(ColorRole)
