"""Shared pytest fixtures for bel7_cli tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from bel7_cli.cli.main import app
from bel7_cli.testing import SHELL_DETECTION_ENV_VARS

# Variables that change color and interactivity decisions
OUTPUT_ENV_VARS = ("NO_COLOR", "FORCE_COLOR", "CLICOLOR_FORCE", "CI")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path]:
    """Provide a temporary directory for tests."""
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    # Clear any BEL7_ prefixed environment variables
    for key in list(os.environ.keys()):
        if key.startswith("BEL7_"):
            monkeypatch.delenv(key, raising=False)
    for key in (*OUTPUT_ENV_VARS, *SHELL_DETECTION_ENV_VARS):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Fixture to capture log output."""
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
