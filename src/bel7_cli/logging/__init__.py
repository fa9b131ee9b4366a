"""Logging configuration for bel7_cli."""

from bel7_cli.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
