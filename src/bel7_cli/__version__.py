"""Version information for bel7_cli."""

__version__ = "0.6.0"
