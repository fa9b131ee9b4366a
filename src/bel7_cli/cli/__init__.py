"""Reference command line interface for bel7_cli."""
