"""Console and table output utilities.

This package provides consistent output formatting for CLI commands:
colored status lines, table styles and column projection.

Usage:
    from bel7_cli.output import StyledTable, TableStyle, parse_columns

    table = StyledTable().style(TableStyle.SHARP).build(rows, parse_columns("name,port"))
    console.print(table)
"""

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
from bel7_cli.output.records import TableRecord, TableRow, format_cell
from bel7_cli.output.table import (
    DEFAULT_TERMINAL_WIDTH,
    StyledTable,
    Table,
    TableStyle,
    build_table_with_columns,
    display_option,
    display_option_or,
    parse_columns,
    project_columns,
    render_table,
    responsive_width,
    terminal_width,
)

__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "ColorRole",
    "StyledTable",
    "Table",
    "TableRecord",
    "TableRow",
    "TableStyle",
    "build_table_with_columns",
    "colorize",
    "display_option",
    "display_option_or",
    "format_bold",
    "format_cell",
    "format_dimmed",
    "format_error",
    "format_info",
    "format_success",
    "format_warning",
    "get_console",
    "parse_columns",
    "print_dimmed",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "project_columns",
    "render_table",
    "responsive_width",
    "should_colorize",
    "should_colorize_stderr",
    "terminal_width",
]
