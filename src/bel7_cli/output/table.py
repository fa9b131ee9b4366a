"""Table output for CLI commands.

This module provides a Table class that wraps Rich's Table with sensible
defaults, a closed set of border styles, a builder for styled tables and
column projection for ``--columns`` style options.
"""

from __future__ import annotations

import io
import shutil
from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

import structlog
from rich import box
from rich.console import Console
from rich.table import Table as RichTable

from bel7_cli.output.records import (
    TableRecord,
    record_headers,
    record_values,
    resolve_record_type,
)

if TYPE_CHECKING:
    from rich.console import ConsoleRenderable, RichCast
    from rich.padding import PaddingDimensions
    from rich.style import Style

logger = structlog.get_logger()

OverflowMethod = Literal["fold", "crop", "ellipsis", "ignore"]
JustifyMethod = Literal["default", "left", "center", "right", "full"]
VerticalAlignMethod = Literal["top", "middle", "bottom"]

# Default terminal width when detection fails
DEFAULT_TERMINAL_WIDTH = 120


class Table(RichTable):
    """Rich Table with sensible defaults for CLI output.

    Key difference: columns use overflow="fold" by default to wrap text
    instead of truncating.

    Usage:
        from bel7_cli.output import Table

        table = Table(title="My Table")
        table.add_column("Name")  # Will wrap long text by default
        table.add_column("ID", no_wrap=True)  # Override to disable wrapping
        table.add_row("example-name", "abc123")

    Setting ``width`` caps the table instead of stretching it: narrower
    tables keep their natural width unless ``expand`` is set explicitly.
    """

    @property
    def expand(self) -> bool:
        """Expand only when asked to, never because a width cap is set."""
        return self._expand

    @expand.setter
    def expand(self, expand: bool) -> None:
        self._expand = expand

    def add_column(
        self,
        header: ConsoleRenderable | RichCast | str = "",
        footer: ConsoleRenderable | RichCast | str = "",
        *,
        header_style: Style | str | None = None,
        highlight: bool | None = None,
        footer_style: Style | str | None = None,
        style: Style | str | None = None,
        justify: JustifyMethod = "default",
        vertical: VerticalAlignMethod = "top",
        overflow: OverflowMethod = "fold",
        width: int | None = None,
        min_width: int | None = None,
        max_width: int | None = None,
        ratio: int | None = None,
        no_wrap: bool = False,
    ) -> None:
        """Add a column with overflow="fold" by default.

        Args:
            header: Column header text or renderable.
            footer: Column footer text or renderable.
            header_style: Style for the header.
            highlight: Enable syntax highlighting.
            footer_style: Style for the footer.
            style: Style for the column cells.
            justify: How to justify cell contents.
            vertical: Vertical alignment of cell contents.
            overflow: How to handle text overflow. Defaults to "fold" (wrap text).
            width: Fixed column width.
            min_width: Minimum column width.
            max_width: Maximum column width.
            ratio: Ratio for flexible column sizing.
            no_wrap: Disable text wrapping.
        """
        super().add_column(
            header,
            footer,
            header_style=header_style,
            highlight=highlight,
            footer_style=footer_style,
            style=style,
            justify=justify,
            vertical=vertical,
            overflow=overflow,
            width=width,
            min_width=min_width,
            max_width=max_width,
            ratio=ratio,
            no_wrap=no_wrap,
        )


def terminal_width(fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Return the current terminal width in columns, or ``fallback``."""
    return shutil.get_terminal_size(fallback=(fallback, 24)).columns


def responsive_width(utilization: float, fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Return a table width as a fraction of the terminal width.

    Args:
        utilization: Share of the terminal to use, clamped to 0.0-1.0.
            0.85 leaves a comfortable margin.
        fallback: Terminal width to assume when detection fails.
    """
    utilization = min(max(utilization, 0.0), 1.0)
    return int(terminal_width(fallback) * utilization)


# psql-style: no outer frame, "-+-" under the header
PSQL = box.Box(
    "    \n"
    "  | \n"
    " -+ \n"
    "  | \n"
    " -+ \n"
    " -+ \n"
    "  | \n"
    "    \n",
    ascii=True,
)

DOTS = box.Box(
    "....\n"
    ": ::\n"
    ":.::\n"
    ": ::\n"
    ":.::\n"
    ":.::\n"
    ": ::\n"
    ":.::\n",
    ascii=True,
)


class TableStyle(StrEnum):
    """Available table border styles."""

    MODERN = "modern"
    BORDERLESS = "borderless"
    MARKDOWN = "markdown"
    SHARP = "sharp"
    ASCII = "ascii"
    PSQL = "psql"
    DOTS = "dots"

    @property
    def box(self) -> box.Box | None:
        """Return the box characters for this style, None for no borders."""
        return _STYLE_BOXES[self]

    @property
    def description(self) -> str:
        """Return a short human-readable description of this style."""
        return _STYLE_DESCRIPTIONS[self]

    def apply(self, table: RichTable) -> None:
        """Apply this style to a table."""
        table.box = self.box
        table.show_edge = self is not TableStyle.PSQL


_STYLE_BOXES: dict[TableStyle, box.Box | None] = {
    TableStyle.MODERN: box.ROUNDED,
    TableStyle.BORDERLESS: None,
    TableStyle.MARKDOWN: box.MARKDOWN,
    TableStyle.SHARP: box.SQUARE,
    TableStyle.ASCII: box.ASCII,
    TableStyle.PSQL: PSQL,
    TableStyle.DOTS: DOTS,
}

_STYLE_DESCRIPTIONS: dict[TableStyle, str] = {
    TableStyle.MODERN: "Rounded corners (default)",
    TableStyle.BORDERLESS: "No borders, space separated",
    TableStyle.MARKDOWN: "Markdown table syntax",
    TableStyle.SHARP: "Sharp corners with box-drawing characters",
    TableStyle.ASCII: "ASCII characters only",
    TableStyle.PSQL: "psql-style output",
    TableStyle.DOTS: "Dotted borders",
}


def display_option(value: object | None) -> str:
    """Format an optional value for a table cell, empty for None."""
    return "" if value is None else str(value)


def display_option_or(value: object | None, default: str) -> str:
    """Format an optional value for a table cell with a default."""
    return default if value is None else str(value)


def parse_columns(columns_arg: str) -> list[str]:
    """Parse a comma-separated column list into lowercase column names.

    Whitespace is trimmed and empty entries are dropped. Order and
    duplicates are preserved.

    Example:
        >>> parse_columns("Name, VALUE ,,status")
        ['name', 'value', 'status']
    """
    return [column for part in columns_arg.split(",") if (column := part.strip().lower())]


def project_columns(
    data: Sequence[TableRecord],
    columns: Sequence[str],
    record_type: type[TableRecord] | None = None,
) -> tuple[list[str], list[list[str]]]:
    """Select and reorder record fields by column name.

    Columns are matched case-insensitively against the record headers, each
    against the first header with that name. Unknown columns are dropped.

    Args:
        data: Records of a single record type.
        columns: Requested column names, typically from :func:`parse_columns`.
        record_type: Record type to take headers from. Defaults to the type
            of the first record; required to resolve headers for empty data.

    Returns:
        The header row (matched column names, lowercased, in request order) and one row
        of cell values per record.
    """
    resolved = resolve_record_type(data, record_type)
    headers = [header.lower() for header in record_headers(resolved)] if resolved else []

    matched: list[tuple[int, str]] = []
    unknown: list[str] = []
    for column in columns:
        name = column.lower()
        try:
            matched.append((headers.index(name), name))
        except ValueError:
            unknown.append(column)

    if unknown:
        logger.debug("Ignoring unknown table columns", columns=unknown, available=headers)

    header_row = [column for _, column in matched]
    rows = []
    for record in data:
        values = record_values(record)
        rows.append([values[index] for index, _ in matched])
    return header_row, rows


def build_table_with_columns(
    data: Sequence[TableRecord],
    columns: Sequence[str],
    record_type: type[TableRecord] | None = None,
) -> Table:
    """Build a table with only the specified columns.

    Columns are matched case-insensitively. Unknown columns are ignored.
    """
    header_row, rows = project_columns(data, columns, record_type)
    table = Table()
    for header in header_row:
        table.add_column(header)
    for row in rows:
        table.add_row(*row)
    return table


def render_table(table: RichTable, width: int | None = None, color: bool = False) -> str:
    """Render a table to text.

    Args:
        table: Table to render.
        width: Console width to render at. Defaults to the terminal width.
        color: Include ANSI styling in the output.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width or terminal_width(),
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
    )
    console.print(table)
    return buffer.getvalue()


class StyledTable:
    """A builder for styled tables.

    Options are applied in a fixed order: style, padding, header row
    removal, header panel, newline replacement, column wrapping and finally
    max width truncation.

    Usage:
        table = (
            StyledTable()
            .style(TableStyle.PSQL)
            .header("Services")
            .replace_newlines(",")
            .build(services)
        )
        console.print(table)
    """

    def __init__(self) -> None:
        self._style = TableStyle.MODERN
        self._header: str | None = None
        self._remove_header_row = False
        self._padding: PaddingDimensions | None = None
        self._newline_replacement: str | None = None
        self._max_width: int | None = None
        self._wrap_column: tuple[int, int] | None = None

    def style(self, style: TableStyle | str) -> StyledTable:
        """Set the table style."""
        self._style = TableStyle(style)
        return self

    def header(self, header: str) -> StyledTable:
        """Set a header panel above the table."""
        self._header = header
        return self

    def remove_header_row(self) -> StyledTable:
        """Remove the column headers.

        Useful for scriptable output where headers are noise.
        """
        self._remove_header_row = True
        return self

    def padding(self, padding: PaddingDimensions) -> StyledTable:
        """Set cell padding as (top, right, bottom, left) or a CSS-style shorthand."""
        self._padding = padding
        return self

    def replace_newlines(self, replacement: str) -> StyledTable:
        """Replace newlines in cell content with ``replacement``.

        A replacement of "," turns multi-line values into comma-separated lists.
        """
        self._newline_replacement = replacement
        return self

    def wrap_column(self, column_index: int, width: int) -> StyledTable:
        """Wrap a column (0-based index) at ``width`` characters."""
        self._wrap_column = (column_index, width)
        return self

    def max_width(self, width: int) -> StyledTable:
        """Truncate cells so the whole table fits in ``width`` characters.

        Tables already narrower than ``width`` are left as they are.
        """
        self._max_width = width
        return self

    def build(
        self,
        data: Sequence[TableRecord],
        columns: Sequence[str] | None = None,
        record_type: type[TableRecord] | None = None,
    ) -> Table:
        """Build the final table from the provided records.

        Args:
            data: Records of a single record type.
            columns: Optional column selection, see :func:`project_columns`.
            record_type: Record type used for headers when ``data`` is empty.
        """
        if columns is not None:
            headers, rows = project_columns(data, columns, record_type)
        else:
            resolved = resolve_record_type(data, record_type)
            headers = record_headers(resolved) if resolved else []
            rows = [record_values(record) for record in data]

        table = Table()
        self._style.apply(table)

        if self._padding is not None:
            table.padding = self._padding

        # Remove column headers before adding panel header
        if self._remove_header_row:
            table.show_header = False

        title = self._header

        if self._newline_replacement is not None:
            replacement = self._newline_replacement
            headers = [header.replace("\n", replacement) for header in headers]
            rows = [[cell.replace("\n", replacement) for cell in row] for row in rows]
            if title is not None:
                title = title.replace("\n", replacement)

        table.title = title

        for header in headers:
            table.add_column(header)

        wrap_index = None
        if self._wrap_column is not None:
            wrap_index, wrap_width = self._wrap_column
            if wrap_index < len(table.columns):
                column = table.columns[wrap_index]
                column.max_width = wrap_width
                column.overflow = "fold"
                column.no_wrap = False

        if self._max_width is not None:
            table.width = self._max_width
            for index, column in enumerate(table.columns):
                if index != wrap_index:
                    column.no_wrap = True
                    column.overflow = "ellipsis"

        for row in rows:
            table.add_row(*row)
        return table

    def render(
        self,
        data: Sequence[TableRecord],
        columns: Sequence[str] | None = None,
        record_type: type[TableRecord] | None = None,
        width: int | None = None,
    ) -> str:
        """Build the table and render it to text."""
        return render_table(self.build(data, columns, record_type), width=width)
