"""Main CLI entry point using Typer."""

from __future__ import annotations

import click
import typer
from pydantic import Field
from rich.console import Console

from bel7_cli import __version__
from bel7_cli.cli.options import (
    BinNameOption,
    ColumnsOption,
    LogFileOption,
    NoHeadersOption,
    ShellArgument,
    TableStyleOption,
)
from bel7_cli.completions import CompletionShell, generate_completions_to_stdout
from bel7_cli.config import OutputConfig
from bel7_cli.errors import exit_code_for, run_with_exit_code
from bel7_cli.logging.config import configure_logging, get_logger
from bel7_cli.output.console import get_console
from bel7_cli.output.records import TableRow
from bel7_cli.output.table import StyledTable, TableStyle, parse_columns

APP_NAME = "bel7"

app = typer.Typer(
    name=APP_NAME,
    help="Showcase and utilities for the bel7 CLI toolkit.",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


class StyleInfo(TableRow):
    """A row of the table style catalogue."""

    name: str = Field(title="Name")
    description: str = Field(title="Description")
    ascii_only: bool = Field(title="ASCII")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"{APP_NAME} version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    log_file: LogFileOption = None,
) -> None:
    """bel7 - table styles, shell completions and other CLI conveniences."""
    configure_logging(verbose=verbose, debug=debug, log_file=log_file)


@app.command()
def completions(
    ctx: typer.Context,
    shell: ShellArgument = None,
    bin_name: BinNameOption = None,
) -> None:
    """Print a shell completion script for this program."""
    if shell is None:
        shell = CompletionShell.detect()
        logger.debug("Detected shell", shell=shell.value)
    name = bin_name or ctx.find_root().info_name or APP_NAME
    generate_completions_to_stdout(shell, app, name)


@app.command()
def styles(
    table_style: TableStyleOption = None,
    columns: ColumnsOption = None,
    no_headers: NoHeadersOption = False,
) -> None:
    """Show the available table styles, rendered in the selected style."""
    config = OutputConfig.from_env()
    style = table_style or config.table_style

    rows = [
        StyleInfo(
            name=option.value,
            description=option.description,
            ascii_only=option.box is None or option.box.ascii,
        )
        for option in TableStyle
    ]

    builder = StyledTable().style(style).header(f"Table styles ({style.value})")
    if no_headers:
        builder.remove_header_row()

    selected = parse_columns(columns) if columns else None
    table = builder.build(rows, selected, record_type=StyleInfo)
    get_console().print(table)


def run() -> None:
    """Console script entry point mapping failures to sysexits codes."""

    def invoke() -> None:
        try:
            result = app(prog_name=APP_NAME, standalone_mode=False)
        except click.ClickException as e:
            e.show()
            raise SystemExit(int(exit_code_for(e))) from e
        if isinstance(result, int) and result != 0:
            raise SystemExit(result)

    run_with_exit_code(invoke)


if __name__ == "__main__":
    run()
