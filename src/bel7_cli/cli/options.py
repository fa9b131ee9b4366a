"""Shared Typer option annotations.

Commands built on bel7_cli declare the common output flags with these
annotations so that names, short flags and help texts stay uniform.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from bel7_cli.completions import CompletionShell, ShellParamType
from bel7_cli.output.table import TableStyle

TableStyleOption = Annotated[
    TableStyle | None,
    typer.Option(
        "--table-style",
        "-s",
        help="Table border style.",
        case_sensitive=False,
        envvar="BEL7_TABLE_STYLE",
    ),
]

ColumnsOption = Annotated[
    str | None,
    typer.Option(
        "--columns",
        "-c",
        help="Comma-separated list of columns to display, in order.",
    ),
]

NoHeadersOption = Annotated[
    bool,
    typer.Option(
        "--no-headers",
        help="Omit the column header row.",
    ),
]

ShellArgument = Annotated[
    CompletionShell | None,
    typer.Argument(
        help="Shell to generate completions for. Detected from the environment if omitted.",
        click_type=ShellParamType(),
        show_default=False,
    ),
]

BinNameOption = Annotated[
    str | None,
    typer.Option(
        "--bin-name",
        help="Program name to complete. Defaults to the running program's name.",
    ),
]

LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Also write JSON logs to this file.",
        dir_okay=False,
    ),
]
