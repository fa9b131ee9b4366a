"""Shell completion script generation.

Scripts are produced through click's shell completion machinery, so a
program answers completion requests at runtime the same way it generated
the script. Click ships bash, zsh and fish support (typer adds PowerShell);
Elvish, Nushell and a PowerShell fallback are provided here.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from pathlib import PurePath
from typing import Any, TextIO

import click
import structlog
import typer
import typer.main
from click.shell_completion import (
    CompletionItem,
    ShellComplete,
    add_completion_class,
    get_completion_class,
    split_arg_string,
)

from bel7_cli.errors import ExitCode, UsageError

logger = structlog.get_logger()


class ParseShellError(UsageError, ValueError):
    """Exception raised when a shell name is not recognized.

    Attributes:
        input: The rejected shell name.
    """

    exit_code = ExitCode.USAGE

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown shell: {value}")
        self.input = value


class CompletionShell(StrEnum):
    """Shells that completion scripts can be generated for."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    ELVISH = "elvish"
    NUSHELL = "nushell"
    POWERSHELL = "powershell"

    @classmethod
    def default(cls) -> CompletionShell:
        """Return the shell assumed when none can be detected."""
        return cls.BASH

    @classmethod
    def all(cls) -> list[CompletionShell]:
        """Return all supported shells."""
        return list(cls)

    @classmethod
    def parse(cls, value: str) -> CompletionShell:
        """Parse a shell name case-insensitively, accepting ``nu`` and ``pwsh``.

        Raises:
            ParseShellError: If the name is not a supported shell.
        """
        shell = _SHELL_NAMES.get(value.strip().lower())
        if shell is None:
            raise ParseShellError(value)
        return shell

    @classmethod
    def detect(cls, environ: Mapping[str, str] | None = None) -> CompletionShell:
        """Detect the current shell from environment variables.

        Checks in order:
        1. ``NU_VERSION`` (set by Nushell)
        2. ``SHELL``, using the executable name from the path

        Falls back to bash if detection fails.
        """
        env = os.environ if environ is None else environ
        if "NU_VERSION" in env:
            return cls.NUSHELL

        shell_path = env.get("SHELL")
        if shell_path:
            shell = _SHELL_NAMES.get(PurePath(shell_path).name)
            if shell is not None:
                return shell
            logger.debug("Unrecognized shell, using default", shell=shell_path)
        return cls.default()


_SHELL_NAMES: dict[str, CompletionShell] = {
    "bash": CompletionShell.BASH,
    "zsh": CompletionShell.ZSH,
    "fish": CompletionShell.FISH,
    "elvish": CompletionShell.ELVISH,
    "nu": CompletionShell.NUSHELL,
    "nushell": CompletionShell.NUSHELL,
    "pwsh": CompletionShell.POWERSHELL,
    "powershell": CompletionShell.POWERSHELL,
}


class ShellParamType(click.ParamType):
    """Click parameter type for shell names, completing the supported shells."""

    name = "shell"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> CompletionShell:
        if isinstance(value, CompletionShell):
            return value
        try:
            return CompletionShell.parse(value)
        except ParseShellError as e:
            self.fail(str(e), param, ctx)

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        return [
            CompletionItem(shell.value)
            for shell in CompletionShell
            if shell.value.startswith(incomplete.lower())
        ]


class _CurrentWordComplete(ShellComplete):
    """Completion protocol where the shell passes the command line and the
    word under the cursor separately, in ``COMP_WORDS`` and ``COMP_INCOMPLETE``.
    """

    def get_completion_args(self) -> tuple[list[str], str]:
        cwords = split_arg_string(os.environ.get("COMP_WORDS", ""))
        incomplete = os.environ.get("COMP_INCOMPLETE", "")
        args = cwords[1:]
        if incomplete and args and args[-1] == incomplete:
            args = args[:-1]
        return args, incomplete

    def format_completion(self, item: CompletionItem) -> str:
        if item.help:
            return f"{item.value}\t{item.help}"
        return str(item.value)


class ElvishComplete(_CurrentWordComplete):
    """Shell completion for Elvish."""

    name = "elvish"
    source_template = """\
use str

set edit:completion:arg-completer[%(prog_name)s] = {|@words|
    tmp E:%(complete_var)s = elvish_complete
    tmp E:COMP_WORDS = (str:join ' ' $words)
    tmp E:COMP_INCOMPLETE = $words[-1]
    e:%(prog_name)s | from-lines | each {|line|
        var parts = [(str:split "\\t" $line)]
        if (> (count $parts) 1) {
            edit:complex-candidate $parts[0] &display=$parts[0]' '$parts[1]
        } else {
            edit:complex-candidate $parts[0]
        }
    }
}
"""


class NushellComplete(_CurrentWordComplete):
    """Shell completion for Nushell."""

    name = "nushell"
    source_template = """\
module %(complete_func)s {
    def "nu-complete %(prog_name)s" [context: string] {
        let words = ($context | split row " ")
        with-env {
            %(complete_var)s: "nushell_complete"
            COMP_WORDS: $context
            COMP_INCOMPLETE: ($words | last)
        } { ^%(prog_name)s } | lines | each {|line|
            let parts = ($line | split row "\\t")
            let description = if ($parts | length) > 1 { $parts.1 } else { "" }
            { value: ($parts | first), description: $description }
        }
    }

    export extern "%(prog_name)s" [
        ...args: string@"nu-complete %(prog_name)s"
    ]
}

use %(complete_func)s *
"""


class PowerShellComplete(_CurrentWordComplete):
    """Shell completion for PowerShell, used when no other class is registered."""

    name = "powershell"
    source_template = """\
Register-ArgumentCompleter -Native -CommandName %(prog_name)s -ScriptBlock {
    param($wordToComplete, $commandAst, $cursorPosition)
    $commandLine = $commandAst.ToString()
    $cursor = [Math]::Min($cursorPosition - $commandAst.Extent.StartOffset, $commandLine.Length)
    $Env:%(complete_var)s = "powershell_complete"
    $Env:COMP_WORDS = $commandLine.Substring(0, $cursor)
    $Env:COMP_INCOMPLETE = $wordToComplete
    %(prog_name)s | ForEach-Object {
        $value, $description = $_ -split "`t", 2
        if (-not $description) { $description = $value }
        [System.Management.Automation.CompletionResult]::new(
            $value, $value, 'ParameterValue', $description
        )
    }
    Remove-Item Env:%(complete_var)s, Env:COMP_WORDS, Env:COMP_INCOMPLETE
}
"""


def register_completion_classes() -> None:
    """Register completion classes for shells click does not know about.

    Classes registered by click or typer take precedence.
    """
    for complete_class in (ElvishComplete, NushellComplete, PowerShellComplete):
        if get_completion_class(complete_class.name) is None:
            add_completion_class(complete_class)


register_completion_classes()


def complete_var_for(bin_name: str) -> str:
    """Return the environment variable a program reads completion requests from."""
    return f"_{bin_name}_COMPLETE".replace("-", "_").upper()


def generate_completions(
    shell: CompletionShell | str,
    command: click.Command | typer.Typer,
    bin_name: str,
    out: TextIO | None = None,
) -> str:
    """Generate a shell completion script.

    Args:
        shell: Target shell.
        command: The click command or typer application to complete.
        bin_name: Name the program is invoked as.
        out: Optional stream the script is also written to.

    Returns:
        The completion script.

    Raises:
        ParseShellError: If ``shell`` is not a supported shell name.
    """
    shell = shell if isinstance(shell, CompletionShell) else CompletionShell.parse(shell)
    if isinstance(command, typer.Typer):
        command = typer.main.get_command(command)

    # Lookup after conversion, typer registers its own classes while converting
    complete_class = get_completion_class(shell.value)
    if complete_class is None:
        register_completion_classes()
        complete_class = get_completion_class(shell.value)
    if complete_class is None:
        raise ParseShellError(shell.value)

    logger.debug(
        "Generating completions",
        shell=shell.value,
        bin_name=bin_name,
        generator=complete_class.__name__,
    )
    script = complete_class(command, {}, bin_name, complete_var_for(bin_name)).source()
    if out is not None:
        out.write(script)
    return script


def generate_completions_to_stdout(
    shell: CompletionShell | str,
    command: click.Command | typer.Typer,
    bin_name: str,
) -> None:
    """Generate a shell completion script and write it to stdout."""
    click.echo(generate_completions(shell, command, bin_name), nl=False)
