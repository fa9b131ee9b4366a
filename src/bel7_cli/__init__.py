"""bel7_cli - reusable conveniences for command line applications.

Colored console output, string truncation, table styling and column
projection, progress reporting, shell completion generation, parameter
accessors and sysexits-style exit codes.
"""

from bel7_cli.__version__ import __version__
from bel7_cli.completions import (
    CompletionShell,
    ParseShellError,
    generate_completions,
    generate_completions_to_stdout,
)
from bel7_cli.errors import CliError, ExitCode, exit_code_for, run_with_exit_code
from bel7_cli.params import ArgParseError, MissingArgumentError, ParamsAccessor
from bel7_cli.progress import (
    DownloadReporter,
    InteractiveReporter,
    NonInteractiveReporter,
    ProgressReporter,
    QuietReporter,
    SpinnerReporter,
    select_reporter,
)
from bel7_cli.truncate import (
    DEFAULT_TRUNCATION_SUFFIX,
    truncate_middle,
    truncate_string,
    truncate_with_suffix,
)

__all__ = [
    "DEFAULT_TRUNCATION_SUFFIX",
    "ArgParseError",
    "CliError",
    "CompletionShell",
    "DownloadReporter",
    "ExitCode",
    "InteractiveReporter",
    "MissingArgumentError",
    "NonInteractiveReporter",
    "ParamsAccessor",
    "ParseShellError",
    "ProgressReporter",
    "QuietReporter",
    "SpinnerReporter",
    "__version__",
    "exit_code_for",
    "generate_completions",
    "generate_completions_to_stdout",
    "run_with_exit_code",
    "select_reporter",
    "truncate_middle",
    "truncate_string",
    "truncate_with_suffix",
]
