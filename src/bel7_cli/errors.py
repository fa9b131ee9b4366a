"""CLI error types and exit code mapping.

Exit codes follow the BSD ``sysexits.h`` conventions so that scripts calling
a command can tell a usage mistake from missing input or a transient outage.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import IntEnum
from typing import Any, NoReturn, Protocol, runtime_checkable

import click
import structlog
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Process exit codes as defined by ``sysexits.h``."""

    OK = 0
    USAGE = 64
    DATAERR = 65
    NOINPUT = 66
    NOUSER = 67
    NOHOST = 68
    UNAVAILABLE = 69
    SOFTWARE = 70
    OSERR = 71
    OSFILE = 72
    CANTCREAT = 73
    IOERR = 74
    TEMPFAIL = 75
    PROTOCOL = 76
    NOPERM = 77
    CONFIG = 78


@runtime_checkable
class ExitCodeProvider(Protocol):
    """Anything that knows which exit code it should terminate the process with."""

    exit_code: ExitCode


class CliError(Exception):
    """Base exception for user-facing CLI errors.

    Attributes:
        message: Human-readable error message.
        exit_code: Exit code the process should terminate with.
    """

    exit_code: ExitCode = ExitCode.SOFTWARE

    def __init__(self, message: str, *, exit_code: ExitCode | None = None) -> None:
        """Initialize CliError.

        Args:
            message: Human-readable error message.
            exit_code: Overrides the class default exit code.
        """
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class UsageError(CliError):
    """Command line usage was incorrect."""

    exit_code = ExitCode.USAGE


class DataError(CliError):
    """User supplied data was malformed."""

    exit_code = ExitCode.DATAERR


class NoInputError(CliError):
    """An input file or resource did not exist or was unreadable."""

    exit_code = ExitCode.NOINPUT


class PermissionDeniedError(CliError):
    """The user lacked permission for the requested operation."""

    exit_code = ExitCode.NOPERM


class ConfigError(CliError):
    """Configuration was missing or invalid."""

    exit_code = ExitCode.CONFIG


class IoError(CliError):
    """An error occurred while doing I/O."""

    exit_code = ExitCode.IOERR


class SystemFailureError(CliError):
    """An operating system error, such as failing to fork."""

    exit_code = ExitCode.OSERR


class ServiceUnavailableError(CliError):
    """A required service is not available."""

    exit_code = ExitCode.UNAVAILABLE


class TemporaryFailureError(CliError):
    """A temporary failure; retrying later may succeed."""

    exit_code = ExitCode.TEMPFAIL


class ProtocolError(CliError):
    """A remote peer violated the expected protocol."""

    exit_code = ExitCode.PROTOCOL


# Checked in order, so subclasses must precede their bases.
_BUILTIN_EXIT_CODES: tuple[tuple[type[BaseException], ExitCode], ...] = (
    (click.UsageError, ExitCode.USAGE),
    (FileNotFoundError, ExitCode.NOINPUT),
    (PermissionError, ExitCode.NOPERM),
    (ConnectionError, ExitCode.UNAVAILABLE),
    (TimeoutError, ExitCode.TEMPFAIL),
    (OSError, ExitCode.IOERR),
    (ValidationError, ExitCode.DATAERR),
    (ValueError, ExitCode.DATAERR),
)


def exit_code_for(error: BaseException) -> ExitCode:
    """Map an exception to the exit code the process should use.

    Args:
        error: The exception to classify.

    Returns:
        The error's own code for ``ExitCodeProvider`` instances, a code for
        well-known builtin exceptions, and ``ExitCode.SOFTWARE`` otherwise.
    """
    # click exceptions carry their own non-sysexits integer codes
    if isinstance(error, ExitCodeProvider) and error.exit_code in set(ExitCode):
        return ExitCode(error.exit_code)
    for error_type, code in _BUILTIN_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.SOFTWARE


def run_with_exit_code(func: Callable[[], Any]) -> NoReturn:
    """Run ``func`` and terminate the process with a matching exit code.

    Exits with ``ExitCode.OK`` when ``func`` returns. Any exception is
    reported on stderr as ``Error: <message>`` and mapped through
    :func:`exit_code_for`.

    Usage:
        def real_main() -> None:
            ...

        if __name__ == "__main__":
            run_with_exit_code(real_main)
    """
    try:
        func()
    except Exception as e:
        code = exit_code_for(e)
        logger.debug("Command failed", error=str(e), exit_code=int(code), exc_info=True)
        Console(stderr=True, highlight=False).print(Text(f"Error: {e}"))
        sys.exit(int(code))
    sys.exit(int(ExitCode.OK))
