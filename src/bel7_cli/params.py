"""Accessor helpers for parsed command line parameters.

Wraps the parameter mapping of a click (or typer) context with typed,
name-based accessors so that command bodies do not have to repeat the same
lookups and conversions.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import click

from bel7_cli.errors import ExitCode, UsageError

T = TypeVar("T")


class ArgParseError(UsageError):
    """Exception raised when an argument value cannot be converted.

    Attributes:
        name: The argument name that failed to parse.
        message: Description of the failure.
    """

    exit_code = ExitCode.USAGE

    def __init__(self, name: str, message: str) -> None:
        """Initialize ArgParseError.

        Args:
            name: The argument name that failed to parse.
            message: Description of the failure.
        """
        super().__init__(message)
        self.name = name

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"Invalid value for '{self.name}': {self.message}"


class MissingArgumentError(ArgParseError):
    """Exception raised when a required argument was not provided."""

    def __init__(self, name: str) -> None:
        super().__init__(name, "required argument not provided")


class ParamsAccessor:
    """Typed accessors over a mapping of parsed parameters.

    Usage:
        @click.command()
        @click.option("--port")
        @click.pass_context
        def serve(ctx: click.Context, port: str | None) -> None:
            params = ParamsAccessor.from_context(ctx)
            port_number = params.parse_optional("port", int)
    """

    def __init__(self, params: Mapping[str, Any]) -> None:
        self._params = params

    @classmethod
    def from_context(cls, ctx: click.Context) -> ParamsAccessor:
        """Create an accessor over the parameters of a click context."""
        return cls(ctx.params)

    def optional_str(self, name: str) -> str | None:
        """Get an optional argument as a string."""
        value = self._params.get(name)
        if value is None:
            return None
        return str(value)

    def required_str(self, name: str) -> str:
        """Get a required argument as a string.

        Raises:
            MissingArgumentError: If the argument was not provided.
        """
        value = self.optional_str(name)
        if value is None:
            raise MissingArgumentError(name)
        return value

    def parse_required(self, name: str, converter: Callable[[str], T]) -> T:
        """Convert a required argument with ``converter``.

        Args:
            name: Argument name.
            converter: Callable turning the raw string into the target type,
                e.g. ``int`` or an enum class.

        Raises:
            MissingArgumentError: If the argument was not provided.
            ArgParseError: If ``converter`` rejects the value.
        """
        return self._convert(name, self.required_str(name), converter)

    def parse_optional(self, name: str, converter: Callable[[str], T]) -> T | None:
        """Convert an optional argument with ``converter``, ``None`` if absent.

        Raises:
            ArgParseError: If ``converter`` rejects the value.
        """
        value = self.optional_str(name)
        if value is None:
            return None
        return self._convert(name, value, converter)

    def get_typed(self, name: str, type_: type[T]) -> T | None:
        """Get an argument already converted by the parser.

        Returns ``None`` when the argument is absent or not a ``type_``.
        """
        value = self._params.get(name)
        if isinstance(value, type_):
            return value
        return None

    def get_typed_or(self, name: str, type_: type[T], default: T) -> T:
        """Get an already converted argument, falling back to ``default``."""
        value = self.get_typed(name, type_)
        return default if value is None else value

    @staticmethod
    def _convert(name: str, value: str, converter: Callable[[str], T]) -> T:
        try:
            return converter(value)
        except (ValueError, TypeError) as e:
            raise ArgParseError(name, str(e)) from e
