"""Record types that can be rendered as table rows.

A table record exposes an ordered list of field names shared by every
instance of its type, and per instance an ordered list of stringified
values aligned with those names.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class TableRecord(Protocol):
    """Protocol for records that can be projected into table rows."""

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the ordered column headers for this record type."""
        ...

    def field_values(self) -> list[str]:
        """Return the ordered cell values for this record."""
        ...


def format_cell(value: Any) -> str:
    """Convert a field value into table cell text.

    ``None`` renders as an empty cell, enums as their value and lists or
    tuples as one item per line.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return "\n".join(format_cell(item) for item in value)
    return str(value)


class TableRow(BaseModel):
    """Pydantic base model implementing :class:`TableRecord`.

    Headers come from each field's ``title`` when set, otherwise from the
    field name, in declaration order.

    Usage:
        class Service(TableRow):
            name: str
            port: int = Field(title="Port")
            tags: list[str] = []

        rows = [Service(name="api", port=8080, tags=["a", "b"])]
        table = build_table_with_columns(rows, parse_columns("port,name"))
    """

    # Field names excluded from table output
    table_exclude: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def table_fields(cls) -> list[str]:
        """Return the names of the fields rendered as columns."""
        return [name for name in cls.model_fields if name not in cls.table_exclude]

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the column headers in field declaration order."""
        headers = []
        for name in cls.table_fields():
            info = cls.model_fields[name]
            headers.append(info.title or name)
        return headers

    def field_values(self) -> list[str]:
        """Return the cell values in field declaration order."""
        return [format_cell(getattr(self, name)) for name in self.table_fields()]


def record_headers(record_type: type[TableRecord]) -> list[str]:
    """Return the headers of a record type as strings."""
    return [str(header) for header in record_type.field_names()]


def record_values(record: TableRecord) -> list[str]:
    """Return the values of a record as strings."""
    return [str(value) for value in record.field_values()]


def resolve_record_type(
    data: Sequence[TableRecord],
    record_type: type[TableRecord] | None = None,
) -> type[TableRecord] | None:
    """Return the explicit record type, or the type of the first record."""
    if record_type is not None:
        return record_type
    if data:
        return type(data[0])
    return None
