"""Data models for column extraction and list-literal recovery."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any

from openpyxl.utils import get_column_letter


# A single decoded spreadsheet value. Empty cells arrive as "".
Cell = str | int | float | bool | datetime | date | time

Row = list[Cell]


@dataclass(frozen=True)
class ColumnSpec:
    """
    A fixed column to extract.

    Positions are 0-based offsets into a row and never derived from header text.
    """
    position: int            # 0-based index into a row (2 -> column C)
    label: str               # Human-readable name used in the report

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(f"Column position must be non-negative, got {self.position}")

    @property
    def letter(self) -> str:
        """Spreadsheet column letter (e.g., "C")."""
        return get_column_letter(self.position + 1)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "letter": self.letter,
            "label": self.label,
        }


@dataclass(frozen=True)
class RecoveredList:
    """
    A cell whose list literal was successfully recovered.

    Nested lists are stored as tuples and objects as read-only mappings;
    .value hands back plain lists and dicts.
    """
    items: tuple

    is_list = True

    def __post_init__(self):
        object.__setattr__(self, "items", freeze(tuple(self.items)))

    @property
    def value(self) -> list:
        return thaw(self.items)


@dataclass(frozen=True)
class PassThrough:
    """A cell returned unchanged (not a list literal, or recovery failed)."""
    value: Any

    is_list = False


RecoveredValue = RecoveredList | PassThrough


@dataclass(frozen=True)
class ExtractedColumn:
    """All recovered values of one selected column, in source row order."""
    spec: ColumnSpec
    values: tuple[RecoveredValue, ...] = ()

    @property
    def label(self) -> str:
        return self.spec.label

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            **self.spec.to_dict(),
            "values": [_json_safe(v.value) for v in self.values],
        }


@dataclass(frozen=True)
class ExtractionResult:
    """
    Result of one extraction run.

    Every column holds exactly total_rows values. Created once from a decoded
    sheet and never mutated afterwards.
    """
    source_name: str         # Name of the uploaded file
    total_rows: int          # Number of data rows (header excluded)
    columns: tuple[ExtractedColumn, ...] = field(default_factory=tuple)

    def __post_init__(self):
        for column in self.columns:
            if len(column.values) != self.total_rows:
                raise ValueError(
                    f"{column.label} has {len(column.values)} values, expected {self.total_rows}"
                )

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.columns]

    def column(self, label: str) -> ExtractedColumn:
        """Get a column by its label."""
        for c in self.columns:
            if c.label == label:
                return c
        raise KeyError(label)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_name": self.source_name,
            "total_rows": self.total_rows,
            "columns": [c.to_dict() for c in self.columns],
        }


def freeze(value: Any) -> Any:
    """Recursively turn lists into tuples and dicts into read-only mappings."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze: plain lists and dicts, safe to serialize or mutate."""
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    return value


def _json_safe(value: Any) -> Any:
    """Make date/time cells JSON-serializable; leave everything else alone."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _column(position: int, name: str) -> ColumnSpec:
    return ColumnSpec(position=position, label=f"Column {get_column_letter(position + 1)} ({name})")


# Columns C-F hold the expected annotations, H-K the predicted ones
DEFAULT_COLUMNS: tuple[ColumnSpec, ...] = (
    _column(2, "Expected Event Types"),
    _column(3, "Expected Trigger Texts"),
    _column(4, "Expected Arguments Roles"),
    _column(5, "Expected Argument Texts"),
    _column(7, "Event Types"),
    _column(8, "Trigger Texts"),
    _column(9, "Argument Roles"),
    _column(10, "Argument Texts"),
)
