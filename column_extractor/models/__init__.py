"""Data models for the column extractor."""

from column_extractor.models.extraction import (
    Cell,
    Row,
    ColumnSpec,
    RecoveredList,
    PassThrough,
    RecoveredValue,
    ExtractedColumn,
    ExtractionResult,
    DEFAULT_COLUMNS,
)

__all__ = [
    "Cell",
    "Row",
    "ColumnSpec",
    "RecoveredList",
    "PassThrough",
    "RecoveredValue",
    "ExtractedColumn",
    "ExtractionResult",
    "DEFAULT_COLUMNS",
]
