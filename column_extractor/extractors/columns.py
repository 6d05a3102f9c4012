"""Fixed-position column extraction from a decoded sheet."""

import logging
from collections.abc import Sequence

from column_extractor.models.extraction import (
    Cell,
    ColumnSpec,
    ExtractedColumn,
    ExtractionResult,
    DEFAULT_COLUMNS,
)
from column_extractor.parsers.list_literal import parse_list_literal

logger = logging.getLogger(__name__)


def _cell_at(row: Sequence[Cell] | None, position: int) -> Cell:
    """Cell at position, or "" when the row is too short or the cell is empty."""
    if row is None or position >= len(row):
        return ""
    value = row[position]
    return "" if value is None else value


def extract_columns(
    rows: Sequence[Sequence[Cell]],
    source_name: str,
    selection: Sequence[ColumnSpec] = DEFAULT_COLUMNS,
) -> ExtractionResult:
    """
    Extract the selected columns from every data row.

    Row 0 is the header and is always skipped. Each extracted cell goes
    through parse_list_literal, so bracketed literals come back as lists.

    Args:
        rows: Decoded sheet, header row first
        source_name: File name the rows came from
        selection: Columns to extract, in report order

    Returns:
        ExtractionResult with one value per data row in every column
    """
    data_rows = rows[1:]
    columns = tuple(
        ExtractedColumn(
            spec=spec,
            values=tuple(parse_list_literal(_cell_at(row, spec.position)) for row in data_rows),
        )
        for spec in selection
    )

    logger.debug(
        "Extracted %d columns x %d rows from %s", len(columns), len(data_rows), source_name
    )
    return ExtractionResult(
        source_name=source_name,
        total_rows=len(data_rows),
        columns=columns,
    )
