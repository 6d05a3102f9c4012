"""Plain-text report of extracted columns."""

import json
import re
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from column_extractor.models.extraction import ExtractedColumn, ExtractionResult, RecoveredValue, thaw


SEPARATOR = "=" * 80
FILENAME_PREFIX = "extracted_columns_"


def format_scalar(value: Any) -> str:
    """Format a single value the way it appears between quotes in the report."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        # null elements of a nested list join as empty text
        return ",".join("" if v is None else format_scalar(v) for v in value)
    if isinstance(value, Mapping):
        return json.dumps(thaw(value), separators=(",", ":"))
    return str(value)


def format_entry(item: RecoveredValue) -> str:
    """Format one recovered value: ['a', 'b'] for lists, 'text' otherwise."""
    if item.is_list:
        return "[" + ", ".join(f"'{format_scalar(v)}'" for v in item.items) + "]"
    return f"'{format_scalar(item.value)}'"


def format_column(column: ExtractedColumn) -> str:
    """Format one labeled column block."""
    lines = [f"{column.label}:", "["]
    last = len(column.values) - 1
    for index, item in enumerate(column.values):
        lines.append(f"  {format_entry(item)}" + ("," if index < last else ""))
    lines.append("]")
    return "\n".join(lines) + "\n\n"


def format_report(result: ExtractionResult, generated_at: datetime | None = None) -> str:
    """
    Render an extraction result as a text document.

    Output is identical for identical results apart from the
    "Generated on" timestamp.
    """
    generated_at = generated_at or datetime.now()

    content = f"Extracted Data from: {result.source_name}\n"
    content += f"Total Rows: {result.total_rows}\n"
    content += f"Generated on: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}\n\n"
    content += SEPARATOR + "\n\n"

    for column in result.columns:
        content += format_column(column)

    return content


def output_filename(source_name: str) -> str:
    """Suggested report name: extracted_columns_<name without extension>.txt"""
    stem = re.sub(r"\.[^/.]+$", "", source_name)
    return f"{FILENAME_PREFIX}{stem}.txt"
