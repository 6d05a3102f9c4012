"""Extraction summary and short per-column preview."""

from column_extractor.generators.text_report import format_scalar
from column_extractor.models.extraction import ExtractionResult


def build_summary(result: ExtractionResult) -> dict:
    """Summary shown after a successful extraction."""
    return {
        "file_name": result.source_name,
        "total_rows": result.total_rows,
        "columns_extracted": [c.spec.letter for c in result.columns],
        "lists_generated": len(result.columns),
    }


def build_preview(result: ExtractionResult, limit: int = 3, max_chars: int = 100) -> list[dict]:
    """
    First few entries of every column.

    Recovered lists are returned as their items; pass-through values as
    text truncated to max_chars (with "..." appended when cut).
    """
    preview = []
    for column in result.columns:
        entries = []
        for i, item in enumerate(column.values[:limit]):
            entry = {"row": i + 1, "is_list": item.is_list}
            if item.is_list:
                entry["items"] = [format_scalar(v) for v in item.items]
            else:
                text = format_scalar(item.value)
                entry["text"] = text[:max_chars] + ("..." if len(text) > max_chars else "")
            entries.append(entry)
        preview.append({"label": column.label, "entries": entries})
    return preview
