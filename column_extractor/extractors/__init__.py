"""Column extraction modules."""

from column_extractor.extractors.columns import extract_columns

__all__ = [
    "extract_columns",
]
