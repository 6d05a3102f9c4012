"""
Extraction API routes.

Handles:
- POST /api/extract - Upload a workbook, return summary, preview and extracted columns
"""

import logging
import os
from typing import Any

from fastapi import APIRouter, HTTPException, UploadFile, File
from pydantic import BaseModel

from column_extractor.extractors.columns import extract_columns
from column_extractor.generators.preview import build_preview, build_summary
from column_extractor.models.extraction import ExtractionResult
from column_extractor.parsers.spreadsheet import (
    DecodeError,
    UnsupportedFormatError,
    check_supported,
    read_rows,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ============== Request/Response Models ==============

class SummaryResponse(BaseModel):
    """Extraction summary."""
    file_name: str
    total_rows: int
    columns_extracted: list[str]
    lists_generated: int


class PreviewEntryResponse(BaseModel):
    """One previewed row of a column."""
    row: int
    is_list: bool
    items: list[str] | None = None
    text: str | None = None


class ColumnPreviewResponse(BaseModel):
    """First entries of a column."""
    label: str
    entries: list[PreviewEntryResponse]


class ColumnResponse(BaseModel):
    """A fully extracted column."""
    position: int
    letter: str
    label: str
    values: list[Any]


class ExtractResponse(BaseModel):
    """Response from extraction endpoint."""
    summary: SummaryResponse
    preview: list[ColumnPreviewResponse]
    columns: list[ColumnResponse]


# ============== Helper Functions ==============

def _max_upload_bytes() -> int:
    return int(os.getenv("MAX_UPLOAD_MB", "50")) * 1024 * 1024


async def process_upload(file: UploadFile) -> ExtractionResult:
    """
    Validate, decode and extract an uploaded workbook.

    Raises:
        HTTPException: 400 for a bad upload, 422 if the workbook can't be read
    """
    try:
        check_supported(file.filename)
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    content = await file.read()

    if len(content) > _max_upload_bytes():
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {os.getenv('MAX_UPLOAD_MB', '50')}MB)",
        )

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    try:
        rows = read_rows(file.filename, content)
    except DecodeError as e:
        raise HTTPException(status_code=422, detail=f"Error processing file: {str(e)}")
    finally:
        del content

    return extract_columns(rows, source_name=file.filename)


# ============== Routes ==============

@router.post("/extract", response_model=ExtractResponse)
async def extract(file: UploadFile = File(...)) -> ExtractResponse:
    """
    Extract the fixed columns from an uploaded .xlsx or .xls file.

    The header row is skipped and list literals such as "['A', 'B']" are
    returned as arrays.
    """
    result = await process_upload(file)
    logger.info("Extracted %d rows from %s", result.total_rows, result.source_name)

    return ExtractResponse(
        summary=SummaryResponse(**build_summary(result)),
        preview=[ColumnPreviewResponse(**p) for p in build_preview(result)],
        columns=[ColumnResponse(**c.to_dict()) for c in result.columns],
    )
