"""
Export API routes.

Handles:
- POST /api/export/text - Upload a workbook, download the text report
"""

import io
from urllib.parse import quote

from fastapi import APIRouter, UploadFile, File
from fastapi.responses import StreamingResponse

from column_extractor.api.routes.extraction import process_upload
from column_extractor.generators.text_report import format_report, output_filename

router = APIRouter()


def content_disposition(filename: str) -> str:
    """
    Attachment header that survives any file name.

    Headers are latin-1 on the wire, so the plain filename parameter gets an
    ASCII fallback and the real name goes in filename* (RFC 6266).
    """
    fallback = "".join(c if " " <= c < "\x7f" else "_" for c in filename)
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.post("/export/text")
async def export_text(file: UploadFile = File(...)):
    """
    Export the extracted columns as a plain-text report.

    The report lists all eight columns, one entry per data row, with
    recovered lists rendered as ['a', 'b'].
    """
    result = await process_upload(file)
    content = format_report(result)

    filename = output_filename(result.source_name)
    return StreamingResponse(
        io.BytesIO(content.encode("utf-8")),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": content_disposition(filename)},
    )
