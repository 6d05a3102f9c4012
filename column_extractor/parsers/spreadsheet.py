"""
Spreadsheet decoding.

Reads the first sheet of an uploaded workbook into a grid of cell values:
- .xlsx via openpyxl (cached formula values, dates kept as datetime)
- .xls via xlrd

Empty cells become "" so downstream code never sees None.
"""

import logging
from io import BytesIO
from pathlib import Path

import xlrd
from openpyxl import load_workbook

from column_extractor.models.extraction import Cell, Row

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".xlsx", ".xls")
UNSUPPORTED_FORMAT_MESSAGE = "Please upload a valid Excel file (.xlsx or .xls)"


class UnsupportedFormatError(ValueError):
    """File name does not end in a supported spreadsheet extension."""


class DecodeError(ValueError):
    """The workbook could not be read."""


def is_supported_filename(filename: str | None) -> bool:
    """Check the file name against the accepted spreadsheet extensions."""
    return bool(filename) and filename.lower().endswith(SUPPORTED_EXTENSIONS)


def check_supported(filename: str | None) -> None:
    """Raise UnsupportedFormatError unless filename is .xlsx or .xls."""
    if not is_supported_filename(filename):
        raise UnsupportedFormatError(UNSUPPORTED_FORMAT_MESSAGE)


def read_rows(filename: str, content: bytes) -> list[Row]:
    """
    Decode the first sheet of a workbook.

    Args:
        filename: Original file name, used to pick the reader
        content: Raw file bytes

    Returns:
        Rows in sheet order, each a list of cell values ("" for empty cells)

    Raises:
        UnsupportedFormatError: If the extension is not .xlsx or .xls
        DecodeError: If the workbook is corrupt or has no sheets
    """
    check_supported(filename)

    reader = _read_xls if filename.lower().endswith(".xls") else _read_xlsx
    try:
        rows = reader(content)
    except DecodeError:
        raise
    except Exception as e:
        logger.error("Failed to decode %s: %s", filename, e)
        raise DecodeError(f"Unable to read spreadsheet '{filename}': {str(e)}") from e

    logger.info("Decoded %s: %d rows", filename, len(rows))
    return rows


def load_rows(path: Path) -> list[Row]:
    """Decode the first sheet of a workbook on disk."""
    path = Path(path)
    check_supported(path.name)
    return read_rows(path.name, path.read_bytes())


def _read_xlsx(content: bytes) -> list[Row]:
    wb = load_workbook(BytesIO(content), read_only=True, data_only=True)
    try:
        if not wb.worksheets:
            raise DecodeError("Workbook contains no sheets")
        ws = wb.worksheets[0]
        return [
            ["" if value is None else value for value in row]
            for row in ws.iter_rows(values_only=True)
        ]
    finally:
        wb.close()


def _read_xls(content: bytes) -> list[Row]:
    wb = xlrd.open_workbook(file_contents=content)
    if wb.nsheets == 0:
        raise DecodeError("Workbook contains no sheets")
    sheet = wb.sheet_by_index(0)
    return [
        [_xls_cell_value(cell, wb.datemode) for cell in sheet.row(r)]
        for r in range(sheet.nrows)
    ]


def _xls_cell_value(cell: xlrd.sheet.Cell, datemode: int) -> Cell:
    """Convert an xlrd cell to the same value types openpyxl produces."""
    ctype = cell.ctype
    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
        return ""
    if ctype == xlrd.XL_CELL_DATE:
        try:
            return xlrd.xldate_as_datetime(cell.value, datemode)
        except (xlrd.xldate.XLDateError, ValueError, OverflowError):
            return cell.value
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if ctype == xlrd.XL_CELL_NUMBER:
        value = cell.value
        return int(value) if value.is_integer() else value
    return cell.value
