"""Shared fixtures: in-memory workbooks."""

import logging
from io import BytesIO

import pytest
from openpyxl import Workbook


HEADER = ["ID", "Text", "Exp Types", "Exp Triggers", "Exp Roles", "Exp Args",
          "Notes", "Types", "Triggers", "Roles", "Args"]


def make_xlsx(rows: list[list]) -> bytes:
    """Build an .xlsx file whose first sheet holds rows."""
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_rows():
    """Header plus two data rows covering lists, scalars and a short row."""
    return [
        HEADER,
        [1, "Mix the batter", "['Add', 'Stir']", "['add', 'stir']", "[]", "plain text",
         "skip me", "['Add']", "['add']", "['Agent']", "['chef']"],
        [2, "Short row", "a", "['x','y']", 42],
    ]


@pytest.fixture
def sample_xlsx(sample_rows):
    return make_xlsx(sample_rows)


@pytest.fixture
def xlsx_factory():
    return make_xlsx


@pytest.fixture(autouse=True)
def reset_root_logging():
    """The CLI installs a handler bound to the runner's stdout; drop it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
