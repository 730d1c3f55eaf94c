import io

import pytest
from openpyxl import Workbook


@pytest.fixture
def make_xlsx():
    """Build an in-memory .xlsx payload from a list of rows."""

    def _make(rows):
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def csv_bytes():
    def _make(*lines):
        return ("\n".join(lines) + "\n").encode("utf-8")

    return _make
