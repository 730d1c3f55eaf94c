"""
EXCEL READER
------------
Reads the first worksheet of an Excel export into a row matrix with NO field
interpretation. Row 0 = headers, rows 1+ = data, every cell rendered as text.
Completely empty rows are skipped; an empty sheet gives an empty matrix.

.xlsx goes through openpyxl; legacy .xls goes through pandas (xlrd engine).
"""

from __future__ import annotations

import io
from datetime import date, datetime
from typing import Any, Iterable, List

import pandas as pd
from openpyxl import load_workbook

from .errors import UnreadableFileError
from .limits import check_row_count


def cell_text(value: Any) -> str:
    """Render a spreadsheet cell as trimmed text; whole floats lose their '.0'."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def _collect_rows(raw_rows: Iterable[Iterable[Any]]) -> List[List[str]]:
    rows: List[List[str]] = []
    for raw in raw_rows:
        cells = [cell_text(v) for v in raw]
        if not any(cells):
            continue

        rows.append(cells)
        check_row_count(len(rows) - 1)
    return rows


def _read_xlsx_rows(payload: bytes) -> List[List[str]]:
    try:
        wb = load_workbook(io.BytesIO(payload), data_only=True, read_only=True)
    except Exception as e:
        raise UnreadableFileError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    try:
        ws = wb.worksheets[0]
        return _collect_rows(ws.iter_rows(values_only=True))
    finally:
        wb.close()


def _read_xls_rows(payload: bytes) -> List[List[str]]:
    try:
        df = pd.read_excel(io.BytesIO(payload), sheet_name=0, header=None, dtype=object, engine="xlrd")
    except Exception as e:
        raise UnreadableFileError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    return _collect_rows(df.itertuples(index=False, name=None))


def read_excel_matrix(payload: bytes, file_name: str = "") -> List[List[str]]:
    """
    Read an Excel payload into a row matrix.

    Args:
        payload: Raw file bytes
        file_name: Original file name; a `.xls` suffix selects the legacy reader

    Returns:
        List of rows, each a list of cell strings

    Raises:
        UnreadableFileError: If the workbook cannot be opened or exceeds the row limit
    """
    if file_name.lower().endswith(".xls"):
        rows = _read_xls_rows(payload)
    else:
        rows = _read_xlsx_rows(payload)
    return rows
