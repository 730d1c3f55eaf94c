"""
Excel output: import templates and import results as .xlsx workbooks.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Mapping, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from domain.results import ParseResult
from domain.schemas import RecordType

from .sample_csv import sample_rows

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")


def _clean(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _write_sheet(ws, headers: Sequence[str], rows: Sequence[Any]) -> None:
    for idx, header in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
    ws.freeze_panes = "A2"

    for row in rows:
        if isinstance(row, Mapping):
            ws.append([_clean(row.get(h)) for h in headers])
        else:
            ws.append([_clean(v) for v in row])

    for col_idx, header in enumerate(headers, start=1):
        max_len = len(str(header))
        for row_num in range(2, ws.max_row + 1):
            value = ws.cell(row=row_num, column=col_idx).value
            if value is not None:
                max_len = max(max_len, len(str(value)))
        ws.column_dimensions[get_column_letter(col_idx)].width = max(12, max_len + 2)


def write_rows_to_xlsx(
    output_path: Path,
    sheet_name: str,
    headers: Sequence[str],
    rows: Sequence[Any],
) -> Path:
    """
    Write rows (dicts keyed by header, or plain sequences) under a styled header row.

    Returns:
        The resolved output path
    """
    output_path = Path(output_path).expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]
    _write_sheet(ws, headers, rows)

    wb.save(output_path)
    return output_path


def write_template_xlsx(output_path: Path, record_type: RecordType | str) -> Path:
    """Sample import template for a record type."""
    header, *rows = sample_rows(record_type)
    return write_rows_to_xlsx(output_path, RecordType(record_type).value.upper(), header, rows)


def write_result_xlsx(output_path: Path, result: ParseResult) -> Path:
    """Imported records on one sheet, errors and warnings on a second."""
    output_path = Path(output_path).expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    records = result.to_dataframe()
    issues = result.issues_dataframe()

    wb = Workbook()
    ws = wb.active
    ws.title = "Records"
    _write_sheet(ws, [str(c) for c in records.columns], records.to_dict(orient="records"))
    _write_sheet(wb.create_sheet("Issues"), list(issues.columns), issues.to_dict(orient="records"))

    wb.save(output_path)
    return output_path
