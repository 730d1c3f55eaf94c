"""
FORMAT DETECTOR
---------------
Classify an uploaded file as JSON, spreadsheet or CSV from its name and the
declared content type. CSV is the unconditional fallback; this never raises.
"""

from __future__ import annotations

from enum import Enum


class FileFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    SPREADSHEET = "spreadsheet"


JSON_CONTENT_TYPE = "application/json"
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS_CONTENT_TYPE = "application/vnd.ms-excel"
CSV_CONTENT_TYPE = "text/csv"

SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")
SPREADSHEET_CONTENT_TYPES = (XLSX_CONTENT_TYPE, XLS_CONTENT_TYPE)


def detect_format(file_name: str, content_type: str | None = None) -> FileFormat:
    name = (file_name or "").lower()
    ctype = (content_type or "").lower()

    if name.endswith(".json") or ctype == JSON_CONTENT_TYPE:
        return FileFormat.JSON

    if name.endswith(SPREADSHEET_EXTENSIONS) or ctype in SPREADSHEET_CONTENT_TYPES:
        return FileFormat.SPREADSHEET

    return FileFormat.CSV


def describe_format(file_name: str, content_type: str | None = None) -> str:
    """User-facing label for the file format, e.g. "Excel (XLSX)"."""
    name = (file_name or "").lower()
    ctype = (content_type or "").lower()

    if name.endswith(".json") or ctype == JSON_CONTENT_TYPE:
        return "JSON"
    if name.endswith(".xlsx") or ctype == XLSX_CONTENT_TYPE:
        return "Excel (XLSX)"
    if name.endswith(".xls") or ctype == XLS_CONTENT_TYPE:
        return "Excel (XLS)"
    if name.endswith(".csv") or ctype == CSV_CONTENT_TYPE:
        return "CSV"
    return "Unknown"
