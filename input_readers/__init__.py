"""
Input readers: turn an uploaded payload into a rectangular-ish matrix of text.

`read_matrix` is the single entry point used by the import pipeline. It detects
the format, enforces the size limit and dispatches to the matching reader. Any
payload that cannot be read raises UnreadableFileError.
"""

from __future__ import annotations

import logging
from typing import List

from config import MAX_FILE_SIZE_MB

from .csv_reader import read_csv_matrix
from .detect import FileFormat, describe_format, detect_format
from .errors import UnreadableFileError
from .excel import read_excel_matrix
from .json_reader import read_json_matrix

logger = logging.getLogger(__name__)


def read_matrix(payload: bytes | str, file_name: str, content_type: str | None = None) -> List[List[str]]:
    size = len(payload.encode("utf-8")) if isinstance(payload, str) else len(payload)
    if size > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise UnreadableFileError(
            f"File is {size / (1024 * 1024):.1f} MB; the limit is {MAX_FILE_SIZE_MB} MB."
        )

    fmt = detect_format(file_name, content_type)
    logger.debug("Reading %s as %s (%d bytes)", file_name, fmt.value, size)

    if fmt is FileFormat.JSON:
        return read_json_matrix(payload)
    if fmt is FileFormat.SPREADSHEET:
        if isinstance(payload, str):
            raise UnreadableFileError("Excel files must be supplied as raw bytes")
        return read_excel_matrix(payload, file_name)
    return read_csv_matrix(payload)


__all__ = [
    "FileFormat",
    "UnreadableFileError",
    "describe_format",
    "detect_format",
    "read_csv_matrix",
    "read_excel_matrix",
    "read_json_matrix",
    "read_matrix",
]
