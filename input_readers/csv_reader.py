"""
CSV READER
----------
Reads delimited text into a row matrix with NO field interpretation.
Row 0 is the header row; every cell is trimmed text. Blank lines are dropped,
ragged rows are kept as-is. A file with no data at all gives an empty matrix;
the importer reports that, not the reader.
"""

from __future__ import annotations

import csv
import io
from typing import List

from .errors import UnreadableFileError
from .limits import check_row_count


def decode_payload(payload: bytes | str) -> str:
    """Decode a text payload as UTF-8, tolerating a leading BOM."""
    if isinstance(payload, str):
        return payload.lstrip("\ufeff")
    try:
        return payload.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableFileError(f"File is not valid UTF-8 text: {e}") from e


def read_csv_matrix(payload: bytes | str) -> List[List[str]]:
    text = decode_payload(payload)

    rows: List[List[str]] = []
    try:
        for record in csv.reader(io.StringIO(text)):
            cells = [cell.strip() for cell in record]
            if any(cells):
                rows.append(cells)
                check_row_count(len(rows) - 1)
    except csv.Error as e:
        raise UnreadableFileError(f"Cannot parse CSV file: {e}") from e

    return rows
