"""
JSON READER
-----------
Flattens a JSON export (array of objects) into the same row matrix shape the
CSV and Excel readers produce. The header row is the key set of the first
object; later objects are read against those keys only. An empty array gives
an empty matrix.
"""

from __future__ import annotations

import json
from typing import Any, List

from .csv_reader import decode_payload
from .errors import UnreadableFileError
from .limits import check_row_count

_WRAPPER_KEYS = ("data", "products", "suppliers")


def _find_rows(document: Any) -> List[Any]:
    """Locate the array of row objects inside a parsed JSON document."""
    if isinstance(document, list):
        return document

    if isinstance(document, dict):
        for key in _WRAPPER_KEYS:
            if isinstance(document.get(key), list):
                return document[key]

        values = list(document.values())
        if values and isinstance(values[0], list):
            return values[0]

    raise UnreadableFileError(
        "JSON structure not recognized. Expected array or object with data/products/suppliers array."
    )


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def read_json_matrix(payload: bytes | str) -> List[List[str]]:
    text = decode_payload(payload)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise UnreadableFileError(f"Invalid JSON file: {e}") from e

    rows = _find_rows(document)
    if not rows:
        return []
    if not isinstance(rows[0], dict):
        raise UnreadableFileError("JSON rows must be objects keyed by column name")
    check_row_count(len(rows))

    headers = [str(key) for key in rows[0].keys()]
    matrix: List[List[str]] = [headers]

    for row in rows:
        source = row if isinstance(row, dict) else {}
        matrix.append([_cell_text(source.get(header)) for header in headers])

    return matrix
