"""Row cap shared by every reader, so no format can bypass MAX_SHEET_ROWS."""

from __future__ import annotations

import config

from .errors import UnreadableFileError


def check_row_count(data_rows: int) -> None:
    """Raise once a matrix holds more data rows (header excluded) than allowed."""
    if data_rows > config.MAX_SHEET_ROWS:
        raise UnreadableFileError(
            f"File has more than {config.MAX_SHEET_ROWS:,} data rows. Split the file and import it in parts."
        )
