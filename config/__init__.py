from .settings import (
    DEFAULT_CURRENT_STOCK,
    DEFAULT_GST_RATE,
    DEFAULT_STATE_CODE,
    DEFAULT_TALLY_RATE,
    DEFAULT_UNIT,
    HOME_STATE_CODE,
    LOG_LEVEL,
    MAX_FILE_SIZE_MB,
    MAX_SHEET_ROWS,
)

__all__ = [
    "DEFAULT_CURRENT_STOCK",
    "DEFAULT_GST_RATE",
    "DEFAULT_STATE_CODE",
    "DEFAULT_TALLY_RATE",
    "DEFAULT_UNIT",
    "HOME_STATE_CODE",
    "LOG_LEVEL",
    "MAX_FILE_SIZE_MB",
    "MAX_SHEET_ROWS",
]
