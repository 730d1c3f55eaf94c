"""
Central configuration for import limits, field defaults and GST locality.

This module defines:
- File and sheet limits to prevent memory issues and oversized spreadsheets.
- Defaults applied by the row normalizer when a source file leaves a field blank.
- The company's home state used when a transaction carries no explicit state pair.
- Logging verbosity for the command-line entry point.

All values are constants and should be imported where needed. The only runtime
step is reading a local `.env` so deployments can override the env-backed values.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


MAX_FILE_SIZE_MB = 50
MAX_SHEET_ROWS = 10_000

DEFAULT_UNIT = "Nos"
DEFAULT_CURRENT_STOCK = 0.0
DEFAULT_TALLY_RATE = 0.0
DEFAULT_GST_RATE = 18.0

# Maharashtra; used for ledger entries whose counterparty has no state on file
DEFAULT_STATE_CODE = "27"
HOME_STATE_CODE = os.getenv("GST_HOME_STATE", DEFAULT_STATE_CODE)

LOG_LEVEL = os.getenv("GST_IMPORT_LOG_LEVEL", "INFO").upper()
