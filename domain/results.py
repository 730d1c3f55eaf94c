"""
Import result types.

A ParseResult is created fresh for every import call and handed back to the
caller; nothing here is cached or shared. Issue rows are 1-based source line
numbers (the header is row 1). Row 0 marks a file-level problem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .canonical import CanonicalRecord
from .schemas import RecordType


@dataclass(frozen=True)
class ParseIssue:
    row: int
    message: str
    context: Optional[List[str]] = None


@dataclass(frozen=True)
class ParseSummary:
    total_rows: int = 0
    processed: int = 0
    skipped: int = 0


@dataclass
class ParseResult:
    record_type: RecordType
    records: List[CanonicalRecord] = field(default_factory=list)
    errors: List[ParseIssue] = field(default_factory=list)
    warnings: List[ParseIssue] = field(default_factory=list)
    summary: ParseSummary = field(default_factory=ParseSummary)

    @property
    def success(self) -> bool:
        """Partial imports count as successful as long as one record came through."""
        return len(self.records) > 0

    def to_dataframe(self) -> pd.DataFrame:
        """Records as a DataFrame, one column per canonical field seen in the import."""
        return pd.DataFrame.from_records(self.records)

    def issues_dataframe(self) -> pd.DataFrame:
        """Errors and warnings in one frame, ordered by source row."""
        rows: List[Dict[str, Any]] = []
        for level, issues in (("error", self.errors), ("warning", self.warnings)):
            for issue in issues:
                rows.append({"row": issue.row, "level": level, "message": issue.message})

        df = pd.DataFrame(rows, columns=["row", "level", "message"])
        return df.sort_values("row", kind="stable").reset_index(drop=True)
