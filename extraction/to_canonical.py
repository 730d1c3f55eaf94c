"""
Tabular extraction into canonical records.

This module provides the single entry point that converts a supplier/ERP export
(CSV, JSON or Excel) into a ParseResult:

- Read the payload into a text matrix (input_readers).
- Resolve the header row to canonical fields once (column_mapping).
- Normalize every data row in source order (row_normalizer).
- Aggregate records, errors, warnings and counts.

Row numbers in issues are 1-based source lines: the header is row 1, so the
first data row is row 2. File-level problems are reported on row 0.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from domain.results import ParseIssue, ParseResult, ParseSummary
from domain.schemas import RecordSchema, RecordType, get_schema
from fields.hsn import HsnRateResolver
from input_readers import read_matrix

from .column_mapping import ColumnMapping, missing_columns, resolve_columns
from .row_normalizer import RowNormalizer, RowOutcome

logger = logging.getLogger(__name__)

FIRST_DATA_ROW = 2


def aggregate(
    rows: Sequence[Sequence[str]],
    normalize_fn: Callable[[Sequence[str]], RowOutcome],
) -> Tuple[List[Dict[str, Any]], List[ParseIssue], List[ParseIssue], ParseSummary]:
    """Run `normalize_fn` over data rows in order and collect the outcome."""
    records: List[Dict[str, Any]] = []
    errors: List[ParseIssue] = []
    warnings: List[ParseIssue] = []
    processed = 0
    skipped = 0

    for row_number, row in enumerate(rows, start=FIRST_DATA_ROW):
        outcome = normalize_fn(row)

        if not outcome.accepted:
            skipped += 1
            errors.append(ParseIssue(row=row_number, message=outcome.rejection, context=list(row)))
            logger.debug("Row %d rejected: %s", row_number, outcome.rejection)
            continue

        processed += 1
        records.append(outcome.record)
        warnings.extend(ParseIssue(row=row_number, message=w) for w in outcome.warnings)

    summary = ParseSummary(total_rows=len(rows), processed=processed, skipped=skipped)
    return records, errors, warnings, summary


class TabularImporter:
    """Import pipeline for one record schema."""

    def __init__(self, schema: RecordSchema, hsn_resolver: Optional[HsnRateResolver] = None):
        self.schema = schema
        self.normalizer = RowNormalizer(schema, hsn_resolver)

    def _fatal(self, message: str, total_rows: int = 0) -> ParseResult:
        logger.warning("Import of %s aborted: %s", self.schema.record_type.value, message)
        return ParseResult(
            record_type=self.schema.record_type,
            errors=[ParseIssue(row=0, message=message)],
            summary=ParseSummary(total_rows=total_rows, processed=0, skipped=total_rows),
        )

    def resolve(self, headers: Sequence[str]) -> ColumnMapping:
        return resolve_columns(headers, self.schema.aliases)

    def parse_matrix(self, matrix: Sequence[Sequence[str]]) -> ParseResult:
        if len(matrix) < 2:
            return self._fatal("File must contain headers and at least one data row")

        headers, data_rows = matrix[0], matrix[1:]
        mapping = self.resolve(headers)

        if not any(f in mapping for f in self.schema.mandatory):
            wanted = " or ".join(self.schema.mandatory)
            return self._fatal(
                f"Missing essential columns: {wanted}. Please ensure your file contains a name column.",
                total_rows=len(data_rows),
            )

        header_warnings = [
            ParseIssue(row=1, message=f"Column not found: {f}; default values will be used")
            for f in missing_columns(mapping, self.schema.essential)
        ]

        records, errors, warnings, summary = aggregate(
            data_rows, lambda row: self.normalizer.normalize(row, mapping)
        )

        result = ParseResult(
            record_type=self.schema.record_type,
            records=records,
            errors=errors,
            warnings=header_warnings + warnings,
            summary=summary,
        )
        logger.info(
            "Imported %s: %d processed, %d skipped, %d warnings",
            self.schema.record_type.value,
            summary.processed,
            summary.skipped,
            len(result.warnings),
        )
        return result


def parse_matrix(
    matrix: Sequence[Sequence[str]],
    record_type: RecordType | str,
    hsn_resolver: Optional[HsnRateResolver] = None,
) -> ParseResult:
    return TabularImporter(get_schema(record_type), hsn_resolver).parse_matrix(matrix)


def import_file(
    payload: bytes | str,
    file_name: str,
    content_type: str | None,
    record_type: RecordType | str,
    hsn_resolver: Optional[HsnRateResolver] = None,
) -> ParseResult:
    """
    Convert an uploaded file into canonical records.

    Raises:
        UnreadableFileError: If the payload cannot be read into rows at all.
            Everything past that point is reported inside the ParseResult.
    """
    schema = get_schema(record_type)
    matrix = read_matrix(payload, file_name, content_type)
    return TabularImporter(schema, hsn_resolver).parse_matrix(matrix)
