"""
Row normalization: one data row + column mapping -> canonical record.

A row either yields a record (possibly with warnings) or is rejected with a
reason. Bad individual values never reject a row; they are reported as
warnings and the field is left unset (and may then be defaulted). Only a short
row or a missing mandatory name rejects it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from config import DEFAULT_GST_RATE
from domain.schemas import RecordSchema
from fields.hsn import HsnRateResolver
from fields.normalization import FieldValueError, coerce

from .column_mapping import ColumnMapping

logger = logging.getLogger(__name__)


@dataclass
class RowOutcome:
    record: Optional[Dict[str, Any]] = None
    warnings: List[str] = field(default_factory=list)
    rejection: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class RowNormalizer:
    """Normalizes data rows for one schema; the HSN resolver fills missing GST rates."""

    def __init__(self, schema: RecordSchema, hsn_resolver: Optional[HsnRateResolver] = None):
        self.schema = schema
        self.hsn_resolver = hsn_resolver or HsnRateResolver()

    def normalize(self, row: Sequence[str], mapping: ColumnMapping) -> RowOutcome:
        if mapping and len(row) < max(mapping.values()) + 1:
            return RowOutcome(rejection="Insufficient columns in row")

        record: Dict[str, Any] = {}
        warnings: List[str] = []

        for field_name, index in mapping.items():
            raw = (row[index] or "").strip()
            if not raw:
                continue
            try:
                record[field_name] = coerce(self.schema.kind_of(field_name), field_name, raw)
            except FieldValueError as e:
                warnings.append(str(e))

        if not any(record.get(f) for f in self.schema.mandatory):
            return RowOutcome(warnings=warnings, rejection=self.schema.missing_mandatory_message)

        self._apply_defaults(record, warnings)
        return RowOutcome(record=record, warnings=warnings)

    def _apply_defaults(self, record: Dict[str, Any], warnings: List[str]) -> None:
        schema = self.schema

        for target, source in schema.cross_defaults:
            if target not in record and source in record:
                record[target] = record[source]
                warnings.append(f"{target} was empty; copied from {source}")

        for field_name, default in schema.defaults.items():
            record.setdefault(field_name, default)

        if schema.gst_defaults and "gstRate" not in record:
            self._infer_gst_rate(record, warnings)

    def _infer_gst_rate(self, record: Dict[str, Any], warnings: List[str]) -> None:
        hsn_code = record.get("hsnCode")
        entry = self.hsn_resolver.lookup(hsn_code) if hsn_code else None

        if entry is None:
            record["gstRate"] = DEFAULT_GST_RATE
            return

        record["gstRate"] = float(entry.gst_rate)
        warnings.append(f"Auto-detected GST rate {entry.gst_rate:g}% from HSN code {hsn_code}")
        logger.debug("GST rate %s inferred from HSN %s", entry.gst_rate, hsn_code)

        if entry.cess_rate and "cessRate" in self.schema.aliases and "cessRate" not in record:
            record["cessRate"] = float(entry.cess_rate)
            warnings.append(f"Auto-detected cess rate {entry.cess_rate:g}% from HSN code {hsn_code}")
