from .canonical import CanonicalRecord, ProductRecord, SupplierRecord, TallyProductRecord
from .results import ParseIssue, ParseResult, ParseSummary
from .schemas import FieldKind, RecordSchema, RecordType, get_schema

__all__ = [
    "CanonicalRecord",
    "FieldKind",
    "ParseIssue",
    "ParseResult",
    "ParseSummary",
    "ProductRecord",
    "RecordSchema",
    "RecordType",
    "SupplierRecord",
    "TallyProductRecord",
    "get_schema",
]
