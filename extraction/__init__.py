from .column_mapping import ColumnMapping, resolve_columns
from .row_normalizer import RowNormalizer, RowOutcome
from .to_canonical import TabularImporter, aggregate, import_file, parse_matrix

__all__ = [
    "ColumnMapping",
    "RowNormalizer",
    "RowOutcome",
    "TabularImporter",
    "aggregate",
    "import_file",
    "parse_matrix",
    "resolve_columns",
]
