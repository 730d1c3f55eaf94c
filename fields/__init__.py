from .hsn import DEFAULT_HSN_TABLE, HsnEntry, HsnRateResolver
from .normalization import FieldValueError, coerce, parse_indian_date, parse_number, to_float

__all__ = [
    "DEFAULT_HSN_TABLE",
    "FieldValueError",
    "HsnEntry",
    "HsnRateResolver",
    "coerce",
    "parse_indian_date",
    "parse_number",
    "to_float",
]
