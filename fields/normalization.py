"""
Field-level coercion of raw spreadsheet text into typed canonical values.

Every canonical field has a FieldKind; COERCERS maps each kind to one function
taking (field_name, raw_text) and returning the typed value. A value that
cannot be coerced raises FieldValueError, which the row normalizer turns into a
warning and leaves the field unset. Nothing here rejects a whole row.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Callable, Dict, Optional

from domain.schemas import FieldKind


class FieldValueError(ValueError):
    """Raised when a single cell cannot be coerced to its field's kind."""
    pass


_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

_DAY_FIRST = re.compile(r"^(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})$")
_YEAR_FIRST = re.compile(r"^(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})$")


def to_float(value: Any) -> Optional[float]:
    """Convert int/float (or numeric-like strings) to float. Return None if not possible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    s = str(value).strip().replace(",", "")
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def parse_number(text: str) -> Optional[float]:
    """
    Parse the numeric part of a messy cell such as "₹1,200.50" or "12 %".

    Everything but digits, '.' and '-' is dropped first, then the leading
    numeric prefix is read, so "1.2.3" gives 1.2. Returns None when no number
    is left.
    """
    cleaned = _NON_NUMERIC.sub("", text)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def parse_indian_date(text: str) -> Optional[date]:
    """Parse DD/MM/YYYY (preferred) or YYYY/MM/DD with '/', '-' or '.' separators."""
    match = _DAY_FIRST.match(text)
    if match:
        day, month, year = (int(g) for g in match.groups())
    else:
        match = _YEAR_FIRST.match(text)
        if not match:
            return None
        year, month, day = (int(g) for g in match.groups())

    if not (1 <= day <= 31 and 1 <= month <= 12):
        return None
    try:
        return date(year, month, day)
    except ValueError:
        # e.g. 31/02/2024
        return None


def coerce_text(field_name: str, raw: str) -> str:
    return raw


def coerce_quantity(field_name: str, raw: str) -> float:
    value = parse_number(raw)
    if value is None or value < 0:
        raise FieldValueError(f"Invalid quantity for {field_name}: {raw}")
    return value


def coerce_price(field_name: str, raw: str) -> float:
    value = parse_number(raw)
    if value is None or value < 0:
        raise FieldValueError(f"Invalid price for {field_name}: {raw}")
    return value


def coerce_percentage(field_name: str, raw: str) -> float:
    value = parse_number(raw)
    if value is None or not 0 <= value <= 100:
        raise FieldValueError(f"Invalid tax rate for {field_name}: {raw}")
    return value


def coerce_date(field_name: str, raw: str) -> date:
    value = parse_indian_date(raw)
    if value is None:
        raise FieldValueError(f"Invalid date format for {field_name}: {raw}")
    return value


COERCERS: Dict[FieldKind, Callable[[str, str], Any]] = {
    FieldKind.TEXT: coerce_text,
    FieldKind.QUANTITY: coerce_quantity,
    FieldKind.PRICE: coerce_price,
    FieldKind.PERCENTAGE: coerce_percentage,
    FieldKind.DATE: coerce_date,
}


def coerce(kind: FieldKind, field_name: str, raw: str) -> Any:
    """Coerce trimmed, non-empty cell text according to its field kind."""
    return COERCERS[kind](field_name, raw)
