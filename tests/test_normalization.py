from datetime import date

import pytest

from domain.schemas import FieldKind
from fields.normalization import (
    FieldValueError,
    coerce,
    parse_indian_date,
    parse_number,
    to_float,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1000", 1000.0),
        ("₹1,200.50", 1200.50),
        ("12 %", 12.0),
        ("  65.5 kg", 65.5),
        ("1.2.3", 1.2),
        ("-5", -5.0),
        (".5", 0.5),
        ("abc", None),
        ("", None),
        ("-", None),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15/08/2024", date(2024, 8, 15)),
        ("5-1-2025", date(2025, 1, 5)),
        ("15.08.2024", date(2024, 8, 15)),
        ("2024-08-15", date(2024, 8, 15)),
        ("2024/8/5", date(2024, 8, 5)),
        ("31/02/2024", None),
        ("13/13/2024", None),
        ("2024/13/01", None),
        ("Aug 15 2024", None),
    ],
)
def test_parse_indian_date(text, expected):
    assert parse_indian_date(text) == expected


def test_quantity_rejects_negative_and_garbage():
    assert coerce(FieldKind.QUANTITY, "currentStock", "1,000") == 1000.0
    with pytest.raises(FieldValueError, match="Invalid quantity for currentStock: abc"):
        coerce(FieldKind.QUANTITY, "currentStock", "abc")
    with pytest.raises(FieldValueError):
        coerce(FieldKind.QUANTITY, "currentStock", "-3")


def test_price_messages():
    assert coerce(FieldKind.PRICE, "mrp", "₹99.90") == 99.90
    with pytest.raises(FieldValueError, match="Invalid price for mrp"):
        coerce(FieldKind.PRICE, "mrp", "-1")


@pytest.mark.parametrize("raw", ["0", "18", "100", "28%"])
def test_percentage_accepts_range(raw):
    assert 0 <= coerce(FieldKind.PERCENTAGE, "gstRate", raw) <= 100


@pytest.mark.parametrize("raw", ["150", "-1", "n/a"])
def test_percentage_rejects_out_of_range(raw):
    with pytest.raises(FieldValueError, match="Invalid tax rate for gstRate"):
        coerce(FieldKind.PERCENTAGE, "gstRate", raw)


def test_date_and_text():
    assert coerce(FieldKind.DATE, "expiryDate", "01/03/2025") == date(2025, 3, 1)
    with pytest.raises(FieldValueError, match="Invalid date format for expiryDate"):
        coerce(FieldKind.DATE, "expiryDate", "soon")
    assert coerce(FieldKind.TEXT, "name", "Steel Rod") == "Steel Rod"


def test_to_float():
    assert to_float("1,250.75") == 1250.75
    assert to_float(3) == 3.0
    assert to_float(None) is None
    assert to_float(True) is None
    assert to_float("  ") is None
    assert to_float("twelve") is None
