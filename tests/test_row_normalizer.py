from datetime import date

from domain.schemas import PRODUCT_SCHEMA, SUPPLIER_SCHEMA, TALLY_SCHEMA
from extraction.column_mapping import resolve_columns
from extraction.row_normalizer import RowNormalizer

PRODUCT_HEADERS = ["Item Name", "Current Stock", "Selling Price", "GST Rate", "HSN"]


def normalize(schema, headers, row):
    mapping = resolve_columns(headers, schema.aliases)
    return RowNormalizer(schema).normalize(row, mapping)


def test_clean_product_row():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Steel Rod", "1,000", "65.50", "18", "7213"])

    assert outcome.accepted
    assert outcome.warnings == []
    assert outcome.record == {
        "name": "Steel Rod",
        "currentStock": 1000.0,
        "sellingPrice": 65.5,
        "gstRate": 18.0,
        "hsnCode": "7213",
        "unit": "Nos",
    }


def test_malformed_stock_is_a_warning_not_a_rejection():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Steel Rod", "abc", "65.50", "18", ""])

    assert outcome.accepted
    assert outcome.warnings == ["Invalid quantity for currentStock: abc"]
    assert outcome.record["currentStock"] == 0.0


def test_gst_rate_inferred_from_hsn():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Mobile Phone", "25", "15000", "", "8517"])

    assert outcome.record["gstRate"] == 18.0
    assert len(outcome.warnings) == 1
    assert "8517" in outcome.warnings[0]
    assert "HSN" in outcome.warnings[0]


def test_hsn_rate_differs_from_default():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Rice", "10", "50", "", "10063010"])
    assert outcome.record["gstRate"] == 5.0


def test_default_gst_rate_without_hsn():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Widget", "1", "10", "", ""])

    assert outcome.record["gstRate"] == 18.0
    assert outcome.warnings == []


def test_out_of_range_gst_rate_falls_back():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Rice", "10", "50", "150", "1006"])

    assert outcome.warnings[0] == "Invalid tax rate for gstRate: 150"
    assert outcome.record["gstRate"] == 5.0


def test_blank_name_is_always_rejected():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["   ", "10", "50", "18", "8517"])

    assert not outcome.accepted
    assert outcome.rejection == "Missing name field"
    assert outcome.record is None


def test_short_row_is_rejected():
    outcome = normalize(PRODUCT_SCHEMA, PRODUCT_HEADERS, ["Steel Rod", "10"])
    assert outcome.rejection == "Insufficient columns in row"


def test_unmapped_extra_cells_are_ignored():
    outcome = normalize(PRODUCT_SCHEMA, ["Name"], ["Bolt", "junk", "more junk"])
    assert outcome.record["name"] == "Bolt"


def test_tally_cross_defaults_and_dates():
    headers = ["Stock Item", "Current Stock", "Expiry Date", "Mfg Date", "Batch No"]
    outcome = normalize(TALLY_SCHEMA, headers, ["Paracetamol 500", "120", "31/12/2026", "2025-01-15", "B-77"])

    assert outcome.accepted
    record = outcome.record
    assert record["stockItem"] == "Paracetamol 500"
    assert record["itemName"] == "Paracetamol 500"
    assert record["currentStock"] == 120.0
    assert record["expiryDate"] == date(2026, 12, 31)
    assert record["mfgDate"] == date(2025, 1, 15)
    assert record["rate"] == 0.0
    assert record["unit"] == "Nos"
    assert record["gstRate"] == 18.0


def test_tally_invalid_date_warns():
    outcome = normalize(TALLY_SCHEMA, ["Item Name", "Expiry"], ["Syrup", "32/01/2026"])

    assert outcome.accepted
    assert outcome.warnings == ["Invalid date format for expiryDate: 32/01/2026"]
    assert "expiryDate" not in outcome.record


def test_tally_cess_from_hsn():
    outcome = normalize(TALLY_SCHEMA, ["Item Name", "HSN"], ["Cola 600ml", "2202"])

    assert outcome.record["gstRate"] == 28.0
    assert outcome.record["cessRate"] == 12.0
    assert len(outcome.warnings) == 2


def test_tally_without_any_name_is_rejected():
    outcome = normalize(TALLY_SCHEMA, ["Item Name", "Qty"], ["", "5"])
    assert outcome.rejection == "Missing item name or stock item"


def test_supplier_has_no_product_defaults():
    headers = ["Supplier Name", "City", "Credit Limit"]
    outcome = normalize(SUPPLIER_SCHEMA, headers, ["ABC Steel", "Pune", "-500"])

    assert outcome.accepted
    assert outcome.warnings == ["Invalid price for creditLimit: -500"]
    assert outcome.record == {"name": "ABC Steel", "city": "Pune"}
