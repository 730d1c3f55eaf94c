"""
Sample templates and Tally-compatible export.

Sample files show users which headers the importer recognises. They are static
data, but every sample is expected to import cleanly (no errors, mandatory
fields present) through the normal pipeline.

Every cell is double-quoted, matching what accounting tools expect from the
export side.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from domain.schemas import RecordType

_SAMPLES: Dict[RecordType, Tuple[Tuple[str, ...], Tuple[Tuple[str, ...], ...]]] = {
    RecordType.PRODUCTS: (
        (
            "Item Name", "SKU", "Description", "Category", "Unit", "Current Stock",
            "Min Stock", "Selling Price", "Purchase Price", "GST Rate", "HSN Code",
        ),
        (
            ("Steel Rod 12mm", "SR-12-001", "TMT Bar 12mm Fe500D", "Construction Materials",
             "Kg", "1000", "100", "65.50", "60.00", "18", "7213"),
            ("Cement OPC 53 Grade", "CEM-OPC53", "Ordinary Portland Cement 53 Grade",
             "Construction Materials", "Bag", "500", "50", "420.00", "400.00", "28", "2523"),
            ("Mobile Phone", "MOB-001", "Smartphone with 128GB storage", "Electronics",
             "Nos", "25", "5", "15000.00", "12000.00", "18", "8517"),
        ),
    ),
    RecordType.SUPPLIERS: (
        ("Company Name", "Contact Person", "Phone", "Email", "Address", "City", "State", "GSTIN", "PAN"),
        (
            ("ABC Steel Suppliers", "Rajesh Kumar", "+91-9876543210", "rajesh@abcsteel.com",
             "123 Industrial Area, Sector 15", "Gurgaon", "Haryana", "06ABCDE1234F1Z5", "ABCDE1234F"),
            ("Modern Electronics Ltd", "Priya Sharma", "+91-9876543211", "priya@modernelectronics.com",
             "456 Tech Park, Phase 2", "Bangalore", "Karnataka", "29FGHIJ5678K1Z9", "FGHIJ5678K"),
            ("Quality Cement Works", "Amit Patel", "+91-9876543212", "amit@qualitycement.com",
             "789 Factory Road, GIDC", "Ahmedabad", "Gujarat", "24KLMNO9012P1Z7", "KLMNO9012P"),
        ),
    ),
}

# "Sale Rate" rather than plain "Rate": a bare "Rate" header is a substring of
# "GST Rate" and would be picked up as the GST column on re-import.
TALLY_EXPORT_HEADERS: Tuple[str, ...] = (
    "Stock Item", "Alias", "Part Number", "Group", "Unit", "Opening Stock", "Current Stock",
    "Sale Rate", "MRP", "GST Rate", "HSN Code", "Minimum Stock", "Godown",
)

_TALLY_SAMPLE_ROWS: Tuple[Tuple[str, ...], ...] = (
    ("Steel Rod 12mm", "TMT 12", "SR-12-001", "Construction Materials", "Kg",
     "800", "1000", "65.50", "70.00", "18", "7213", "100", "Main Godown"),
    ("Basmati Rice 25kg", "Rice25", "RICE-25", "Groceries", "Bag",
     "40", "55", "1850.00", "1999.00", "5", "1006", "10", "Cold Store"),
    ("Aerated Drink 600ml", "Cola600", "BEV-600", "Beverages", "Bottle",
     "200", "240", "38.00", "40.00", "", "2202", "48", "Main Godown"),
)

_SAMPLES[RecordType.TALLY_PRODUCTS] = (TALLY_EXPORT_HEADERS, _TALLY_SAMPLE_ROWS)


def _to_csv(rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def sample_rows(record_type: RecordType | str) -> List[List[str]]:
    """Header row followed by example data rows for a record type."""
    headers, rows = _SAMPLES[RecordType(record_type)]
    return [list(headers)] + [list(r) for r in rows]


def generate_sample_csv(record_type: RecordType | str) -> str:
    return _to_csv(sample_rows(record_type))


def _fmt(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def generate_tally_csv(records: Iterable[Mapping[str, Any]]) -> str:
    """Export Tally product records in a layout Tally (and this importer) reads back."""
    rows: List[List[str]] = [list(TALLY_EXPORT_HEADERS)]

    for r in records:
        rows.append([
            _fmt(r.get("stockItem") or r.get("itemName")),
            _fmt(r.get("alias")),
            _fmt(r.get("partNumber")),
            _fmt(r.get("category")),
            _fmt(r.get("unit")),
            _fmt(r.get("openingStock", 0)),
            _fmt(r.get("currentStock", 0)),
            _fmt(r.get("rate", 0)),
            _fmt(r.get("mrp")),
            _fmt(r.get("gstRate")),
            _fmt(r.get("hsnCode")),
            _fmt(r.get("minStock")),
            _fmt(r.get("godown")),
        ])

    return _to_csv(rows)
