"""
Record schemas: alias tables, field kinds, mandatory fields and defaults.

Each RecordType has exactly one RecordSchema. Callers pick it once at entry
(`get_schema`) and pass it down; nothing downstream branches on the record type
again. All tables are immutable and shared process-wide.

Alias order matters: for a given field the first alias that matches any header
wins, so the most specific spellings come first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from config import DEFAULT_CURRENT_STOCK, DEFAULT_TALLY_RATE, DEFAULT_UNIT


class RecordType(str, Enum):
    PRODUCTS = "products"
    TALLY_PRODUCTS = "tally"
    SUPPLIERS = "suppliers"


class FieldKind(str, Enum):
    TEXT = "text"
    QUANTITY = "quantity"
    PRICE = "price"
    PERCENTAGE = "percentage"
    DATE = "date"


AliasTable = Mapping[str, Tuple[str, ...]]


def _freeze(table: Dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class RecordSchema:
    record_type: RecordType
    aliases: AliasTable
    field_kinds: Mapping[str, FieldKind]
    # at least one of these must be set for a row to be accepted
    mandatory: Tuple[str, ...]
    missing_mandatory_message: str
    # columns worth a header warning when absent, but not fatal
    essential: Tuple[str, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    cross_defaults: Tuple[Tuple[str, str], ...] = ()
    gst_defaults: bool = False

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.aliases)

    def kind_of(self, field_name: str) -> FieldKind:
        return self.field_kinds.get(field_name, FieldKind.TEXT)


# ---------------------------------------------------------------------------
# Generic ERP products
# ---------------------------------------------------------------------------
PRODUCT_ALIASES: AliasTable = _freeze({
    "name": ("Item Name", "Product Name", "Name", "Description", "Item", "Stock Item"),
    "sku": ("SKU", "Item Code", "Product Code", "Code", "Part Number", "Item No"),
    "description": ("Description", "Details", "Product Description", "Long Description"),
    "category": ("Category", "Group", "Item Group", "Product Group", "Class", "Type"),
    "unit": ("Unit", "UOM", "Unit of Measure", "Primary Unit", "Base Unit"),
    "currentStock": ("Current Stock", "Stock", "Quantity", "Qty", "Balance", "Available Stock", "On Hand"),
    "minStock": ("Min Stock", "Minimum Stock", "Min Level", "Reorder Level", "ROL"),
    "maxStock": ("Max Stock", "Maximum Stock", "Max Level"),
    "sellingPrice": ("Selling Price", "Sale Rate", "Rate", "Price", "SP", "Sales Price"),
    "purchasePrice": ("Purchase Price", "Cost Price", "CP", "Buy Rate", "Purchase Rate"),
    "mrp": ("MRP", "Maximum Retail Price", "List Price", "RRP"),
    "gstRate": ("GST Rate", "GST%", "GST", "Tax Rate", "VAT Rate", "Tax%"),
    "hsnCode": ("HSN Code", "HSN", "HSN/SAC", "SAC Code", "Commodity Code"),
    "location": ("Location", "Warehouse", "Godown", "Store"),
    "brand": ("Brand", "Make", "Manufacturer"),
    "barcode": ("Barcode", "EAN", "UPC", "Barcode No"),
})

PRODUCT_SCHEMA = RecordSchema(
    record_type=RecordType.PRODUCTS,
    aliases=PRODUCT_ALIASES,
    field_kinds=_freeze({
        "currentStock": FieldKind.QUANTITY,
        "minStock": FieldKind.QUANTITY,
        "maxStock": FieldKind.QUANTITY,
        "sellingPrice": FieldKind.PRICE,
        "purchasePrice": FieldKind.PRICE,
        "mrp": FieldKind.PRICE,
        "gstRate": FieldKind.PERCENTAGE,
    }),
    mandatory=("name",),
    missing_mandatory_message="Missing name field",
    defaults=_freeze({"unit": DEFAULT_UNIT, "currentStock": DEFAULT_CURRENT_STOCK}),
    gst_defaults=True,
)


# ---------------------------------------------------------------------------
# Tally stock items
# ---------------------------------------------------------------------------
TALLY_ALIASES: AliasTable = _freeze({
    "itemName": ("Item Name", "Stock Item", "Product Name", "Item", "Name", "Description"),
    "stockItem": ("Stock Item", "Item Name", "Product Name", "Item Code", "Code"),
    "alias": ("Alias", "Alternate Name", "Short Name"),
    "partNumber": ("Part Number", "Part No", "SKU", "Model No", "Article"),
    "category": ("Category", "Group", "Item Group", "Product Group", "Class"),
    "unit": ("Unit", "UOM", "Base Unit", "Primary Unit", "Stock UOM"),
    "baseUnit": ("Base Unit", "Primary Unit", "Stock Unit"),
    "openingStock": ("Opening Stock", "Opening Qty", "Opening Balance", "Op Stock"),
    "currentStock": ("Current Stock", "Stock", "Quantity", "Qty", "Balance", "Closing Stock"),
    "reservedStock": ("Reserved Stock", "Reserved Qty", "Allocated Stock"),
    "rate": ("Rate", "Price", "Sale Rate", "Selling Price", "SP"),
    "mrp": ("MRP", "Maximum Retail Price", "Max Price", "List Price"),
    "lastPurchaseRate": ("Last Purchase Rate", "Purchase Rate", "Cost Price", "CP", "Buy Rate"),
    "lastSaleRate": ("Last Sale Rate", "Sale Rate", "Selling Rate"),
    "gstRate": ("GST Rate", "GST%", "GST", "Tax Rate", "VAT Rate", "Tax%"),
    "hsnCode": ("HSN Code", "HSN", "HSN/SAC", "SAC Code", "Commodity Code"),
    "cessRate": ("Cess Rate", "Cess%", "Cess"),
    "minStock": ("Min Stock", "Minimum Stock", "Min Level", "Reorder Level"),
    "maxStock": ("Max Stock", "Maximum Stock", "Max Level"),
    "reorderLevel": ("Reorder Level", "ROL", "Minimum Level"),
    "location": ("Location", "Godown", "Warehouse", "Store"),
    "godown": ("Godown", "Warehouse", "Location", "Store"),
    "batchNo": ("Batch No", "Batch", "Lot No", "Serial No"),
    "expiryDate": ("Expiry Date", "Exp Date", "Expiry"),
    "mfgDate": ("Mfg Date", "Manufacturing Date", "Production Date"),
    "costCenter": ("Cost Center", "Cost Centre", "Department", "Division"),
})

TALLY_SCHEMA = RecordSchema(
    record_type=RecordType.TALLY_PRODUCTS,
    aliases=TALLY_ALIASES,
    field_kinds=_freeze({
        "openingStock": FieldKind.QUANTITY,
        "currentStock": FieldKind.QUANTITY,
        "reservedStock": FieldKind.QUANTITY,
        "minStock": FieldKind.QUANTITY,
        "maxStock": FieldKind.QUANTITY,
        "reorderLevel": FieldKind.QUANTITY,
        "rate": FieldKind.PRICE,
        "mrp": FieldKind.PRICE,
        "lastPurchaseRate": FieldKind.PRICE,
        "lastSaleRate": FieldKind.PRICE,
        "gstRate": FieldKind.PERCENTAGE,
        "cessRate": FieldKind.PERCENTAGE,
        "expiryDate": FieldKind.DATE,
        "mfgDate": FieldKind.DATE,
    }),
    mandatory=("itemName", "stockItem"),
    missing_mandatory_message="Missing item name or stock item",
    essential=("currentStock",),
    defaults=_freeze({
        "unit": DEFAULT_UNIT,
        "currentStock": DEFAULT_CURRENT_STOCK,
        "rate": DEFAULT_TALLY_RATE,
    }),
    cross_defaults=(("itemName", "stockItem"), ("stockItem", "itemName")),
    gst_defaults=True,
)


# ---------------------------------------------------------------------------
# Suppliers
# ---------------------------------------------------------------------------
SUPPLIER_ALIASES: AliasTable = _freeze({
    "name": ("Company Name", "Supplier Name", "Vendor Name", "Name", "Business Name"),
    "contactPerson": ("Contact Person", "Contact Name", "Representative", "Person Name"),
    "phone": ("Phone", "Mobile", "Contact No", "Phone Number", "Mobile No"),
    "email": ("Email", "Email ID", "Email Address", "Contact Email"),
    "address": ("Address", "Full Address", "Complete Address", "Street Address"),
    "city": ("City", "Town"),
    "state": ("State", "Province"),
    "pincode": ("Pincode", "PIN", "Postal Code", "ZIP Code"),
    "gstin": ("GSTIN", "GST No", "GST Number", "Tax ID"),
    "pan": ("PAN", "PAN No", "PAN Number"),
    "bankAccount": ("Bank Account", "Account No", "Account Number", "Bank Account No"),
    "ifscCode": ("IFSC Code", "IFSC", "Bank Code"),
    "creditLimit": ("Credit Limit", "Credit Amount", "Max Credit"),
    "paymentTerms": ("Payment Terms", "Terms", "Credit Terms", "Payment Condition"),
})

SUPPLIER_SCHEMA = RecordSchema(
    record_type=RecordType.SUPPLIERS,
    aliases=SUPPLIER_ALIASES,
    field_kinds=_freeze({"creditLimit": FieldKind.PRICE}),
    mandatory=("name",),
    missing_mandatory_message="Missing name field",
)


SCHEMAS: Mapping[RecordType, RecordSchema] = _freeze({
    RecordType.PRODUCTS: PRODUCT_SCHEMA,
    RecordType.TALLY_PRODUCTS: TALLY_SCHEMA,
    RecordType.SUPPLIERS: SUPPLIER_SCHEMA,
})


def get_schema(record_type: RecordType | str) -> RecordSchema:
    """Return the schema for a record type (enum member or its string value)."""
    try:
        return SCHEMAS[RecordType(record_type)]
    except ValueError as e:
        valid = ", ".join(t.value for t in RecordType)
        raise ValueError(f"Unknown record type {record_type!r}. Expected one of: {valid}") from e
