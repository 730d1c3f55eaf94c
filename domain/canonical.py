"""
Canonical record schemas.

These TypedDicts represent the normalized structure every import path maps
into, whatever the source tool called its columns. Three variants exist:

- ProductRecord: generic ERP product/stock exports
- TallyProductRecord: Tally-style stock item exports (item name + stock item)
- SupplierRecord: supplier / vendor master exports

Fields are optional in the type because source files are routinely incomplete.
Which fields are mandatory, and which defaults apply, is decided by the
matching RecordSchema in `domain.schemas`.
"""

from __future__ import annotations

from datetime import date
from typing import TypedDict, Union


class ProductRecord(TypedDict, total=False):
    name: str
    sku: str
    description: str
    category: str
    unit: str

    currentStock: float
    minStock: float
    maxStock: float

    sellingPrice: float
    purchasePrice: float
    mrp: float

    gstRate: float
    hsnCode: str

    location: str
    brand: str
    barcode: str


class TallyProductRecord(TypedDict, total=False):
    itemName: str
    stockItem: str
    alias: str
    partNumber: str
    category: str
    unit: str
    baseUnit: str

    openingStock: float
    currentStock: float
    reservedStock: float

    rate: float
    mrp: float
    lastPurchaseRate: float
    lastSaleRate: float

    gstRate: float
    hsnCode: str
    cessRate: float

    minStock: float
    maxStock: float
    reorderLevel: float

    location: str
    godown: str
    batchNo: str
    expiryDate: date
    mfgDate: date
    costCenter: str


class SupplierRecord(TypedDict, total=False):
    name: str
    contactPerson: str

    phone: str
    email: str
    address: str

    city: str
    state: str
    pincode: str

    gstin: str
    pan: str

    bankAccount: str
    ifscCode: str

    creditLimit: float
    paymentTerms: str


CanonicalRecord = Union[ProductRecord, TallyProductRecord, SupplierRecord]
