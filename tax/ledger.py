"""
GST ledger synchronisation for invoices.

The ledger itself lives in an external store (see LedgerStore); this module only
decides what goes into it:

- record_invoice: one breakdown per invoice, computed when the invoice is created
- update_ledger_status: invoice status changes map onto the ledger entry's status;
  amounts are never recomputed
- sync_missing_entries: bulk pass over existing invoices that have no entry yet
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Protocol

from config import DEFAULT_GST_RATE, DEFAULT_STATE_CODE, HOME_STATE_CODE
from fields.normalization import to_float

from .gst_breakdown import GSTConfig, compute_breakdown, weighted_gst_rate

logger = logging.getLogger(__name__)

LEDGER_STATUSES = {"paid": "paid", "cancelled": "cancelled", "overdue": "overdue"}


class LedgerSyncError(RuntimeError):
    """Raised when the ledger store is missing an entry or rejects a write."""
    pass


@dataclass(frozen=True)
class InvoiceLine:
    description: str
    quantity: float
    unit_price: float
    gst_rate: float
    line_total: float


@dataclass(frozen=True)
class InvoiceTaxData:
    invoice_id: str
    invoice_number: str
    invoice_date: str
    transaction_type: str  # "sale" | "purchase"
    entity_name: str
    subtotal: float
    from_state: str
    to_state: str
    line_items: List[InvoiceLine] = field(default_factory=list)
    entity_id: str = ""
    force_igst: Optional[bool] = None


@dataclass(frozen=True)
class LedgerEntry:
    invoice_id: str
    invoice_number: str
    invoice_date: str
    transaction_type: str
    entity_name: str
    taxable_amount: float
    gst_rate: float
    cgst: float
    sgst: float
    igst: float
    total_gst: float
    total_amount: float
    from_state: str
    to_state: str
    is_interstate: bool
    status: str = "due"


class LedgerStore(Protocol):
    def has_entry(self, invoice_id: str) -> bool: ...

    def insert(self, entry: LedgerEntry) -> str: ...

    def set_status(self, invoice_id: str, status: str, payment_date: Optional[str] = None) -> None: ...


@dataclass(frozen=True)
class SyncResult:
    invoice_id: str
    success: bool
    entry_id: Optional[str] = None
    error: Optional[str] = None


def build_ledger_entry(invoice: InvoiceTaxData) -> LedgerEntry:
    """Compute the ledger entry for an invoice from its subtotal and average line rate."""
    rate = weighted_gst_rate(
        ((line.line_total, line.gst_rate) for line in invoice.line_items),
        default=DEFAULT_GST_RATE,
    )
    config = GSTConfig(invoice.from_state, invoice.to_state, invoice.force_igst)
    breakdown = compute_breakdown(invoice.subtotal, rate, inter_state=config.inter_state)

    return LedgerEntry(
        invoice_id=invoice.invoice_id,
        invoice_number=invoice.invoice_number,
        invoice_date=invoice.invoice_date,
        transaction_type=invoice.transaction_type,
        entity_name=invoice.entity_name,
        taxable_amount=breakdown.taxable_amount,
        gst_rate=rate,
        cgst=breakdown.cgst,
        sgst=breakdown.sgst,
        igst=breakdown.igst,
        total_gst=breakdown.total_gst,
        total_amount=breakdown.total_amount,
        from_state=invoice.from_state,
        to_state=invoice.to_state,
        is_interstate=breakdown.inter_state,
    )


def has_entry(store: LedgerStore, invoice_id: str) -> bool:
    """Store lookup; store failures surface as LedgerSyncError."""
    try:
        return store.has_entry(invoice_id)
    except Exception as e:
        raise LedgerSyncError(f"Could not look up GST entry for invoice {invoice_id}: {e}") from e


def record_invoice(store: LedgerStore, invoice: InvoiceTaxData) -> str:
    entry = build_ledger_entry(invoice)
    try:
        entry_id = store.insert(entry)
    except Exception as e:
        raise LedgerSyncError(f"Could not write GST entry for invoice {invoice.invoice_number}: {e}") from e

    logger.info("GST entry %s recorded for invoice %s", entry_id, invoice.invoice_number)
    return entry_id


def ledger_status(invoice_status: str) -> str:
    """Ledger status for an invoice status; anything unrecognised stays "due"."""
    return LEDGER_STATUSES.get((invoice_status or "").strip().lower(), "due")


def update_ledger_status(
    store: LedgerStore,
    invoice_id: str,
    invoice_status: str,
    payment_date: Optional[str] = None,
) -> str:
    if not has_entry(store, invoice_id):
        raise LedgerSyncError(f"GST entry not found for invoice {invoice_id}")

    status = ledger_status(invoice_status)
    store.set_status(invoice_id, status, payment_date)
    return status


def invoice_from_row(row: Mapping[str, Any], home_state: str = HOME_STATE_CODE) -> InvoiceTaxData:
    """
    Build InvoiceTaxData from a stored invoice row (with nested items and counterparty).

    Counterparties without a state on file are treated as being in DEFAULT_STATE_CODE.
    """
    entity = row.get("supplier") or row.get("customer") or {}
    lines = [
        InvoiceLine(
            description=str(item.get("description") or ""),
            quantity=to_float(item.get("quantity")) or 0.0,
            unit_price=to_float(item.get("unit_price")) or 0.0,
            gst_rate=to_float(item.get("gst_rate")) or 0.0,
            line_total=to_float(item.get("line_total")) or 0.0,
        )
        for item in row.get("items") or []
    ]

    return InvoiceTaxData(
        invoice_id=str(row["id"]),
        invoice_number=str(row.get("invoice_number") or ""),
        invoice_date=str(row.get("invoice_date") or ""),
        transaction_type="sale" if row.get("invoice_type") == "sales" else "purchase",
        entity_name=entity.get("company_name") or "Unknown",
        subtotal=to_float(row.get("subtotal")) or 0.0,
        from_state=entity.get("state") or DEFAULT_STATE_CODE,
        to_state=home_state,
        line_items=lines,
        entity_id=str(row.get("supplier_id") or row.get("customer_id") or ""),
    )


def sync_missing_entries(invoices: Iterable[InvoiceTaxData], store: LedgerStore) -> List[SyncResult]:
    """Create ledger entries for invoices that have none. Failures are recorded per invoice."""
    results: List[SyncResult] = []

    for invoice in invoices:
        try:
            if has_entry(store, invoice.invoice_id):
                continue
            entry_id = record_invoice(store, invoice)
        except (LedgerSyncError, ValueError) as e:
            logger.exception("GST sync failed for invoice %s", invoice.invoice_id)
            results.append(SyncResult(invoice_id=invoice.invoice_id, success=False, error=str(e)))
            continue
        results.append(SyncResult(invoice_id=invoice.invoice_id, success=True, entry_id=entry_id))

    return results
