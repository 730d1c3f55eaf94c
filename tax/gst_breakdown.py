"""
GST breakdown calculations (CGST/SGST vs IGST, plus cess).

Intra-state supplies split the GST amount equally into CGST and SGST; inter-state
supplies carry it all as IGST. Never both.

Rounding policy (₹0.01, half away from zero):
- single amounts: each component (cgst, sgst, igst, cess, taxable) is rounded on
  its own; total_gst is the sum of the rounded components, so it can be one
  paisa off a direct full-precision calculation. This is deliberate.
- aggregates (invoices, purchase orders): per-item components are kept at full
  precision, summed across items, and only the sums are rounded.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Optional, Tuple

from .states import state_key

ROUND = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


class GSTInputError(ValueError):
    """Raised for negative amounts or rates outside 0-100."""
    pass


@dataclass(frozen=True)
class GSTBreakdown:
    cgst: float
    sgst: float
    igst: float
    cess: float
    total_gst: float
    taxable_amount: float
    total_amount: float
    inter_state: bool


def determine_inter_state(from_state: str = "", to_state: str = "", force_igst: Optional[bool] = None) -> bool:
    """
    Inter-state when both states are known and differ. An explicit `force_igst`
    always wins over the state comparison.
    """
    if force_igst is not None:
        return bool(force_igst)

    origin, destination = state_key(from_state), state_key(to_state)
    return bool(origin) and bool(destination) and origin != destination


@dataclass(frozen=True)
class GSTConfig:
    from_state: str = ""
    to_state: str = ""
    force_igst: Optional[bool] = None

    @property
    def inter_state(self) -> bool:
        return determine_inter_state(self.from_state, self.to_state, self.force_igst)


@dataclass(frozen=True)
class LineItem:
    quantity: float
    unit_price: float
    gst_rate: float
    cess_rate: float = 0.0


def _decimal(value, name: str) -> Decimal:
    if isinstance(value, bool):
        raise GSTInputError(f"{name} must be a number, got {value!r}")
    try:
        d = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise GSTInputError(f"{name} must be a number, got {value!r}") from e
    if not d.is_finite():
        raise GSTInputError(f"{name} must be finite, got {value!r}")
    return d


def _amount(value, name: str) -> Decimal:
    d = _decimal(value, name)
    if d < 0:
        raise GSTInputError(f"{name} cannot be negative: {value}")
    return d


def _rate(value, name: str) -> Decimal:
    d = _decimal(value, name)
    if not ZERO <= d <= HUNDRED:
        raise GSTInputError(f"{name} must be between 0 and 100: {value}")
    return d


def _money(value: Decimal) -> Decimal:
    return value.quantize(ROUND, rounding=ROUND_HALF_UP)


def _components(taxable: Decimal, gst_rate: Decimal, cess_rate: Decimal, inter_state: bool) -> Tuple[Decimal, ...]:
    """Full-precision (cgst, sgst, igst, cess) for one taxable amount."""
    gst_amount = taxable * gst_rate / HUNDRED
    cess_amount = taxable * cess_rate / HUNDRED

    if inter_state:
        return ZERO, ZERO, gst_amount, cess_amount
    half = gst_amount / 2
    return half, half, ZERO, cess_amount


def _finalize(taxable: Decimal, cgst: Decimal, sgst: Decimal, igst: Decimal, cess: Decimal, inter_state: bool) -> GSTBreakdown:
    taxable, cgst, sgst, igst, cess = (_money(v) for v in (taxable, cgst, sgst, igst, cess))
    total_gst = cgst + sgst + igst

    return GSTBreakdown(
        cgst=float(cgst),
        sgst=float(sgst),
        igst=float(igst),
        cess=float(cess),
        total_gst=float(total_gst),
        taxable_amount=float(taxable),
        total_amount=float(taxable + total_gst + cess),
        inter_state=inter_state,
    )


def compute_breakdown(taxable_amount: float, gst_rate: float, cess_rate: float = 0.0, *, inter_state: bool) -> GSTBreakdown:
    """Split GST on a taxable amount into CGST+SGST or IGST, plus cess."""
    taxable = _amount(taxable_amount, "taxable_amount")
    rate = _rate(gst_rate, "gst_rate")
    cess = _rate(cess_rate, "cess_rate")

    return _finalize(taxable, *_components(taxable, rate, cess, inter_state), inter_state)


def breakdown_for(config: GSTConfig, taxable_amount: float, gst_rate: float, cess_rate: float = 0.0) -> GSTBreakdown:
    return compute_breakdown(taxable_amount, gst_rate, cess_rate, inter_state=config.inter_state)


def line_item_breakdown(
    quantity: float,
    unit_price: float,
    gst_rate: float,
    config: GSTConfig,
    cess_rate: float = 0.0,
) -> GSTBreakdown:
    taxable = _amount(quantity, "quantity") * _amount(unit_price, "unit_price")
    return compute_breakdown(taxable, gst_rate, cess_rate, inter_state=config.inter_state)


def aggregate_breakdown(items: Iterable[LineItem], config: GSTConfig) -> GSTBreakdown:
    """
    One breakdown for a whole invoice or purchase order.

    Components are summed at full precision and rounded once at the end.
    """
    inter_state = config.inter_state
    taxable = cgst = sgst = igst = cess = ZERO

    for item in items:
        item_taxable = _amount(item.quantity, "quantity") * _amount(item.unit_price, "unit_price")
        c, s, i, k = _components(
            item_taxable,
            _rate(item.gst_rate, "gst_rate"),
            _rate(item.cess_rate, "cess_rate"),
            inter_state,
        )
        taxable += item_taxable
        cgst += c
        sgst += s
        igst += i
        cess += k

    return _finalize(taxable, cgst, sgst, igst, cess, inter_state)


def inclusive_breakdown(gross_amount: float, gst_rate: float, config: GSTConfig, cess_rate: float = 0.0) -> GSTBreakdown:
    """Breakdown for an amount that already includes GST and cess."""
    gross = _amount(gross_amount, "gross_amount")
    rate = _rate(gst_rate, "gst_rate")
    cess = _rate(cess_rate, "cess_rate")

    taxable = gross / (1 + (rate + cess) / HUNDRED)
    inter_state = config.inter_state
    return _finalize(taxable, *_components(taxable, rate, cess, inter_state), inter_state)


def weighted_gst_rate(lines: Iterable[Tuple[float, float]], default: float = 18.0) -> float:
    """
    Line-total-weighted average GST rate from (line_total, gst_rate) pairs.
    Falls back to `default` when there is no positive base to weigh against.
    """
    base = weighted = ZERO
    for line_total, rate in lines:
        amount = _decimal(line_total, "line_total")
        base += amount
        weighted += amount * _decimal(rate, "gst_rate")

    if base <= 0:
        return default
    return float(weighted / base)
