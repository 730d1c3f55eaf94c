"""
HSN/SAC code to GST rate resolution.

Lookup order for a code:
1. strip everything but digits
2. exact match on the full digit string
3. match on the first 4 digits (the HSN heading)
4. otherwise unresolved (None); callers must not guess a rate

The default table is a small static set of common headings. It is built once at
import time and never mutated; pass a different table to HsnRateResolver to use
another one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class HsnEntry:
    code: str
    description: str
    gst_rate: float
    cess_rate: Optional[float] = None


_DEFAULT_ENTRIES = (
    # Cereals
    HsnEntry("1001", "Wheat and meslin", 5),
    HsnEntry("1002", "Rye", 5),
    HsnEntry("1003", "Barley", 5),
    HsnEntry("1004", "Oats", 5),
    HsnEntry("1006", "Rice", 5),
    # Dairy
    HsnEntry("0401", "Milk and cream", 5),
    HsnEntry("0402", "Milk powder", 5),
    HsnEntry("0403", "Buttermilk, curd", 5),
    HsnEntry("0404", "Whey", 5),
    HsnEntry("0713", "Dried leguminous vegetables (pulses)", 5),
    # Essentials
    HsnEntry("1701", "Cane or beet sugar", 5),
    HsnEntry("1507", "Soya-bean oil", 5),
    HsnEntry("1508", "Ground-nut oil", 5),
    HsnEntry("1509", "Olive oil", 5),
    HsnEntry("1511", "Palm oil", 5),
    HsnEntry("2501", "Salt", 5),
    # Medicines
    HsnEntry("3003", "Medicaments (not packed for retail)", 5),
    HsnEntry("3004", "Medicaments (packed for retail)", 5),
    # Textiles
    HsnEntry("5201", "Cotton, not carded or combed", 5),
    HsnEntry("5202", "Cotton waste", 5),
    HsnEntry("5208", "Woven fabrics of cotton", 5),
    HsnEntry("6001", "Pile fabrics, knitted", 12),
    HsnEntry("6002", "Knitted fabrics", 12),
    HsnEntry("6109", "T-shirts, singlets and other vests", 12),
    # Construction
    HsnEntry("7213", "Bars and rods of iron or steel", 18),
    HsnEntry("7308", "Structures of iron or steel", 18),
    HsnEntry("2523", "Cement", 28),
    # FMCG with compensation cess
    HsnEntry("3401", "Soap, organic detergents", 18),
    HsnEntry("2202", "Aerated beverages", 28, cess_rate=12),
    HsnEntry("2401", "Unmanufactured tobacco", 28, cess_rate=4),
    # Electronics
    HsnEntry("8517", "Mobile phones and accessories", 18),
    HsnEntry("8528", "TV receivers, monitors", 18),
    HsnEntry("8471", "Automatic data processing machines", 18),
    HsnEntry("8504", "Electrical transformers", 18),
    HsnEntry("8544", "Insulated wire, cable", 18),
    # Automobiles
    HsnEntry("8703", "Motor cars", 28, cess_rate=15),
    HsnEntry("8711", "Motorcycles", 28, cess_rate=3),
    HsnEntry("8712", "Bicycles and cycle rickshaws", 12),
    # Services (SAC)
    HsnEntry("998314", "Transportation of goods by road", 5),
    HsnEntry("998313", "Transportation of passengers by air", 5),
    HsnEntry("997212", "Advertising services", 18),
    HsnEntry("997321", "Management consultancy services", 18),
    HsnEntry("998361", "Telecommunications services", 18),
)

_NON_DIGIT = re.compile(r"\D")


def build_table(entries: Iterable[HsnEntry]) -> Mapping[str, HsnEntry]:
    """Index entries by code into a read-only mapping."""
    return MappingProxyType({entry.code: entry for entry in entries})


DEFAULT_HSN_TABLE: Mapping[str, HsnEntry] = build_table(_DEFAULT_ENTRIES)


class HsnRateResolver:
    """Resolve GST (and cess) rates from HSN/SAC codes against a fixed table."""

    def __init__(self, table: Mapping[str, HsnEntry] = DEFAULT_HSN_TABLE):
        self._table = table

    def lookup(self, code: str) -> Optional[HsnEntry]:
        digits = _NON_DIGIT.sub("", code or "")
        if not digits:
            return None

        entry = self._table.get(digits)
        if entry is None:
            entry = self._table.get(digits[:4])
        return entry

    def resolve_rate(self, code: str) -> Optional[float]:
        entry = self.lookup(code)
        return float(entry.gst_rate) if entry is not None else None
