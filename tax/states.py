"""
Indian states/UTs and tax identifier helpers.

GST state codes are the two-digit prefixes used in GSTINs. `state_key` lets
callers compare states given as a code ("27"), an abbreviation ("MH") or a name
("Maharashtra") without caring which form each side used.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class IndianState:
    code: str
    abbreviation: str
    name: str


INDIAN_STATES: Tuple[IndianState, ...] = (
    IndianState("01", "JK", "Jammu and Kashmir"),
    IndianState("02", "HP", "Himachal Pradesh"),
    IndianState("03", "PB", "Punjab"),
    IndianState("04", "CH", "Chandigarh"),
    IndianState("05", "UK", "Uttarakhand"),
    IndianState("06", "HR", "Haryana"),
    IndianState("07", "DL", "Delhi"),
    IndianState("08", "RJ", "Rajasthan"),
    IndianState("09", "UP", "Uttar Pradesh"),
    IndianState("10", "BR", "Bihar"),
    IndianState("11", "SK", "Sikkim"),
    IndianState("12", "AR", "Arunachal Pradesh"),
    IndianState("13", "NL", "Nagaland"),
    IndianState("14", "MN", "Manipur"),
    IndianState("15", "MZ", "Mizoram"),
    IndianState("16", "TR", "Tripura"),
    IndianState("17", "ML", "Meghalaya"),
    IndianState("18", "AS", "Assam"),
    IndianState("19", "WB", "West Bengal"),
    IndianState("20", "JH", "Jharkhand"),
    IndianState("21", "OR", "Odisha"),
    IndianState("22", "CG", "Chhattisgarh"),
    IndianState("23", "MP", "Madhya Pradesh"),
    IndianState("24", "GJ", "Gujarat"),
    IndianState("25", "DD", "Daman and Diu"),
    IndianState("26", "DH", "Dadra and Nagar Haveli"),
    IndianState("27", "MH", "Maharashtra"),
    IndianState("28", "AP", "Andhra Pradesh (Old)"),
    IndianState("29", "KA", "Karnataka"),
    IndianState("30", "GA", "Goa"),
    IndianState("31", "LD", "Lakshadweep"),
    IndianState("32", "KL", "Kerala"),
    IndianState("33", "TN", "Tamil Nadu"),
    IndianState("34", "PY", "Puducherry"),
    IndianState("35", "AN", "Andaman and Nicobar Islands"),
    IndianState("36", "TS", "Telangana"),
    IndianState("37", "AD", "Andhra Pradesh"),
)

_BY_CODE: Dict[str, IndianState] = {s.code: s for s in INDIAN_STATES}
_LOOKUP: Dict[str, str] = {}
for _state in INDIAN_STATES:
    _LOOKUP[_state.code] = _state.code
    _LOOKUP[_state.abbreviation.casefold()] = _state.code
    _LOOKUP.setdefault(_state.name.casefold(), _state.code)
# "Andhra Pradesh" by name means the current state
_LOOKUP["andhra pradesh"] = "37"

GSTIN_PATTERN = re.compile(r"^[0-3][0-9][A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")
PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")


def state_key(value: Optional[str]) -> str:
    """Comparable key for a state given as code, abbreviation or name; '' when blank."""
    text = (value or "").strip()
    if not text:
        return ""
    if text.isdigit() and len(text) == 1:
        text = text.zfill(2)
    return _LOOKUP.get(text.casefold(), text.casefold())


def state_name(code: str) -> str:
    state = _BY_CODE.get(state_key(code))
    return state.name if state else "Unknown State"


def validate_gstin(gstin: str) -> bool:
    if not gstin or len(gstin) != 15:
        return False
    return bool(GSTIN_PATTERN.match(gstin.upper()))


def validate_pan(pan: str) -> bool:
    if not pan or len(pan) != 10:
        return False
    return bool(PAN_PATTERN.match(pan.upper()))


def state_from_gstin(gstin: str) -> Optional[str]:
    """State name encoded in a valid GSTIN, or None."""
    if not validate_gstin(gstin):
        return None
    state = _BY_CODE.get(gstin[:2])
    return state.name if state else None
