"""
Header inference: map raw header strings onto canonical field names.

Runs once per import on the header row. For every field (in alias-table order)
each alias is tried in turn against all headers; a header matches when, after
trimming and lower-casing, it

- equals the alias, or
- contains the alias / is contained in it, or
- has the same alphanumeric-only form ("GST %" vs "gst%").

The first matching header index wins for that field. Several fields may land on
the same column; recall is preferred over a strict one-to-one mapping.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Sequence

from domain.schemas import AliasTable

ColumnMapping = Dict[str, int]

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _normalize(text: str) -> str:
    return (text or "").strip().lower()


def _alnum(text: str) -> str:
    return _NON_ALNUM.sub("", text)


def header_matches(header: str, alias: str) -> bool:
    """Both arguments must already be normalized."""
    if not header:
        # an empty header is a substring of every alias
        return False
    return (
        header == alias
        or alias in header
        or header in alias
        or _alnum(header) == _alnum(alias)
    )


def resolve_columns(headers: Sequence[str], aliases: AliasTable) -> ColumnMapping:
    """Map canonical field names to zero-based column indices for one header row."""
    normalized = [_normalize(h) for h in headers]
    mapping: ColumnMapping = {}

    for field_name, names in aliases.items():
        for name in names:
            alias = _normalize(name)
            index = next(
                (i for i, header in enumerate(normalized) if header_matches(header, alias)),
                None,
            )
            if index is not None:
                mapping[field_name] = index
                break

    return mapping


def missing_columns(mapping: ColumnMapping, fields: Iterable[str]) -> List[str]:
    return [f for f in fields if f not in mapping]
