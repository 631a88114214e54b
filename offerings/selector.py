"""
Offer selection: which normalized rows are currently enrollable, and in
what order.

A row is kept when its closing date parses, is on or after the reference
date, and its offer type denotes the open token. Kept rows are sorted by
closing date ascending; equal dates keep their input order.
"""

from __future__ import annotations

from datetime import date
from typing import List, Mapping, Optional, Sequence

from loguru import logger

from .formatters import normalize_value, parse_date_loose
from .normalize import FIELD_KEYS, FieldKeys
from .rules import OPEN_MATCH_CONTAINS, OPEN_MATCH_EXACT, OPEN_OFFER_TOKEN


def offer_type_is_open(
    value: Optional[str],
    *,
    token: str = OPEN_OFFER_TOKEN,
    match: str = OPEN_MATCH_EXACT,
) -> bool:
    """
    Exact match is the default. "contains" also accepts values such as
    "abierta - virtual".
    """
    normalized = normalize_value(value)
    if match == OPEN_MATCH_EXACT:
        return normalized == token
    if match == OPEN_MATCH_CONTAINS:
        return token in normalized
    raise ValueError(f"Unknown open match policy: {match!r}")


def is_open_offering(
    row: Mapping[str, Optional[str]],
    reference_date: date,
    *,
    keys: FieldKeys = FIELD_KEYS,
    token: str = OPEN_OFFER_TOKEN,
    match: str = OPEN_MATCH_EXACT,
) -> bool:
    closing = parse_date_loose(row.get(keys.closing))
    if closing is None or closing < reference_date:
        return False
    return offer_type_is_open(row.get(keys.offer_type), token=token, match=match)


def select_open_offerings(
    rows: Sequence[Mapping[str, Optional[str]]],
    reference_date: date,
    *,
    keys: FieldKeys = FIELD_KEYS,
    token: str = OPEN_OFFER_TOKEN,
    match: str = OPEN_MATCH_EXACT,
) -> List[Mapping[str, Optional[str]]]:
    """
    Filter rows to currently open offerings, sorted by closing date.

    Rows are returned as-is (not copied, not mutated) in a new list.
    """
    selected = [
        row for row in rows
        if is_open_offering(row, reference_date, keys=keys, token=token, match=match)
    ]
    logger.info(
        f"Selected {len(selected)} of {len(rows)} rows open on or after {reference_date.isoformat()}"
    )

    # sorted() is stable; the closing date is non-null for every kept row.
    return sorted(selected, key=lambda row: parse_date_loose(row.get(keys.closing)))
