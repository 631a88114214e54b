"""
The offerings pipeline.

raw rows -> normalize_rows -> select_open_offerings -> project_offerings

`build_offerings` is the pure part. `load_offerings` adds configuration and
the feed fetch around it and is what the HTTP layer calls.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

import httpx
from loguru import logger

from .config import Settings
from .feed import fetch_feed_text
from .formatters import start_of_today
from .models import OfferingsResponse
from .normalize import RawRow, decode_feed, normalize_rows, read_csv_rows
from .projector import project_offerings
from .rules import NO_OFFERINGS_MESSAGE, OPEN_MATCH_EXACT
from .selector import select_open_offerings


def build_offerings(
    raw_rows: Iterable[RawRow],
    reference_date: Optional[date] = None,
    *,
    open_match: str = OPEN_MATCH_EXACT,
) -> OfferingsResponse:
    """Run normalization, selection and projection over already-parsed rows."""
    reference_date = reference_date or start_of_today()

    rows = normalize_rows(raw_rows)
    selected = select_open_offerings(rows, reference_date, match=open_match)
    items = project_offerings(selected)

    return OfferingsResponse(
        reference_date=reference_date,
        count=len(items),
        items=items,
        message=None if items else NO_OFFERINGS_MESSAGE,
    )


def offerings_from_bytes(
    raw: bytes,
    reference_date: Optional[date] = None,
    *,
    open_match: str = OPEN_MATCH_EXACT,
) -> OfferingsResponse:
    return build_offerings(read_csv_rows(decode_feed(raw)), reference_date, open_match=open_match)


def load_offerings(
    settings: Settings,
    reference_date: Optional[date] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> OfferingsResponse:
    """
    Full run against the configured feed.

    Raises:
        ConfigurationError: If no feed location is configured (checked before fetching)
        FetchError: If the feed cannot be fetched
    """
    url = settings.require_feed_url()
    text = fetch_feed_text(url, timeout=settings.http_timeout, client=client)
    raw_rows = read_csv_rows(text)
    logger.info(f"Feed parsed into {len(raw_rows)} rows")
    return build_offerings(raw_rows, reference_date, open_match=settings.open_match)
