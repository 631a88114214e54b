"""
Feed acquisition.

One best-effort GET per pipeline run: no retry, no cache. Transport failures
and non-success statuses become FetchError; the body is decoded with the same
encoding detection used for uploaded files.
"""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from .errors import FetchError
from .normalize import decode_feed

DEFAULT_HEADERS = {
    "User-Agent": "offerings-feed/0.1",
    "Accept": "text/csv, text/plain, */*",
}


def fetch_feed_text(
    url: str,
    *,
    timeout: float = 30.0,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Fetch the published CSV and return it as text.

    Args:
        url: Feed location
        timeout: Request timeout in seconds
        client: Optional pre-built client (tests inject a MockTransport here)

    Raises:
        FetchError: On transport failure or a non-2xx response
    """
    logger.info(f"Fetching feed {url}")

    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url, headers=DEFAULT_HEADERS)
        else:
            response = client.get(url, headers=DEFAULT_HEADERS)
    except httpx.HTTPError as e:
        logger.error(f"Feed request failed: {e}")
        raise FetchError(f"No se pudo leer el CSV ({e.__class__.__name__}).") from e

    if not response.is_success:
        logger.error(f"Feed returned HTTP {response.status_code} for {url}")
        raise FetchError(
            f"No se pudo leer el CSV (HTTP {response.status_code}).",
            status_code=response.status_code,
        )

    logger.debug(f"Fetched {url} ({response.status_code}, {len(response.content)} bytes)")
    return decode_feed(response.content)
