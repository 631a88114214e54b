"""Errors escalated past the pipeline. Row-level anomalies never raise."""

from __future__ import annotations

from typing import Optional


class OfferingsError(RuntimeError):
    """Base class for failures that prevent any result from being shown."""
    pass


class ConfigurationError(OfferingsError):
    """Raised when the feed location is not configured."""
    pass


class FetchError(OfferingsError):
    """Raised on transport failure or a non-success response from the feed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
