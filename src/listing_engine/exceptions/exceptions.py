"""Custom exceptions for the listing engine."""

from __future__ import annotations


class ListingEngineError(Exception):
    """Base exception for listing-engine errors."""

    pass


class MissingRequiredConfigError(ListingEngineError):
    """Raised when a required configuration value is missing."""

    pass


class InvalidDurationPolicyError(ListingEngineError):
    """Raised when a freshly entered custom cadence is outside [1 hour, 6 days]."""

    def __init__(
        self,
        message: str,
        *,
        requested_seconds: int | None = None,
    ) -> None:
        super().__init__(message)
        self.requested_seconds = requested_seconds


class RenewalError(ListingEngineError):
    """Raised when a listing cannot be renewed (no raw event, signer unavailable or failed)."""

    def __init__(
        self,
        message: str,
        *,
        listing_id: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.listing_id = listing_id
        self.cause = cause


class TimerUnavailableError(ListingEngineError):
    """Raised by a scheduler that cannot start an interval timer (e.g. no running event loop)."""

    pass
