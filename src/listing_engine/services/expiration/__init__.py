"""Expiration snapshot engine and tick-driven refresher."""

from listing_engine.services.expiration.refresher import ListingExpirationRefresher
from listing_engine.services.expiration.snapshot import (
    EXPIRATION_TAG,
    ExpirationStatus,
    compute_status,
    current_unix_time,
    extract_expiration,
    is_expired_at_reference,
    refresh_snapshot,
)

__all__ = [
    "EXPIRATION_TAG",
    "ExpirationStatus",
    "ListingExpirationRefresher",
    "compute_status",
    "current_unix_time",
    "extract_expiration",
    "is_expired_at_reference",
    "refresh_snapshot",
]
