"""Listing engine: listing event codec, duration policies and expiration lifecycle."""

from listing_engine.codec import ListingFormInput, build_listing_tags, parse_listing_event
from listing_engine.config import get_settings
from listing_engine.DI.container import Container
from listing_engine.services.expiration import compute_status, refresh_snapshot

__version__ = "0.1.0"
__all__ = [
    "Container",
    "ListingFormInput",
    "build_listing_tags",
    "compute_status",
    "get_settings",
    "parse_listing_event",
    "refresh_snapshot",
]
