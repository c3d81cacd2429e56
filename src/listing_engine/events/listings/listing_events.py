"""Listing lifecycle events (emitted by the expiration refresher and the renewal service)."""

from __future__ import annotations

from bubus import BaseEvent  # type: ignore[import-untyped]


class ListingExpiredEvent(BaseEvent[None]):
    """Emitted when a tracked listing crosses from Live to Expired."""

    listing_id: str
    author_key: str
    expiration: int
    """Expiration timestamp (unix seconds) that was reached."""
    detected_at: int
    """Reference time of the tick that observed the transition."""


class ListingRenewedEvent(BaseEvent[None]):
    """Emitted after a renewed listing event was signed, published and cached."""

    listing_id: str
    """Id of the new event."""
    previous_listing_id: str
    author_key: str
    expiration: int
    policy_token: str
    """'weekly', 'bi-weekly', 'monthly' or 'custom'."""
