# -*- coding: utf-8 -*-
"""Listing lifecycle events."""

from listing_engine.events.listings.listing_events import ListingExpiredEvent, ListingRenewedEvent

__all__ = ["ListingExpiredEvent", "ListingRenewedEvent"]
