# -*- coding: utf-8 -*-
"""Event bus and event types."""

from listing_engine.events.bus import get_event_bus, set_event_bus
from listing_engine.events.listings import ListingExpiredEvent, ListingRenewedEvent

__all__ = ["get_event_bus", "set_event_bus", "ListingExpiredEvent", "ListingRenewedEvent"]
