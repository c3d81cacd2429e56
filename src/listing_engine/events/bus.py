# -*- coding: utf-8 -*-
"""Process-wide bubus bus carrying listing lifecycle events (expired, renewed)."""

from __future__ import annotations

import re

from bubus import EventBus  # type: ignore[import-untyped]

from listing_engine.config import get_settings

LISTING_EVENT_HISTORY_SIZE = 100

_event_bus: EventBus | None = None


def bus_name(app_name: str) -> str:
    """CamelCase identifier for the bus, e.g. 'listing-engine' -> 'ListingEngine'."""
    parts = [part for part in re.split(r"[^0-9A-Za-z]+", app_name) if part]
    name = "".join(part[:1].upper() + part[1:] for part in parts)
    if not name or not name.isidentifier():
        return "ListingEngine"
    return name


def get_event_bus() -> EventBus:
    """Return the shared bus, creating it on first call and naming it after the app."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus(
            name=bus_name(get_settings().app.app_name),
            max_history_size=LISTING_EVENT_HISTORY_SIZE,
            wal_path=None,
        )
    return _event_bus


def set_event_bus(bus: EventBus | None) -> None:
    """Install a bus (tests, embedding apps). None drops it so the next get creates a fresh one."""
    global _event_bus
    _event_bus = bus
