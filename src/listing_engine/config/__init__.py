"""Configuration subpackage."""

from listing_engine.config.config import (
    AppSettings,
    ClockSettings,
    CountdownSettings,
    ListingSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ClockSettings",
    "CountdownSettings",
    "ListingSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
