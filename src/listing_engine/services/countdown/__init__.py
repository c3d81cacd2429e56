"""Countdown view model."""

from listing_engine.services.countdown.countdown_label import CountdownLabel, build_countdown_label

__all__ = ["CountdownLabel", "build_countdown_label"]
