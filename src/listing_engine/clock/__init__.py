# -*- coding: utf-8 -*-
"""Shared time source and interval schedulers."""

from listing_engine.clock.scheduler import AsyncioIntervalScheduler, IntervalScheduler, TimerHandle
from listing_engine.clock.unix_time_source import (
    DEFAULT_INTERVAL_MS,
    MIN_INTERVAL_MS,
    CurrentUnixTime,
    TimeStore,
    UnixTimeListener,
    UnixTimeSource,
    normalize_interval_ms,
)

__all__ = [
    "AsyncioIntervalScheduler",
    "CurrentUnixTime",
    "DEFAULT_INTERVAL_MS",
    "IntervalScheduler",
    "MIN_INTERVAL_MS",
    "TimeStore",
    "TimerHandle",
    "UnixTimeListener",
    "UnixTimeSource",
    "normalize_interval_ms",
]
