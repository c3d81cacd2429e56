# -*- coding: utf-8 -*-
"""Shared unix-time source: one ticking timer per interval, shared by all subscribers.

Stores are keyed by the normalized interval (ms, at least 250). A store is created on
the first subscription for its interval and deleted, timer included, when its last
subscriber leaves. Every subscriber gets the current value synchronously on
subscribe (existing subscribers too when that moves the store to a new second);
after that a tick notifies only when the unix second has advanced, so
values seen by one subscriber are strictly increasing.

The registry is owned by the composition root (see DI.container) and injected;
tests call reset() to tear it down.
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from listing_engine.clock.scheduler import AsyncioIntervalScheduler, IntervalScheduler, TimerHandle
from listing_engine.exceptions import TimerUnavailableError

MIN_INTERVAL_MS = 250
DEFAULT_INTERVAL_MS = 1000

UnixTimeListener = Callable[[int], None]
Unsubscribe = Callable[[], None]


def normalize_interval_ms(interval_ms: float) -> int:
    """max(250, floor(interval_ms)); non-finite input uses the default interval."""
    if interval_ms is None or not math.isfinite(interval_ms):
        return DEFAULT_INTERVAL_MS
    return max(MIN_INTERVAL_MS, math.floor(interval_ms))


@dataclass
class TimeStore:
    """Per-interval state: last delivered second, subscribers, timer."""

    interval_ms: int
    current: int
    listeners: dict[object, UnixTimeListener] = field(default_factory=dict)
    timer: Optional[TimerHandle] = None


class UnixTimeSource:
    """Registry of per-interval time stores."""

    def __init__(
        self,
        scheduler: Optional[IntervalScheduler] = None,
        *,
        clock: Callable[[], float] = time.time,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the registry.

        Args:
            scheduler: Timer backend; defaults to AsyncioIntervalScheduler.
            clock: Wall clock returning unix seconds (float).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._scheduler = scheduler or AsyncioIntervalScheduler()
        self._clock = clock
        self._stores: dict[int, TimeStore] = {}
        # Guards _stores and every store; listeners are always called outside it.
        self._lock = threading.RLock()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def now(self) -> int:
        """Instantaneous unix second (static read, no subscription)."""
        return math.floor(self._clock())

    def subscribe(self, interval_ms: float, callback: UnixTimeListener) -> Unsubscribe:
        """Register callback on the store for interval_ms and deliver the current value.

        If the store advanced to a new second on this call, existing subscribers are
        notified too. A callback that raises on first delivery is unsubscribed and the
        error propagates.

        Returns:
            An idempotent unsubscribe function.
        """
        interval = normalize_interval_ms(interval_ms)
        token = object()
        with self._lock:
            store = self._get_or_create_store(interval)
            previous = store.current
            store.current = max(store.current, self.now())
            current = store.current
            existing = list(store.listeners.values()) if current > previous else []
            store.listeners[token] = callback
            if store.timer is None:
                self._start_timer(store)

        def unsubscribe() -> None:
            self._unsubscribe(interval, token)

        self._notify(existing, interval, current)
        try:
            callback(current)
        except Exception:
            unsubscribe()
            raise

        return unsubscribe

    def current(self, interval_ms: float = DEFAULT_INTERVAL_MS) -> int:
        """Last value of the store for interval_ms, or the instantaneous clock if none exists."""
        with self._lock:
            store = self._stores.get(normalize_interval_ms(interval_ms))
            if store is not None:
                return store.current
        return self.now()

    @property
    def active_intervals(self) -> list[int]:
        """Normalized intervals that currently have a store."""
        with self._lock:
            return sorted(self._stores)

    def subscriber_count(self, interval_ms: float) -> int:
        with self._lock:
            store = self._stores.get(normalize_interval_ms(interval_ms))
            return len(store.listeners) if store is not None else 0

    def has_timer(self, interval_ms: float) -> bool:
        with self._lock:
            store = self._stores.get(normalize_interval_ms(interval_ms))
            return store is not None and store.timer is not None

    def reset(self) -> None:
        """Cancel every timer and drop every store (teardown)."""
        with self._lock:
            for store in self._stores.values():
                if store.timer is not None:
                    store.timer.cancel()
                    store.timer = None
                store.listeners.clear()
            self._stores.clear()
        self._logger.debug("time_source_reset")

    def tick(self, interval_ms: float) -> None:
        """Advance the store for interval_ms to the current second and notify if it changed.

        Called by the store's timer; public so a driver without a scheduler can pump it.
        """
        interval = normalize_interval_ms(interval_ms)
        with self._lock:
            store = self._stores.get(interval)
            if store is None:
                return
            next_timestamp = self.now()
            if next_timestamp <= store.current:
                return
            store.current = next_timestamp
            listeners = list(store.listeners.values())

        self._notify(listeners, interval, next_timestamp)

    def _notify(self, listeners: list[UnixTimeListener], interval: int, timestamp: int) -> None:
        for listener in listeners:
            try:
                listener(timestamp)
            except Exception:
                self._logger.exception(
                    "time_source_listener_failed",
                    time_store_interval_ms=interval,
                    time_store_timestamp=timestamp,
                )

    def _get_or_create_store(self, interval: int) -> TimeStore:
        store = self._stores.get(interval)
        if store is not None:
            return store
        store = TimeStore(interval_ms=interval, current=self.now())
        self._stores[interval] = store
        self._logger.debug("time_store_created", time_store_interval_ms=interval)
        return store

    def _start_timer(self, store: TimeStore) -> None:
        interval = store.interval_ms
        try:
            store.timer = self._scheduler.start(interval / 1000, lambda: self.tick(interval))
        except TimerUnavailableError as exc:
            self._logger.warning(
                "time_source_timer_unavailable",
                time_store_interval_ms=interval,
                error=str(exc),
            )

    def _unsubscribe(self, interval: int, token: object) -> None:
        with self._lock:
            store = self._stores.get(interval)
            if store is None or store.listeners.pop(token, None) is None:
                return
            if store.listeners:
                return
            if store.timer is not None:
                store.timer.cancel()
                store.timer = None
            del self._stores[interval]
        self._logger.debug("time_store_destroyed", time_store_interval_ms=interval)


class CurrentUnixTime:
    """One consumer of the shared time source (e.g. a countdown on screen).

    Enabled: subscribes on start() and exposes the pushed value via `now`.
    Disabled: never subscribes; `now` reads the clock on every access and
    on_change is never called.
    """

    def __init__(
        self,
        source: UnixTimeSource,
        *,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        is_enabled: bool = True,
        on_change: Optional[UnixTimeListener] = None,
    ) -> None:
        self._source = source
        self._interval_ms = interval_ms
        self._is_enabled = is_enabled
        self._on_change = on_change
        self._now = source.current(interval_ms)
        self._unsubscribe: Optional[Unsubscribe] = None

    @property
    def is_enabled(self) -> bool:
        return self._is_enabled

    @property
    def now(self) -> int:
        if not self._is_enabled:
            return self._source.now()
        return self._now

    def start(self) -> CurrentUnixTime:
        if self._is_enabled and self._unsubscribe is None:
            self._unsubscribe = self._source.subscribe(self._interval_ms, self._receive)
        return self

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _receive(self, timestamp: int) -> None:
        self._now = timestamp
        if self._on_change is not None:
            self._on_change(timestamp)

    def __enter__(self) -> CurrentUnixTime:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
