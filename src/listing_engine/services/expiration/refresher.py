# -*- coding: utf-8 -*-
"""ListingExpirationRefresher: keeps the expiration snapshot of tracked listings current on each tick."""

from __future__ import annotations

import structlog
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Optional

from listing_engine.clock.unix_time_source import DEFAULT_INTERVAL_MS, Unsubscribe, UnixTimeSource
from listing_engine.events.listings import ListingExpiredEvent
from listing_engine.models.listing import ListingRecord
from listing_engine.services.expiration.snapshot import refresh_snapshot

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

OnUpdate = Callable[[list[ListingRecord]], None]


class ListingExpirationRefresher:
    """Subscribes to the shared time source and refreshes tracked records per tick.

    Only records whose identity changed are reported; a Live->Expired transition
    also emits ListingExpiredEvent. Records never go back to Live here (only a
    renewal, which produces a new event and record, does that).
    """

    _event_bus: Optional["EventBus"] = None

    def __init__(
        self,
        time_source: UnixTimeSource,
        *,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        event_bus: Optional[Any] = None,
        on_update: Optional[OnUpdate] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the refresher.

        Args:
            time_source: Shared time source (injected).
            interval_ms: Tick interval to subscribe with.
            event_bus: Optional; if set, emits ListingExpiredEvent.
            on_update: Optional callback receiving the records that changed on a tick.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._time_source = time_source
        self._interval_ms = interval_ms
        self._event_bus = event_bus
        self._on_update = on_update
        self._records: dict[str, ListingRecord] = {}
        self._unsubscribe: Optional[Unsubscribe] = None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def records(self) -> list[ListingRecord]:
        """Tracked records in tracking order."""
        return list(self._records.values())

    def get(self, listing_id: str) -> Optional[ListingRecord]:
        return self._records.get(listing_id)

    def track(self, records: Iterable[ListingRecord]) -> None:
        """Add or replace records (by id), refreshed to the source's current second."""
        reference_time = self._time_source.current(self._interval_ms)
        for record in records:
            self._records[record.id] = refresh_snapshot(record, reference_time)

    def untrack(self, listing_ids: Iterable[str]) -> None:
        for listing_id in listing_ids:
            self._records.pop(listing_id, None)

    def start(self) -> None:
        """Subscribe to the time source (refreshes immediately with the current value)."""
        if self._unsubscribe is None:
            self._unsubscribe = self._time_source.subscribe(self._interval_ms, self._on_tick)
            self._logger.info(
                "expiration_refresher_started",
                refresher_interval_ms=self._interval_ms,
                refresher_tracked_count=len(self._records),
            )

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            self._logger.info("expiration_refresher_stopped")

    def refresh(self, reference_time: int) -> list[ListingRecord]:
        """Refresh every tracked record at reference_time; return the ones that changed."""
        changed: list[ListingRecord] = []
        for listing_id, record in list(self._records.items()):
            refreshed = refresh_snapshot(record, reference_time)
            if refreshed is record:
                continue
            self._records[listing_id] = refreshed
            changed.append(refreshed)
            if refreshed.is_expired and not record.is_expired:
                self._emit_expired(refreshed, reference_time)

        if changed and self._on_update is not None:
            self._on_update(changed)
        return changed

    def _on_tick(self, timestamp: int) -> None:
        self.refresh(timestamp)

    def _emit_expired(self, record: ListingRecord, reference_time: int) -> None:
        self._logger.info(
            "listing_expired",
            listing_id=record.id,
            listing_expiration=record.expiration,
            listing_detected_at=reference_time,
        )
        if self._event_bus is None or record.expiration is None:
            return
        self._event_bus.dispatch(
            ListingExpiredEvent(
                listing_id=record.id,
                author_key=record.author_key,
                expiration=record.expiration,
                detected_at=reference_time,
            )
        )
