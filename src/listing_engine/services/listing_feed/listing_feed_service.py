# -*- coding: utf-8 -*-
"""ListingFeedService: turns fetched listing events into records and keeps the cache to active ones."""

from __future__ import annotations

import structlog
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from listing_engine.codec.tag_parser import parse_listing_event
from listing_engine.models.event import ProtocolEvent
from listing_engine.models.listing import ListingRecord
from listing_engine.persistence.repositories.interfaces.listing_cache import IListingCache
from listing_engine.services.expiration.snapshot import (
    current_unix_time,
    refresh_snapshot,
)
from listing_engine.services.pricing.total_cost import PricingFn, calculate_total_cost


@dataclass(frozen=True)
class FeedResult:
    """Outcome of one ingest pass."""

    events: list[ProtocolEvent]
    """Every input event, expired ones included, in input order."""
    listings: list[ListingRecord]
    """Decoded records (events without a tag list are skipped)."""
    author_keys: set[str] = field(default_factory=set)
    """Authors of active listings (for profile lookups)."""
    removed_ids: list[str] = field(default_factory=list)
    """Cached listings evicted because they are now expired."""

    @property
    def active(self) -> list[ListingRecord]:
        return [listing for listing in self.listings if not listing.is_expired]

    @property
    def expired(self) -> list[ListingRecord]:
        return [listing for listing in self.listings if listing.is_expired]


class ListingFeedService:
    """Decodes listing events, caches the active ones and evicts expired cache entries."""

    def __init__(
        self,
        cache: IListingCache,
        *,
        pricing: PricingFn = calculate_total_cost,
        clock: Callable[[], int] = current_unix_time,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the service.

        Args:
            cache: Listing cache (injected).
            pricing: Total-cost collaborator passed to the decoder.
            clock: Returns the reference unix second when none is given.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._cache = cache
        self._pricing = pricing
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def ingest(
        self,
        events: Iterable[ProtocolEvent],
        *,
        reference_time: Optional[int] = None,
    ) -> FeedResult:
        """Decode events, cache active listings and drop expired ones from the cache.

        Expired listings are still decoded and returned for display; they are never written.
        """
        now = reference_time if reference_time is not None else self._clock()
        all_events = list(events)
        listings: list[ListingRecord] = []
        author_keys: set[str] = set()
        expired_count = 0

        for event in all_events:
            record = parse_listing_event(event, reference_time=now, pricing=self._pricing)
            if record is None:
                self._logger.debug("listing_feed_skipped_event", listing_id=event.id)
                continue
            listings.append(record)
            if record.is_expired:
                expired_count += 1
                continue
            author_keys.add(event.author_key)
            await self._cache.add(record)

        removed_ids = await self._evict_expired(now)

        self._logger.info(
            "listing_feed_ingested",
            listing_feed_events_count=len(all_events),
            listing_feed_decoded_count=len(listings),
            listing_feed_expired_count=expired_count,
            listing_feed_evicted_count=len(removed_ids),
        )
        return FeedResult(
            events=all_events,
            listings=listings,
            author_keys=author_keys,
            removed_ids=removed_ids,
        )

    async def load_cached(self, *, reference_time: Optional[int] = None) -> list[ListingRecord]:
        """Cached listings with their snapshot refreshed to reference_time."""
        now = reference_time if reference_time is not None else self._clock()
        return [refresh_snapshot(record, now) for record in await self._cache.fetch_all()]

    async def _evict_expired(self, reference_time: int) -> list[str]:
        cached = await self._cache.fetch_all()
        removed_ids = [
            record.id
            for record in cached
            if refresh_snapshot(record, reference_time).is_expired
        ]
        await self._cache.remove(removed_ids)
        return removed_ids
