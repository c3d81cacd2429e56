# -*- coding: utf-8 -*-
"""In-memory listing cache (keyed by event id, LRU-bounded)."""

from __future__ import annotations

from collections.abc import Iterable

from cachetools import LRUCache

from listing_engine.models.listing import ListingRecord
from listing_engine.persistence.repositories.interfaces.listing_cache import IListingCache


class InMemoryListingCache(IListingCache):
    """In-memory implementation of IListingCache.

    Uses cachetools.LRUCache so memory stays bounded when browsing many listings.
    """

    def __init__(self, maxsize: int = 4096) -> None:
        """Initialize an empty cache holding at most maxsize listings."""
        self._store: LRUCache[str, ListingRecord] = LRUCache(maxsize=max(1, maxsize))

    async def add(self, listing: ListingRecord) -> None:
        """Insert or replace a listing (by id)."""
        self._store[listing.id] = listing

    async def remove(self, listing_ids: Iterable[str]) -> None:
        """Remove listings by id. Unknown ids are ignored."""
        for listing_id in listing_ids:
            self._store.pop(listing_id, None)

    async def fetch_all(self) -> list[ListingRecord]:
        """Return every cached listing."""
        return list(self._store.values())
