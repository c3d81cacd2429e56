# -*- coding: utf-8 -*-
"""Abstract interface for the local listing cache (in-memory, IndexedDB-like store, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from listing_engine.models.listing import ListingRecord


class IListingCache(ABC):
    """Interface for caching decoded listings. Only non-expired listings are written."""

    @abstractmethod
    async def add(self, listing: ListingRecord) -> None:
        """Insert or replace a listing (by id)."""
        ...

    @abstractmethod
    async def remove(self, listing_ids: Iterable[str]) -> None:
        """Remove listings by id. Unknown ids are ignored."""
        ...

    @abstractmethod
    async def fetch_all(self) -> list[ListingRecord]:
        """Return every cached listing."""
        ...
