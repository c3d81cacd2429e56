"""In-memory repository implementations."""

from listing_engine.persistence.repositories.in_memory.listing_cache import InMemoryListingCache

__all__ = ["InMemoryListingCache"]
