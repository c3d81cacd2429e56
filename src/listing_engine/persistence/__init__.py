"""Persistence layer (repositories, etc.)."""

from listing_engine.persistence.repositories import IListingCache, InMemoryListingCache

__all__ = ["IListingCache", "InMemoryListingCache"]
