# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from listing_engine.persistence.repositories.interfaces import IListingCache
from listing_engine.persistence.repositories.in_memory import InMemoryListingCache

__all__ = ["IListingCache", "InMemoryListingCache"]
