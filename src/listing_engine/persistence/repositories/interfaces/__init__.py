# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, etc."""

from listing_engine.persistence.repositories.interfaces.listing_cache import IListingCache

__all__ = ["IListingCache"]
