"""Listing feed ingest (decode + cache policy)."""

from listing_engine.services.listing_feed.listing_feed_service import FeedResult, ListingFeedService

__all__ = ["FeedResult", "ListingFeedService"]
