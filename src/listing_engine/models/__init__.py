# -*- coding: utf-8 -*-
"""Domain models."""

from listing_engine.models.duration_policy import (
    CUSTOM_TOKEN,
    CustomPolicy,
    DurationPolicy,
    ListingDuration,
    NamedPolicy,
)
from listing_engine.models.event import ProtocolEvent, Tag, TagList, freeze_tags
from listing_engine.models.listing import ListingRecord

__all__ = [
    "CUSTOM_TOKEN",
    "CustomPolicy",
    "DurationPolicy",
    "ListingDuration",
    "ListingRecord",
    "NamedPolicy",
    "ProtocolEvent",
    "Tag",
    "TagList",
    "freeze_tags",
]
