# -*- coding: utf-8 -*-
"""Tag codec: listing events <-> structured listings."""

from listing_engine.codec.form import ListingFormInput
from listing_engine.codec.shipping import (
    LegacyAddedCost,
    ShippingTag,
    ShippingTypeOnly,
    ShippingWithCost,
    decode_shipping,
)
from listing_engine.codec.tag_builder import build_listing_tags, listing_slug, unique_categories
from listing_engine.codec.tag_parser import parse_listing_event

__all__ = [
    "LegacyAddedCost",
    "ListingFormInput",
    "ShippingTag",
    "ShippingTypeOnly",
    "ShippingWithCost",
    "build_listing_tags",
    "decode_shipping",
    "listing_slug",
    "parse_listing_event",
    "unique_categories",
]
