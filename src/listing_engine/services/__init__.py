# -*- coding: utf-8 -*-
"""Application services.

Only codec-independent services are re-exported here; listing_feed and renewal
import the codec and are imported from their own packages.
"""

from listing_engine.services.countdown import CountdownLabel, build_countdown_label
from listing_engine.services.expiration import (
    ExpirationStatus,
    ListingExpirationRefresher,
    compute_status,
    refresh_snapshot,
)
from listing_engine.services.listing_duration import (
    DEFAULT_LISTING_DURATION,
    encode_policy_tag,
    decode_policy_tag,
    resolve_seconds,
)
from listing_engine.services.pricing import PricingFn, calculate_total_cost

__all__ = [
    "CountdownLabel",
    "DEFAULT_LISTING_DURATION",
    "ExpirationStatus",
    "ListingExpirationRefresher",
    "PricingFn",
    "build_countdown_label",
    "calculate_total_cost",
    "compute_status",
    "decode_policy_tag",
    "encode_policy_tag",
    "refresh_snapshot",
    "resolve_seconds",
]
