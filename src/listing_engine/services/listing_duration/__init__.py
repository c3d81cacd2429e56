"""Listing duration policy catalog (pure logic, no I/O)."""

from listing_engine.services.listing_duration.catalog import (
    DEFAULT_CUSTOM_DURATION_SECONDS,
    DEFAULT_LISTING_DURATION,
    EXPIRATION_POLICY_TAG,
    LISTING_DURATION_DEFINITIONS,
    MAX_CUSTOM_DURATION_DAYS,
    MAX_CUSTOM_DURATION_SECONDS,
    ListingDurationDefinition,
    days_hours_to_seconds,
    decode_policy_tag,
    encode_policy_tag,
    ensure_listing_duration_policy,
    format_custom_duration_description,
    format_custom_duration_label,
    is_recognized_policy_token,
    lookup_definition,
    normalize_custom_seconds,
    resolve_seconds,
    split_custom_duration,
    validate_custom_duration,
)

__all__ = [
    "DEFAULT_CUSTOM_DURATION_SECONDS",
    "DEFAULT_LISTING_DURATION",
    "EXPIRATION_POLICY_TAG",
    "LISTING_DURATION_DEFINITIONS",
    "MAX_CUSTOM_DURATION_DAYS",
    "MAX_CUSTOM_DURATION_SECONDS",
    "ListingDurationDefinition",
    "days_hours_to_seconds",
    "decode_policy_tag",
    "encode_policy_tag",
    "ensure_listing_duration_policy",
    "format_custom_duration_description",
    "format_custom_duration_label",
    "is_recognized_policy_token",
    "lookup_definition",
    "normalize_custom_seconds",
    "resolve_seconds",
    "split_custom_duration",
    "validate_custom_duration",
]
