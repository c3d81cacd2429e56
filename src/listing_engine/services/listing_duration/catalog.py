# -*- coding: utf-8 -*-
"""Listing duration policy catalog: named cadences, custom cadence bounds and the expiration_policy tag.

Pure logic, no I/O. Encoding is lenient (an invalid custom cadence falls back to the
default named cadence so a malformed tag is never published); decoding is strict
(an invalid custom cadence decodes to None and the caller picks the fallback).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

from listing_engine.exceptions import InvalidDurationPolicyError
from listing_engine.models.duration_policy import (
    CUSTOM_TOKEN,
    CustomPolicy,
    DurationPolicy,
    ListingDuration,
    NamedPolicy,
)
from listing_engine.utils.duration import SECONDS_PER_DAY, SECONDS_PER_HOUR, pluralize, to_parts
from listing_engine.utils.numbers import to_number

EXPIRATION_POLICY_TAG = "expiration_policy"

MAX_CUSTOM_DURATION_DAYS = 6
MAX_CUSTOM_DURATION_SECONDS = MAX_CUSTOM_DURATION_DAYS * SECONDS_PER_DAY
MAX_CUSTOM_DURATION_HOURS = MAX_CUSTOM_DURATION_SECONDS // SECONDS_PER_HOUR
DEFAULT_CUSTOM_DURATION_SECONDS = 2 * SECONDS_PER_DAY

DEFAULT_LISTING_DURATION = NamedPolicy(ListingDuration.WEEKLY)

CUSTOM_DURATION_ERROR_MESSAGE = (
    "Choose at least one hour (and no more than six days) for your custom cadence."
)


@dataclass(frozen=True, slots=True)
class ListingDurationDefinition:
    """Catalog entry. Only `seconds` drives the engine; the rest is display copy."""

    value: ListingDuration
    title: str
    subtitle: str
    cadence_label: str
    cadence_description: str
    seconds: int


LISTING_DURATION_DEFINITIONS: tuple[ListingDurationDefinition, ...] = (
    ListingDurationDefinition(
        value=ListingDuration.WEEKLY,
        title="Weekly",
        subtitle="A poised weekly refresh that keeps your audience returning.",
        cadence_label="Weekly · renew every 7 days",
        cadence_description=(
            "A refined tempo that keeps inventory feeling fresh while establishing "
            "a reliable rhythm for collectors."
        ),
        seconds=7 * SECONDS_PER_DAY,
    ),
    ListingDurationDefinition(
        value=ListingDuration.BI_WEEKLY,
        title="Bi-weekly",
        subtitle="Twice-monthly polish for effortless merchandising upkeep.",
        cadence_label="Bi-weekly · renew every 14 days",
        cadence_description=(
            "The signature cadence: balances discovery time with an always-evolving storefront."
        ),
        seconds=14 * SECONDS_PER_DAY,
    ),
    ListingDurationDefinition(
        value=ListingDuration.MONTHLY,
        title="Monthly",
        subtitle="The leisurely cadence for heritage collections and evergreen drops.",
        cadence_label="Monthly · renew every 30 days",
        cadence_description=(
            "Ideal for enduring essentials. Let timeless goods shine with a once-a-month encore."
        ),
        seconds=30 * SECONDS_PER_DAY,
    ),
)

_LOOKUP: dict[str, ListingDurationDefinition] = {
    definition.value.value: definition for definition in LISTING_DURATION_DEFINITIONS
}


def is_recognized_policy_token(token: Optional[str]) -> bool:
    """True for the named cadence tokens and 'custom'."""
    return token == CUSTOM_TOKEN or token in _LOOKUP


def lookup_definition(value: Any) -> Optional[ListingDurationDefinition]:
    """Catalog entry for a named cadence (enum or token). None for 'custom' or unknown input."""
    if isinstance(value, ListingDuration):
        value = value.value
    if not isinstance(value, str):
        return None
    return _LOOKUP.get(value)


def normalize_custom_seconds(raw_seconds: Optional[float]) -> Optional[int]:
    """Floor to whole hours, capped at 144 hours. None when the result is below one hour."""
    if raw_seconds is None or math.isnan(raw_seconds):
        return None
    if math.isinf(raw_seconds):
        return MAX_CUSTOM_DURATION_SECONDS if raw_seconds > 0 else None

    floored_hours = math.floor(raw_seconds / SECONDS_PER_HOUR)
    if floored_hours <= 0:
        return None
    return min(floored_hours, MAX_CUSTOM_DURATION_HOURS) * SECONDS_PER_HOUR


def days_hours_to_seconds(days: float, hours: float) -> int:
    """Combine days and hours; each is clamped to a non-negative int (non-finite -> 0)."""
    safe_days = max(0, math.floor(days)) if _finite(days) else 0
    safe_hours = max(0, math.floor(hours)) if _finite(hours) else 0
    return safe_days * SECONDS_PER_DAY + safe_hours * SECONDS_PER_HOUR


def _finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def validate_custom_duration(days: float, hours: float) -> CustomPolicy:
    """Build a custom policy from freshly entered days/hours, or reject it.

    Raises:
        InvalidDurationPolicyError: if the cadence is below one hour.
    """
    requested = days_hours_to_seconds(days, hours)
    normalized = normalize_custom_seconds(requested)
    if normalized is None:
        raise InvalidDurationPolicyError(CUSTOM_DURATION_ERROR_MESSAGE, requested_seconds=requested)
    return CustomPolicy(seconds=normalized)


def encode_policy_tag(
    policy: DurationPolicy,
    *,
    default: NamedPolicy = DEFAULT_LISTING_DURATION,
) -> list[str]:
    """Encode the expiration_policy tag. Never emits a malformed tag."""
    if isinstance(policy, CustomPolicy):
        normalized = normalize_custom_seconds(policy.seconds)
        if normalized is None:
            return [EXPIRATION_POLICY_TAG, default.token]
        return [EXPIRATION_POLICY_TAG, CUSTOM_TOKEN, str(normalized)]
    return [EXPIRATION_POLICY_TAG, policy.token]


def decode_policy_tag(values: Sequence[str]) -> Optional[DurationPolicy]:
    """Decode expiration_policy tag values (without the key). None when invalid."""
    if not values:
        return None
    token = values[0]
    if not is_recognized_policy_token(token):
        return None
    if token == CUSTOM_TOKEN:
        detail = values[1] if len(values) > 1 else None
        normalized = normalize_custom_seconds(to_number(detail))
        if normalized is None:
            return None
        return CustomPolicy(seconds=normalized)
    return NamedPolicy(ListingDuration(token))


def resolve_seconds(
    policy: Optional[DurationPolicy] = None,
    *,
    default: NamedPolicy = DEFAULT_LISTING_DURATION,
) -> int:
    """Lifetime in seconds granted by a policy; invalid custom cadences use the default."""
    default_seconds = _LOOKUP[default.token].seconds
    if policy is None:
        return default_seconds
    if isinstance(policy, CustomPolicy):
        normalized = normalize_custom_seconds(policy.seconds)
        return normalized if normalized is not None else default_seconds
    definition = _LOOKUP.get(policy.token)
    return definition.seconds if definition is not None else default_seconds


def ensure_listing_duration_policy(
    values: Optional[Sequence[str]],
    *,
    default: NamedPolicy = DEFAULT_LISTING_DURATION,
) -> DurationPolicy:
    """Decode tag values, falling back to the default policy when absent or invalid."""
    if values is None:
        return default
    return decode_policy_tag(values) or default


def split_custom_duration(custom_seconds: Optional[float]) -> tuple[int, int, int]:
    """(days, hours, minutes) of a custom cadence; zeros for absent input."""
    if not custom_seconds:
        return (0, 0, 0)
    parts = to_parts(custom_seconds)
    return (parts.days, parts.hours, parts.minutes)


def format_custom_duration_label(custom_seconds: Optional[float]) -> str:
    """Short label for the custom cadence option, e.g. 'Custom · renew every 2 days · 3 hours'."""
    if not custom_seconds:
        return "Custom · renew at your bespoke cadence"

    days, hours, minutes = split_custom_duration(custom_seconds)
    segments: list[str] = []
    if days > 0:
        segments.append(pluralize(days, "day"))
    if hours > 0:
        segments.append(pluralize(hours, "hour"))
    if minutes > 0 and not segments:
        segments.append(pluralize(minutes, "minute"))

    cadence = " · ".join(segments) or "moments"
    return f"Custom · renew every {cadence}"


def format_custom_duration_description(custom_seconds: Optional[float]) -> str:
    """Sentence describing how long a custom cadence keeps a listing live."""
    if not custom_seconds:
        return (
            "Craft a limited-time showcase that disappears within six days unless you relist it."
        )

    days, hours, minutes = split_custom_duration(custom_seconds)
    fragments: list[str] = []
    if days > 0:
        fragments.append(pluralize(days, "day"))
    if hours > 0:
        fragments.append(pluralize(hours, "hour"))
    if minutes > 0:
        fragments.append(pluralize(minutes, "minute"))

    cadence = ", ".join(fragments) or "an hour"
    return f"This bespoke cadence keeps your drop live for {cadence} before it quietly retires."
