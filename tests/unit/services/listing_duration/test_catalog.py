# -*- coding: utf-8 -*-
"""Unit tests for the listing duration policy catalog."""

from __future__ import annotations

import math

import pytest

from listing_engine.exceptions import InvalidDurationPolicyError
from listing_engine.models.duration_policy import CustomPolicy, ListingDuration, NamedPolicy
from listing_engine.services.listing_duration.catalog import (
    CUSTOM_DURATION_ERROR_MESSAGE,
    DEFAULT_LISTING_DURATION,
    LISTING_DURATION_DEFINITIONS,
    MAX_CUSTOM_DURATION_SECONDS,
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

HOUR = 3600
DAY = 86_400


def test_catalog_has_three_named_cadences_in_order() -> None:
    assert [(d.value.value, d.seconds) for d in LISTING_DURATION_DEFINITIONS] == [
        ("weekly", 7 * DAY),
        ("bi-weekly", 14 * DAY),
        ("monthly", 30 * DAY),
    ]


@pytest.mark.parametrize("token", ["weekly", "bi-weekly", "monthly", "custom"])
def test_recognized_tokens(token: str) -> None:
    assert is_recognized_policy_token(token) is True


@pytest.mark.parametrize("token", ["Weekly", "daily", "", None])
def test_unrecognized_tokens(token: str | None) -> None:
    assert is_recognized_policy_token(token) is False


def test_lookup_definition_accepts_enum_and_token() -> None:
    assert lookup_definition(ListingDuration.MONTHLY) is lookup_definition("monthly")
    assert lookup_definition("custom") is None
    assert lookup_definition("yearly") is None
    assert lookup_definition(None) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, None),
        (3599, None),
        (-HOUR, None),
        (HOUR, HOUR),
        (HOUR + 59, HOUR),
        (2 * HOUR + 1800, 2 * HOUR),
        (144 * HOUR, 144 * HOUR),
        (144 * HOUR + 1, 144 * HOUR),
        (30 * DAY, MAX_CUSTOM_DURATION_SECONDS),
        (math.inf, MAX_CUSTOM_DURATION_SECONDS),
        (-math.inf, None),
        (math.nan, None),
        (None, None),
    ],
)
def test_normalize_custom_seconds(raw: float | None, expected: int | None) -> None:
    assert normalize_custom_seconds(raw) == expected


def test_normalized_custom_seconds_are_whole_hours_within_bounds() -> None:
    for raw in range(0, 200 * HOUR, 1799):
        normalized = normalize_custom_seconds(raw)
        if normalized is None:
            continue
        assert normalized % HOUR == 0
        assert HOUR <= normalized <= 144 * HOUR


def test_days_hours_to_seconds_clamps_each_component() -> None:
    assert days_hours_to_seconds(2, 3) == 2 * DAY + 3 * HOUR
    assert days_hours_to_seconds(1.9, 2.5) == DAY + 2 * HOUR
    assert days_hours_to_seconds(-1, 5) == 5 * HOUR
    assert days_hours_to_seconds(math.nan, math.inf) == 0


@pytest.mark.parametrize(
    ("policy", "expected"),
    [
        (NamedPolicy(ListingDuration.WEEKLY), ["expiration_policy", "weekly"]),
        (NamedPolicy(ListingDuration.BI_WEEKLY), ["expiration_policy", "bi-weekly"]),
        (CustomPolicy(seconds=7200), ["expiration_policy", "custom", "7200"]),
        (CustomPolicy(seconds=7300.5), ["expiration_policy", "custom", "7200"]),
        (CustomPolicy(seconds=10 * DAY), ["expiration_policy", "custom", str(144 * HOUR)]),
    ],
)
def test_encode_policy_tag(policy: NamedPolicy | CustomPolicy, expected: list[str]) -> None:
    assert encode_policy_tag(policy) == expected


@pytest.mark.parametrize("seconds", [0, 1800, None, math.nan])
def test_encode_invalid_custom_policy_falls_back_to_default(seconds: float | None) -> None:
    assert encode_policy_tag(CustomPolicy(seconds=seconds)) == ["expiration_policy", "weekly"]
    assert encode_policy_tag(
        CustomPolicy(seconds=seconds),
        default=NamedPolicy(ListingDuration.MONTHLY),
    ) == ["expiration_policy", "monthly"]


@pytest.mark.parametrize(
    "policy",
    [
        NamedPolicy(ListingDuration.WEEKLY),
        NamedPolicy(ListingDuration.BI_WEEKLY),
        NamedPolicy(ListingDuration.MONTHLY),
        CustomPolicy(seconds=HOUR),
        CustomPolicy(seconds=50 * HOUR),
        CustomPolicy(seconds=144 * HOUR),
    ],
)
def test_decode_of_encoded_valid_policy_is_identity(policy: NamedPolicy | CustomPolicy) -> None:
    assert decode_policy_tag(encode_policy_tag(policy)[1:]) == policy


@pytest.mark.parametrize(
    "values",
    [
        [],
        ["daily"],
        ["custom"],
        ["custom", ""],
        ["custom", "abc"],
        ["custom", "0"],
        ["custom", "1800"],
        ["custom", "-7200"],
    ],
)
def test_decode_invalid_values_returns_none(values: list[str]) -> None:
    assert decode_policy_tag(values) is None


def test_decode_custom_normalizes_and_caps() -> None:
    assert decode_policy_tag(["custom", "7300"]) == CustomPolicy(seconds=7200)
    assert decode_policy_tag(["custom", str(30 * DAY)]) == CustomPolicy(seconds=144 * HOUR)


def test_resolve_seconds() -> None:
    assert resolve_seconds() == 7 * DAY
    assert resolve_seconds(None) == 7 * DAY
    assert resolve_seconds(NamedPolicy(ListingDuration.MONTHLY)) == 30 * DAY
    assert resolve_seconds(CustomPolicy(seconds=3 * HOUR)) == 3 * HOUR
    assert resolve_seconds(CustomPolicy(seconds=10)) == 7 * DAY
    assert resolve_seconds(None, default=NamedPolicy(ListingDuration.BI_WEEKLY)) == 14 * DAY


def test_validate_custom_duration_accepts_in_range_values() -> None:
    assert validate_custom_duration(2, 3) == CustomPolicy(seconds=2 * DAY + 3 * HOUR)
    assert validate_custom_duration(9, 0) == CustomPolicy(seconds=144 * HOUR)


def test_validate_custom_duration_rejects_less_than_an_hour() -> None:
    with pytest.raises(InvalidDurationPolicyError) as exc_info:
        validate_custom_duration(0, 0)

    assert str(exc_info.value) == CUSTOM_DURATION_ERROR_MESSAGE
    assert exc_info.value.requested_seconds == 0


def test_ensure_listing_duration_policy_falls_back_to_default() -> None:
    assert ensure_listing_duration_policy(None) == DEFAULT_LISTING_DURATION
    assert ensure_listing_duration_policy(["nope"]) == DEFAULT_LISTING_DURATION
    assert ensure_listing_duration_policy(["monthly"]) == NamedPolicy(ListingDuration.MONTHLY)


def test_split_custom_duration() -> None:
    assert split_custom_duration(2 * DAY + 3 * HOUR + 120) == (2, 3, 2)
    assert split_custom_duration(None) == (0, 0, 0)


def test_custom_duration_copy() -> None:
    assert format_custom_duration_label(2 * DAY + 3 * HOUR) == "Custom · renew every 2 days · 3 hours"
    assert format_custom_duration_label(None) == "Custom · renew at your bespoke cadence"
    assert format_custom_duration_description(DAY + HOUR) == (
        "This bespoke cadence keeps your drop live for 1 day, 1 hour before it quietly retires."
    )
    assert "six days" in format_custom_duration_description(0)
