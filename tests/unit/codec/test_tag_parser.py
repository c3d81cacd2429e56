# -*- coding: utf-8 -*-
"""Unit tests for parse_listing_event."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable

import pytest

from listing_engine.codec.tag_parser import parse_listing_event
from listing_engine.models.duration_policy import CustomPolicy, ListingDuration, NamedPolicy
from listing_engine.models.event import ProtocolEvent
from listing_engine.models.listing import ListingRecord


def _parse(
    event_factory: Callable[..., ProtocolEvent],
    tags: list[list[str]],
    reference_time: int,
) -> ListingRecord:
    record = parse_listing_event(event_factory(tags), reference_time=reference_time)
    assert record is not None
    return record


def test_returns_none_without_tag_list(event_factory: Callable[..., ProtocolEvent]) -> None:
    assert parse_listing_event(event_factory(None)) is None


def test_empty_tag_list_yields_defaults(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
    author_key: str,
) -> None:
    record = _parse(event_factory, [], reference_time)

    assert record.author_key == author_key
    assert record.created_at == reference_time
    assert record.title == ""
    assert record.images == ()
    assert record.categories == ()
    assert record.price == 0.0
    assert record.currency == ""
    assert record.total_cost == 0.0
    assert record.expiration is None
    assert record.is_expired is False
    assert record.seconds_until_expiration is None
    assert record.expiration_policy is None


def test_decodes_commerce_tags(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    record = _parse(
        event_factory,
        [
            ["title", "Handmade mug"],
            ["summary", "Stoneware, 350ml"],
            ["published_at", "1759990000"],
            ["image", "https://img.example/1.png"],
            ["image", "https://img.example/2.png"],
            ["t", "ceramics"],
            ["t", "shopstr"],
            ["location", "Lisbon"],
            ["price", "21", "USD"],
            ["shipping", "Added Cost", "4", "USD"],
            ["d", "mug-001"],
            ["quantity", "3"],
            ["condition", "New"],
            ["status", "active"],
            ["required", "email"],
            ["restrictions", "EU only"],
        ],
        reference_time,
    )

    assert record.title == "Handmade mug"
    assert record.summary == "Stoneware, 350ml"
    assert record.published_at == "1759990000"
    assert record.images == ("https://img.example/1.png", "https://img.example/2.png")
    assert record.categories == ("ceramics", "shopstr")
    assert record.location == "Lisbon"
    assert record.price == 21.0
    assert record.currency == "USD"
    assert record.shipping_type == "Added Cost"
    assert record.shipping_cost == 4.0
    assert record.total_cost == 25.0
    assert record.d == "mug-001"
    assert record.quantity == 3.0
    assert (record.condition, record.status, record.required, record.restrictions) == (
        "New",
        "active",
        "email",
        "EU only",
    )


def test_unknown_tags_are_ignored(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    base = [["title", "Mug"], ["price", "5", "USD"]]
    plain = _parse(event_factory, base, reference_time)
    noisy = _parse(event_factory, [["alt", "x"], *base, ["client", "Shopstr"], ["zzz"], []], reference_time)

    assert noisy == dataclasses.replace(plain, id=noisy.id)


def test_later_scalar_tags_overwrite_earlier_ones(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(event_factory, [["title", "First"], ["title", "Second"]], reference_time)
    assert record.title == "Second"


def test_non_numeric_price_becomes_nan(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    record = _parse(event_factory, [["price", "abc", "USD"]], reference_time)

    assert math.isnan(record.price)
    assert record.currency == "USD"
    assert math.isnan(record.total_cost)


@pytest.mark.parametrize(
    ("shipping", "expected_type", "expected_cost"),
    [
        (["shipping", "Added Cost", "5", "USD"], "Added Cost", 5.0),
        (["shipping", "7", "USD"], "Added Cost", 7.0),
        (["shipping", "Free"], "Free", 0.0),
        (["shipping", "Pickup"], "Pickup", 0.0),
    ],
)
def test_shipping_variants_by_arity(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
    shipping: list[str],
    expected_type: str,
    expected_cost: float,
) -> None:
    record = _parse(event_factory, [shipping], reference_time)

    assert record.shipping_type == expected_type
    assert record.shipping_cost == expected_cost


def test_shipping_with_unexpected_arity_is_ignored(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(event_factory, [["shipping"], ["shipping", "a", "b", "c", "d"]], reference_time)

    assert record.shipping_type is None
    assert record.shipping_cost is None


@pytest.mark.parametrize(
    "tag",
    [
        ["content-warning"],
        ["content-warning", "nudity"],
        ["L", "content-warning"],
        ["l", "nudity", "content-warning"],
    ],
)
def test_content_warning_variants(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
    tag: list[str],
) -> None:
    assert _parse(event_factory, [tag], reference_time).content_warning is True


@pytest.mark.parametrize("tag", [["L", "ugc"], ["l", "content-warning"], ["l", "nudity", "other"]])
def test_other_labels_do_not_set_content_warning(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
    tag: list[str],
) -> None:
    assert _parse(event_factory, [tag], reference_time).content_warning is False


def test_sizes_with_quantities(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    record = _parse(event_factory, [["size", "S", "2"], ["size", "M", "0"], ["size", "L"]], reference_time)

    assert record.sizes == ("S", "M", "L")
    assert record.size_quantities is not None
    assert record.size_quantities["S"] == 2.0
    assert record.size_quantities["M"] == 0.0
    assert math.isnan(record.size_quantities["L"])


def test_volume_prices_keep_explicit_zero_and_skip_missing(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(
        event_factory,
        [["volume", "250ml", "0"], ["volume", "500ml"], ["volume", "1l", "12.5 USD"], ["volume", ""]],
        reference_time,
    )

    assert record.volumes == ("250ml", "500ml", "1l")
    assert record.volume_prices == {"250ml": 0.0, "1l": 12.5}


def test_volume_tag_with_empty_label_still_initializes_sequences(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(event_factory, [["volume", ""]], reference_time)

    assert record.volumes == ()
    assert record.volume_prices == {}


def test_pickup_locations_accumulate(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    record = _parse(
        event_factory,
        [["pickup_location", "Market stall 4"], ["pickup_location", "Café Rio"]],
        reference_time,
    )

    assert record.pickup_locations == ("Market stall 4", "Café Rio")


@pytest.mark.parametrize(
    ("values", "policy", "custom_seconds"),
    [
        (["weekly"], NamedPolicy(ListingDuration.WEEKLY), None),
        (["monthly"], NamedPolicy(ListingDuration.MONTHLY), None),
        (["custom", "7300"], CustomPolicy(seconds=7200), 7200),
        (["custom", "10"], None, None),
        (["forever"], None, None),
    ],
)
def test_expiration_policy_tag(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
    values: list[str],
    policy: NamedPolicy | CustomPolicy | None,
    custom_seconds: int | None,
) -> None:
    record = _parse(event_factory, [["expiration_policy", *values]], reference_time)

    assert record.expiration_policy == policy
    assert record.expiration_custom_seconds == custom_seconds


def test_unrecognized_expiration_policy_keeps_earlier_value(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(
        event_factory,
        [["expiration_policy", "custom", "7200"], ["expiration_policy", "forever"], ["expiration_policy", "custom", "10"]],
        reference_time,
    )

    assert record.expiration_policy == CustomPolicy(seconds=7200)
    assert record.expiration_custom_seconds == 7200


def test_expiration_snapshot_is_computed_at_reference_time(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(event_factory, [["expiration", str(reference_time + 90)]], reference_time)

    assert record.expiration == reference_time + 90
    assert record.is_expired is False
    assert record.seconds_until_expiration == 90


def test_malformed_expiration_tags_are_skipped(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> None:
    record = _parse(
        event_factory,
        [["expiration"], ["expiration", ""], ["expiration", "soon"], ["expiration", str(reference_time - 1)]],
        reference_time,
    )

    assert record.expiration == reference_time - 1
    assert record.is_expired is True
    assert record.seconds_until_expiration == 0


def test_raw_event_is_kept(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    event = event_factory([["title", "Mug"]])
    record = parse_listing_event(event, reference_time=reference_time)

    assert record is not None
    assert record.raw_event is event


def test_custom_pricing_collaborator(event_factory: Callable[..., ProtocolEvent], reference_time: int) -> None:
    record = parse_listing_event(
        event_factory([["price", "10", "USD"]]),
        reference_time=reference_time,
        pricing=lambda listing: listing.price * 2,
    )

    assert record is not None
    assert record.total_cost == 20.0
