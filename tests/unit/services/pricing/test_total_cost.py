# -*- coding: utf-8 -*-
"""Unit tests for the default pricing collaborator."""

from __future__ import annotations

import math
from collections.abc import Callable

from listing_engine.models.listing import ListingRecord
from listing_engine.services.pricing.total_cost import calculate_total_cost


def test_price_plus_shipping() -> None:
    record = ListingRecord(id="a", author_key="k", created_at=0, price=20.0, shipping_cost=5.5)

    assert calculate_total_cost(record) == 25.5


def test_missing_shipping_counts_as_zero() -> None:
    assert calculate_total_cost(ListingRecord(id="a", author_key="k", created_at=0, price=20.0)) == 20.0


def test_nan_price_propagates() -> None:
    record = ListingRecord(id="a", author_key="k", created_at=0, price=math.nan, shipping_cost=1.0)

    assert math.isnan(calculate_total_cost(record))


def test_selected_volume_price_replaces_base_price(listing_factory: Callable[..., ListingRecord]) -> None:
    record = listing_factory(extra_tags=[["volume", "1l", "30"], ["volume", "250ml", "0"], ["shipping", "Free"]])

    assert calculate_total_cost(record.with_selection(volume="1l")) == 30.0
    assert calculate_total_cost(record.with_selection(volume="250ml")) == 0.0
    assert calculate_total_cost(record.with_selection(volume="5l")) == 21.0
