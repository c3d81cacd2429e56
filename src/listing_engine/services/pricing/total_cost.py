# -*- coding: utf-8 -*-
"""Default pricing collaborator: total cost of a listing (base or volume price + shipping)."""

from __future__ import annotations

from collections.abc import Callable

from listing_engine.models.listing import ListingRecord

PricingFn = Callable[[ListingRecord], float]


def calculate_total_cost(record: ListingRecord) -> float:
    """Price plus shipping cost. A selected volume's price replaces the base price.

    NaN in either operand propagates so bad tag data stays visible.
    """
    base = record.volume_price if record.volume_price is not None else record.price
    return base + (record.shipping_cost or 0.0)
