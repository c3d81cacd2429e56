# -*- coding: utf-8 -*-
"""Shipping tag variants, selected by value arity at decode time.

  ["shipping", type, cost, currency]  -> ShippingWithCost
  ["shipping", cost, currency]        -> LegacyAddedCost (older clients)
  ["shipping", type]                  -> ShippingTypeOnly (cost 0)

Any other arity decodes to None and leaves the record's shipping fields untouched.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

from listing_engine.utils.numbers import to_number

LEGACY_SHIPPING_TYPE = "Added Cost"
PICKUP_SHIPPING_TYPES = frozenset({"Pickup", "Free/Pickup"})


@dataclass(frozen=True, slots=True)
class ShippingWithCost:
    shipping_type: str
    cost: float
    currency: str


@dataclass(frozen=True, slots=True)
class LegacyAddedCost:
    cost: float
    currency: str

    @property
    def shipping_type(self) -> str:
        return LEGACY_SHIPPING_TYPE


@dataclass(frozen=True, slots=True)
class ShippingTypeOnly:
    shipping_type: str

    @property
    def cost(self) -> float:
        return 0.0


ShippingTag = Union[ShippingWithCost, LegacyAddedCost, ShippingTypeOnly]


def decode_shipping(values: Sequence[str]) -> Optional[ShippingTag]:
    """Decode shipping tag values (without the key) by arity."""
    if len(values) == 3:
        shipping_type, cost, currency = values
        return ShippingWithCost(shipping_type=shipping_type, cost=to_number(cost), currency=currency)
    if len(values) == 2:
        cost, currency = values
        return LegacyAddedCost(cost=to_number(cost), currency=currency)
    if len(values) == 1:
        return ShippingTypeOnly(shipping_type=values[0])
    return None


def encode_shipping(shipping_type: str, cost: Optional[str], currency: str) -> list[str]:
    """Always the 3-value form; a missing cost is written as '0'."""
    return ["shipping", shipping_type, cost or "0", currency]
