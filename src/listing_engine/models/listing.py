# -*- coding: utf-8 -*-
"""ListingRecord: structured projection of one listing event.

Immutable. Only the expiration snapshot (is_expired, seconds_until_expiration)
is recomputed over time, and always into a new record via with_expiration_snapshot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from listing_engine.models.duration_policy import DurationPolicy
from listing_engine.models.event import ProtocolEvent


@dataclass(frozen=True, slots=True)
class ListingRecord:
    """One decoded listing.

    Identity: id (event id). Commerce, variant and lifecycle attributes mirror the
    event tags; numeric fields may be NaN when the tag value was not numeric.
    """

    id: str
    author_key: str
    created_at: int

    title: str = ""
    summary: str = ""
    published_at: str = ""
    images: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    location: str = ""
    price: float = 0.0
    currency: str = ""
    total_cost: float = 0.0
    """Assigned last by the pricing collaborator."""
    shipping_type: Optional[str] = None
    shipping_cost: Optional[float] = None

    d: Optional[str] = None
    """Listing slug (replaceable-event identifier)."""
    content_warning: bool = False
    quantity: Optional[float] = None
    sizes: Optional[tuple[str, ...]] = None
    size_quantities: Optional[dict[str, float]] = None
    volumes: Optional[tuple[str, ...]] = None
    volume_prices: Optional[dict[str, float]] = None
    """Only volumes whose tag carried a price have an entry; an explicit 0 is kept."""
    condition: Optional[str] = None
    status: Optional[str] = None
    required: Optional[str] = None
    restrictions: Optional[str] = None
    pickup_locations: Optional[tuple[str, ...]] = None

    expiration: Optional[int] = None
    is_expired: bool = False
    seconds_until_expiration: Optional[int] = None
    expiration_policy: Optional[DurationPolicy] = None
    expiration_custom_seconds: Optional[int] = None

    # Buyer selection; never touched by the engine.
    selected_size: Optional[str] = None
    selected_quantity: Optional[int] = None
    selected_volume: Optional[str] = None
    volume_price: Optional[float] = None

    raw_event: Optional[ProtocolEvent] = field(default=None, compare=False, repr=False)

    def with_expiration_snapshot(
        self,
        *,
        is_expired: bool,
        seconds_until_expiration: Optional[int],
    ) -> ListingRecord:
        """Return a copy with only the snapshot fields replaced."""
        return dataclasses.replace(
            self,
            is_expired=is_expired,
            seconds_until_expiration=seconds_until_expiration,
        )

    def with_selection(
        self,
        *,
        size: Optional[str] = None,
        quantity: Optional[int] = None,
        volume: Optional[str] = None,
    ) -> ListingRecord:
        """Return a copy with the buyer's size/quantity/volume selection applied."""
        volume_price = None
        if volume is not None and self.volume_prices is not None:
            volume_price = self.volume_prices.get(volume)
        return dataclasses.replace(
            self,
            selected_size=size,
            selected_quantity=quantity,
            selected_volume=volume,
            volume_price=volume_price,
        )
