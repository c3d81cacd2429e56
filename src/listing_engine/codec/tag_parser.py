# -*- coding: utf-8 -*-
"""Tag decoder: ProtocolEvent -> ListingRecord.

Tags are applied in order; later occurrences overwrite scalar fields and append to
sequence fields. Unknown keys are ignored. Numeric values that do not parse become
NaN instead of failing the decode. The only hard failure is a missing tag list,
which yields None.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any, Optional

from listing_engine.codec.shipping import decode_shipping
from listing_engine.models.duration_policy import CustomPolicy
from listing_engine.models.event import ProtocolEvent
from listing_engine.models.listing import ListingRecord
from listing_engine.services.expiration.snapshot import compute_status
from listing_engine.services.listing_duration.catalog import (
    EXPIRATION_POLICY_TAG,
    decode_policy_tag,
)
from listing_engine.services.pricing.total_cost import PricingFn, calculate_total_cost
from listing_engine.utils.numbers import parse_float, to_number

CONTENT_WARNING = "content-warning"

Draft = dict[str, Any]
TagHandler = Callable[[Draft, Sequence[str]], None]

# tag key -> record field, first value wins per occurrence
_SCALAR_TAGS: dict[str, str] = {
    "title": "title",
    "summary": "summary",
    "published_at": "published_at",
    "location": "location",
    "d": "d",
    "condition": "condition",
    "status": "status",
    "required": "required",
    "restrictions": "restrictions",
}

# tag key -> record field, first value appended per occurrence
_APPEND_TAGS: dict[str, str] = {
    "image": "images",
    "t": "categories",
    "pickup_location": "pickup_locations",
}


def _first(values: Sequence[str]) -> Optional[str]:
    return values[0] if values else None


def _scalar(field: str) -> TagHandler:
    def handle(draft: Draft, values: Sequence[str]) -> None:
        value = _first(values)
        if value is not None:
            draft[field] = value

    return handle


def _append(field: str) -> TagHandler:
    def handle(draft: Draft, values: Sequence[str]) -> None:
        value = _first(values)
        if value is not None:
            draft.setdefault(field, []).append(value)

    return handle


def _price(draft: Draft, values: Sequence[str]) -> None:
    amount = values[0] if len(values) > 0 else None
    currency = values[1] if len(values) > 1 else ""
    draft["price"] = to_number(amount)
    draft["currency"] = currency


def _shipping(draft: Draft, values: Sequence[str]) -> None:
    shipping = decode_shipping(values)
    if shipping is None:
        return
    draft["shipping_type"] = shipping.shipping_type
    draft["shipping_cost"] = shipping.cost


def _content_warning(draft: Draft, values: Sequence[str]) -> None:
    draft["content_warning"] = True


def _label_namespace(draft: Draft, values: Sequence[str]) -> None:
    if _first(values) == CONTENT_WARNING:
        draft["content_warning"] = True


def _label(draft: Draft, values: Sequence[str]) -> None:
    if len(values) > 1 and values[1] == CONTENT_WARNING:
        draft["content_warning"] = True


def _quantity(draft: Draft, values: Sequence[str]) -> None:
    draft["quantity"] = to_number(_first(values))


def _size(draft: Draft, values: Sequence[str]) -> None:
    label = _first(values)
    if label is None:
        return
    quantity = values[1] if len(values) > 1 else None
    draft.setdefault("sizes", []).append(label)
    draft.setdefault("size_quantities", {})[label] = to_number(quantity)


def _volume(draft: Draft, values: Sequence[str]) -> None:
    volumes = draft.setdefault("volumes", [])
    prices = draft.setdefault("volume_prices", {})
    label = _first(values)
    if not label:
        return
    volumes.append(label)
    if len(values) > 1 and values[1]:
        prices[label] = parse_float(values[1])


def _expiration_policy(draft: Draft, values: Sequence[str]) -> None:
    policy = decode_policy_tag(values)
    if policy is None:
        return
    draft["expiration_policy"] = policy
    draft["expiration_custom_seconds"] = (
        int(policy.seconds) if isinstance(policy, CustomPolicy) and policy.seconds is not None else None
    )


TAG_HANDLERS: dict[str, TagHandler] = {
    **{key: _scalar(field) for key, field in _SCALAR_TAGS.items()},
    **{key: _append(field) for key, field in _APPEND_TAGS.items()},
    "price": _price,
    "shipping": _shipping,
    CONTENT_WARNING: _content_warning,
    "L": _label_namespace,
    "l": _label,
    "quantity": _quantity,
    "size": _size,
    "volume": _volume,
    EXPIRATION_POLICY_TAG: _expiration_policy,
}

_SEQUENCE_FIELDS = ("images", "categories", "pickup_locations", "sizes", "volumes")


def _freeze(draft: Draft) -> Draft:
    for name in _SEQUENCE_FIELDS:
        if name in draft:
            draft[name] = tuple(draft[name])
    return draft


def parse_listing_event(
    event: ProtocolEvent,
    *,
    reference_time: Optional[int] = None,
    pricing: PricingFn = calculate_total_cost,
) -> Optional[ListingRecord]:
    """Decode an event into a ListingRecord, or None when it has no tag list.

    Args:
        event: Event to decode.
        reference_time: Unix second used for the expiration snapshot (defaults to now).
        pricing: Collaborator computing total_cost over the parsed record.
    """
    if event.tags is None:
        return None

    draft: Draft = {}
    for tag in event.tags:
        if not tag:
            continue
        key, values = tag[0], tag[1:]
        handler = TAG_HANDLERS.get(key)
        if handler is not None:
            handler(draft, values)

    record = ListingRecord(
        id=event.id,
        author_key=event.author_key,
        created_at=event.created_at,
        raw_event=event,
        **_freeze(draft),
    )
    record = dataclasses.replace(record, total_cost=pricing(record))

    status = compute_status(event.tags, reference_time)
    return dataclasses.replace(
        record,
        expiration=status.expiration,
        is_expired=status.is_expired,
        seconds_until_expiration=status.seconds_until_expiration,
    )
