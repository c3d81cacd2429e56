# -*- coding: utf-8 -*-
"""Tag encoder: ListingFormInput -> ordered tag list for publishing."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from typing import Optional

from listing_engine.codec.form import ListingFormInput
from listing_engine.codec.shipping import PICKUP_SHIPPING_TYPES, encode_shipping
from listing_engine.models.duration_policy import DurationPolicy
from listing_engine.services.listing_duration.catalog import encode_policy_tag

DEFAULT_PLATFORM_CATEGORY = "shopstr"
DEFAULT_CLIENT_NAME = "Shopstr"
APP_HANDLER_KIND = 31990


def listing_slug(title: str) -> str:
    """SHA-256 hex of the title; slug for new listings."""
    return hashlib.sha256(title.encode("utf-8")).hexdigest()


def unique_categories(raw: Iterable[str], *, platform_category: str) -> list[str]:
    """Trimmed, non-blank, first-seen order, platform marker removed (it is appended separately)."""
    seen: dict[str, None] = {}
    for category in raw:
        value = category.strip()
        if value and value != platform_category:
            seen.setdefault(value, None)
    return list(seen)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def build_listing_tags(
    form: ListingFormInput,
    *,
    policy: Optional[DurationPolicy] = None,
    author_key: Optional[str] = None,
    relay_hint: str = "",
    platform_category: str = DEFAULT_PLATFORM_CATEGORY,
    client_name: str = DEFAULT_CLIENT_NAME,
) -> list[list[str]]:
    """Build the tag list of a listing event.

    Emits exactly one expiration_policy tag, one tag per image/category/size/volume/
    pickup location in input order, and the platform category exactly once, last
    among the categories.

    Args:
        form: Seller input.
        policy: Duration policy; defaults to form.duration_policy() (which may raise
            InvalidDurationPolicyError for an out-of-range custom cadence).
        author_key: When given, a `client` tag pointing at the listing address is added.
        relay_hint: Relay URL for the client tag.
        platform_category: Category marker appended to every listing.
        client_name: Client name for the client tag.
    """
    if policy is None:
        policy = form.duration_policy()

    d = form.d or listing_slug(form.title)
    tags: list[list[str]] = [
        ["d", d],
        ["alt", f"Product listing: {form.title}"],
    ]
    if author_key:
        tags.append(["client", client_name, f"{APP_HANDLER_KIND}:{author_key}:{d}", relay_hint])
    tags.extend(
        [
            ["title", form.title],
            ["summary", form.description],
            ["price", form.price, form.currency],
            ["location", form.location],
            encode_shipping(form.shipping_option, form.shipping_cost, form.currency),
            encode_policy_tag(policy),
        ]
    )

    for image in form.images:
        tags.append(["image", image])

    for category in unique_categories(form.categories, platform_category=platform_category):
        tags.append(["t", category])
    tags.append(["t", platform_category])

    if form.quantity:
        tags.append(["quantity", str(form.quantity)])

    for size in form.sizes:
        tags.append(["size", size, str(form.size_quantities.get(size, 0))])

    for volume in form.volumes:
        tags.append(["volume", volume, _format_number(form.volume_prices.get(volume, 0))])

    for key, value in (
        ("condition", form.condition),
        ("status", form.status),
        ("required", form.required),
        ("restrictions", form.restrictions),
    ):
        if value:
            tags.append([key, value])

    if form.shipping_option in PICKUP_SHIPPING_TYPES:
        for location in form.pickup_locations:
            if location.strip():
                tags.append(["pickup_location", location.strip()])

    return tags
