# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Optional

from dependency_injector import containers, providers

from listing_engine.clock import UnixTimeSource
from listing_engine.codec import build_listing_tags
from listing_engine.config import Settings, get_settings
from listing_engine.events.bus import get_event_bus
from listing_engine.persistence.repositories.in_memory import InMemoryListingCache
from listing_engine.services.countdown import CountdownLabel, build_countdown_label
from listing_engine.services.expiration import ListingExpirationRefresher
from listing_engine.services.listing_feed import ListingFeedService
from listing_engine.services.pricing import calculate_total_cost
from listing_engine.services.renewal import ListingRenewalService


def _build_listing_cache(settings: Settings) -> InMemoryListingCache:
    """Build the listing cache with size from settings."""
    return InMemoryListingCache(maxsize=settings.listings.cache_maxsize)


def _build_tag_builder(settings: Settings) -> Callable[..., list[list[str]]]:
    """build_listing_tags bound to the configured platform category and client name."""
    return functools.partial(
        build_listing_tags,
        platform_category=settings.listings.platform_category,
        client_name=settings.listings.client_name,
    )


def _build_countdown_labeler(settings: Settings) -> Callable[..., Optional[CountdownLabel]]:
    """build_countdown_label bound to the configured urgency threshold and prefix."""
    return functools.partial(
        build_countdown_label,
        urgent_threshold_seconds=settings.countdown.urgent_threshold_seconds,
        prefix=settings.countdown.prefix,
    )


def _build_renewal_service(
    settings: Settings,
    cache: InMemoryListingCache,
    signer: Any,
    event_bus: Any,
) -> ListingRenewalService:
    return ListingRenewalService(
        cache,
        signer,
        event_bus,
        default_policy=settings.listings.default_policy,
        listing_kind=settings.listings.listing_kind,
    )


def _build_expiration_refresher(
    settings: Settings,
    time_source: UnixTimeSource,
    event_bus: Any,
) -> ListingExpirationRefresher:
    return ListingExpirationRefresher(
        time_source,
        interval_ms=settings.clock.tick_interval_ms,
        event_bus=event_bus,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, time source, listing cache and listing services."""

    config = providers.Callable(get_settings)

    event_bus = providers.Callable(get_event_bus)

    # Signing lives outside the engine; override with an IListingSigner once a seller signs in.
    signer = providers.Object(None)

    time_source = providers.Singleton(UnixTimeSource)

    listing_cache = providers.Singleton(_build_listing_cache, config)

    tag_builder = providers.Singleton(_build_tag_builder, config)

    countdown_labeler = providers.Singleton(_build_countdown_labeler, config)

    listing_feed_service = providers.Singleton(
        ListingFeedService,
        cache=listing_cache,
        pricing=providers.Object(calculate_total_cost),
    )

    renewal_service = providers.Singleton(
        _build_renewal_service,
        config,
        listing_cache,
        signer,
        event_bus,
    )

    expiration_refresher = providers.Singleton(
        _build_expiration_refresher,
        config,
        time_source,
        event_bus,
    )
