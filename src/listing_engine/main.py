# -*- coding: utf-8 -*-
"""
Entry point for the listing engine.

Orchestrates: logging, settings, container, cached listings, expiration refresher, shutdown (SIGINT or CancelledError).
Ticks flow: time source -> refresher -> refresh_snapshot per tracked listing (log + ListingExpiredEvent on expiry).

Run with: python -m listing_engine.main

Notebook usage:
    from listing_engine.main import run
    await run()  # Interrupt kernel to stop; system will shut down on CancelledError.
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any

from listing_engine.DI.container import Container
from listing_engine.config import get_settings
from listing_engine.exceptions import MissingRequiredConfigError
from listing_engine.logging.config import configure_logging


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def _do_shutdown(logger: Any, container: Container) -> None:
    """Clean shutdown. Safe to call on normal shutdown or CancelledError."""
    container.expiration_refresher().stop()
    container.time_source().reset()
    logger.info("main_shutdown_complete")


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    if not settings.listings.platform_category.strip():
        logger.error(
            "main_missing_platform_category",
            message="LISTINGS__PLATFORM_CATEGORY is blank",
        )
        raise MissingRequiredConfigError("LISTINGS__PLATFORM_CATEGORY")

    container = Container()
    feed = container.listing_feed_service()
    refresher = container.expiration_refresher()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    cached = await feed.load_cached()
    refresher.track(cached)
    if settings.clock.enabled:
        refresher.start()

    logger.info(
        "main_listing_engine_started",
        tracked_count=len(cached),
        tick_interval_ms=settings.clock.tick_interval_ms,
        clock_enabled=settings.clock.enabled,
        default_duration=settings.listings.default_duration.value,
    )

    try:
        await shutdown_event.wait()
    except asyncio.CancelledError:
        await _do_shutdown(logger, container)
        raise

    await _do_shutdown(logger, container)


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
