# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit and integration tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from listing_engine.codec.tag_parser import parse_listing_event
from listing_engine.models.event import ProtocolEvent, freeze_tags
from listing_engine.models.listing import ListingRecord
from listing_engine.persistence.repositories.in_memory.listing_cache import InMemoryListingCache


class FakeTimer:
    """Cancellable handle returned by FakeScheduler."""

    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self.interval_seconds = interval_seconds
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.callback()


class FakeScheduler:
    """Records started timers instead of running them; tests fire them by hand."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def start(self, interval_seconds: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval_seconds, callback)
        self.timers.append(timer)
        return timer

    @property
    def created(self) -> int:
        return len(self.timers)

    @property
    def active(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled]


class FakeClock:
    """Settable wall clock (unix seconds)."""

    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def reference_time() -> int:
    """Stable unix second used as "now" in deterministic assertions."""
    return 1_760_000_000


@pytest.fixture
def author_key() -> str:
    """Default seller public key (hex) used by tests."""
    return "a" * 64


@pytest.fixture
def fake_clock(reference_time: int) -> FakeClock:
    return FakeClock(float(reference_time))


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def event_factory(author_key: str, reference_time: int) -> Callable[..., ProtocolEvent]:
    """Build a listing ProtocolEvent; `tags` may be given as lists, or None for no tag list."""
    counter = {"n": 0}

    def _build(tags: Sequence[Sequence[Any]] | None = (), **overrides: Any) -> ProtocolEvent:
        counter["n"] += 1
        return ProtocolEvent(
            id=overrides.pop("id", f"event-{counter['n']}"),
            author_key=overrides.pop("author_key", author_key),
            created_at=overrides.pop("created_at", reference_time),
            kind=overrides.pop("kind", 30402),
            content=overrides.pop("content", ""),
            tags=freeze_tags(tags),
            signature=overrides.pop("signature", ""),
        )

    return _build


@pytest.fixture
def listing_factory(
    event_factory: Callable[..., ProtocolEvent],
    reference_time: int,
) -> Callable[..., ListingRecord]:
    """Decode a listing with a title, a price and an expiration `expires_in` seconds after reference_time."""

    def _build(
        *,
        expires_in: int | None = 3600,
        extra_tags: Sequence[Sequence[str]] = (),
        at: int | None = None,
        **overrides: Any,
    ) -> ListingRecord:
        tags: list[list[str]] = [
            ["title", overrides.pop("title", "Handmade mug")],
            ["price", "21", "USD"],
            ["expiration_policy", "weekly"],
        ]
        if expires_in is not None:
            tags.append(["expiration", str(reference_time + expires_in)])
        tags.extend(list(tag) for tag in extra_tags)
        event = event_factory(tags, **overrides)
        record = parse_listing_event(event, reference_time=at if at is not None else reference_time)
        assert record is not None
        return record

    return _build


@pytest.fixture
def listing_cache() -> InMemoryListingCache:
    """Fresh in-memory listing cache per test."""
    return InMemoryListingCache()

