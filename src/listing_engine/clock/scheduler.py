# -*- coding: utf-8 -*-
"""Interval schedulers used by the shared time source."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional, Protocol

from listing_engine.exceptions import TimerUnavailableError


class TimerHandle(Protocol):
    """Anything that can be cancelled (asyncio.Task satisfies this)."""

    def cancel(self) -> object: ...


class IntervalScheduler(ABC):
    """Starts a repeating timer that calls `callback` every `interval_seconds`."""

    @abstractmethod
    def start(self, interval_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Start the timer and return its handle.

        Raises:
            TimerUnavailableError: if no timer can be started right now.
        """
        ...


class AsyncioIntervalScheduler(IntervalScheduler):
    """One asyncio task per timer, sleeping `interval_seconds` between callbacks."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Loop to run timers on; defaults to the loop running at start().
        """
        self._loop = loop

    def start(self, interval_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise TimerUnavailableError("no running event loop for interval timer") from exc
        if loop.is_closed():
            raise TimerUnavailableError("event loop is closed")
        return loop.create_task(self._run(interval_seconds, callback))

    @staticmethod
    async def _run(interval_seconds: float, callback: Callable[[], None]) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            callback()
