# -*- coding: utf-8 -*-
"""Countdown view model: what an "Expires in ..." badge should show for a listing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

from listing_engine.utils.duration import SECONDS_PER_DAY, SECONDS_PER_MINUTE, format_compact, format_long

DEFAULT_URGENT_THRESHOLD_SECONDS = SECONDS_PER_DAY
DEFAULT_PREFIX = "Expires in"


@dataclass(frozen=True, slots=True)
class CountdownLabel:
    """Renderer-agnostic countdown content."""

    text: str
    """e.g. 'Expires in 1d 2h 5m'."""
    aria_label: str
    title: Optional[str]
    """Long form for tooltips, e.g. '1 day, 2 hours, 5 minutes'."""
    is_urgent: bool
    aria_live: Literal["off", "polite"]
    display_seconds: int


def _display_seconds(seconds_remaining: int, prefers_reduced_motion: bool) -> int:
    if not prefers_reduced_motion:
        return seconds_remaining
    if seconds_remaining <= 0:
        return 0
    return math.ceil(seconds_remaining / SECONDS_PER_MINUTE) * SECONDS_PER_MINUTE


def build_countdown_label(
    seconds_remaining: Optional[int],
    *,
    is_expired: bool = False,
    prefers_reduced_motion: bool = False,
    urgent_threshold_seconds: int = DEFAULT_URGENT_THRESHOLD_SECONDS,
    prefix: str = DEFAULT_PREFIX,
) -> Optional[CountdownLabel]:
    """Countdown content, or None when the listing is expired or has no expiration.

    With reduced motion the remaining time is rounded up to whole minutes so the
    badge changes at most once a minute, and the aria label says "Approximately".
    """
    if is_expired or seconds_remaining is None:
        return None

    display = _display_seconds(seconds_remaining, prefers_reduced_motion)
    compact = format_compact(display)
    if not compact:
        return None
    long_label = format_long(display)

    aria_parts: list[str] = [prefix] if prefix else []
    if prefers_reduced_motion and long_label:
        aria_parts.append(f"Approximately {long_label}")
    else:
        aria_parts.append(long_label or compact)

    return CountdownLabel(
        text=f"{prefix} {compact}" if prefix else compact,
        aria_label=" ".join(aria_parts),
        title=long_label,
        is_urgent=display <= urgent_threshold_seconds,
        aria_live="off" if prefers_reduced_motion else "polite",
        display_seconds=display,
    )
