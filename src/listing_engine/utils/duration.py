# -*- coding: utf-8 -*-
"""Duration calculus: seconds <-> (days, hours, minutes, seconds) and countdown strings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


@dataclass(frozen=True, slots=True)
class DurationParts:
    """Breakdown of a non-negative whole number of seconds."""

    days: int
    hours: int
    minutes: int
    seconds: int


def _safe_seconds(total_seconds: float) -> int:
    """Floor to a non-negative int; negative, NaN and infinite input become 0."""
    if total_seconds is None or not math.isfinite(total_seconds):
        return 0
    return max(0, math.floor(total_seconds))


def to_parts(total_seconds: float) -> DurationParts:
    """Decompose total_seconds into days/hours/minutes/seconds. Never raises."""
    safe = _safe_seconds(total_seconds)
    return DurationParts(
        days=safe // SECONDS_PER_DAY,
        hours=(safe % SECONDS_PER_DAY) // SECONDS_PER_HOUR,
        minutes=(safe % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE,
        seconds=safe % SECONDS_PER_MINUTE,
    )


def _is_absent(total_seconds: Optional[float]) -> bool:
    return total_seconds is None or (isinstance(total_seconds, float) and math.isnan(total_seconds))


def pluralize(count: int, unit: str) -> str:
    """Return '1 hour' / '2 hours'."""
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_compact(total_seconds: Optional[float]) -> Optional[str]:
    """Compact countdown such as '1d 0h 5m', '3h 12m' or '42s'. None for absent/NaN input.

    Once a larger unit is non-zero every smaller unit down to minutes is shown,
    even when zero, so the width stays stable while ticking.
    """
    if _is_absent(total_seconds):
        return None

    parts = to_parts(total_seconds)  # type: ignore[arg-type]
    out: list[str] = []
    if parts.days > 0:
        out.append(f"{parts.days}d")
    if parts.hours > 0 or parts.days > 0:
        out.append(f"{parts.hours}h")
    if parts.minutes > 0 or parts.hours > 0 or parts.days > 0:
        out.append(f"{parts.minutes}m")
    if not out:
        out.append(f"{parts.seconds}s")
    return " ".join(out[:3])


def format_long(total_seconds: Optional[float]) -> Optional[str]:
    """Long countdown such as '1 day, 2 hours' listing only non-zero units. None for absent/NaN."""
    if _is_absent(total_seconds):
        return None

    parts = to_parts(total_seconds)  # type: ignore[arg-type]
    out: list[str] = []
    if parts.days > 0:
        out.append(pluralize(parts.days, "day"))
    if parts.hours > 0:
        out.append(pluralize(parts.hours, "hour"))
    if parts.minutes > 0:
        out.append(pluralize(parts.minutes, "minute"))
    if not out:
        out.append(pluralize(parts.seconds, "second"))
    return ", ".join(out)
