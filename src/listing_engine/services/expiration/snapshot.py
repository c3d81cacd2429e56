# -*- coding: utf-8 -*-
"""Expiration snapshot engine: expiration timestamp + reference time -> (is_expired, seconds left).

Pure functions. A listing is Live while expiration > reference_time and Expired once
expiration <= reference_time (equality counts as expired).
"""

from __future__ import annotations

import math
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from listing_engine.models.listing import ListingRecord
from listing_engine.utils.numbers import to_number

EXPIRATION_TAG = "expiration"


@dataclass(frozen=True, slots=True)
class ExpirationStatus:
    """Snapshot derived from an expiration timestamp and a reference time."""

    expiration: Optional[int]
    is_expired: bool
    seconds_until_expiration: Optional[int]


def current_unix_time() -> int:
    """Current wall-clock unix second."""
    return math.floor(time.time())


def extract_expiration(tags: Optional[Iterable[Sequence[str]]]) -> Optional[int]:
    """First `expiration` tag whose value is a finite number; malformed entries are skipped."""
    if tags is None:
        return None
    for tag in tags:
        if not tag or tag[0] != EXPIRATION_TAG:
            continue
        if len(tag) < 2 or not tag[1]:
            continue
        value = to_number(tag[1])
        if math.isfinite(value):
            return math.floor(value)
    return None


def is_expired_at_reference(expiration: Optional[int], reference_time: Optional[int] = None) -> bool:
    """True when expiration is known and not after reference_time."""
    if expiration is None:
        return False
    if reference_time is None:
        reference_time = current_unix_time()
    return expiration <= reference_time


def _seconds_left(expiration: Optional[int], reference_time: int) -> Optional[int]:
    if expiration is None:
        return None
    return max(0, expiration - reference_time)


def compute_status(
    tags: Optional[Iterable[Sequence[str]]],
    reference_time: Optional[int] = None,
) -> ExpirationStatus:
    """Expiration status of a tag list at reference_time (defaults to now)."""
    if reference_time is None:
        reference_time = current_unix_time()
    expiration = extract_expiration(tags)
    return ExpirationStatus(
        expiration=expiration,
        is_expired=is_expired_at_reference(expiration, reference_time),
        seconds_until_expiration=_seconds_left(expiration, reference_time),
    )


def refresh_snapshot(record: ListingRecord, reference_time: Optional[int] = None) -> ListingRecord:
    """Recompute the snapshot fields of a record.

    Returns the same object when nothing changed, so callers can skip work on
    identity; otherwise a copy with only is_expired/seconds_until_expiration updated.
    """
    if reference_time is None:
        reference_time = current_unix_time()

    if record.expiration is None:
        if not record.is_expired and record.seconds_until_expiration is None:
            return record
        return record.with_expiration_snapshot(is_expired=False, seconds_until_expiration=None)

    is_expired = is_expired_at_reference(record.expiration, reference_time)
    seconds_left = _seconds_left(record.expiration, reference_time)
    if record.is_expired == is_expired and record.seconds_until_expiration == seconds_left:
        return record
    return record.with_expiration_snapshot(
        is_expired=is_expired,
        seconds_until_expiration=seconds_left,
    )
