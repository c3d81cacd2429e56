# -*- coding: utf-8 -*-
"""DurationPolicy: renewal cadence of a listing (named catalog cadence or custom seconds)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ListingDuration(str, Enum):
    """Named catalog cadences. Values are the wire tokens."""

    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"


CUSTOM_TOKEN = "custom"


@dataclass(frozen=True, slots=True)
class NamedPolicy:
    """One of the catalog cadences."""

    duration: ListingDuration

    @property
    def token(self) -> str:
        return self.duration.value


@dataclass(frozen=True, slots=True)
class CustomPolicy:
    """Custom cadence in seconds.

    Construction does not normalize; the catalog normalizes on encode/resolve and
    rejects values that floor to zero hours.
    """

    seconds: Optional[float]

    @property
    def token(self) -> str:
        return CUSTOM_TOKEN


DurationPolicy = Union[NamedPolicy, CustomPolicy]
