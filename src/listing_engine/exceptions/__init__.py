"""Exceptions subpackage."""

from listing_engine.exceptions.exceptions import (
    InvalidDurationPolicyError,
    ListingEngineError,
    MissingRequiredConfigError,
    RenewalError,
    TimerUnavailableError,
)

__all__ = [
    "InvalidDurationPolicyError",
    "ListingEngineError",
    "MissingRequiredConfigError",
    "RenewalError",
    "TimerUnavailableError",
]
