# -*- coding: utf-8 -*-
"""Utility modules."""

from listing_engine.utils.duration import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    DurationParts,
    format_compact,
    format_long,
    pluralize,
    to_parts,
)
from listing_engine.utils.numbers import parse_float, to_number

__all__ = [
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "DurationParts",
    "format_compact",
    "format_long",
    "parse_float",
    "pluralize",
    "to_number",
    "to_parts",
]
