# -*- coding: utf-8 -*-
"""Permissive numeric parsing for tag values (bad input becomes NaN, never an exception)."""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY = re.compile(r"^[+-]?Infinity$")
_RADIX_LITERAL = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def to_number(value: Any) -> float:
    """Strict whole-string conversion. Blank strings are 0, None and garbage are NaN.

    Unsigned 0x, 0o and 0b literals are read in their base; signed ones are NaN.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    if _INFINITY.match(text):
        return -math.inf if text.startswith("-") else math.inf
    if _RADIX_LITERAL.match(text):
        return float(int(text, 0))
    # float() also accepts "nan", "inf" and digit separators, which tag values never mean
    if "_" in text or text.lstrip("+-")[:1].isalpha():
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_float(value: Any) -> float:
    """Leading-prefix conversion: '12.5kg' -> 12.5, 'abc' -> NaN."""
    if value is None:
        return math.nan
    match = _FLOAT_PREFIX.match(str(value).strip())
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))
