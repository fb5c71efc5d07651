"""
Permissive Numeric Coercion.

Listing fields arrive as raw text and are frequently dirty ("120 USD",
"", "N/A"). Numbers are read from the longest leading numeric prefix;
text without such a prefix is malformed and maps to a fallback value.
"Infinity" (optionally signed, case-sensitive) counts as a numeric
prefix.

Fallback per field role:
    - Range comparisons (price in a price range): NaN, so the
      comparison fails and the listing does not match
    - Thresholds (bedrooms, review score): 0
    - Sums (price and bedrooms in statistics): 0
"""

from __future__ import annotations

import math
import re
from typing import Optional

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

# Fallbacks by role
RANGE_FALLBACK = math.nan
THRESHOLD_FALLBACK = 0
SUM_FALLBACK = 0


def parse_float(value: Optional[str]) -> float:
    """
    Read a float from the leading numeric prefix of a string.

    Args:
        value: Raw field value (may be None for missing fields)

    Returns:
        Parsed number, or NaN if the value has no numeric prefix
    """
    if value is None:
        return math.nan
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Read an integer from the leading digits of a string.

    "2.5" reads as 2, "3 rooms" as 3.

    Returns:
        Parsed integer, or None if the value has no leading digits
    """
    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    return int(match.group(1))


def coerce_float(value: Optional[str], fallback: float = RANGE_FALLBACK) -> float:
    """Parse a float, returning ``fallback`` for malformed or missing values."""
    number = parse_float(value)
    if math.isnan(number):
        return fallback
    return number


def coerce_int(value: Optional[str], fallback: int = THRESHOLD_FALLBACK) -> int:
    """Parse an integer, returning ``fallback`` for malformed or missing values."""
    number = parse_int(value)
    if number is None:
        return fallback
    return number
