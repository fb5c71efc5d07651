"""
Domain Layer - Listings, Criteria and Derived Values.

This package contains the core domain model for the Listing Explorer.
Listings stay plain string mappings exactly as parsed; everything numeric
is derived on demand through the coercion helpers.

Entities:
    - Listing: One parsed row (field name -> raw string value)
    - FilterCriteria: Optional price/rooms/review thresholds
    - StatsSnapshot: Count and average price per bedroom
    - HostRankingEntry: One host with its listing count

Value Objects:
    - FilterResult: Result of a single filter stage

Design Principles:
    - Listings are never mutated
    - Derived values are immutable and cheap to recompute
    - Dirty numeric text degrades to a fallback, never to an exception
"""

from listing_explorer.domain.coercion import coerce_float, coerce_int
from listing_explorer.domain.entities import (
    FilterCriteria,
    HostRankingEntry,
    Listing,
    StageResult,
    StatsSnapshot,
    listing_label,
)
from listing_explorer.domain.value_objects import FilterResult

__all__ = [
    "FilterCriteria",
    "FilterResult",
    "HostRankingEntry",
    "Listing",
    "StageResult",
    "StatsSnapshot",
    "coerce_float",
    "coerce_int",
    "listing_label",
]
