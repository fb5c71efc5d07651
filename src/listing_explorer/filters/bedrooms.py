"""
Minimum Bedrooms Filter Implementation.

Bedrooms are read as an integer ("2.5" counts as 2); a missing or
malformed value counts as 0 bedrooms.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.coercion import THRESHOLD_FALLBACK, coerce_int
from listing_explorer.domain.entities import Listing, listing_label
from listing_explorer.domain.value_objects import FilterResult


class MinBedroomsFilter:
    """Filter listings by a minimum number of bedrooms."""

    def __init__(self, min_rooms: int, columns: Optional[FieldMapping] = None) -> None:
        self.min_rooms = min_rooms
        self.columns = columns or FieldMapping()

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "min_bedrooms_filter"

    def apply(self, listings: List[Listing]) -> FilterResult:
        """Keep listings with at least ``min_rooms`` bedrooms."""
        passed: List[Listing] = []
        rejected: List[Listing] = []
        reasons: Dict[str, str] = {}

        for position, listing in enumerate(listings):
            rooms = coerce_int(
                listing.get(self.columns.bedrooms), fallback=THRESHOLD_FALLBACK
            )
            if rooms >= self.min_rooms:
                passed.append(listing)
            else:
                rejected.append(listing)
                label = listing_label(listing, self.columns.id, position)
                reasons[label] = f"bedrooms={rooms} < min={self.min_rooms}"

        return FilterResult(passed=passed, rejected=rejected, rejection_reasons=reasons)
