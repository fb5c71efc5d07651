"""
Price Range Filter Implementation.

Keeps listings whose price lies within inclusive bounds. A price that
cannot be read as a number coerces to NaN, fails both bound checks and
is rejected.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.coercion import RANGE_FALLBACK, coerce_float
from listing_explorer.domain.entities import Listing, listing_label
from listing_explorer.domain.value_objects import FilterResult


class PriceRangeFilter:
    """Filter listings by an inclusive [min, max] price range."""

    def __init__(
        self,
        min_price: float,
        max_price: float,
        columns: Optional[FieldMapping] = None,
    ) -> None:
        """
        Initialize with bounds.

        Args:
            min_price: Lowest accepted price (inclusive)
            max_price: Highest accepted price (inclusive)
            columns: Column names (defaults to the standard listing columns)
        """
        self.min_price = min_price
        self.max_price = max_price
        self.columns = columns or FieldMapping()

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "price_range_filter"

    def apply(self, listings: List[Listing]) -> FilterResult:
        """
        Apply price filtering.

        Args:
            listings: Listings to filter

        Returns:
            FilterResult with passed/rejected listings
        """
        passed: List[Listing] = []
        rejected: List[Listing] = []
        reasons: Dict[str, str] = {}

        for position, listing in enumerate(listings):
            is_valid, reason = self._check_listing(listing)
            if is_valid:
                passed.append(listing)
            else:
                rejected.append(listing)
                reasons[listing_label(listing, self.columns.id, position)] = reason

        return FilterResult(passed=passed, rejected=rejected, rejection_reasons=reasons)

    def _check_listing(self, listing: Listing) -> Tuple[bool, str]:
        """Check if a single listing is inside the price range."""
        raw = listing.get(self.columns.price)
        price = coerce_float(raw, fallback=RANGE_FALLBACK)

        if math.isnan(price):
            return False, f"price={raw!r} is not a number"

        if not self.min_price <= price <= self.max_price:
            return (
                False,
                f"price={price:g} outside [{self.min_price:g}, {self.max_price:g}]",
            )

        return True, ""
