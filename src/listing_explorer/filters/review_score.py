"""
Minimum Review Score Filter Implementation.

Listings without a readable review score count as scoring 0, so any
positive threshold rejects unreviewed listings.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.coercion import THRESHOLD_FALLBACK, coerce_float
from listing_explorer.domain.entities import Listing, listing_label
from listing_explorer.domain.value_objects import FilterResult


class MinReviewScoreFilter:
    """Filter listings by a minimum review score."""

    def __init__(
        self, min_score: float, columns: Optional[FieldMapping] = None
    ) -> None:
        self.min_score = min_score
        self.columns = columns or FieldMapping()

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "min_review_score_filter"

    def apply(self, listings: List[Listing]) -> FilterResult:
        passed: List[Listing] = []
        rejected: List[Listing] = []
        reasons: Dict[str, str] = {}

        for position, listing in enumerate(listings):
            score = coerce_float(
                listing.get(self.columns.review_score), fallback=THRESHOLD_FALLBACK
            )
            if score >= self.min_score:
                passed.append(listing)
            else:
                rejected.append(listing)
                label = listing_label(listing, self.columns.id, position)
                reasons[label] = f"review_score={score:g} < min={self.min_score:g}"

        return FilterResult(passed=passed, rejected=rejected, rejection_reasons=reasons)
