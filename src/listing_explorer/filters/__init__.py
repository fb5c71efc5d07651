"""
Filters Package - Listing Filter Stages.

Each stage checks one criterion and returns a FilterResult with the
passed listings, the rejected listings and a reason per rejection.
The FilterEngine builds one stage per criterion present and ANDs them
by running them in sequence.

Filters:
    - PriceRangeFilter: Inclusive price bounds (malformed price never matches)
    - MinBedroomsFilter: Minimum bedroom count (malformed counts as 0)
    - MinReviewScoreFilter: Minimum review score (malformed counts as 0)

Design Principles:
    - Each filter is independently testable
    - Thresholds and column names injected via constructor
    - Input order is always preserved
    - Clear rejection reasons for audit trail
"""

from listing_explorer.filters.bedrooms import MinBedroomsFilter
from listing_explorer.filters.engine import FilterEngine, FilterStageProtocol
from listing_explorer.filters.price import PriceRangeFilter
from listing_explorer.filters.review_score import MinReviewScoreFilter

__all__ = [
    "FilterEngine",
    "FilterStageProtocol",
    "MinBedroomsFilter",
    "MinReviewScoreFilter",
    "PriceRangeFilter",
]
