"""
Filter Engine - Builds Filter Stages from Criteria.

Criteria fields are independently optional. The engine turns each
present field into one stage; running the stages in sequence ANDs them.
No criteria means no stages, which leaves the listings untouched.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Protocol, Union

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.entities import FilterCriteria, Listing
from listing_explorer.domain.value_objects import FilterResult
from listing_explorer.filters.bedrooms import MinBedroomsFilter
from listing_explorer.filters.price import PriceRangeFilter
from listing_explorer.filters.review_score import MinReviewScoreFilter

logger = logging.getLogger(__name__)

CriteriaInput = Union[FilterCriteria, Mapping[str, Any]]


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def apply(self, listings: List[Listing]) -> FilterResult:
        ...


class FilterEngine:
    """Creates and runs the filter stages for a set of criteria."""

    def __init__(self, columns: Optional[FieldMapping] = None) -> None:
        """
        Initialize filter engine.

        Args:
            columns: Column names passed to every stage
        """
        self.columns = columns or FieldMapping()

    @staticmethod
    def to_criteria(criteria: Optional[CriteriaInput]) -> FilterCriteria:
        """Accept a FilterCriteria, a mapping (snake_case or camelCase) or None."""
        if criteria is None:
            return FilterCriteria()
        if isinstance(criteria, FilterCriteria):
            return criteria
        return FilterCriteria.model_validate(dict(criteria))

    def build_stages(self, criteria: Optional[CriteriaInput]) -> List[FilterStageProtocol]:
        """
        Build one stage per criterion present.

        Args:
            criteria: Filter criteria

        Returns:
            Stages in a fixed order: price, bedrooms, review score
        """
        criteria = self.to_criteria(criteria)
        stages: List[FilterStageProtocol] = []

        if criteria.price_range is not None:
            min_price, max_price = criteria.price_range
            stages.append(PriceRangeFilter(min_price, max_price, self.columns))
        if criteria.rooms is not None:
            stages.append(MinBedroomsFilter(criteria.rooms, self.columns))
        if criteria.review_score is not None:
            stages.append(MinReviewScoreFilter(criteria.review_score, self.columns))

        logger.debug(f"Built {len(stages)} filter stages for {criteria!r}")
        return stages

    def apply(
        self, listings: List[Listing], criteria: Optional[CriteriaInput]
    ) -> List[Listing]:
        """Run every stage in sequence and return the listings passing all of them."""
        current = list(listings)
        for stage in self.build_stages(criteria):
            current = stage.apply(current).passed
        return current
