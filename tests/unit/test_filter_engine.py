"""
Unit Tests for FilterEngine.

Test Aspects Covered:
    ✅ Business Logic: Stage construction, AND semantics
    ✅ Edge Cases: No criteria, camelCase mappings
    ✅ Properties: Identity, monotonic size, intersection of sequential filters
"""

from __future__ import annotations

from typing import List

import pytest
from pydantic import ValidationError

from listing_explorer.domain.entities import FilterCriteria, Listing
from listing_explorer.filters.engine import FilterEngine


class TestFilterEngine:
    """Test cases for FilterEngine."""

    def test_no_criteria_builds_no_stages(self) -> None:
        engine = FilterEngine()

        assert engine.build_stages(None) == []
        assert engine.build_stages({}) == []
        assert engine.build_stages(FilterCriteria()) == []

    def test_builds_one_stage_per_criterion(self) -> None:
        """
        SCENARIO: All three criteria present
        EXPECTED: Price, bedrooms and review stages in that order
        """
        # Arrange
        engine = FilterEngine()
        criteria = FilterCriteria(price_range=(0, 100), rooms=1, review_score=4.0)

        # Act
        stages = engine.build_stages(criteria)

        # Assert
        assert [stage.name for stage in stages] == [
            "price_range_filter",
            "min_bedrooms_filter",
            "min_review_score_filter",
        ]

    def test_accepts_camel_case_mapping(self) -> None:
        criteria = FilterEngine.to_criteria({"priceRange": [10, 20], "reviewScore": 4})

        assert criteria.price_range == (10.0, 20.0)
        assert criteria.review_score == 4.0
        assert criteria.rooms is None

    def test_rejects_malformed_criteria_object(self) -> None:
        with pytest.raises(ValidationError):
            FilterEngine.to_criteria({"priceRange": [10]})

    def test_empty_criteria_is_identity(self, sample_listings: List[Listing]) -> None:
        result = FilterEngine().apply(sample_listings, {})

        assert result == sample_listings

    def test_criteria_are_anded(self, sample_listings: List[Listing]) -> None:
        """
        SCENARIO: Price range and minimum bedrooms together
        EXPECTED: Only listings satisfying both remain
        """
        # Act
        result = FilterEngine().apply(
            sample_listings, {"price_range": (50, 500), "rooms": 2}
        )

        # Assert
        assert [listing["id"] for listing in result] == ["2"]

    def test_sequential_filters_equal_combined_filter(
        self, sample_listings: List[Listing]
    ) -> None:
        """
        SCENARIO: Filter by price then by review vs. both at once
        EXPECTED: Same listings in the same order
        """
        # Arrange
        engine = FilterEngine()

        # Act
        sequential = engine.apply(
            engine.apply(sample_listings, {"price_range": (0, 200)}),
            {"review_score": 4.0},
        )
        combined = engine.apply(
            sample_listings, {"price_range": (0, 200), "review_score": 4.0}
        )

        # Assert
        assert sequential == combined
        assert len(combined) <= len(sample_listings)
