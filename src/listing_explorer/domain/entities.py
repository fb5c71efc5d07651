"""
Core Domain Entities.

A listing is kept as the raw mapping produced by the dataset source.
The remaining entities describe user input (criteria) and derived
values (statistics, host ranking).
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

# One parsed row: field name -> raw string value
Listing = Dict[str, str]


class FilterCriteria(BaseModel):
    """Independently optional filter thresholds, ANDed when present."""

    price_range: Optional[Tuple[float, float]] = Field(
        default=None,
        alias="priceRange",
        description="Inclusive (min, max) price bounds",
    )
    rooms: Optional[int] = Field(
        default=None, description="Minimum number of bedrooms"
    )
    review_score: Optional[float] = Field(
        default=None,
        alias="reviewScore",
        description="Minimum review score",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_empty(self) -> bool:
        """True when no criterion is set (filtering is the identity)."""
        return (
            self.price_range is None
            and self.rooms is None
            and self.review_score is None
        )


class StatsSnapshot(BaseModel):
    """Summary values computed from the current working set."""

    count: int = Field(..., ge=0, description="Number of listings")
    avg_price_per_bedroom: float = Field(
        ..., description="Total price divided by total bedrooms (0 if none)"
    )

    model_config = {"frozen": True}


class HostRankingEntry(BaseModel):
    """A host and the number of listings it has in the working set."""

    host: str
    count: int = Field(..., ge=1)

    model_config = {"frozen": True}


def listing_label(listing: Listing, id_field: str, position: int) -> str:
    """Readable label for a listing in logs: its id, else its row position."""
    listing_id = listing.get(id_field)
    if listing_id:
        return listing_id
    return f"row {position}"


class StageResult(BaseModel):
    """Result of a single filter stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    filter_reasons: Dict[str, str] = Field(
        default_factory=dict, description="Listing label -> rejection reason"
    )

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)
