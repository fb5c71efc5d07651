"""
Test Fixtures - Shared Test Data and Helpers.

This package contains reusable test data:
    - listings.csv: Sample listings with quoted and dirty values
    - sample_config.yaml: Sample configuration for testing
    - make_listing: Listing row builder
    - RecordingSink: In-memory dataset sink

Usage:
    from tests.fixtures import make_listing, RecordingSink
"""

from __future__ import annotations

from typing import Dict, Optional

from listing_explorer.domain.entities import Listing


class RecordingSink:
    """Sink that keeps written text in memory."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.writes: Dict[str, str] = {}
        self._error = error

    async def write(self, destination, text: str) -> None:
        if self._error is not None:
            raise self._error
        self.writes[str(destination)] = text


def make_listing(
    listing_id: str,
    price: str = "100",
    bedrooms: str = "1",
    review: str = "4.5",
    host: str = "h1",
) -> Listing:
    """Build a listing row with the standard columns."""
    return {
        "id": listing_id,
        "price": price,
        "bedrooms": bedrooms,
        "review_scores_rating": review,
        "host_id": host,
    }
