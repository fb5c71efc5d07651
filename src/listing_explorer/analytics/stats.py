"""
Listing Statistics.

The average price per bedroom is a ratio of sums, not a mean of
per-listing ratios: listings with 0 bedrooms still contribute their
price to the total.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.coercion import SUM_FALLBACK, coerce_float, coerce_int
from listing_explorer.domain.entities import Listing, StatsSnapshot

logger = logging.getLogger(__name__)


def compute_stats(
    listings: Sequence[Listing],
    columns: Optional[FieldMapping] = None,
) -> StatsSnapshot:
    """
    Compute count and average price per bedroom.

    Malformed prices and bedroom counts contribute 0 to their sums.
    When the bedroom total is 0 (including an empty input) the average
    is 0.

    Args:
        listings: Listings to summarize
        columns: Column names (defaults to the standard listing columns)

    Returns:
        StatsSnapshot for the given listings
    """
    columns = columns or FieldMapping()

    total_price = sum(
        coerce_float(listing.get(columns.price), fallback=SUM_FALLBACK)
        for listing in listings
    )
    total_bedrooms = sum(
        coerce_int(listing.get(columns.bedrooms), fallback=SUM_FALLBACK)
        for listing in listings
    )

    if total_bedrooms:
        avg_price_per_bedroom = total_price / total_bedrooms
    else:
        avg_price_per_bedroom = 0.0

    logger.debug(
        f"Stats over {len(listings)} listings: price total={total_price}, "
        f"bedroom total={total_bedrooms}"
    )
    return StatsSnapshot(
        count=len(listings),
        avg_price_per_bedroom=float(avg_price_per_bedroom),
    )
