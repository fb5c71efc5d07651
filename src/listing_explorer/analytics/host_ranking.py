"""
Host Ranking.

Hosts are grouped by the raw host id text, without any numeric
coercion, so "007" and "7" are different hosts.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from listing_explorer.config.models import FieldMapping
from listing_explorer.domain.entities import HostRankingEntry, Listing


def rank_hosts(
    listings: Sequence[Listing],
    columns: Optional[FieldMapping] = None,
) -> List[HostRankingEntry]:
    """
    Rank hosts by their number of listings, most listings first.

    Hosts with equal counts keep the order in which they were first
    encountered. Listings without a host id are grouped under "".

    Args:
        listings: Listings to group
        columns: Column names (defaults to the standard listing columns)

    Returns:
        One entry per distinct host; counts sum to ``len(listings)``
    """
    columns = columns or FieldMapping()

    # dict keeps first-encountered order, sorted() is stable
    counts: Dict[str, int] = {}
    for listing in listings:
        host = listing.get(columns.host) or ""
        counts[host] = counts.get(host, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [HostRankingEntry(host=host, count=count) for host, count in ranked]
