"""
Analytics Package - Derived Values over the Working Set.

Both computations are pure functions of the listings they receive;
the store caches their results but never depends on the cache.

Components:
    - compute_stats: Listing count and average price per bedroom
    - rank_hosts: Hosts ordered by number of listings
"""

from listing_explorer.analytics.host_ranking import rank_hosts
from listing_explorer.analytics.stats import compute_stats

__all__ = ["compute_stats", "rank_hosts"]
