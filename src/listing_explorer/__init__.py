"""
Listing Explorer - Filter, Summarize and Export Rental Listings.

Loads short-term-rental listings from a CSV file into memory and lets a
single user narrow them down, summarize them, rank hosts, pin listings
to the top of the results and export the current view back to CSV.

Architecture:
    - One ListingStore per loaded dataset owns the working set
    - Chainable operations: filter -> stats -> ranking -> pin -> export
    - Dirty numeric text degrades to fallbacks instead of failing
    - Configuration-driven columns and delimiters via YAML

Main Components:
    - domain: Listings, criteria, derived values, numeric coercion
    - filters: Price, bedroom and review-score filter stages
    - analytics: Statistics and host ranking
    - pipeline: ListingStore and PinManager
    - export: Pinned-first view and CSV encoding
    - adapters: CSV source and sink, console audit logger
    - config: Configuration models and loaders
    - cli: Interactive menu and process entry point

Example:
    >>> from listing_explorer import load_store
    >>> store = load_store("listings.csv")
    >>> store.filter({"rooms": 2, "priceRange": [50, 200]}).compute_stats()
    >>> print(store.stats.count, store.stats.avg_price_per_bedroom)

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Listing Explorer.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import listing_explorer
        >>> listing_explorer.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("listing_explorer").setLevel(level)


from listing_explorer.domain.entities import (  # noqa: E402
    FilterCriteria,
    HostRankingEntry,
    StatsSnapshot,
)
from listing_explorer.errors import (  # noqa: E402
    ExportError,
    ListingExplorerError,
    ListingLoadError,
)
from listing_explorer.pipeline.listing_store import ListingStore, load_store  # noqa: E402
from listing_explorer.pipeline.pin_manager import PinManager  # noqa: E402

__all__ = [
    "ExportError",
    "FilterCriteria",
    "HostRankingEntry",
    "ListingExplorerError",
    "ListingLoadError",
    "ListingStore",
    "PinManager",
    "StatsSnapshot",
    "configure_logging",
    "load_store",
]
