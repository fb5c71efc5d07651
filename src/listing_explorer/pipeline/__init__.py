"""
Pipeline Package - Working Set Ownership and Chaining.

Components:
    - ListingStore: Owns the working set; chainable filter, statistics,
      ranking, pinning and export operations
    - PinManager: Ordered, grow-only set of pinned listing ids
    - load_store: Reads a CSV file into a new ListingStore

Design Principles:
    - One store per loaded dataset, no shared module state
    - All collaborators injected via constructor
    - Derived values are caches that can be recomputed at any time
"""

from listing_explorer.pipeline.listing_store import (
    AuditLoggerProtocol,
    ListingStore,
    load_store,
)
from listing_explorer.pipeline.pin_manager import PinManager

__all__ = [
    "AuditLoggerProtocol",
    "ListingStore",
    "PinManager",
    "load_store",
]
