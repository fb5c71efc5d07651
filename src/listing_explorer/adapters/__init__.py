"""
Adapters Package - Infrastructure Implementations.

This package contains the concrete collaborators at the edges of the
listing pipeline.

Sources:
    - CsvListingSource: Reads listings from a CSV file
    - parse_listings: Parses CSV text already in memory

Sinks:
    - CsvFileSink: Writes encoded listings to a file (async)

Loggers:
    - ConsoleAuditLogger: Simple console output

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from listing_explorer.adapters.console_logger import ConsoleAuditLogger
from listing_explorer.adapters.csv_sink import CsvFileSink
from listing_explorer.adapters.csv_source import CsvListingSource, parse_listings

__all__ = [
    "ConsoleAuditLogger",
    "CsvFileSink",
    "CsvListingSource",
    "parse_listings",
]
