"""
Export Package - Ordered View and Delimited Text Encoding.

Components:
    - build_export_view: Pinned listings first, then the rest
    - encode_listings / quote_field: Delimited text encoding
    - ListingExporter: Encodes the view and hands it to a dataset sink
"""

from listing_explorer.export.csv_encoder import encode_listings, quote_field
from listing_explorer.export.exporter import (
    DatasetSinkProtocol,
    ListingExporter,
    build_export_view,
)

__all__ = [
    "DatasetSinkProtocol",
    "ListingExporter",
    "build_export_view",
    "encode_listings",
    "quote_field",
]
