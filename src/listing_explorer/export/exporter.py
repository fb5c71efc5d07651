"""
Listing Exporter.

Produces the export view (pinned listings first) and writes its
encoded form through a dataset sink. Writing is the only suspending
operation in the pipeline; failures surface as ExportError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Protocol, Sequence, Union

from listing_explorer.domain.entities import Listing
from listing_explorer.errors import ExportError
from listing_explorer.export.csv_encoder import encode_listings

if TYPE_CHECKING:
    from listing_explorer.pipeline.pin_manager import PinManager

logger = logging.getLogger(__name__)

Destination = Union[str, Path]


class DatasetSinkProtocol(Protocol):
    """Protocol for dataset sinks."""

    async def write(self, destination: Destination, text: str) -> None:
        ...


def build_export_view(
    working_set: Sequence[Listing], pins: "PinManager"
) -> List[Listing]:
    """
    Order the working set for output.

    With pins: pinned listings in working-set order, then every other
    listing in working-set order, each listing exactly once. Without
    pins: the working set as is.
    """
    if not len(pins):
        return list(working_set)
    pinned, rest = pins.split(working_set)
    return pinned + rest


class ListingExporter:
    """Encodes listings and hands the text to a sink."""

    def __init__(self, sink: DatasetSinkProtocol, delimiter: str = ",") -> None:
        """
        Initialize exporter.

        Args:
            sink: Where encoded text is written
            delimiter: Field delimiter for the encoded text
        """
        self.sink = sink
        self.delimiter = delimiter

    async def export(self, listings: Sequence[Listing], destination: Destination) -> int:
        """
        Encode and write listings.

        Args:
            listings: Listings in output order
            destination: Target passed to the sink

        Returns:
            Number of listings written

        Raises:
            ExportError: If the sink cannot write the destination
        """
        text = encode_listings(listings, self.delimiter)
        try:
            await self.sink.write(destination, text)
        except (OSError, UnicodeError, LookupError) as e:
            logger.error(f"Failed to export {len(listings)} listings to {destination}: {e}")
            raise ExportError(f"Cannot write {destination}: {e}", destination) from e

        logger.info(f"Exported {len(listings)} listings to {destination}")
        return len(listings)
