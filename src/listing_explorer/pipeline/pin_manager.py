"""
Pin Manager - Ordered, Grow-Only Set of Pinned Listing Ids.

Pins are held independently of the working set: a pinned id that has
been filtered out stays pinned but selects nothing, and it is not
brought back into view. There is no unpin.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from listing_explorer.domain.entities import Listing

logger = logging.getLogger(__name__)


class PinManager:
    """Keeps pinned ids in first-pinned order without duplicates."""

    def __init__(self, id_field: str = "id") -> None:
        """
        Initialize with no pins.

        Args:
            id_field: Column holding the listing identifier
        """
        self.id_field = id_field
        # dict as an insertion-ordered set
        self._pinned: Dict[str, None] = {}

    @property
    def pinned_ids(self) -> Tuple[str, ...]:
        """Pinned ids in the order they were first pinned."""
        return tuple(self._pinned)

    def pin(self, listing_id: str) -> bool:
        """
        Pin a listing id.

        Returns:
            True if the id was newly pinned, False if it already was
        """
        if listing_id in self._pinned:
            logger.debug(f"Listing {listing_id} already pinned")
            return False
        self._pinned[listing_id] = None
        logger.info(f"Pinned listing {listing_id}")
        return True

    def is_pinned(self, listing: Listing) -> bool:
        """True if the listing has a non-empty id that is pinned."""
        listing_id = listing.get(self.id_field)
        return bool(listing_id) and listing_id in self._pinned

    def select_pinned(self, listings: Sequence[Listing]) -> List[Listing]:
        """Pinned listings among ``listings``, in their given order."""
        return [listing for listing in listings if self.is_pinned(listing)]

    def split(self, listings: Sequence[Listing]) -> Tuple[List[Listing], List[Listing]]:
        """Split listings into (pinned, not pinned), each keeping its order."""
        pinned: List[Listing] = []
        rest: List[Listing] = []
        for listing in listings:
            if self.is_pinned(listing):
                pinned.append(listing)
            else:
                rest.append(listing)
        return pinned, rest

    def __len__(self) -> int:
        return len(self._pinned)

    def __contains__(self, listing_id: object) -> bool:
        return listing_id in self._pinned
