"""
CSV Listing Source.

Reads listings from delimited text with standard CSV quoting: the first
non-blank row is the header, every following non-blank row is one
listing. Values stay as text.

Any read or parse problem (missing file, bad encoding, broken quoting,
a row with the wrong number of fields) is a load failure.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from listing_explorer.domain.entities import Listing
from listing_explorer.errors import ListingLoadError

logger = logging.getLogger(__name__)


def _read_listings(reader: Any) -> List[Listing]:
    """Build listings from a csv reader (which tracks line numbers)."""
    header: Optional[List[str]] = None
    listings: List[Listing] = []

    for row in reader:
        if not row:
            continue
        if header is None:
            header = list(row)
            continue
        if len(row) != len(header):
            raise ListingLoadError(
                f"line {reader.line_num}: expected {len(header)} fields, "
                f"found {len(row)}",
                line=reader.line_num,
            )
        listings.append(dict(zip(header, row)))

    return listings


def parse_listings(text: str, delimiter: str = ",") -> List[Listing]:
    """
    Parse delimited text into listings.

    Args:
        text: Delimited text with a header row
        delimiter: Field delimiter

    Returns:
        Listings in input order (empty for empty text)

    Raises:
        ListingLoadError: If the text is malformed
    """
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    try:
        return _read_listings(reader)
    except csv.Error as e:
        raise ListingLoadError(f"line {reader.line_num}: {e}", line=reader.line_num) from e


class CsvListingSource:
    """Loads listings from a CSV file."""

    def __init__(
        self,
        path: Union[str, Path],
        delimiter: str = ",",
        encoding: str = "utf-8-sig",
    ) -> None:
        """
        Initialize source.

        Args:
            path: File to read
            delimiter: Field delimiter
            encoding: Text encoding ("utf-8-sig" also accepts a BOM)
        """
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self) -> List[Listing]:
        """
        Read and parse the file.

        Returns:
            Listings in file order

        Raises:
            ListingLoadError: If the file cannot be read or parsed
        """
        try:
            with open(self.path, encoding=self.encoding, newline="") as f:
                reader = csv.reader(f, delimiter=self.delimiter, strict=True)
                listings = _read_listings(reader)
        except ListingLoadError as e:
            e.path = self.path
            logger.error(f"Error parsing {self.path}: {e}")
            raise
        except csv.Error as e:
            logger.error(f"Error parsing {self.path}: {e}")
            raise ListingLoadError(f"{self.path}: {e}", path=self.path) from e
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            raise ListingLoadError(f"Cannot read {self.path}: {e}", path=self.path) from e

        logger.info(f"Loaded {len(listings)} listings from {self.path}")
        return listings
