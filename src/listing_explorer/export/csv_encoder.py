"""
Delimited Text Encoding.

Output format:
    - Header line from the keys of the first listing, in their order
    - One line per listing with values in header order
    - Lines joined by "\\n", no trailing newline
    - A value is quoted only if it contains the delimiter, a double
      quote or a newline; embedded double quotes are doubled
    - Missing and None values encode as empty strings

Keys that appear only in later listings are not exported.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from listing_explorer.domain.entities import Listing

QUOTE = '"'
LINE_SEPARATOR = "\n"


def quote_field(value: Any, delimiter: str = ",") -> str:
    """
    Encode a single value.

    Args:
        value: Field value (None encodes as "")
        delimiter: Field delimiter

    Returns:
        The value as text, quoted if required
    """
    if value is None:
        return ""
    text = str(value)
    if delimiter in text or QUOTE in text or "\n" in text:
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def encode_listings(listings: Sequence[Listing], delimiter: str = ",") -> str:
    """
    Encode listings as delimited text.

    Args:
        listings: Listings in output order
        delimiter: Field delimiter

    Returns:
        Encoded text ("" for no listings)
    """
    if not listings:
        return ""

    headers = list(listings[0].keys())
    lines: List[str] = [
        delimiter.join(quote_field(header, delimiter) for header in headers)
    ]
    for listing in listings:
        lines.append(
            delimiter.join(
                quote_field(listing.get(header), delimiter) for header in headers
            )
        )
    return LINE_SEPARATOR.join(lines)
