"""
Error Types.

Only I/O at the edges of the pipeline can fail: reading the dataset and
writing an export. Dirty values inside the dataset never raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ListingExplorerError(Exception):
    """Base class for all Listing Explorer errors."""


class ListingLoadError(ListingExplorerError):
    """Raised when the dataset cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line


class ExportError(ListingExplorerError):
    """Raised when exported results cannot be written."""

    def __init__(self, message: str, destination: Union[str, Path]) -> None:
        super().__init__(message)
        self.message = message
        self.destination = destination
