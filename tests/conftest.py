"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from listing_explorer.config.models import ExplorerConfig, FieldMapping
from listing_explorer.domain.entities import Listing
from listing_explorer.pipeline.listing_store import ListingStore
from tests.fixtures import RecordingSink, make_listing


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory with sample files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_csv_path(fixtures_dir: Path) -> Path:
    """Path to the sample listings file."""
    return fixtures_dir / "listings.csv"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def default_config() -> ExplorerConfig:
    """Create default explorer configuration."""
    return ExplorerConfig()


@pytest.fixture
def columns() -> FieldMapping:
    """Standard listing columns."""
    return FieldMapping()


@pytest.fixture
def sample_listings() -> List[Listing]:
    """A small dataset with clean and dirty values."""
    return [
        make_listing("1", price="100", bedrooms="1", review="4.9", host="h1"),
        make_listing("2", price="150", bedrooms="2", review="4.2", host="h2"),
        make_listing("3", price="0", bedrooms="0", review="", host="h1"),
        make_listing("4", price="n/a", bedrooms="3", review="3.5", host="h3"),
        make_listing("5", price="300", bedrooms="abc", review="5", host="h1"),
    ]


@pytest.fixture
def recording_sink() -> RecordingSink:
    """In-memory sink."""
    return RecordingSink()


@pytest.fixture
def store(sample_listings: List[Listing], recording_sink: RecordingSink) -> ListingStore:
    """Store over the sample listings that exports into memory."""
    return ListingStore(sample_listings, sink=recording_sink)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV text into a temporary file and return its path."""

    def _write(text: str, name: str = "listings.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write
