"""
Listing Store - Working Set and Chained Operations.

The ListingStore owns the working set of listings and the pinned ids
for one loaded dataset. Every operation acts on the current working
set and returns the store itself, so calls chain:

    store.filter({"rooms": 2}).compute_stats().compute_host_ranking()

Filtering replaces the working set with a subsequence of it; there is
no way back to the full dataset other than loading it again. Pinning
never reorders the working set, only the exported view.
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Tuple, Union

from listing_explorer.adapters.csv_sink import CsvFileSink
from listing_explorer.adapters.csv_source import CsvListingSource
from listing_explorer.analytics.host_ranking import rank_hosts
from listing_explorer.analytics.stats import compute_stats
from listing_explorer.config.models import ExplorerConfig
from listing_explorer.domain.entities import (
    HostRankingEntry,
    Listing,
    StageResult,
    StatsSnapshot,
)
from listing_explorer.export.exporter import (
    DatasetSinkProtocol,
    Destination,
    ListingExporter,
    build_export_view,
)
from listing_explorer.filters.engine import (
    CriteriaInput,
    FilterEngine,
    FilterStageProtocol,
)
from listing_explorer.pipeline.pin_manager import PinManager

logger = logging.getLogger(__name__)


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_session_id(self, session_id: str) -> None:
        ...

    def log_operation_start(self, operation: str, input_count: int) -> None:
        ...

    def log_operation_end(
        self, operation: str, output_count: int, duration_seconds: float
    ) -> None:
        ...

    def log_listing_filtered(self, label: str, stage_name: str, reason: str) -> None:
        ...

    def log_anomaly(self, message: str, severity: str = "WARNING") -> None:
        ...


class ListingStore:
    """In-memory working set of listings with chainable operations."""

    def __init__(
        self,
        listings: Iterable[Listing],
        config: Optional[ExplorerConfig] = None,
        pin_manager: Optional[PinManager] = None,
        sink: Optional[DatasetSinkProtocol] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
    ) -> None:
        """
        Initialize store with the full dataset as working set.

        Args:
            listings: All loaded listings, in source order
            config: Explorer configuration (defaults apply if omitted)
            pin_manager: Pinned id holder (a new empty one if omitted)
            sink: Where exports are written (CSV files if omitted)
            audit_logger: Receives operation events (optional)
        """
        self.config = config or ExplorerConfig()
        self._working_set: List[Listing] = list(listings)
        self._pins = pin_manager or PinManager(self.config.columns.id)
        self._filter_engine = FilterEngine(self.config.columns)
        self._exporter = ListingExporter(
            sink or CsvFileSink(self.config.export.encoding),
            delimiter=self.config.export_delimiter,
        )
        self.audit_logger = audit_logger
        self.session_id = str(uuid.uuid4())

        # Derived caches, overwritten on every recomputation
        self.stats: Optional[StatsSnapshot] = None
        self.host_ranking: Optional[List[HostRankingEntry]] = None
        self.audit_trail: List[StageResult] = []

        if self.audit_logger:
            self.audit_logger.set_session_id(self.session_id)
        logger.debug(f"ListingStore {self.session_id[:8]} created with {len(self)} listings")

    @property
    def working_set(self) -> Tuple[Listing, ...]:
        """Current listings in source order."""
        return tuple(self._working_set)

    @property
    def pinned_ids(self) -> Tuple[str, ...]:
        """Pinned ids in the order they were first pinned."""
        return self._pins.pinned_ids

    def filter(self, criteria: Optional[CriteriaInput] = None) -> "ListingStore":
        """
        Keep only listings matching every criterion present.

        Args:
            criteria: FilterCriteria or a mapping with any of
                ``price_range``/``priceRange``, ``rooms``,
                ``review_score``/``reviewScore``

        Returns:
            This store
        """
        start = time.perf_counter()
        input_count = len(self._working_set)
        self._audit_start("filter", input_count)

        current = self._working_set
        for stage in self._filter_engine.build_stages(criteria):
            stage_result, current = self._execute_stage(stage, current)
            self.audit_trail.append(stage_result)

        self._working_set = list(current)

        duration = time.perf_counter() - start
        logger.info(f"Filter applied: {input_count} -> {len(self._working_set)} listings")
        self._audit_end("filter", len(self._working_set), duration)
        if input_count and not self._working_set and self.audit_logger:
            self.audit_logger.log_anomaly("Filter removed every listing")
        return self

    def compute_stats(self) -> "ListingStore":
        """Compute count and average price per bedroom into ``stats``."""
        self.stats = compute_stats(self._working_set, self.config.columns)
        logger.debug(f"Stats computed: {self.stats}")
        return self

    def compute_host_ranking(self) -> "ListingStore":
        """Rank hosts by listing count into ``host_ranking``."""
        self.host_ranking = rank_hosts(self._working_set, self.config.columns)
        logger.debug(f"Host ranking computed: {len(self.host_ranking)} hosts")
        return self

    def pin_listing(self, listing_id: str) -> "ListingStore":
        """Pin a listing id; pinning an id twice has no further effect."""
        self._pins.pin(listing_id)
        return self

    def get_pinned_listings(self) -> List[Listing]:
        """Pinned listings that are still in the working set, in working-set order."""
        return self._pins.select_pinned(self._working_set)

    def get_data(self) -> List[Listing]:
        """Working set with pinned listings moved to the front."""
        return build_export_view(self._working_set, self._pins)

    async def export_results(self, destination: Destination) -> None:
        """
        Write the current view (pinned first) as delimited text.

        Args:
            destination: Output file

        Raises:
            ExportError: If the destination cannot be written
        """
        start = time.perf_counter()
        data = self.get_data()
        self._audit_start("export", len(data))
        await self._exporter.export(data, destination)
        self._audit_end("export", len(data), time.perf_counter() - start)

    def _execute_stage(
        self,
        stage: FilterStageProtocol,
        listings: List[Listing],
    ) -> Tuple[StageResult, List[Listing]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()

        filter_result = stage.apply(listings)

        stage_duration = time.perf_counter() - stage_start

        if self.audit_logger:
            for label, reason in filter_result.rejection_reasons.items():
                self.audit_logger.log_listing_filtered(label, stage.name, reason)

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(listings),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
            filter_reasons=filter_result.rejection_reasons,
        )
        return stage_result, filter_result.passed

    def _audit_start(self, operation: str, input_count: int) -> None:
        if self.audit_logger:
            self.audit_logger.log_operation_start(operation, input_count)

    def _audit_end(self, operation: str, output_count: int, duration: float) -> None:
        if self.audit_logger:
            self.audit_logger.log_operation_end(operation, output_count, duration)

    def __len__(self) -> int:
        """Number of listings in the working set."""
        return len(self._working_set)

    def __repr__(self) -> str:
        return (
            f"ListingStore(listings={len(self._working_set)}, "
            f"pinned={len(self._pins)}, session={self.session_id[:8]})"
        )


def load_store(
    path: Union[str, Path],
    config: Optional[ExplorerConfig] = None,
    **store_kwargs,
) -> ListingStore:
    """
    Load a CSV file and wrap it in a new ListingStore.

    Args:
        path: CSV file with a header row
        config: Explorer configuration (delimiter, encoding, columns)
        **store_kwargs: Passed to ListingStore (pin_manager, sink, audit_logger)

    Returns:
        A store whose working set is the whole file

    Raises:
        ListingLoadError: If the file cannot be read or parsed
    """
    config = config or ExplorerConfig()
    source = CsvListingSource(
        path,
        delimiter=config.dataset.delimiter,
        encoding=config.dataset.encoding,
    )
    return ListingStore(source.load(), config=config, **store_kwargs)
