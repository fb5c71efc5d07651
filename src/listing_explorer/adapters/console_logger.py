"""
Console Audit Logger.

A simple audit logger that prints store operations to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only summaries.
        """
        self._verbose = verbose
        self._session_id: Optional[str] = None

    def set_session_id(self, session_id: str) -> None:
        """Set session ID for subsequent log entries."""
        self._session_id = session_id

    def log_operation_start(self, operation: str, input_count: int) -> None:
        """Log the start of a store operation."""
        if self._verbose:
            self._log("INFO", f"Starting {operation} with {input_count} listings")

    def log_operation_end(
        self,
        operation: str,
        output_count: int,
        duration_seconds: float,
    ) -> None:
        """Log the end of a store operation."""
        self._log(
            "INFO",
            f"Completed {operation}: {output_count} listings "
            f"({duration_seconds:.3f}s)",
        )

    def log_listing_filtered(self, label: str, stage_name: str, reason: str) -> None:
        """Log that a listing was filtered out."""
        if self._verbose:
            self._log("DEBUG", f"{label} filtered by {stage_name}: {reason}")

    def log_anomaly(self, message: str, severity: str = "WARNING") -> None:
        """Log an anomaly or warning."""
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        session = self._session_id[:8] if self._session_id else "--------"
        print(f"[{timestamp}] [{session}] [{level:5}] {message}")
