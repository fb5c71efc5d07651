"""
Unit Tests for ConsoleAuditLogger.

Test Aspects Covered:
    ✅ Business Logic: Session tagging, verbosity
"""

from __future__ import annotations

import pytest

from listing_explorer.adapters.console_logger import ConsoleAuditLogger


class TestConsoleAuditLogger:
    """Test cases for ConsoleAuditLogger."""

    def test_lines_carry_session_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        # Arrange
        audit = ConsoleAuditLogger()
        audit.set_session_id("0123456789abcdef")

        # Act
        audit.log_operation_start("filter", 4)

        # Assert
        out = capsys.readouterr().out
        assert "[01234567]" in out
        assert "Starting filter with 4 listings" in out

    def test_quiet_mode_keeps_summaries_and_anomalies(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """
        SCENARIO: Non-verbose logger receives every kind of event
        EXPECTED: Only completion and anomaly lines printed
        """
        # Arrange
        audit = ConsoleAuditLogger(verbose=False)

        # Act
        audit.log_operation_start("filter", 4)
        audit.log_listing_filtered("row 2", "price_range_filter", "price='x' is not a number")
        audit.log_operation_end("filter", 0, 0.01)
        audit.log_anomaly("Filter removed every listing")

        # Assert
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert "[--------]" in lines[0]
        assert "Completed filter: 0 listings" in lines[0]
        assert "ANOMALY: Filter removed every listing" in lines[1]
