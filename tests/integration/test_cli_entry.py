"""
Integration Test: Command Line Entry.

Tests:
    - Usage errors before any data is read
    - Load and config failures exit with status 1
    - A scripted menu session over the sample file
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from listing_explorer import __version__
from listing_explorer.cli import app

runner = CliRunner()


class TestEntryErrors:
    """Failures before the menu starts."""

    def test_missing_argument_is_usage_error(self) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 2

    def test_missing_file_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nope.csv")], input="7\n")

        assert result.exit_code == 1
        assert "Select an option:" not in result.output

    def test_missing_config_exits_with_error(self, sample_csv_path: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, [str(sample_csv_path), "--config", str(tmp_path / "missing.yaml")]
        )

        assert result.exit_code == 1

    def test_config_directory_exits_with_error(
        self, sample_csv_path: Path, tmp_path: Path
    ) -> None:
        """
        SCENARIO: --config points at a directory
        EXPECTED: Error printed, exit status 1, menu never shown
        """
        # Act
        result = runner.invoke(app, [str(sample_csv_path), "--config", str(tmp_path)])

        # Assert
        assert result.exit_code == 1
        assert "Error reading configuration" in result.output
        assert "Select an option:" not in result.output

    def test_unknown_encoding_in_config_exits_with_error(
        self, sample_csv_path: Path, tmp_path: Path
    ) -> None:
        # Arrange
        config_path = tmp_path / "latin.yaml"
        config_path.write_text("dataset:\n  encoding: no-such-codec\n", encoding="utf-8")

        # Act
        result = runner.invoke(app, [str(sample_csv_path), "-c", str(config_path)])

        # Assert
        assert result.exit_code == 1
        assert "unknown text encoding" in result.output

    def test_invalid_config_exits_with_error(self, sample_csv_path: Path, tmp_path: Path) -> None:
        # Arrange
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("display:\n  ranking_limit: 0\n", encoding="utf-8")

        # Act
        result = runner.invoke(app, [str(sample_csv_path), "-c", str(config_path)])

        # Assert
        assert result.exit_code == 1

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestMenuSession:
    """Scripted sessions through stdin."""

    def test_stats_and_ranking(self, sample_csv_path: Path, sample_config_path: Path) -> None:
        """
        SCENARIO: Show statistics and a ranking limited to two hosts
        EXPECTED: Values for the whole file, third host not shown
        """
        # Act
        result = runner.invoke(
            app,
            [str(sample_csv_path), "--config", str(sample_config_path)],
            input="2\n3\n7\n",
        )

        # Assert
        assert result.exit_code == 0
        assert "Statistics: count=6, average price per bedroom=89.50" in result.output
        assert "1. Host: h1, Listings: 3" in result.output
        assert "2. Host: h2, Listings: 2" in result.output
        assert "3. Host:" not in result.output
        assert "Exiting." in result.output

    def test_filter_pin_export(self, sample_csv_path: Path, tmp_path: Path) -> None:
        """
        SCENARIO: Filter by price, pin a listing, export
        EXPECTED: Exported file starts with the pinned listing
        """
        # Arrange
        output = tmp_path / "picked.csv"
        answers = ["1", "100,200", "", "", "5", "106", "6", "4", str(output), "7"]

        # Act
        result = runner.invoke(app, [str(sample_csv_path)], input="\n".join(answers) + "\n")

        # Assert
        assert result.exit_code == 0
        assert "Filter applied. 3 listings match the criteria." in result.output
        assert "Listing with id 106 has been pinned." in result.output
        assert "1. id: 106 | price: 180 | bedrooms: 2" in result.output
        assert f"Results exported to {output}" in result.output
        lines = output.read_text(encoding="utf-8").splitlines()
        assert [line.split(",")[0] for line in lines[1:]] == ["106", "101", "102"]

    def test_end_of_input_ends_session(self, sample_csv_path: Path) -> None:
        result = runner.invoke(app, [str(sample_csv_path)], input="")

        assert result.exit_code == 0
