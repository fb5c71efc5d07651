"""
Listing Explorer Command Line Interface.

Entry point for the listing-explorer CLI tool: loads one CSV file and
starts a numbered menu over the resulting ListingStore.

Menu input is forgiving: blank or non-numeric answers to a numeric
question drop that constraint instead of failing.
"""

from __future__ import annotations

import asyncio
import logging
import math
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import typer
import yaml
from pydantic import ValidationError

from listing_explorer import __version__, configure_logging
from listing_explorer.adapters.console_logger import ConsoleAuditLogger
from listing_explorer.config.loader import load_config
from listing_explorer.config.models import ExplorerConfig
from listing_explorer.domain.entities import FilterCriteria
from listing_explorer.errors import ExportError, ListingLoadError
from listing_explorer.pipeline.listing_store import ListingStore, load_store

__all__ = [
    "ListingShell",
    "app",
    "parse_optional_float",
    "parse_optional_int",
    "parse_price_range",
]

MENU = (
    "1. Filter listings",
    "2. Compute statistics",
    "3. Compute host ranking",
    "4. Export results",
    "5. Pin listing (enter listing id)",
    "6. Print pinned listings",
    "7. Exit",
)
EXIT_CHOICE = "7"


def _to_number(text: str) -> Optional[float]:
    try:
        number = float(text.strip())
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def parse_price_range(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse "min,max" into a price range.

    Returns:
        (min, max), or None if the text is blank or not exactly two numbers
    """
    if not text.strip():
        return None
    parts = text.split(",")
    if len(parts) != 2:
        return None
    low, high = _to_number(parts[0]), _to_number(parts[1])
    if low is None or high is None:
        return None
    return low, high


def parse_optional_int(text: str) -> Optional[int]:
    """
    Parse a minimum count.

    A fractional minimum is rounded up, since counts compared against it
    are whole numbers ("1.5" behaves like "2").
    """
    number = _to_number(text)
    if number is None or not math.isfinite(number):
        return None
    return math.ceil(number)


def parse_optional_float(text: str) -> Optional[float]:
    """Parse a minimum score, None if blank or not a number."""
    return _to_number(text)


class ListingShell:
    """Numbered menu over a ListingStore."""

    def __init__(
        self,
        store: ListingStore,
        config: Optional[ExplorerConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = typer.echo,
    ) -> None:
        """
        Initialize shell.

        Args:
            store: Store the menu operates on
            config: Display settings (defaults to the store's config)
            input_func: Reads one answer for a prompt
            output_func: Prints one message
        """
        self.store = store
        self.config = config or store.config
        self._input = input_func
        self._output = output_func
        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.prompt_filter,
            "2": self.show_stats,
            "3": self.show_host_ranking,
            "4": self.prompt_export,
            "5": self.prompt_pin,
            "6": self.show_pinned,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self._output("\nSelect an option:")
            for line in MENU:
                self._output(line)

            choice = self._ask("Enter your choice: ")
            if choice is None:
                break
            choice = choice.strip()
            if choice == EXIT_CHOICE:
                self._output("Exiting.")
                break

            handler = self._handlers.get(choice)
            if handler is None:
                self._output("Invalid choice.")
                continue
            handler()

    def prompt_filter(self) -> None:
        price_input = self._ask("Enter price range (min,max) or leave empty: ") or ""
        rooms_input = self._ask("Enter minimum number of rooms or leave empty: ") or ""
        review_input = self._ask("Enter minimum review score or leave empty: ") or ""

        criteria = FilterCriteria(
            price_range=parse_price_range(price_input),
            rooms=parse_optional_int(rooms_input),
            review_score=parse_optional_float(review_input),
        )
        self.store.filter(criteria)
        self._output(
            f"Filter applied. {len(self.store.get_data())} listings match the criteria."
        )

    def show_stats(self) -> None:
        stats = self.store.compute_stats().stats
        self._output(
            f"Statistics: count={stats.count}, "
            f"average price per bedroom={stats.avg_price_per_bedroom:.2f}"
        )

    def show_host_ranking(self) -> None:
        ranking = self.store.compute_host_ranking().host_ranking
        limit = self.config.display.ranking_limit
        self._output("Host Ranking:")
        for index, entry in enumerate(ranking[:limit], start=1):
            self._output(f"{index}. Host: {entry.host}, Listings: {entry.count}")

    def prompt_export(self) -> None:
        file_name = (self._ask("Enter output file name: ") or "").strip()
        try:
            asyncio.run(self.store.export_results(file_name))
        except ExportError as e:
            self._output(f"Error exporting results: {e}")
            return
        self._output(f"Results exported to {file_name}")

    def prompt_pin(self) -> None:
        listing_id = (self._ask("Enter the listing id to pin: ") or "").strip()
        if not listing_id:
            self._output("No listing id given.")
            return
        self.store.pin_listing(listing_id)
        self._output(f"Listing with id {listing_id} has been pinned.")

    def show_pinned(self) -> None:
        pinned = self.store.get_pinned_listings()
        if not pinned:
            self._output("No listings have been pinned.")
            return
        self._output("Pinned Listings:")
        columns = self.config.display.pinned_columns
        for index, listing in enumerate(pinned, start=1):
            details = " | ".join(f"{column}: {listing.get(column, '')}" for column in columns)
            self._output(f"{index}. {details}")

    def _ask(self, prompt: str) -> Optional[str]:
        """Read one answer, None once input has ended."""
        try:
            return self._input(prompt)
        except EOFError:
            return None


app = typer.Typer(
    name="listing-explorer",
    help="Filter, summarize and export short-term-rental listings.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"listing-explorer version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    csv_path: Path = typer.Argument(..., help="CSV file with listings."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Configuration profile to apply."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug messages."
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Load CSV_PATH and start the interactive menu."""
    try:
        settings = load_config(config, profile)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1) from None
    except yaml.YAMLError as e:
        typer.echo(f"YAML syntax error in {config}: {e}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None

    level = logging.DEBUG if verbose else logging.getLevelName(settings.logging.level)
    configure_logging(level)

    audit_logger = None
    if settings.logging.audit:
        audit_logger = ConsoleAuditLogger(verbose=settings.logging.verbose_audit)

    try:
        store = load_store(csv_path, settings, audit_logger=audit_logger)
    except ListingLoadError as e:
        typer.echo(f"Error loading data: {e}", err=True)
        raise typer.Exit(1) from None

    ListingShell(store, settings).run()
