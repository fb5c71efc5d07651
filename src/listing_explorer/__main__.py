"""Allow ``python -m listing_explorer``."""

from listing_explorer.cli import app

app(prog_name="listing-explorer")
