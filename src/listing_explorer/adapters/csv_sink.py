"""
CSV File Sink.

Writes encoded text to a file without blocking the event loop. The
file is written in one call; there is no partial or resumable write.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class CsvFileSink:
    """Writes delimited text to a file path."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def write(self, destination: Union[str, Path], text: str) -> None:
        """
        Write text to ``destination``, replacing any existing file.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(destination)
        await asyncio.to_thread(self._write_file, path, text)
        logger.debug(f"Wrote {len(text)} characters to {path}")

    def _write_file(self, path: Path, text: str) -> None:
        # newline="" keeps "\n" as is on every platform
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
