"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import codecs
import logging
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _check_delimiter(value: str) -> str:
    if len(value) != 1:
        raise ValueError("delimiter must be a single character")
    if value in ('"', "\n", "\r"):
        raise ValueError("delimiter cannot be a quote or newline character")
    return value


def _check_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise ValueError(f"unknown text encoding: {value}") from None
    return value


class DatasetConfig(BaseModel):
    """How the input file is read."""

    delimiter: str = Field(default=",")
    encoding: str = Field(default="utf-8-sig")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        return _check_delimiter(value)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        return _check_encoding(value)


class FieldMapping(BaseModel):
    """Column names the filters, statistics and ranking read from."""

    id: str = "id"
    price: str = "price"
    bedrooms: str = "bedrooms"
    review_score: str = "review_scores_rating"
    host: str = "host_id"


class ExportConfig(BaseModel):
    """How exported results are written."""

    delimiter: Optional[str] = Field(
        default=None, description="Defaults to the dataset delimiter"
    )
    encoding: str = Field(default="utf-8")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _check_delimiter(value)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        return _check_encoding(value)


class DisplayConfig(BaseModel):
    """What the interactive shell prints."""

    pinned_columns: List[str] = Field(
        default_factory=lambda: ["id", "price", "bedrooms"]
    )
    ranking_limit: Optional[int] = Field(default=None, ge=1)


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING")
    audit: bool = Field(default=False, description="Print the audit trail")
    verbose_audit: bool = Field(
        default=False, description="Include one line per rejected listing"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class ExplorerConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    columns: FieldMapping = Field(default_factory=FieldMapping)
    export: ExportConfig = Field(default_factory=ExportConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"populate_by_name": True}

    @property
    def export_delimiter(self) -> str:
        """Delimiter used for export (falls back to the dataset delimiter)."""
        return self.export.delimiter or self.dataset.delimiter
