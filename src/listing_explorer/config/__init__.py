"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Listing Explorer:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ExplorerConfig: Root configuration object
    - DatasetConfig: Input delimiter and encoding
    - FieldMapping: Column names the core reads
    - ExportConfig: Output delimiter and encoding
    - DisplayConfig: What the interactive shell prints
    - LoggingConfig: Log level and audit trail switch
"""

from listing_explorer.config.loader import ConfigLoader, load_config
from listing_explorer.config.models import (
    DatasetConfig,
    DisplayConfig,
    ExplorerConfig,
    ExportConfig,
    FieldMapping,
    LoggingConfig,
)

__all__ = [
    "ConfigLoader",
    "DatasetConfig",
    "DisplayConfig",
    "ExplorerConfig",
    "ExportConfig",
    "FieldMapping",
    "LoggingConfig",
    "load_config",
]
