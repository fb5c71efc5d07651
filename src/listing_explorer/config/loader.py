"""
Configuration Loader - YAML Files and Profiles.

An explorer configuration is built in up to three layers, each one
deep-merged over the previous:

    built-in defaults  <-  config file (optional)  <-  profile (optional)

Profiles are small YAML overlays kept under ``config/profiles/`` below
the loader's base path, e.g. ``semicolon.yaml`` for semicolon-separated
exports from spreadsheet tools.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from listing_explorer.config.models import ExplorerConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path("config") / "profiles"


def deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge overlay into a copy of base; nested sections merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads explorer settings from YAML files below a base path."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths and the
                profiles directory are resolved against (cwd if omitted)
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    @property
    def profiles_dir(self) -> Path:
        return self._base_path / PROFILES_DIR

    def available_profiles(self) -> List[str]:
        """Names of the profiles found in the profiles directory."""
        if not self.profiles_dir.is_dir():
            return []
        return sorted(path.stem for path in self.profiles_dir.glob("*.yaml"))

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> ExplorerConfig:
        """
        Build a configuration from defaults, a file and a profile.

        Args:
            config_path: YAML file, absolute or relative to the base path
            profile: Profile name merged on top of the file

        Returns:
            Validated ExplorerConfig

        Raises:
            FileNotFoundError: If the file or the profile does not exist
            yaml.YAMLError: If a file is not valid YAML
            ValidationError: If the merged settings are invalid
        """
        settings: Dict[str, Any] = {}
        if config_path is not None:
            settings = self._read_mapping(self._resolve(config_path))
        if profile:
            settings = deep_merge(settings, self._read_profile(profile))
        return self.load_from_dict(settings)

    def load_profile_only(self, profile: str) -> ExplorerConfig:
        """Apply a profile to the built-in defaults."""
        return self.load(profile=profile)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> ExplorerConfig:
        return ExplorerConfig.model_validate(dict(config_dict))

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self._base_path / path

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        path = self.profiles_dir / f"{profile}.yaml"
        if not path.exists():
            known = ", ".join(self.available_profiles()) or "none"
            raise FileNotFoundError(f"Profile not found: {profile} (available: {known})")
        return self._read_mapping(path)

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        """Read a YAML file whose top level is a mapping (an empty file is {})."""
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise yaml.YAMLError(f"{path}: top level must be a mapping")
        logger.debug(f"Read settings from {path}: {sorted(content)}")
        return content


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ExplorerConfig:
    """Shortcut for ``ConfigLoader(base_path).load(config_path, profile)``."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
