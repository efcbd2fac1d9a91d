"""
YAML configuration loading for the calculator.

A base file (bigint.yaml) is read first; a sibling bigint.local.yaml, if
present, is layered on top key by key so a machine only needs to list the
settings it changes.
"""

import logging
from pathlib import Path
from typing import Dict, Any

import yaml

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Load bigint.yaml and merge bigint.local.yaml over it.

    Usage:
        raw = ConfigManager().load_config("bigint.yaml")
        raw['calculator']['sqrt_iterations']
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ConfigManager")

    def load_config(self, config_path: str) -> Any:
        """
        Read the base file, then apply local overrides.

        Args:
            config_path: Path to the base YAML file

        Returns:
            Parsed YAML document with overrides applied ({} for an empty
            file). The top level is returned as-is; callers check its type.

        Raises:
            FileNotFoundError: If the base file is missing
            yaml.YAMLError: If the base file is not valid YAML
        """
        base_path = Path(config_path)
        if not base_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.logger.debug(f"Reading configuration: {base_path}")
        config = self._read_yaml(base_path)
        if config is None:
            self.logger.warning(f"Configuration file is empty: {config_path}")
            config = {}

        override_path = self._get_local_config_path(base_path)
        if not override_path.exists():
            self.logger.debug(f"No local overrides at {override_path}")
            return config

        # A broken override file must not take the base configuration down with it
        try:
            overrides = self._read_yaml(override_path)
        except yaml.YAMLError as e:
            self.logger.error(f"Ignoring unparsable local configuration {override_path}: {e}")
            return config

        if not isinstance(overrides, dict) or not isinstance(config, dict):
            self.logger.warning(f"Ignoring local configuration {override_path}: not a mapping")
            return config

        self.logger.info(f"Applying local configuration overrides from: {override_path}")
        return self.deep_merge(config, overrides)

    def _read_yaml(self, path: Path) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    def _get_local_config_path(self, base_config_path: Path) -> Path:
        """bigint.yaml -> bigint.local.yaml, in the same directory."""
        return base_config_path.with_name(f"{base_config_path.stem}.local.yaml")

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return a new dict with override layered onto base.

        Nested mappings merge recursively; any other override value replaces
        the base value outright. Neither input is modified.

        Example:
            deep_merge({'a': {'b': 1, 'c': 2}}, {'a': {'b': 99}})
            # {'a': {'b': 99, 'c': 2}}
        """
        merged = dict(base)
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = self.deep_merge(current, value)
            else:
                merged[key] = value
        return merged
