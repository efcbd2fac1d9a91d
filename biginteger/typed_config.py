"""
Typed Configuration Classes

Provides type-safe access to configuration values, replacing
dictionary-based access with dataclasses validated at load time.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any

import yaml

from .big_integer import DEFAULT_SQRT_ITERATIONS
from .config_manager import ConfigManager

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    file: str = "data/logs/bigint_calc.log"
    level: str = "INFO"
    enabled: bool = True  # False: stream handler only, no log file

    def ensure_log_dir_exists(self) -> None:
        """Create log directory if it doesn't exist."""
        Path(self.file).parent.mkdir(parents=True, exist_ok=True)


@dataclass
class CalculatorConfig:
    """Calculator driver configuration."""
    sqrt_iterations: int = DEFAULT_SQRT_ITERATIONS
    show_banner: bool = True
    quiet: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.sqrt_iterations <= 0:
            raise ValueError(f"sqrt_iterations must be positive, got {self.sqrt_iterations}")


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Usage:
        config = TypedConfigLoader().load("bigint.yaml")
        print(config.calculator.sqrt_iterations)
        print(config.logging.level)
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)


class TypedConfigLoader:
    """
    Load configuration from YAML into typed dataclasses.

    Wraps ConfigManager so bigint.local.yaml overrides apply here too.

    Usage:
        loader = TypedConfigLoader()
        config = loader.load("bigint.yaml")
    """

    def load(self, config_path: str) -> AppConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Typed AppConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid YAML, is not a mapping, or
                a value fails validation
        """
        try:
            raw_config = ConfigManager().load_config(config_path)
        except yaml.YAMLError as e:
            # PyYAML messages span several lines (problem, context, marks)
            raise ValueError(f"Invalid YAML: {' '.join(str(e).split())}") from e
        return self._parse_config(raw_config)

    def load_or_default(self, config_path: str) -> AppConfig:
        """Load configuration, falling back to defaults if the file is missing."""
        try:
            return self.load(config_path)
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {config_path}, using defaults")
            return AppConfig()

    def _parse_config(self, raw: Any) -> AppConfig:
        """Parse raw dictionary into typed config."""
        if not isinstance(raw, dict):
            raise ValueError(f"top level must be a mapping, got {type(raw).__name__}")
        return AppConfig(
            logging=self._parse_logging(self._section(raw, 'logging')),
            calculator=self._parse_calculator(self._section(raw, 'calculator')),
        )

    def _section(self, raw: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"'{name}' must be a mapping, got {type(section).__name__}")
        return section

    def _parse_logging(self, raw: Dict[str, Any]) -> LoggingConfig:
        return LoggingConfig(
            file=raw.get('file', 'data/logs/bigint_calc.log'),
            level=str(raw.get('level', 'INFO')).upper(),
            enabled=raw.get('enabled', True),
        )

    def _parse_calculator(self, raw: Dict[str, Any]) -> CalculatorConfig:
        return CalculatorConfig(
            sqrt_iterations=int(raw.get('sqrt_iterations', DEFAULT_SQRT_ITERATIONS)),
            show_banner=raw.get('show_banner', True),
            quiet=raw.get('quiet', False),
        )
