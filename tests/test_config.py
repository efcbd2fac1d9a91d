"""
Unit tests for configuration loading.

Tests cover:
- YAML loading with .local.yaml overrides (ConfigManager)
- Typed configuration defaults and validation (TypedConfigLoader)
"""
from pathlib import Path

import pytest
import yaml

from biginteger.config_manager import ConfigManager
from biginteger.typed_config import AppConfig, CalculatorConfig, TypedConfigLoader

ROOT_DIR = Path(__file__).parent.parent


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            ConfigManager().load_config(str(tmp_path / "missing.yaml"))

    def test_loads_base_file(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("calculator:\n  sqrt_iterations: 20\n")
        config = ConfigManager().load_config(str(path))
        assert config == {'calculator': {'sqrt_iterations': 20}}

    def test_empty_file_yields_empty_dict(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("")
        assert ConfigManager().load_config(str(path)) == {}

    def test_local_overrides_are_deep_merged(self, tmp_path):
        (tmp_path / "bigint.yaml").write_text(
            "calculator:\n  sqrt_iterations: 15\n  show_banner: true\n"
            "logging:\n  level: INFO\n"
        )
        (tmp_path / "bigint.local.yaml").write_text("calculator:\n  show_banner: false\n")

        config = ConfigManager().load_config(str(tmp_path / "bigint.yaml"))

        assert config['calculator'] == {'sqrt_iterations': 15, 'show_banner': False}
        assert config['logging'] == {'level': 'INFO'}

    def test_broken_local_file_is_ignored(self, tmp_path):
        (tmp_path / "bigint.yaml").write_text("calculator:\n  quiet: false\n")
        (tmp_path / "bigint.local.yaml").write_text("calculator: [unclosed\n")

        config = ConfigManager().load_config(str(tmp_path / "bigint.yaml"))

        assert config == {'calculator': {'quiet': False}}

    def test_local_config_path(self):
        manager = ConfigManager()
        assert manager._get_local_config_path(Path("bigint.yaml")) == Path("bigint.local.yaml")
        assert manager._get_local_config_path(Path("config/app.yaml")) == Path("config/app.local.yaml")

    def test_deep_merge_does_not_mutate_inputs(self):
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        override = {'a': {'b': 99}, 'e': 4}

        result = ConfigManager().deep_merge(base, override)

        assert result == {'a': {'b': 99, 'c': 2}, 'd': 3, 'e': 4}
        assert base == {'a': {'b': 1, 'c': 2}, 'd': 3}
        assert override == {'a': {'b': 99}, 'e': 4}

    def test_base_file_syntax_error_propagates(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("calculator: [\n")
        with pytest.raises(yaml.YAMLError):
            ConfigManager().load_config(str(path))

    def test_non_mapping_local_file_is_ignored(self, tmp_path):
        (tmp_path / "bigint.yaml").write_text("calculator:\n  quiet: true\n")
        (tmp_path / "bigint.local.yaml").write_text("- a\n- b\n")

        config = ConfigManager().load_config(str(tmp_path / "bigint.yaml"))

        assert config == {'calculator': {'quiet': True}}


class TestTypedConfig:
    """Tests for TypedConfigLoader and the config dataclasses."""

    def test_defaults_for_missing_sections(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("{}\n")

        config = TypedConfigLoader().load(str(path))

        assert config == AppConfig()
        assert config.calculator.sqrt_iterations == 15
        assert config.calculator.show_banner is True
        assert config.logging.level == 'INFO'
        assert config.logging.enabled is True

    def test_values_from_file(self, config_file):
        config = TypedConfigLoader().load(str(config_file))
        assert config.logging.enabled is False
        assert config.calculator.sqrt_iterations == 15

    def test_level_is_upper_cased(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("logging:\n  level: debug\n")
        assert TypedConfigLoader().load(str(path)).logging.level == 'DEBUG'

    def test_invalid_sqrt_iterations(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("calculator:\n  sqrt_iterations: 0\n")
        with pytest.raises(ValueError, match="sqrt_iterations must be positive"):
            TypedConfigLoader().load(str(path))

    def test_calculator_config_validation(self):
        with pytest.raises(ValueError):
            CalculatorConfig(sqrt_iterations=-1)

    def test_load_or_default_missing_file(self, tmp_path):
        config = TypedConfigLoader().load_or_default(str(tmp_path / "missing.yaml"))
        assert config == AppConfig()

    def test_invalid_yaml_is_value_error(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("calculator: [\n")
        with pytest.raises(ValueError, match="Invalid YAML") as excinfo:
            TypedConfigLoader().load(str(path))
        assert "\n" not in str(excinfo.value)

    def test_list_top_level_is_rejected(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="top level must be a mapping, got list"):
            TypedConfigLoader().load(str(path))

    def test_scalar_top_level_is_rejected(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("just a string\n")
        with pytest.raises(ValueError, match="mapping"):
            TypedConfigLoader().load(str(path))

    def test_non_mapping_section_is_rejected(self, tmp_path):
        path = tmp_path / "bigint.yaml"
        path.write_text("calculator: 5\n")
        with pytest.raises(ValueError, match="'calculator' must be a mapping, got int"):
            TypedConfigLoader().load(str(path))

    def test_shipped_config_loads(self):
        config = TypedConfigLoader().load(str(ROOT_DIR / "bigint.yaml"))
        assert config == AppConfig()

    def test_ensure_log_dir_exists(self, tmp_path):
        config = AppConfig()
        config.logging.file = str(tmp_path / "nested" / "logs" / "calc.log")
        config.logging.ensure_log_dir_exists()
        assert (tmp_path / "nested" / "logs").is_dir()
