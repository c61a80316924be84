"""
Unit tests for core configuration - Imperative style.

Tests configuration loading, validation, defaults and environment variables.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.fontselector.core.config import (
    FontSelectorConfig,
    default_store_path,
    load_config_from_yaml,
)
from src.fontselector.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep FONTSELECTOR_ variables from the host out of the tests."""
    for name in ("CATALOG_PATH", "STORE_PATH", "LOG_LEVEL", "AUTOSAVE"):
        monkeypatch.delenv(f"FONTSELECTOR_{name}", raising=False)


class TestFontSelectorConfig:
    """Test FontSelectorConfig defaults and validation."""

    def test_defaults(self):
        config = FontSelectorConfig(_env_file=None)

        assert config.catalog_path is None
        assert config.store_path == default_store_path()
        assert config.log_level == "INFO"
        assert config.autosave is True

    def test_from_env_and_yaml_invalid_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("FONTSELECTOR_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigLoadError):
            FontSelectorConfig.from_env_and_yaml(
                yaml_path=None, env_file=str(temp_dir / ".env")
            )

    def test_log_level_normalized(self):
        config = FontSelectorConfig(_env_file=None, log_level="debug")

        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            FontSelectorConfig(_env_file=None, log_level="chatty")

    def test_from_env_vars(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FONTSELECTOR_CATALOG_PATH", str(tmp_path / "fonts.json"))
        monkeypatch.setenv("FONTSELECTOR_STORE_PATH", str(tmp_path / "store.json"))
        monkeypatch.setenv("FONTSELECTOR_AUTOSAVE", "false")

        config = FontSelectorConfig(_env_file=None)

        assert config.catalog_path == tmp_path / "fonts.json"
        assert config.store_path == tmp_path / "store.json"
        assert config.autosave is False

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FONTSELECTOR_LOG_LEVEL=warning\n", encoding="utf-8")

        config = FontSelectorConfig(_env_file=env_file)

        assert config.log_level == "WARNING"


class TestYamlLoading:
    """Test YAML configuration loading."""

    def test_from_yaml(self, temp_dir):
        config_path = temp_dir / "config.yaml"
        with config_path.open("w") as f:
            yaml.dump({"catalog_path": "fonts.yaml", "autosave": False}, f)

        config = FontSelectorConfig.from_yaml(config_path)

        assert isinstance(config, FontSelectorConfig)
        assert config.catalog_path == Path("fonts.yaml")
        assert config.autosave is False

    def test_from_env_and_yaml_without_yaml(self, temp_dir):
        config = FontSelectorConfig.from_env_and_yaml(
            yaml_path=None, env_file=str(temp_dir / ".env")
        )

        assert config.log_level == "INFO"

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigFileNotFoundError):
            load_config_from_yaml(temp_dir / "missing.yaml", FontSelectorConfig)

    def test_empty_file(self, temp_dir):
        config_path = temp_dir / "empty.yaml"
        config_path.write_text("", encoding="utf-8")

        with pytest.raises(EmptyConfigFileError):
            load_config_from_yaml(config_path, FontSelectorConfig)

    def test_invalid_yaml(self, temp_dir):
        config_path = temp_dir / "invalid.yaml"
        config_path.write_text("log_level: [unclosed", encoding="utf-8")

        with pytest.raises(InvalidYamlError):
            load_config_from_yaml(config_path, FontSelectorConfig)

    def test_invalid_values(self, temp_dir):
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("log_level: chatty\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config_from_yaml(config_path, FontSelectorConfig)

        assert isinstance(exc_info.value, ConfigurationError)
