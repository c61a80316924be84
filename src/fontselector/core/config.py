"""Configuration management for the font selector."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    EmptyConfigFileError,
    InvalidLogLevelError,
    InvalidYamlError,
)


def default_store_path() -> Path:
    """Get the default location of the persisted selection store."""
    return Path.home() / ".cache" / "fontselector" / "store.json"


class FontSelectorConfig(BaseSettings):
    """Font selector configuration loaded from env vars, .env and YAML."""

    model_config = SettingsConfigDict(
        env_prefix="FONTSELECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    catalog_path: Path | None = Field(
        None, description="Raw catalog file (JSON or YAML); None uses the built-in catalog"
    )
    store_path: Path = Field(
        default_factory=default_store_path, description="JSON file backing the selection store"
    )
    log_level: str = Field("INFO", description="Application log level")
    autosave: bool = Field(True, description="Persist the selection after every change")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "FontSelectorConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "FontSelectorConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        try:
            return cls(_env_file=env_file if Path(env_file).exists() else None)
        except ValidationError as e:
            raise ConfigLoadError(str(e)) from e


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(str(config_path))

    # YAML-based configs do not read the .env file
    class YamlConfig(config_class):
        model_config = SettingsConfigDict(env_file=None)

    try:
        return YamlConfig(**config_data)
    except (TypeError, ValidationError) as e:
        raise ConfigLoadError(str(e)) from e
