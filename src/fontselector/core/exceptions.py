"""Custom exceptions for the font selector."""

from typing import Any


class FontSelectorError(Exception):
    """Base exception for all font selector errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class CatalogError(FontSelectorError):
    """Exception raised for font catalog errors."""


class StorageError(FontSelectorError):
    """Exception raised for persistence store errors."""


class ConfigurationError(FontSelectorError):
    """Exception raised for configuration errors."""


class CatalogFileNotFoundError(CatalogError):
    """Exception raised when the raw catalog file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Catalog file not found: {path}")


class CatalogLoadError(CatalogError):
    """Exception raised when the raw catalog file cannot be parsed."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to load catalog from {path}: {error}")


class StorageWriteError(StorageError):
    """Exception raised when the store cannot be written to disk."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to write store {path}: {error}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised when YAML is invalid."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown log level names."""

    def __init__(self, level: str):
        super().__init__(f"Unknown log level: {level}")
