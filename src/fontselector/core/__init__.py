"""Core components for the font selector."""

from .config import FontSelectorConfig, load_config_from_yaml
from .exceptions import (
    CatalogError,
    ConfigurationError,
    FontSelectorError,
    StorageError,
)

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "FontSelectorConfig",
    "FontSelectorError",
    "StorageError",
    "load_config_from_yaml",
]
