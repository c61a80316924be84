"""Persistence adapters for the selection state."""

from .base import KeyValueStore, MemoryStore
from .json_store import JsonFileStore
from .keys import ALL_KEYS, FONT_KEY, ITALIC_KEY, SELECTION_KEYS, TEXT_KEY, VARIANT_KEY

__all__ = [
    "ALL_KEYS",
    "FONT_KEY",
    "ITALIC_KEY",
    "SELECTION_KEYS",
    "TEXT_KEY",
    "VARIANT_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
]
