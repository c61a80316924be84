"""
JSON File Store
===============

Persists the key-value store as a single JSON object on disk, so a selection
survives across sessions the way browser local storage does.
"""

import json
import logging
from pathlib import Path

from src.fontselector.core.exceptions import StorageWriteError

from .base import MemoryStore

logger = logging.getLogger(__name__)


class JsonFileStore(MemoryStore):
    """
    Key-value store backed by a JSON file.

    The file is read once on construction and rewritten on every change.
    """

    def __init__(self, path: Path):
        super().__init__(self._read(path))
        self.path = path

    @staticmethod
    def _read(path: Path) -> dict[str, str]:
        """Read the store file; a missing or unreadable file is an empty store."""
        if not path.exists():
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable store {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {path}: expected a JSON object")
            return {}

        # Values are always text
        store = {str(k): v for k, v in data.items() if isinstance(v, str)}
        logger.debug(f"Loaded {len(store)} keys from {path}")
        return store

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.snapshot(), f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageWriteError(str(self.path), str(e)) from e

        logger.debug(f"Store saved to {self.path}")

    def save(self, key: str, value: str) -> None:
        super().save(key, value)
        self._write()

    def remove(self, key: str) -> None:
        if key not in self:
            return
        super().remove(key)
        self._write()
