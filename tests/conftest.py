"""
Pytest configuration and fixtures for font selector tests.
"""

import json
import tempfile
from pathlib import Path

import pytest

from src.fontselector.fonts.catalog import build_catalog
from src.fontselector.storage.base import MemoryStore


@pytest.fixture
def raw_catalog():
    """Raw catalog in the web font key format."""
    return {
        "Lato": {
            "100": "Lato Thin",
            "100italic": "Lato Thin Italic",
            "400": "Lato Regular",
            "400italic": "Lato Italic",
            "700": "Lato Bold",
        },
        "Merriweather": {
            "300italic": "Merriweather Light Italic",
            "regular": "Merriweather Regular",
            "900": "Merriweather Black",
        },
        "Oswald": {
            "500": "Oswald Medium",
        },
    }


@pytest.fixture
def catalog(raw_catalog):
    """Normalized catalog built from the raw fixture."""
    return build_catalog(raw_catalog)


@pytest.fixture
def store():
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def catalog_file(temp_dir, raw_catalog):
    """Raw catalog written to a JSON file."""
    path = temp_dir / "fonts.json"
    path.write_text(json.dumps(raw_catalog), encoding="utf-8")
    return path
