"""
Basic Usage Examples
====================

This module demonstrates basic usage patterns for the Font Selector.
"""

from pathlib import Path

from src.fontselector.core.config import FontSelectorConfig
from src.fontselector.fonts.catalog import build_catalog, load_catalog, normalize
from src.fontselector.selection.editor import FontEditor
from src.fontselector.storage.base import MemoryStore
from src.fontselector.storage.json_store import JsonFileStore

RAW_CATALOG = {
    "Lato": {"400": "Lato Regular", "400italic": "Lato Italic", "700": "Lato Bold"},
    "Oswald": {"500": "Oswald Medium"},
}


def example_in_memory_session():
    """
    Drive a selection session against an in-memory store.
    """
    print("=== In-memory Session ===")

    editor = FontEditor(build_catalog(RAW_CATALOG), MemoryStore())

    editor.pick_font("Lato")
    editor.pick_variant(400)
    editor.toggle_italic()
    editor.edit_text("Sphinx of black quartz, judge my vow")

    print(f"Selection: {editor.selection}")
    print(f"Style:     {editor.style.as_css()}")

    # Oswald has no italic face, the variant becomes unresolved
    editor.pick_font("Oswald")
    editor.toggle_italic()
    print(f"Selection: {editor.selection}")
    print(f"Style:     {editor.style.as_css()}")


def example_normalization_result():
    """
    Inspect the normalizer result instead of falling back silently.
    """
    print("\n=== Normalization Result ===")

    result = normalize({"Broken": ["400", "700"]})
    if result.success:
        print(f"Families: {result.catalog.families}")
    else:
        print(f"Catalog rejected: {result.errors[0]}")


def example_persistent_session():
    """
    Keep the selection in a JSON file across sessions.
    """
    print("\n=== Persistent Session ===")

    config = FontSelectorConfig.from_env_and_yaml()
    store_path = Path("examples/store.json")

    editor = FontEditor(load_catalog(config.catalog_path), JsonFileStore(store_path))
    editor.pick_font(editor.catalog.families[-1])
    editor.save()

    restored = FontEditor(load_catalog(config.catalog_path), JsonFileStore(store_path))
    print(f"Restored: {restored.selection}")

    restored.reset()


if __name__ == "__main__":
    example_in_memory_session()
    example_normalization_result()
    example_persistent_session()
