"""Font Selector
=============

Pick a font family and a weight/italic variant from a catalog, preview text
with it, and keep the selection and text across sessions.
"""

__version__ = "1.0.0"

from .core.config import FontSelectorConfig
from .core.exceptions import CatalogError, FontSelectorError, StorageError
from .fonts import Catalog, Font, Variant, build_catalog, load_catalog, normalize
from .selection import FontEditor, PreviewStyle, Selection, SelectionStateMachine
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "Catalog",
    "CatalogError",
    "Font",
    "FontEditor",
    "FontSelectorConfig",
    "FontSelectorError",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PreviewStyle",
    "Selection",
    "SelectionStateMachine",
    "StorageError",
    "Variant",
    "build_catalog",
    "load_catalog",
    "normalize",
]
