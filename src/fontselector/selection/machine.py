"""
Selection State Machine
=======================

Holds the user's font selection and applies the transitions that change it.
The selection is mirrored into a key-value store: text is saved as soon as it
changes, the font/variant/italic fields when ``commit()`` is called.
"""

import json
import logging
from dataclasses import replace

from pydantic import ValidationError

from src.fontselector.fonts.catalog import Catalog
from src.fontselector.fonts.models import Font, Variant
from src.fontselector.storage.base import KeyValueStore
from src.fontselector.storage.keys import (
    ALL_KEYS,
    FONT_KEY,
    ITALIC_KEY,
    SELECTION_KEYS,
    TEXT_KEY,
    VARIANT_KEY,
)

from .state import Selection

logger = logging.getLogger(__name__)


class SelectionStateMachine:
    """
    Cascading font selection.

    Picking a font resets the variant to the font's first one; picking a
    variant resets the italic intent to the variant's flag; toggling italic
    resolves the variant with the same weight and the new flag, if any.
    Lookups never raise, a miss leaves the font or variant unset.
    """

    def __init__(self, catalog: Catalog, store: KeyValueStore):
        """
        Initialize the state machine from persisted data.

        Args:
            catalog: Session font catalog
            store: Store the selection is persisted to
        """
        self.catalog = catalog
        self.store = store
        self._selection = self._load()

        logger.debug(f"Selection initialized: {self._selection}")

    @property
    def selection(self) -> Selection:
        return self._selection

    def _default_selection(self, italic_override: bool, text: str) -> Selection:
        return Selection(
            font=self.catalog.default_font,
            variant=self.catalog.default_variant,
            italic_override=italic_override,
            text=text,
        )

    def _load(self) -> Selection:
        """Build the initial selection from the store, falling back to catalog defaults."""
        text = self.store.load(TEXT_KEY) or ""

        persisted = self._load_persisted_selection()
        if persisted is None:
            return self._default_selection(self.catalog.default_variant.italic, text)

        font, variant, italic = persisted
        return Selection(font=font, variant=variant, italic_override=italic, text=text)

    def _load_persisted_selection(self) -> tuple[Font | None, Variant | None, bool] | None:
        raw = {key: self.store.load(key) for key in SELECTION_KEYS}
        missing = [key for key, value in raw.items() if value is None]
        if missing:
            logger.debug(f"No persisted selection (missing {', '.join(missing)})")
            return None

        try:
            font_data = json.loads(raw[FONT_KEY])
            variant_data = json.loads(raw[VARIANT_KEY])
            italic = json.loads(raw[ITALIC_KEY])

            font = None if font_data is None else Font.model_validate(font_data)
            variant = None if variant_data is None else Variant.model_validate(variant_data)

            if not isinstance(italic, bool):
                raise TypeError(f"{ITALIC_KEY} must be a boolean, got {italic!r}")
            if variant is not None and (font is None or variant not in font.variants):
                raise ValueError(f"{variant} does not belong to the persisted font")
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring corrupt persisted selection: {e}")
            return None

        return font, variant, italic

    def select_font(self, family: str) -> Selection:
        """Select a font by family; the variant resets to the font's first one."""
        font = self.catalog.find_font(family)
        variant = font.default_variant if font else None

        self._selection = replace(
            self._selection,
            font=font,
            variant=variant,
            italic_override=variant.italic if variant else False,
        )
        logger.debug(f"select_font({family!r}) -> {self._selection}")
        return self._selection

    def select_variant(self, weight: int) -> Selection:
        """Select the first variant of the current font with the given weight."""
        font = self._selection.font
        variant = font.find_variant(weight) if font else None

        self._selection = replace(
            self._selection,
            variant=variant,
            italic_override=variant.italic if variant else False,
        )
        logger.debug(f"select_variant({weight}) -> {self._selection}")
        return self._selection

    def toggle_italic(self) -> Selection:
        """Flip the italic intent and resolve the matching variant, if any."""
        current = self._selection
        italic = not current.italic_override
        variant = current.variant

        if current.font is not None and variant is not None:
            variant = current.font.find_variant(variant.weight, italic=italic)

        self._selection = replace(current, variant=variant, italic_override=italic)
        logger.debug(f"toggle_italic() -> {self._selection}")
        return self._selection

    def set_text(self, value: str) -> Selection:
        """Replace the preview text and persist it immediately."""
        self.store.save(TEXT_KEY, value)
        self._selection = replace(self._selection, text=value)
        return self._selection

    def commit(self) -> None:
        """Write the font, variant and italic intent to the store."""
        selection = self._selection
        font = selection.font.model_dump_json() if selection.font else "null"
        variant = selection.variant.model_dump_json() if selection.variant else "null"

        self.store.save(FONT_KEY, font)
        self.store.save(VARIANT_KEY, variant)
        self.store.save(ITALIC_KEY, json.dumps(selection.italic_override))
        logger.debug(f"Committed selection: {selection}")

    def reset(self) -> Selection:
        """Return to the catalog defaults and clear everything persisted."""
        self._selection = self._default_selection(False, "")
        for key in ALL_KEYS:
            self.store.remove(key)

        logger.info("Selection reset to catalog defaults")
        return self._selection
