"""
Font editor session: forwards user intents to the state machine and keeps
the store in sync after each change.
"""

import logging
from dataclasses import dataclass

from src.fontselector.fonts.catalog import Catalog
from src.fontselector.storage.base import KeyValueStore
from src.fontselector.storage.keys import TEXT_KEY

from .machine import SelectionStateMachine
from .state import Selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewStyle:
    """Style the preview text is rendered with."""

    font_family: str | None
    font_weight: int | None  # None falls back to default styling
    font_style: str  # normal, italic

    @classmethod
    def from_selection(cls, selection: Selection) -> "PreviewStyle":
        return cls(
            font_family=selection.font.family if selection.font else None,
            font_weight=selection.variant.weight if selection.variant else None,
            font_style="italic" if selection.italic_override else "normal",
        )

    def as_css(self) -> dict[str, str]:
        """Get the style as CSS properties, omitting unresolved ones."""
        css = {"font-style": self.font_style}
        if self.font_family is not None:
            css["font-family"] = self.font_family
        if self.font_weight is not None:
            css["font-weight"] = str(self.font_weight)
        return css


class FontEditor:
    """
    Orchestrates a font selection session.

    Every intent runs one state machine transition, then commits the
    selection when it is resolved. ``save()`` writes everything regardless.
    """

    def __init__(self, catalog: Catalog, store: KeyValueStore, autosave: bool = True):
        self.machine = SelectionStateMachine(catalog, store)
        self.autosave = autosave

    @property
    def catalog(self) -> Catalog:
        return self.machine.catalog

    @property
    def selection(self) -> Selection:
        return self.machine.selection

    @property
    def style(self) -> PreviewStyle:
        return PreviewStyle.from_selection(self.selection)

    def _persist(self) -> None:
        if not self.autosave:
            return
        if not self.selection.is_resolved:
            logger.debug("Selection unresolved, skipping autosave")
            return
        self.machine.commit()

    def variant_options(self) -> list[tuple[int, str]]:
        """Get the (weight, label) entries of the current font's variant picker."""
        font = self.selection.font
        if font is None:
            return []
        return [(variant.weight, variant.label) for variant in font.variants]

    def pick_font(self, family: str) -> Selection:
        selection = self.machine.select_font(family)
        if selection.font is None:
            logger.warning(f"Font family not in catalog: {family}")
        self._persist()
        return selection

    def pick_variant(self, weight: int) -> Selection:
        selection = self.machine.select_variant(weight)
        if selection.variant is None:
            logger.warning(f"No variant with weight {weight} in current font")
        self._persist()
        return selection

    def toggle_italic(self) -> Selection:
        selection = self.machine.toggle_italic()
        self._persist()
        return selection

    def edit_text(self, value: str) -> Selection:
        return self.machine.set_text(value)

    def reset(self) -> Selection:
        return self.machine.reset()

    def save(self) -> None:
        """Persist the text and the full selection."""
        self.machine.store.save(TEXT_KEY, self.selection.text)
        self.machine.commit()
        logger.info(f"Saved selection: {self.selection}")
