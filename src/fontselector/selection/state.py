"""
Selection state record.
"""

from dataclasses import dataclass

from src.fontselector.fonts.models import Font, Variant


@dataclass(frozen=True)
class Selection:
    """The current font, variant, italic intent and preview text."""

    font: Font | None
    variant: Variant | None
    italic_override: bool = False
    text: str = ""

    @property
    def is_resolved(self) -> bool:
        """Whether both a font and one of its variants are selected."""
        return self.font is not None and self.variant is not None

    def __str__(self) -> str:
        family = self.font.family if self.font else "<none>"
        variant = self.variant.label if self.variant else "<none>"
        italic = " +italic" if self.italic_override else ""
        return f"{family} {variant}{italic}"
