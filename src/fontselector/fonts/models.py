"""
Font data models and types.
"""

from pydantic import BaseModel, ConfigDict, Field


class Variant(BaseModel):
    """A weight/italic combination within a font family."""

    model_config = ConfigDict(frozen=True)

    weight: int = Field(..., description="Numeric weight, typically 100-900")
    italic: bool = Field(False, description="Italic face")
    name: str | None = Field(None, description="Display name from the raw catalog")

    @property
    def key(self) -> tuple[int, bool]:
        """Identity of the variant within its font."""
        return (self.weight, self.italic)

    @property
    def label(self) -> str:
        return f"{self.weight} {'Italic' if self.italic else 'Regular'}"

    def __str__(self) -> str:
        return self.label


class Font(BaseModel):
    """A font family and its ordered variants."""

    model_config = ConfigDict(frozen=True)

    family: str = Field(..., min_length=1, description="Family name, unique in a catalog")
    variants: tuple[Variant, ...] = Field(..., min_length=1, description="Ordered variants")

    @property
    def default_variant(self) -> Variant:
        return self.variants[0]

    def find_variant(self, weight: int, italic: bool | None = None) -> Variant | None:
        """
        Find the first variant with the given weight.

        Args:
            weight: Weight to match
            italic: Italic flag to match as well; None matches either

        Returns:
            The first matching variant, None if there is no match
        """
        for variant in self.variants:
            if variant.weight == weight and (italic is None or variant.italic == italic):
                return variant
        return None

    def __str__(self) -> str:
        return f"{self.family} ({len(self.variants)} variants)"
