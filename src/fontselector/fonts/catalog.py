"""
Font Catalog
============

Normalizes a raw ``{family: {variant_key: display_name}}`` mapping into an
immutable catalog of fonts with structured variants.

Variant keys follow the web font convention: ``"regular"``, ``"500"``,
``"700italic"``. The leading integer is the weight and the presence of
``"italic"`` marks the italic face.
"""

import json
import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from src.fontselector.core.exceptions import (
    CatalogError,
    CatalogFileNotFoundError,
    CatalogLoadError,
)

from .models import Font, Variant

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 400
ITALIC_MARKER = "italic"

_LEADING_INT = re.compile(r"^[+-]?[0-9]+")


class Catalog(BaseModel):
    """Ordered, immutable collection of fonts available for selection."""

    model_config = ConfigDict(frozen=True)

    fonts: tuple[Font, ...] = Field(..., min_length=1)
    is_default: bool = Field(False, description="Built-in fallback catalog")

    def __iter__(self) -> Iterator[Font]:  # type: ignore[override]
        return iter(self.fonts)

    def __len__(self) -> int:
        return len(self.fonts)

    def __getitem__(self, index: int) -> Font:
        return self.fonts[index]

    @property
    def families(self) -> list[str]:
        return [font.family for font in self.fonts]

    @property
    def default_font(self) -> Font:
        return self.fonts[0]

    @property
    def default_variant(self) -> Variant:
        return self.fonts[0].variants[0]

    def find_font(self, family: str) -> Font | None:
        """Find a font by exact family name."""
        for font in self.fonts:
            if font.family == family:
                return font
        return None


class NormalizationResult(BaseModel):
    """Outcome of normalizing a raw catalog."""

    success: bool
    catalog: Catalog | None = None
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, catalog: Catalog) -> "NormalizationResult":
        return cls(success=True, catalog=catalog)

    @classmethod
    def failed(cls, reason: str) -> "NormalizationResult":
        return cls(success=False, errors=[reason])


def default_catalog() -> Catalog:
    """Get the built-in single-family catalog."""
    return Catalog(
        fonts=(
            Font(
                family="Roboto",
                variants=(
                    Variant(weight=400, italic=False, name="Regular"),
                    Variant(weight=500, italic=False, name="Medium"),
                    Variant(weight=700, italic=False, name="Bold"),
                ),
            ),
        ),
        is_default=True,
    )


def parse_variant_key(key: Any) -> tuple[int, bool]:
    """
    Parse a raw variant key into weight and italic flag.

    Returns:
        Tuple of (weight, italic). Keys without a leading integer, or with a
        weight of 0, get the default weight of 400.
    """
    key = str(key)
    italic = ITALIC_MARKER in key

    match = _LEADING_INT.match(key.replace(ITALIC_MARKER, "", 1).strip())
    weight = int(match.group()) if match else 0

    return (weight or DEFAULT_WEIGHT), italic


def _normalize_family(family: str, raw_variants: Mapping) -> Font | None:
    if not isinstance(raw_variants, Mapping):
        raise TypeError(
            f"variants of {family!r} must be a mapping, got {type(raw_variants).__name__}"
        )

    if not family or not raw_variants:
        logger.warning(f"Skipping font family {family!r}: no variants")
        return None

    variants = []
    for key, display_name in raw_variants.items():
        weight, italic = parse_variant_key(key)
        variants.append(Variant(weight=weight, italic=italic, name=display_name))

    return Font(family=family, variants=tuple(variants))


def normalize(raw: Any) -> NormalizationResult:
    """
    Normalize a raw catalog mapping.

    Args:
        raw: Mapping of family name to a mapping of variant key to display name

    Returns:
        NormalizationResult holding the catalog, or the reason it could not be built
    """
    if not isinstance(raw, Mapping):
        return NormalizationResult.failed(
            f"Raw catalog must be a mapping, got {type(raw).__name__}"
        )

    fonts = []
    try:
        for family, raw_variants in raw.items():
            font = _normalize_family(str(family), raw_variants)
            if font is not None:
                fonts.append(font)
    except (AttributeError, TypeError, ValueError) as e:
        return NormalizationResult.failed(f"Malformed raw catalog: {e}")

    if not fonts:
        return NormalizationResult.failed("Raw catalog contains no font families")

    logger.debug(f"Normalized {len(fonts)} font families")
    return NormalizationResult.ok(Catalog(fonts=tuple(fonts)))


def build_catalog(raw: Any) -> Catalog:
    """Normalize a raw catalog, substituting the built-in catalog on failure."""
    result = normalize(raw)
    if result.success and result.catalog is not None:
        return result.catalog

    logger.warning(f"Using built-in font catalog: {'; '.join(result.errors)}")
    return default_catalog()


def load_raw_catalog(path: str | Path) -> Any:
    """
    Read a raw catalog mapping from a JSON or YAML file.

    Raises:
        CatalogFileNotFoundError: If the file does not exist
        CatalogLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    if not path.exists():
        raise CatalogFileNotFoundError(str(path))

    try:
        with path.open(encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(str(path), str(e)) from e


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load and build the session catalog; any failure yields the built-in catalog."""
    if path is None:
        logger.info("No catalog file configured, using built-in font catalog")
        return default_catalog()

    try:
        raw = load_raw_catalog(path)
    except CatalogError as e:
        logger.warning(f"{e}; using built-in font catalog")
        return default_catalog()

    catalog = build_catalog(raw)
    logger.info(f"Loaded font catalog with {len(catalog)} families from {path}")
    return catalog
