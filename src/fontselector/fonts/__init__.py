"""Font Catalog Module
===================

Font and variant models and the normalizer that turns a raw catalog mapping
into the immutable catalog used for a session.
"""

from .catalog import (
    Catalog,
    NormalizationResult,
    build_catalog,
    default_catalog,
    load_catalog,
    load_raw_catalog,
    normalize,
    parse_variant_key,
)
from .models import Font, Variant

__all__ = [
    "Catalog",
    "Font",
    "NormalizationResult",
    "Variant",
    "build_catalog",
    "default_catalog",
    "load_catalog",
    "load_raw_catalog",
    "normalize",
    "parse_variant_key",
]
