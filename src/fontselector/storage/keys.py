"""Keys under which the selection is persisted."""

TEXT_KEY = "text"
FONT_KEY = "selectedFont"
VARIANT_KEY = "selectedVariant"
ITALIC_KEY = "isItalic"

SELECTION_KEYS = (FONT_KEY, VARIANT_KEY, ITALIC_KEY)
ALL_KEYS = (TEXT_KEY, *SELECTION_KEYS)
