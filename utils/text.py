from __future__ import annotations

import unicodedata

# Letters, marks, numbers, punctuation, symbols and Zs spaces are graphic.
_NON_GRAPHIC_CATEGORIES = {"Zl", "Zp"}


def is_graphic(char: str) -> bool:
    category = unicodedata.category(char)
    return not (category.startswith("C") or category in _NON_GRAPHIC_CATEGORIES)


def has_non_printable(text: str) -> bool:
    return any(not is_graphic(char) for char in text)
