"""Canonical taxonomy definitions for wardrobe items.

This module centralises the canonical category labels and style tags used by
the scoring engine, the store and the HTTP layer so that case-insensitive
category matching stays consistent everywhere.
"""

from typing import Dict, List

TOPS = "Tops"
BOTTOMS = "Bottoms"
FOOTWEAR = "Footwear"
ACCESSORIES = "Accessories"

CATEGORIES: List[str] = [TOPS, BOTTOMS, FOOTWEAR, ACCESSORIES]

STYLE_CASUAL = "casual"
STYLE_FORMAL = "formal"
STYLE_TAGS = [STYLE_CASUAL, STYLE_FORMAL]

_CATEGORY_LOOKUP: Dict[str, str] = {category.lower(): category for category in CATEGORIES}


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower()


def validate_category(value: str) -> str:
    """Validate a category case-insensitively and return its canonical label.

    Raises a :class:`ValueError` if the category is not part of the taxonomy.
    """

    key = _normalize_key(str(value))
    if key not in _CATEGORY_LOOKUP:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")
    return _CATEGORY_LOOKUP[key]


def is_known_category(value: str) -> bool:
    return _normalize_key(str(value)) in _CATEGORY_LOOKUP


def style_for(is_formal: bool) -> str:
    """Return the style tag for a formal flag."""

    return STYLE_FORMAL if is_formal else STYLE_CASUAL


__all__ = [
    "TOPS",
    "BOTTOMS",
    "FOOTWEAR",
    "ACCESSORIES",
    "CATEGORIES",
    "STYLE_CASUAL",
    "STYLE_FORMAL",
    "STYLE_TAGS",
    "validate_category",
    "is_known_category",
    "style_for",
]
