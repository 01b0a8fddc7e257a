"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.color_theory import HSL
from models.outfit import OutfitCandidate, OutfitScore, ScoreDetails
from models.wardrobe import Wardrobe, group_items_by_category
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = [
    "HSL",
    "OutfitCandidate",
    "OutfitScore",
    "ScoreDetails",
    "Wardrobe",
    "WardrobeItem",
    "from_raw_metadata",
    "group_items_by_category",
]
