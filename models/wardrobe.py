"""Wardrobe partition consumed by the candidate generator."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from models.taxonomy import ACCESSORIES, BOTTOMS, FOOTWEAR, TOPS, is_known_category, validate_category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wardrobe:
    """Items split into the four category buckets, in insertion order."""

    tops: List[WardrobeItem] = field(default_factory=list)
    bottoms: List[WardrobeItem] = field(default_factory=list)
    footwear: List[WardrobeItem] = field(default_factory=list)
    accessories: List[WardrobeItem] = field(default_factory=list)

    def bucket(self, category: str) -> List[WardrobeItem]:
        return {
            TOPS: self.tops,
            BOTTOMS: self.bottoms,
            FOOTWEAR: self.footwear,
            ACCESSORIES: self.accessories,
        }[validate_category(category)]

    def counts(self) -> Dict[str, int]:
        return {
            TOPS: len(self.tops),
            BOTTOMS: len(self.bottoms),
            FOOTWEAR: len(self.footwear),
            ACCESSORIES: len(self.accessories),
        }

    def __len__(self) -> int:
        return sum(self.counts().values())


def group_items_by_category(items: Iterable[WardrobeItem]) -> Wardrobe:
    """Partition a flat item sequence into category buckets."""

    wardrobe = Wardrobe()
    for item in items:
        if not is_known_category(item.category):
            logger.warning("Skipping item %s with unknown category %s", item.item_id, item.category)
            continue
        wardrobe.bucket(item.category).append(item)
    logger.debug("Grouped wardrobe -> %s", wardrobe.counts())
    return wardrobe


__all__ = ["Wardrobe", "group_items_by_category"]
