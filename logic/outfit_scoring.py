"""Deterministic color-harmony scoring for candidate outfits."""

from __future__ import annotations

import logging
from typing import List, Sequence

from models.color_theory import (
    harmony_score,
    hue_distance,
    is_analogous,
    is_complementary,
    is_neutral,
    round_half_up,
)
from models.outfit import OutfitScore, ScoreDetails
from models.taxonomy import style_for
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

NOT_ENOUGH_ITEMS = "Not enough items for scoring"

FORMAL_NEUTRAL_BONUS = 0.5
FORMAL_SATURATION_LIMIT = 55
FORMAL_BRIGHTNESS_PENALTY = 1.0
CASUAL_SATURATION_THRESHOLD = 40
CASUAL_VIBRANCY_BONUS = 0.5
VIBRANT_REMARK_SATURATION = 50


def _pair_details(item_a: WardrobeItem, item_b: WardrobeItem) -> List[str]:
    prefix = f"{item_a.category} + {item_b.category}"
    details = []
    distance = hue_distance(item_a.hsl.hue, item_b.hsl.hue)
    if is_complementary(distance):
        details.append(f"{prefix}: complementary colors")
    elif is_analogous(distance):
        details.append(f"{prefix}: analogous harmony")
    if is_neutral(item_a.hsl) or is_neutral(item_b.hsl):
        details.append(f"{prefix}: neutral pairing")
    return details


def _style_adjustment(is_formal: bool, neutral_count: int, avg_saturation: float) -> float:
    if is_formal:
        adjustment = FORMAL_NEUTRAL_BONUS * neutral_count
        if avg_saturation > FORMAL_SATURATION_LIMIT:
            adjustment -= FORMAL_BRIGHTNESS_PENALTY
        return adjustment
    if avg_saturation > CASUAL_SATURATION_THRESHOLD:
        return CASUAL_VIBRANCY_BONUS
    return 0.0


def build_explanation(
    items: Sequence[WardrobeItem],
    harmony_details: Sequence[str],
    is_formal: bool,
    neutral_count: int,
    avg_saturation: float,
) -> str:
    """Compose the human-readable rationale for a scored combination.

    Only the first recorded harmony detail is summarised.
    """

    item_names = " + ".join(f"{item.color_label} {item.category.lower()}" for item in items)
    if not harmony_details and neutral_count == 0:
        return f"{item_names} — experimental color combination for {style_for(is_formal)} wear"

    clauses = []
    if neutral_count > 0:
        if neutral_count == len(items):
            clauses.append("All neutral palette")
        else:
            plural = "s" if neutral_count > 1 else ""
            clauses.append(f"{neutral_count} neutral item{plural} provide balance")
    if harmony_details:
        clauses.append(harmony_details[0].split(": ", 1)[-1])
    explanation = "; ".join(clauses)

    if is_formal and neutral_count > 0:
        explanation += " — professional and sophisticated"
    elif not is_formal and avg_saturation > VIBRANT_REMARK_SATURATION:
        explanation += " — vibrant and expressive"
    return f"{item_names} — {explanation}"


def score_outfit(items: Sequence[WardrobeItem], is_formal: bool) -> OutfitScore:
    """Aggregate pairwise harmony across an outfit and apply style adjustments."""

    if len(items) < 2:
        return OutfitScore(score=0, explanation=NOT_ENOUGH_ITEMS)

    total = 0.0
    harmony_details: List[str] = []
    for i, item_a in enumerate(items):
        for item_b in items[i + 1 :]:
            pair_score = harmony_score(item_a.hsl, item_b.hsl, is_formal)
            total += pair_score
            if pair_score > 0:
                harmony_details.extend(_pair_details(item_a, item_b))

    neutral_count = sum(1 for item in items if is_neutral(item.hsl))
    avg_saturation = sum(item.hsl.saturation for item in items) / len(items)
    total += _style_adjustment(is_formal, neutral_count, avg_saturation)

    explanation = build_explanation(items, harmony_details, is_formal, neutral_count, avg_saturation)
    logger.debug(
        "Scored outfit %s formal=%s -> %s", [item.item_id for item in items], is_formal, total
    )
    return OutfitScore(
        score=total,
        explanation=explanation,
        details=ScoreDetails(
            harmony_details=tuple(harmony_details),
            neutral_count=neutral_count,
            avg_saturation=round_half_up(avg_saturation),
        ),
    )


__all__ = ["score_outfit", "build_explanation", "NOT_ENOUGH_ITEMS"]
