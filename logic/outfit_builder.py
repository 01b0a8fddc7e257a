"""Outfit candidate generation with transparent diagnostics."""
from __future__ import annotations

import itertools
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple
from uuid import uuid4

from logic.outfit_scoring import score_outfit
from models.outfit import OutfitCandidate, dedup_key
from models.taxonomy import style_for
from models.wardrobe import Wardrobe
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 200
DEFAULT_MAX_SUGGESTIONS = 3
FOOTWEAR_PROBABILITY = 0.7
ACCESSORY_PROBABILITY = 0.5

STRATEGY_SAMPLING = "sampling"
STRATEGY_ENUMERATION = "enumeration"


@dataclass(frozen=True)
class GenerationResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object]


def _new_candidate_id() -> str:
    return f"outfit-{uuid4().hex[:12]}"


def _draw_combination(wardrobe: Wardrobe, rng: random.Random) -> List[WardrobeItem]:
    """Draw one random combination: a top and a bottom when available, optional extras."""

    combination: List[WardrobeItem] = []
    if wardrobe.tops:
        combination.append(rng.choice(wardrobe.tops))
    if wardrobe.bottoms:
        combination.append(rng.choice(wardrobe.bottoms))
    if wardrobe.footwear and rng.random() < FOOTWEAR_PROBABILITY:
        combination.append(rng.choice(wardrobe.footwear))
    if wardrobe.accessories and rng.random() < ACCESSORY_PROBABILITY:
        combination.append(rng.choice(wardrobe.accessories))
    return combination


def count_combinations(wardrobe: Wardrobe) -> int:
    """Number of distinct category-respecting combinations with at least two items."""

    if not wardrobe.tops and not wardrobe.bottoms:
        return 0
    base = max(len(wardrobe.tops), 1) * max(len(wardrobe.bottoms), 1)
    total = base * (len(wardrobe.footwear) + 1) * (len(wardrobe.accessories) + 1)
    if not wardrobe.tops or not wardrobe.bottoms:
        # a lone top or bottom with no extras is a single item
        total -= base
    return total


def enumerate_combinations(wardrobe: Wardrobe) -> List[List[WardrobeItem]]:
    """Every combination the sampler could draw, in bucket order."""

    optional: List[Optional[WardrobeItem]] = [None]
    combinations = []
    for parts in itertools.product(
        wardrobe.tops or optional,
        wardrobe.bottoms or optional,
        list(wardrobe.footwear) + optional,
        list(wardrobe.accessories) + optional,
    ):
        combination = [item for item in parts if item is not None]
        if len(combination) >= 2:
            combinations.append(combination)
    return combinations


def _build_candidate(
    combination: Sequence[WardrobeItem], is_formal: bool, clock: Callable[[], float]
) -> OutfitCandidate:
    scoring = score_outfit(combination, is_formal)
    return OutfitCandidate(
        candidate_id=_new_candidate_id(),
        items=tuple(combination),
        score=scoring.score,
        explanation=scoring.explanation,
        details=scoring.details,
        style=style_for(is_formal),
        timestamp=int(clock() * 1000),
    )


def generate_with_diagnostics(
    wardrobe: Wardrobe,
    is_formal: bool = False,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    enumeration_threshold: int = 0,
    clock: Callable[[], float] = time.time,
) -> GenerationResult:
    """Sample, score, deduplicate and rank outfit candidates.

    Small wardrobes whose combination count is at most ``enumeration_threshold``
    are enumerated exhaustively instead of sampled.
    """

    diagnostics: Dict[str, object] = {
        "style": style_for(is_formal),
        "wardrobe_counts": wardrobe.counts(),
        "attempts": 0,
        "duplicates": 0,
        "undersized": 0,
        "accepted": 0,
        "strategy": STRATEGY_SAMPLING,
    }
    if not wardrobe.tops and not wardrobe.bottoms:
        logger.info("No tops or bottoms available; skipping generation")
        diagnostics["reason"] = "missing_base_items"
        return GenerationResult(candidates=[], diagnostics=diagnostics)

    accepted: List[OutfitCandidate] = []
    seen: Set[Tuple[str, ...]] = set()

    combination_count = count_combinations(wardrobe)
    if combination_count <= enumeration_threshold:
        diagnostics["strategy"] = STRATEGY_ENUMERATION
        for combination in enumerate_combinations(wardrobe):
            key = dedup_key(combination)
            if key in seen:
                continue
            seen.add(key)
            accepted.append(_build_candidate(combination, is_formal, clock))
        diagnostics["attempts"] = combination_count
    else:
        source = rng or random.Random()
        attempts = 0
        while len(accepted) < max_suggestions and attempts < max_attempts:
            attempts += 1
            combination = _draw_combination(wardrobe, source)
            if len(combination) < 2:
                diagnostics["undersized"] = int(diagnostics["undersized"]) + 1
                continue
            key = dedup_key(combination)
            if key in seen:
                diagnostics["duplicates"] = int(diagnostics["duplicates"]) + 1
                continue
            seen.add(key)
            accepted.append(_build_candidate(combination, is_formal, clock))
        diagnostics["attempts"] = attempts

    diagnostics["accepted"] = len(accepted)
    ranked = sorted(accepted, key=lambda candidate: candidate.score, reverse=True)[:max_suggestions]
    diagnostics["returned_ids"] = [candidate.candidate_id for candidate in ranked]
    logger.info(
        "Generated %s of %s requested %s outfits via %s after %s attempts",
        len(ranked),
        max_suggestions,
        diagnostics["style"],
        diagnostics["strategy"],
        diagnostics["attempts"],
    )
    return GenerationResult(candidates=ranked, diagnostics=diagnostics)


def generate_outfit_suggestions(
    wardrobe: Wardrobe,
    is_formal: bool = False,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    enumeration_threshold: int = 0,
) -> List[OutfitCandidate]:
    """Return up to ``max_suggestions`` ranked candidates; best effort."""

    return generate_with_diagnostics(
        wardrobe,
        is_formal=is_formal,
        max_suggestions=max_suggestions,
        rng=rng,
        max_attempts=max_attempts,
        enumeration_threshold=enumeration_threshold,
    ).candidates


__all__ = [
    "generate_outfit_suggestions",
    "generate_with_diagnostics",
    "count_combinations",
    "enumerate_combinations",
    "GenerationResult",
    "MAX_ATTEMPTS",
]
