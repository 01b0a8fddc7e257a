"""Candidate generator tests with scripted and seeded random sources."""
from __future__ import annotations

import itertools
import random
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from logic.outfit_builder import (
    count_combinations,
    enumerate_combinations,
    generate_outfit_suggestions,
    generate_with_diagnostics,
)
from models.color_theory import HSL
from models.outfit import dedup_key
from models.wardrobe import Wardrobe, group_items_by_category
from models.wardrobe_item import WardrobeItem


class ScriptedRandom:
    """Random source replaying fixed choice indices and probabilities."""

    def __init__(self, choices: Iterable[int], randoms: Iterable[float]) -> None:
        self._choices = iter(choices)
        self._randoms = iter(randoms)

    def choice(self, seq: Sequence):
        return seq[next(self._choices)]

    def random(self) -> float:
        return next(self._randoms)


def _item(item_id: str, category: str, hsl=(0, 50, 50)) -> WardrobeItem:
    return WardrobeItem(item_id=item_id, category=category, hsl=HSL(*hsl))


def _keys(candidates) -> List[tuple]:
    return [candidate.dedup_key for candidate in candidates]


def _full_wardrobe() -> Wardrobe:
    return group_items_by_category(
        [
            _item("t1", "Tops", (0, 80, 20)),
            _item("t2", "tops", (210, 40, 50)),
            _item("t3", "TOPS", (0, 0, 95)),
            _item("b1", "Bottoms", (180, 80, 80)),
            _item("b2", "Bottoms", (30, 20, 60)),
            _item("f1", "Footwear", (0, 0, 10)),
            _item("f2", "Footwear", (120, 60, 50)),
            _item("a1", "Accessories", (45, 90, 50)),
            _item("a2", "Accessories", (300, 50, 50)),
        ]
    )


def test_empty_wardrobe_returns_nothing():
    assert generate_outfit_suggestions(Wardrobe(), False, 3) == []


def test_without_tops_or_bottoms_returns_nothing():
    wardrobe = Wardrobe(footwear=[_item("f1", "Footwear")], accessories=[_item("a1", "Accessories")])
    result = generate_with_diagnostics(wardrobe, max_suggestions=3)
    assert result.candidates == []
    assert result.diagnostics["reason"] == "missing_base_items"


def test_single_top_and_bottom_yield_one_candidate():
    top, bottom = _item("t1", "Tops"), _item("b1", "Bottoms")
    wardrobe = Wardrobe(tops=[top], bottoms=[bottom])
    candidates = generate_outfit_suggestions(wardrobe, False, 3, rng=random.Random(7))
    assert len(candidates) == 1
    assert set(candidates[0].items) == {top, bottom}


def test_single_item_set_never_duplicates():
    wardrobe = Wardrobe(tops=[_item("t1", "Tops")], bottoms=[_item("b1", "Bottoms")])
    result = generate_with_diagnostics(wardrobe, max_suggestions=50, rng=random.Random(1))
    assert len(result.candidates) == 1
    assert result.diagnostics["attempts"] == 200
    assert result.diagnostics["duplicates"] == 199


def test_one_item_per_bucket_stays_within_distinct_item_sets():
    wardrobe = Wardrobe(
        tops=[_item("t1", "Tops")],
        bottoms=[_item("b1", "Bottoms")],
        footwear=[_item("f1", "Footwear")],
        accessories=[_item("a1", "Accessories")],
    )
    candidates = generate_outfit_suggestions(wardrobe, True, 25, rng=random.Random(11))
    keys = _keys(candidates)
    assert len(keys) == len(set(keys))
    assert len(keys) <= count_combinations(wardrobe) == 4


def test_scripted_draws_produce_exact_candidates():
    wardrobe = Wardrobe(
        tops=[_item("t1", "Tops"), _item("t2", "Tops")],
        bottoms=[_item("b1", "Bottoms")],
        footwear=[_item("f1", "Footwear")],
    )
    rng = ScriptedRandom(choices=[0, 0, 0, 0, 0], randoms=[0.9, 0.1])
    candidates = generate_outfit_suggestions(wardrobe, False, 2, rng=rng)
    assert set(_keys(candidates)) == {("b1", "t1"), ("b1", "f1", "t1")}


def test_duplicate_draws_are_skipped():
    wardrobe = Wardrobe(
        tops=[_item("t1", "Tops"), _item("t2", "Tops")],
        bottoms=[_item("b1", "Bottoms")],
        footwear=[_item("f1", "Footwear")],
    )
    rng = ScriptedRandom(choices=[0, 0, 0, 0, 1, 0], randoms=[0.9, 0.9, 0.9])
    result = generate_with_diagnostics(wardrobe, max_suggestions=2, rng=rng)
    assert set(_keys(result.candidates)) == {("b1", "t1"), ("b1", "t2")}
    assert result.diagnostics["attempts"] == 3
    assert result.diagnostics["duplicates"] == 1


def test_attempt_ceiling_stops_unviable_sampling():
    wardrobe = Wardrobe(tops=[_item("t1", "Tops")], footwear=[_item("f1", "Footwear")])
    rng = ScriptedRandom(choices=itertools.repeat(0), randoms=itertools.repeat(0.95))
    result = generate_with_diagnostics(wardrobe, max_suggestions=3, rng=rng, max_attempts=200)
    assert result.candidates == []
    assert result.diagnostics["attempts"] == 200
    assert result.diagnostics["undersized"] == 200


def test_candidates_are_ranked_and_well_formed():
    candidates = generate_outfit_suggestions(_full_wardrobe(), False, 5, rng=random.Random(3))
    assert 0 < len(candidates) <= 5
    scores = [candidate.score for candidate in candidates]
    assert scores == sorted(scores, reverse=True)
    keys = _keys(candidates)
    assert len(keys) == len(set(keys))
    for candidate in candidates:
        categories = [item.category for item in candidate.items]
        assert 2 <= len(candidate.items) <= 4
        assert len(categories) == len(set(categories))
        assert candidate.dedup_key == tuple(sorted(item.item_id for item in candidate.items))
        assert candidate.style == "casual"
        assert candidate.candidate_id.startswith("outfit-")
        assert candidate.timestamp > 0


def test_candidate_ids_are_unique():
    candidates = generate_outfit_suggestions(_full_wardrobe(), True, 10, rng=random.Random(5))
    ids = [candidate.candidate_id for candidate in candidates]
    assert len(ids) == len(set(ids))
    assert all(candidate.style == "formal" for candidate in candidates)


def test_seeded_sources_reproduce_item_sets():
    first = generate_outfit_suggestions(_full_wardrobe(), False, 4, rng=random.Random(42))
    second = generate_outfit_suggestions(_full_wardrobe(), False, 4, rng=random.Random(42))
    assert _keys(first) == _keys(second)
    assert [c.score for c in first] == [c.score for c in second]


def test_count_and_enumerate_agree():
    wardrobe = _full_wardrobe()
    assert count_combinations(wardrobe) == 3 * 2 * 3 * 3
    assert len(enumerate_combinations(wardrobe)) == count_combinations(wardrobe)

    tops_only = Wardrobe(tops=[_item("t1", "Tops"), _item("t2", "Tops")], footwear=[_item("f1", "Footwear")])
    assert count_combinations(tops_only) == 2
    assert [dedup_key(combo) for combo in enumerate_combinations(tops_only)] == [("f1", "t1"), ("f1", "t2")]


def test_enumeration_below_threshold_is_deterministic():
    wardrobe = Wardrobe(
        tops=[_item("t1", "Tops")],
        bottoms=[_item("b1", "Bottoms")],
        footwear=[_item("f1", "Footwear")],
    )
    result = generate_with_diagnostics(wardrobe, max_suggestions=5, enumeration_threshold=10)
    assert result.diagnostics["strategy"] == "enumeration"
    assert set(_keys(result.candidates)) == {("b1", "t1"), ("b1", "f1", "t1")}


def test_candidate_record_shape():
    wardrobe = Wardrobe(tops=[_item("t1", "Tops")], bottoms=[_item("b1", "Bottoms")])
    candidate = generate_outfit_suggestions(wardrobe, True, 1, rng=random.Random(0))[0]
    record = candidate.to_record()
    assert set(record) == {"id", "items", "score", "explanation", "details", "style", "timestamp"}
    assert set(record["details"]) == {"harmonyDetails", "neutralCount", "avgSaturation"}
    assert [item["id"] for item in record["items"]] == ["t1", "b1"]
    assert record["style"] == "formal"
