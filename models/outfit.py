"""Outfit scoring and candidate records."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class ScoreDetails:
    harmony_details: Tuple[str, ...] = ()
    neutral_count: int = 0
    avg_saturation: int = 0

    def to_record(self) -> Dict[str, Any]:
        return {
            "harmonyDetails": list(self.harmony_details),
            "neutralCount": self.neutral_count,
            "avgSaturation": self.avg_saturation,
        }


@dataclass(frozen=True)
class OutfitScore:
    """Result of scoring one combination of wardrobe items."""

    score: float
    explanation: str
    details: Optional[ScoreDetails] = None

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"score": self.score, "explanation": self.explanation}
        if self.details is not None:
            record["details"] = self.details.to_record()
        return record


def dedup_key(items: List[WardrobeItem]) -> Tuple[str, ...]:
    """Identity of a combination: its sorted item ids."""

    return tuple(sorted(item.item_id for item in items))


@dataclass(frozen=True)
class OutfitCandidate:
    """A sampled, scored outfit combination ready for ranking."""

    candidate_id: str
    items: Tuple[WardrobeItem, ...]
    score: float
    explanation: str
    style: str
    timestamp: int
    details: ScoreDetails = field(default_factory=ScoreDetails)

    @property
    def dedup_key(self) -> Tuple[str, ...]:
        return dedup_key(list(self.items))

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.candidate_id,
            "items": [item.to_record() for item in self.items],
            "score": self.score,
            "explanation": self.explanation,
            "details": self.details.to_record(),
            "style": self.style,
            "timestamp": self.timestamp,
        }


__all__ = ["ScoreDetails", "OutfitScore", "OutfitCandidate", "dedup_key"]
