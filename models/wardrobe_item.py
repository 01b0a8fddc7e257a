"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from models.color_theory import HSL, hex_to_rgb, rgb_to_hex, rgb_to_hsl
from models.taxonomy import validate_category


def _coerce_rgb(value: Sequence[Any]) -> Tuple[int, int, int]:
    channels = [int(channel) for channel in value]
    if len(channels) != 3:
        raise ValueError(f"RGB color needs three channels, got {value!r}")
    return channels[0], channels[1], channels[2]


@dataclass(frozen=True)
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    The color is fixed when the item is created. Display metadata such as the
    hex code, file name and image URL is carried along untouched by the
    scoring engine.
    """

    item_id: str
    category: str
    hsl: HSL
    hex: Optional[str] = None
    rgb: Optional[Tuple[int, int, int]] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    added_at: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", validate_category(self.category))
        if not isinstance(self.hsl, HSL):
            object.__setattr__(self, "hsl", HSL.from_sequence(self.hsl))
        if self.hex:
            object.__setattr__(self, "hex", self.hex.lower())
        if self.rgb is not None:
            object.__setattr__(self, "rgb", _coerce_rgb(self.rgb))

    @property
    def color_label(self) -> str:
        """Hex code when known, otherwise an ``hsl(...)`` rendering."""

        return self.hex or str(self.hsl)

    def to_record(self) -> Dict[str, Any]:
        """Serialise into the plain record shape exchanged with collaborators."""

        return {
            "id": self.item_id,
            "category": self.category,
            "hsl": self.hsl.as_list(),
            "hex": self.hex,
            "rgb": list(self.rgb) if self.rgb else None,
            "name": self.name,
            "image_url": self.image_url,
            "added_at": self.added_at,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a loose record.

    The color may be supplied as ``hsl``, or derived from ``rgb`` or ``hex``
    as produced by the color extraction step.
    """

    item_id = metadata.get("item_id") or metadata.get("id")
    missing = [name for name, value in (("id", item_id), ("category", metadata.get("category"))) if not value]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    hex_value = metadata.get("hex")
    rgb = metadata.get("rgb")
    hsl = metadata.get("hsl")
    if hex_value:
        hex_value = rgb_to_hex(*hex_to_rgb(str(hex_value)))
    if rgb is not None:
        rgb = _coerce_rgb(rgb)
    elif hex_value:
        rgb = hex_to_rgb(hex_value)
    if hsl is None:
        if rgb is None:
            raise ValueError("WardrobeItem needs one of 'hsl', 'rgb' or 'hex'")
        hsl = rgb_to_hsl(*rgb)
    if not hex_value and rgb is not None:
        hex_value = rgb_to_hex(*rgb)

    return WardrobeItem(
        item_id=str(item_id),
        category=str(metadata["category"]),
        hsl=hsl if isinstance(hsl, HSL) else HSL.from_sequence(hsl),
        hex=hex_value,
        rgb=rgb,
        name=metadata.get("name"),
        image_url=metadata.get("image_url"),
        added_at=metadata.get("added_at"),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
