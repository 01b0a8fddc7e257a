"""Wardrobe item model, taxonomy and SQLite store tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from models import taxonomy
from models.color_theory import HSL
from models.wardrobe import group_items_by_category
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from tools.wardrobe_store import SQLiteWardrobeStore


@pytest.fixture()
def sample_metadata() -> Dict[str, object]:
    return {
        "id": "item-1",
        "category": "tops",
        "hex": "#FF0000",
        "name": "red-shirt.jpg",
        "image_url": "https://example.com/red-shirt.jpg",
    }


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "nested" / "wardrobe.db")


def test_taxonomy_validation():
    assert taxonomy.validate_category("FOOTWEAR") == "Footwear"
    assert taxonomy.validate_category(" accessories ") == "Accessories"
    with pytest.raises(ValueError):
        taxonomy.validate_category("hats")
    assert taxonomy.style_for(True) == "formal"
    assert taxonomy.style_for(False) == "casual"


def test_from_raw_metadata_derives_color(sample_metadata):
    item = from_raw_metadata(sample_metadata)
    assert item.item_id == "item-1"
    assert item.category == "Tops"
    assert item.hex == "#ff0000"
    assert item.rgb == (255, 0, 0)
    assert item.hsl == HSL(0, 100, 50)


def test_from_raw_metadata_prefers_explicit_hsl():
    item = from_raw_metadata({"item_id": "x", "category": "Bottoms", "hsl": [200, 30, 40], "rgb": [1, 2, 3]})
    assert item.hsl == HSL(200, 30, 40)
    assert item.hex == "#010203"


def test_from_raw_metadata_requires_fields():
    with pytest.raises(ValueError):
        from_raw_metadata({"category": "Tops", "hsl": [0, 0, 0]})
    with pytest.raises(ValueError):
        from_raw_metadata({"id": "x", "category": "Tops"})


def test_wardrobe_item_is_immutable(sample_metadata):
    item = from_raw_metadata(sample_metadata)
    with pytest.raises(Exception):
        item.hsl = HSL(1, 1, 1)  # type: ignore[misc]


def test_group_items_by_category_preserves_order():
    items = [
        WardrobeItem(item_id="t2", category="Tops", hsl=HSL(0, 0, 0)),
        WardrobeItem(item_id="b1", category="bottoms", hsl=HSL(0, 0, 0)),
        WardrobeItem(item_id="t1", category="TOPS", hsl=HSL(0, 0, 0)),
    ]
    wardrobe = group_items_by_category(items)
    assert [item.item_id for item in wardrobe.tops] == ["t2", "t1"]
    assert [item.item_id for item in wardrobe.bottoms] == ["b1"]
    assert wardrobe.footwear == [] and wardrobe.accessories == []
    assert len(wardrobe) == 3


def test_store_item_crud(store: SQLiteWardrobeStore, sample_metadata):
    first = from_raw_metadata(sample_metadata)
    second = from_raw_metadata({"id": "item-0", "category": "Bottoms", "hsl": [210, 40, 30]})
    store.create_item(first)
    store.create_item(second)

    assert [item.item_id for item in store.list_items()] == ["item-1", "item-0"]
    fetched = store.get_item("item-1")
    assert fetched == first
    assert store.get_item("missing") is None

    assert store.delete_item("item-1") is True
    assert store.delete_item("item-1") is False
    assert [item.item_id for item in store.list_items()] == ["item-0"]


def test_saved_outfits_get_fresh_ids(store: SQLiteWardrobeStore):
    outfit = {"id": "outfit-abc", "items": [], "score": 2.5, "style": "casual"}
    saved = store.save_outfit(outfit)
    assert saved["id"].startswith("saved-")
    assert saved["id"] != "outfit-abc"
    assert saved["savedAt"] > 0
    assert store.list_saved_outfits() == [saved]

    assert store.delete_saved_outfit(saved["id"]) is True
    assert store.list_saved_outfits() == []


def test_settings_roundtrip_and_clear(store: SQLiteWardrobeStore, sample_metadata):
    assert store.load_settings() == {}
    assert store.save_settings({"strict_formal": True, "max_suggestions": 5}) == {
        "strict_formal": True,
        "max_suggestions": 5,
    }
    store.create_item(from_raw_metadata(sample_metadata))
    store.clear_all()
    assert store.load_settings() == {}
    assert store.list_items() == []
