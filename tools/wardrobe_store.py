"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import json
import random
import sqlite3
import string
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.color_theory import HSL
from models.wardrobe_item import WardrobeItem


def now_ms() -> int:
    return int(time.time() * 1000)


def new_record_id(prefix: str) -> str:
    """Return ``<prefix>-<epoch ms>-<9 random chars>``."""

    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{prefix}-{now_ms()}-{suffix}"


class WardrobeStore:
    """Persistence interface for wardrobe items, saved outfits and settings."""

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        raise NotImplementedError

    def get_item(self, item_id: str) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def list_items(self) -> List[WardrobeItem]:
        raise NotImplementedError

    def delete_item(self, item_id: str) -> bool:
        raise NotImplementedError

    def save_outfit(self, outfit: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def list_saved_outfits(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def delete_saved_outfit(self, outfit_id: str) -> bool:
        raise NotImplementedError

    def load_settings(self) -> Dict[str, Any]:
        raise NotImplementedError

    def save_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def clear_all(self) -> None:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS wardrobe_items (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    item_id TEXT NOT NULL UNIQUE,
                    category TEXT NOT NULL,
                    hue INTEGER NOT NULL,
                    saturation INTEGER NOT NULL,
                    lightness INTEGER NOT NULL,
                    hex TEXT,
                    rgb TEXT,
                    name TEXT,
                    image_url TEXT,
                    added_at INTEGER
                );
                CREATE TABLE IF NOT EXISTS saved_outfits (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    outfit_id TEXT NOT NULL UNIQUE,
                    payload TEXT NOT NULL,
                    saved_at INTEGER NOT NULL
                );
                CREATE TABLE IF NOT EXISTS app_settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                );
                """
            )

    @staticmethod
    def _serialise_list(values: Optional[List[object]]) -> Optional[str]:
        return json.dumps(list(values)) if values is not None else None

    @staticmethod
    def _deserialise_list(raw: Optional[str]) -> Optional[List[Any]]:
        return json.loads(raw) if raw else None

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        """Insert an item, replacing any existing row with the same id."""

        with self._connect() as conn:
            conn.execute("DELETE FROM wardrobe_items WHERE item_id = ?", (item.item_id,))
            conn.execute(
                """
                INSERT INTO wardrobe_items (
                    item_id, category, hue, saturation, lightness, hex, rgb, name, image_url, added_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.item_id,
                    item.category,
                    item.hsl.hue,
                    item.hsl.saturation,
                    item.hsl.lightness,
                    item.hex,
                    self._serialise_list(item.rgb),
                    item.name,
                    item.image_url,
                    item.added_at,
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> WardrobeItem:
        rgb = self._deserialise_list(row["rgb"])
        return WardrobeItem(
            item_id=row["item_id"],
            category=row["category"],
            hsl=HSL(hue=row["hue"], saturation=row["saturation"], lightness=row["lightness"]),
            hex=row["hex"],
            rgb=tuple(rgb) if rgb else None,
            name=row["name"],
            image_url=row["image_url"],
            added_at=row["added_at"],
        )

    def get_item(self, item_id: str) -> Optional[WardrobeItem]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM wardrobe_items WHERE item_id = ?", (item_id,))
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None

    def list_items(self) -> List[WardrobeItem]:
        """Return all items in insertion order."""

        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM wardrobe_items ORDER BY seq")
            return [self._row_to_item(row) for row in cursor.fetchall()]

    def delete_item(self, item_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM wardrobe_items WHERE item_id = ?", (item_id,))
            return cursor.rowcount > 0

    def save_outfit(self, outfit: Dict[str, Any]) -> Dict[str, Any]:
        """Append an outfit under a fresh ``saved-`` id with a ``savedAt`` stamp."""

        saved = {**outfit, "id": new_record_id("saved"), "savedAt": now_ms()}
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO saved_outfits (outfit_id, payload, saved_at) VALUES (?, ?, ?)",
                (saved["id"], json.dumps(saved), saved["savedAt"]),
            )
        return saved

    def list_saved_outfits(self) -> List[Dict[str, Any]]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT payload FROM saved_outfits ORDER BY seq")
            return [json.loads(row["payload"]) for row in cursor.fetchall()]

    def delete_saved_outfit(self, outfit_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM saved_outfits WHERE outfit_id = ?", (outfit_id,))
            return cursor.rowcount > 0

    def load_settings(self) -> Dict[str, Any]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT key, value FROM app_settings")
            return {row["key"]: json.loads(row["value"]) for row in cursor.fetchall()}

    def save_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        with self._connect() as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO app_settings (key, value) VALUES (?, ?)",
                [(key, json.dumps(value)) for key, value in settings.items()],
            )
        return self.load_settings()

    def clear_all(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM wardrobe_items")
            conn.execute("DELETE FROM saved_outfits")
            conn.execute("DELETE FROM app_settings")


__all__ = ["WardrobeStore", "SQLiteWardrobeStore", "new_record_id", "now_ms"]
