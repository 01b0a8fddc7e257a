"""Stylist app bootstrap wiring the store, settings and outfit generator."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from logic.outfit_builder import generate_with_diagnostics
from logic.validation import (
    AppSettings,
    OutfitRecord,
    SettingsUpdate,
    SuggestionRequest,
    WardrobeItemInput,
)
from models.wardrobe import Wardrobe, group_items_by_category
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from tools.observability import instrument_operation
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore, new_record_id, now_ms

LOGGER = get_logger(__name__)


class WardrobeStylistApp:
    """Wires together configuration, persistence and the suggestion engine."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        store: WardrobeStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.store = store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.rng = rng

    # Wardrobe items

    @instrument_operation("add_wardrobe_item", input_model=WardrobeItemInput)
    def add_item(self, **payload: Any) -> Dict[str, Any]:
        """Validate an extracted item record and persist it with a fresh id."""

        metadata = dict(payload)
        metadata["id"] = metadata.get("id") or new_record_id("item")
        metadata["added_at"] = now_ms()
        item = from_raw_metadata(metadata)
        return self.store.create_item(item).to_record()

    def list_items(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return stored items, optionally restricted to one category."""

        items = self.store.list_items()
        if category is not None:
            items = self.wardrobe(items).bucket(category)
        return [item.to_record() for item in items]

    def category_counts(self) -> Dict[str, int]:
        return self.wardrobe().counts()

    @instrument_operation("delete_wardrobe_item")
    def delete_item(self, item_id: str) -> bool:
        return self.store.delete_item(item_id)

    def wardrobe(self, items: Optional[List[WardrobeItem]] = None) -> Wardrobe:
        """Partition the stored wardrobe into category buckets."""

        return group_items_by_category(items if items is not None else self.store.list_items())

    # Settings

    def get_settings(self) -> AppSettings:
        defaults = AppSettings(max_suggestions=self.config.default_max_suggestions)
        return defaults.model_copy(update=self.store.load_settings())

    @instrument_operation("update_settings", input_model=SettingsUpdate)
    def update_settings(self, **changes: Any) -> AppSettings:
        updates = {key: value for key, value in changes.items() if value is not None}
        merged = AppSettings.model_validate({**self.get_settings().model_dump(), **updates})
        self.store.save_settings(merged.model_dump())
        return merged

    # Suggestions

    @instrument_operation("suggest_outfits", input_model=SuggestionRequest)
    def suggest_outfits(
        self, formal: Optional[bool] = None, max_suggestions: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Generate ranked outfit candidates from the stored wardrobe.

        Missing arguments fall back to the persisted settings.
        """

        settings = self.get_settings()
        is_formal = settings.strict_formal if formal is None else formal
        count = max_suggestions or settings.max_suggestions

        with operation_context("app:suggest_outfits") as correlation_id:
            wardrobe = self.wardrobe()
            result = generate_with_diagnostics(
                wardrobe,
                is_formal=is_formal,
                max_suggestions=count,
                rng=self.rng,
                max_attempts=self.config.max_attempts,
                enumeration_threshold=self.config.enumeration_threshold,
            )
            log_event(
                LOGGER,
                logging.INFO,
                "suggestions_generated",
                correlation_id=correlation_id,
                style=result.diagnostics["style"],
                requested=count,
                returned=len(result.candidates),
                attempts=result.diagnostics["attempts"],
                strategy=result.diagnostics["strategy"],
            )
            return [candidate.to_record() for candidate in result.candidates]

    # Saved outfits

    @instrument_operation("save_outfit")
    def save_outfit(self, outfit: Dict[str, Any]) -> Dict[str, Any]:
        record = OutfitRecord.model_validate(outfit)
        return self.store.save_outfit(record.model_dump())

    def list_saved_outfits(self) -> List[Dict[str, Any]]:
        return self.store.list_saved_outfits()

    @instrument_operation("delete_saved_outfit")
    def delete_saved_outfit(self, outfit_id: str) -> bool:
        return self.store.delete_saved_outfit(outfit_id)

    @instrument_operation("clear_all_data")
    def clear_all(self) -> None:
        """Remove every item, saved outfit and stored setting."""

        self.store.clear_all()


__all__ = ["WardrobeStylistApp"]
