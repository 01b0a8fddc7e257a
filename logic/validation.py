"""Pydantic schemas and helpers for validating app and HTTP payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from models.taxonomy import validate_category

MAX_SUGGESTIONS_LIMIT = 20


class WardrobeItemInput(BaseModel):
    """Input contract for a newly extracted wardrobe item."""

    id: Optional[str] = None
    category: str
    hsl: Optional[Tuple[int, int, int]] = None
    rgb: Optional[Tuple[int, int, int]] = None
    hex: Optional[str] = Field(default=None, pattern=r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
    name: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, value: str) -> str:
        return validate_category(value)

    @field_validator("hsl")
    @classmethod
    def _validate_hsl(cls, value: Optional[Tuple[int, int, int]]) -> Optional[Tuple[int, int, int]]:
        if value is None:
            return value
        hue, saturation, lightness = value
        if not 0 <= hue < 360:
            raise ValueError("hue must be within [0, 360)")
        if not (0 <= saturation <= 100 and 0 <= lightness <= 100):
            raise ValueError("saturation and lightness must be within [0, 100]")
        return value

    @field_validator("rgb")
    @classmethod
    def _validate_rgb(cls, value: Optional[Tuple[int, int, int]]) -> Optional[Tuple[int, int, int]]:
        if value is not None and any(not 0 <= channel <= 255 for channel in value):
            raise ValueError("rgb channels must be within [0, 255]")
        return value

    @model_validator(mode="after")
    def _require_color(self) -> "WardrobeItemInput":
        if self.hsl is None and self.rgb is None and not self.hex:
            raise ValueError("one of hsl, rgb or hex is required")
        return self


class SuggestionRequest(BaseModel):
    """Request for a fresh batch of outfit suggestions."""

    formal: Optional[bool] = None
    max_suggestions: Optional[int] = Field(default=None, ge=1, le=MAX_SUGGESTIONS_LIMIT)


class AppSettings(BaseModel):
    """Persisted user preferences with the app defaults."""

    strict_formal: bool = False
    max_suggestions: int = Field(default=3, ge=1, le=MAX_SUGGESTIONS_LIMIT)


class SettingsUpdate(BaseModel):
    strict_formal: Optional[bool] = None
    max_suggestions: Optional[int] = Field(default=None, ge=1, le=MAX_SUGGESTIONS_LIMIT)


class OutfitRecord(BaseModel):
    """Outfit candidate record as handed to the persistence layer."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    items: List[Dict[str, Any]] = Field(min_length=2)
    score: float
    explanation: str
    details: Dict[str, Any] = Field(default_factory=dict)
    style: Literal["casual", "formal"]
    timestamp: Optional[int] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False, include_context=False)).model_dump()


__all__ = [
    "WardrobeItemInput",
    "SuggestionRequest",
    "AppSettings",
    "SettingsUpdate",
    "OutfitRecord",
    "ValidationResult",
    "validation_failure",
]
