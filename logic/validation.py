"""Pydantic schemas for validating service requests and responses."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.color_theory import normalize_hex
from models.taxonomy import validate_category, validate_gender


def _canonical_palette(palette: Optional[List[str]]) -> Optional[List[str]]:
    if palette is None:
        return None
    return [normalize_hex(color) for color in palette]


class HarmonyRequest(BaseModel):
    color_a: str
    color_b: str

    @field_validator("color_a", "color_b")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        return normalize_hex(value)


class HarmonyResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    harmony: str


class ProductFilter(BaseModel):
    """Catalog filter shared by scoring and outfit requests."""

    category: Optional[str] = None
    gender: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _validate_category(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value.strip().lower() == "all":
            return None
        return validate_category(value)

    @field_validator("gender")
    @classmethod
    def _validate_gender(cls, value: Optional[str]) -> Optional[str]:
        return validate_gender(value) if value else None


class ProductScoreRequest(ProductFilter):
    user_id: Optional[str] = None
    occasion: str = Field(default="casual", min_length=1)
    palette: Optional[List[str]] = None

    @field_validator("palette")
    @classmethod
    def _validate_palette(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _canonical_palette(value)


class OutfitRequest(BaseModel):
    """Envelope for outfit composition requests."""

    user_id: Optional[str] = None
    occasion: str = Field(default="casual", min_length=1)
    gender: Optional[str] = None
    palette: Optional[List[str]] = None
    max_combinations: Optional[int] = Field(default=None, ge=0, le=50)
    seed: Optional[int] = None

    @field_validator("palette")
    @classmethod
    def _validate_palette(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _canonical_palette(value)

    @field_validator("gender")
    @classmethod
    def _validate_gender(cls, value: Optional[str]) -> Optional[str]:
        return validate_gender(value) if value else None


class PaletteUpdate(BaseModel):
    skin_tone: str = Field(min_length=1)
    palette: List[str] = Field(min_length=4, max_length=6)

    @field_validator("palette")
    @classmethod
    def _validate_palette(cls, value: List[str]) -> List[str]:
        return [normalize_hex(color) for color in value]


class OutfitResponse(BaseModel):
    """Structure returned by outfit composition."""

    status: Literal["ok", "empty"]
    occasion: str
    palette: List[str]
    palette_source: Literal["request", "profile", "guest"]
    outfits: List[Dict[str, Any]] = []
    debug_summary: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Wrapper returned when request validation fails."""

    status: Literal["invalid"] = "invalid"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent error payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False, include_context=False)).model_dump()


__all__ = [
    "HarmonyRequest",
    "HarmonyResponse",
    "ProductFilter",
    "ProductScoreRequest",
    "OutfitRequest",
    "PaletteUpdate",
    "OutfitResponse",
    "ValidationResult",
    "validation_failure",
]
