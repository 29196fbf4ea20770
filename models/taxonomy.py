"""Canonical taxonomy and fixed lookup tables for catalog products.

This module centralises the canonical labels for product categories, genders
and occasions together with the constant tables the scoring engine reads.
Everything here is built once at import time and never mutated.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


CATEGORIES: Tuple[str, ...] = ("tops", "bottoms", "dresses", "outerwear", "shoes")
GENDERS: Tuple[str, ...] = ("male", "female", "unisex")
OCCASIONS: Tuple[str, ...] = ("formal", "casual", "party", "business", "workout")

DEFAULT_OCCASION = "casual"
DEFAULT_OCCASION_BONUS = 5

# Occasions that always get the first outerwear piece layered on.
LAYERED_OCCASIONS = frozenset({"formal", "business"})

OCCASION_CATEGORY_BONUS: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        "formal": MappingProxyType(
            {"dresses": 15, "tops": 12, "bottoms": 12, "outerwear": 10, "shoes": 8}
        ),
        "casual": MappingProxyType(
            {"tops": 15, "bottoms": 12, "dresses": 10, "outerwear": 8, "shoes": 10}
        ),
        "party": MappingProxyType(
            {"dresses": 18, "tops": 12, "shoes": 15, "outerwear": 8, "bottoms": 10}
        ),
        "business": MappingProxyType(
            {"tops": 15, "bottoms": 15, "outerwear": 12, "dresses": 10, "shoes": 8}
        ),
        "workout": MappingProxyType(
            {"tops": 18, "bottoms": 18, "shoes": 15, "outerwear": 10, "dresses": 2}
        ),
    }
)

PREMIUM_BRANDS: Tuple[str, ...] = ("zara", "h&m", "mango", "nike", "adidas")

STYLE_DESCRIPTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "formal": ("Professional elegance", "Sophisticated charm", "Executive style", "Polished look"),
        "casual": ("Effortless chic", "Relaxed comfort", "Everyday elegance", "Casual sophistication"),
        "party": ("Glamorous night out", "Party ready", "Evening elegance", "Festive style"),
        "business": ("Business professional", "Office appropriate", "Corporate chic", "Work ready"),
        "workout": ("Athletic performance", "Gym ready", "Active lifestyle", "Sport chic"),
    }
)


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    key = _normalize_key(value)
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {sorted(CATEGORIES)}")
    return key


def is_known_category(value: object) -> bool:
    return isinstance(value, str) and _normalize_key(value) in CATEGORIES


def validate_gender(value: str | None) -> str:
    """Validate a gender label, defaulting to ``unisex`` when missing."""

    if value is None or not str(value).strip():
        return "unisex"
    key = _normalize_key(str(value))
    if key not in GENDERS:
        raise ValueError(f"Unsupported gender '{value}'. Allowed: {list(GENDERS)}")
    return key


def normalize_occasion(value: str | None) -> str:
    """Return the lookup key for an occasion tag.

    Unknown tags are returned as-is (lower-cased); the lookup helpers below
    apply the defaults.
    """

    key = (value or "").strip().lower()
    return key or DEFAULT_OCCASION


def occasion_bonus(category: str, occasion: str) -> int:
    """Return the bonus points a category earns for an occasion."""

    return OCCASION_CATEGORY_BONUS.get(occasion, {}).get(category) or DEFAULT_OCCASION_BONUS


def style_descriptions_for(occasion: str) -> Tuple[str, ...]:
    return STYLE_DESCRIPTIONS.get(occasion, STYLE_DESCRIPTIONS[DEFAULT_OCCASION])


def is_premium_brand(brand: str | None) -> bool:
    """Case-insensitive substring match against the premium brand list."""

    lowered = (brand or "").lower()
    return any(name in lowered for name in PREMIUM_BRANDS)


__all__ = [
    "CATEGORIES",
    "GENDERS",
    "OCCASIONS",
    "DEFAULT_OCCASION",
    "DEFAULT_OCCASION_BONUS",
    "LAYERED_OCCASIONS",
    "OCCASION_CATEGORY_BONUS",
    "PREMIUM_BRANDS",
    "STYLE_DESCRIPTIONS",
    "validate_category",
    "is_known_category",
    "validate_gender",
    "normalize_occasion",
    "occasion_bonus",
    "style_descriptions_for",
    "is_premium_brand",
]
