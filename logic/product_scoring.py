"""Deterministic palette and occasion scoring for individual products."""

from __future__ import annotations

import logging
import math
import warnings
from typing import Any, Mapping, Sequence

from models.color_theory import calculate_color_harmony, normalize_hex
from models.product import Product, ensure_product
from models.taxonomy import is_premium_brand, normalize_occasion, occasion_bonus

logger = logging.getLogger(__name__)

BASE_SCORE = 50
COLOR_WEIGHT = 0.4
RATING_THRESHOLD = 4.0
RATING_WEIGHT = 10
BRAND_BONUS = 5
PRICE_BAND = (50.0, 500.0)
PRICE_BONUS = 3
STOCK_THRESHOLD = 5
STOCK_BONUS = 2
MAX_SCORE = 98


class EmptyPaletteWarning(UserWarning):
    """Issued when scoring runs without any palette colors."""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    return max(0, min(_round_half_up(value), MAX_SCORE))


def validate_palette(palette: Sequence[str] | None) -> list[str]:
    """Return the palette as canonical hex strings, raising on bad colors."""

    return [normalize_hex(color) for color in (palette or [])]


def warn_empty_palette(context: str) -> None:
    logger.warning("Empty palette while %s; color bonus set to zero", context)
    warnings.warn(
        f"Empty palette while {context}; color bonus set to zero",
        EmptyPaletteWarning,
        stacklevel=3,
    )


def best_palette_harmony(color: str, palette: Sequence[str]) -> int | None:
    """Return the best harmony score of ``color`` against any palette color."""

    if not palette:
        return None
    return max(calculate_color_harmony(color, swatch).score for swatch in palette)


def score_product(product: Product, palette: Sequence[str], occasion: str) -> int:
    """Score an already normalised product; expects canonical inputs."""

    score: float = BASE_SCORE
    best = best_palette_harmony(product.color, palette)
    if best is not None:
        score += (best - BASE_SCORE) * COLOR_WEIGHT

    score += occasion_bonus(product.category, occasion)

    if product.rating is not None and product.rating > RATING_THRESHOLD:
        score += (product.rating - RATING_THRESHOLD) * RATING_WEIGHT
    if is_premium_brand(product.brand):
        score += BRAND_BONUS
    if PRICE_BAND[0] <= product.price <= PRICE_BAND[1]:
        score += PRICE_BONUS
    if product.stock_quantity is not None and product.stock_quantity > STOCK_THRESHOLD:
        score += STOCK_BONUS

    final = clamp_score(score)
    logger.debug(
        "product %s (%s, %s) best_harmony=%s occasion=%s -> %s",
        product.product_id,
        product.category,
        product.color,
        best,
        occasion,
        final,
    )
    return final


def calculate_advanced_product_match(
    product: Product | Mapping[str, Any],
    palette: Sequence[str] | None,
    occasion: str | None = "casual",
) -> int:
    """Score how well a product suits a user's palette and an occasion.

    The result is an integer in ``[0, 98]``. An empty palette contributes no
    color bonus and issues an :class:`EmptyPaletteWarning`.
    """

    item = ensure_product(product)
    swatches = validate_palette(palette)
    if not swatches:
        warn_empty_palette(f"scoring product {item.product_id}")
    return score_product(item, swatches, normalize_occasion(occasion))


__all__ = [
    "EmptyPaletteWarning",
    "MAX_SCORE",
    "best_palette_harmony",
    "calculate_advanced_product_match",
    "clamp_score",
    "score_product",
    "validate_palette",
    "warn_empty_palette",
]
