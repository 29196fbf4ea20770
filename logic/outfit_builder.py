"""Outfit assembly from catalog products with ranked match scores."""
from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, MutableSequence, Protocol, Sequence

from logic.product_scoring import (
    clamp_score,
    score_product,
    validate_palette,
    warn_empty_palette,
)
from models.color_theory import calculate_color_harmony
from models.outfit import OutfitCombination
from models.product import Product, ensure_product
from models.taxonomy import (
    CATEGORIES,
    LAYERED_OCCASIONS,
    is_known_category,
    normalize_occasion,
    style_descriptions_for,
)

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 70
PAIR_HARMONY_WEIGHT = 0.1
MIXED_HARMONY = "Mixed"

# Enumeration windows: how many of each partition are tried.
TOP_WINDOW = 3
BOTTOM_WINDOW = 3
SEPARATES_SHOE_WINDOW = 2
DRESS_WINDOW = 2
DRESS_SHOE_WINDOW = 2

# Outerwear is layered on when a uniform draw exceeds these thresholds.
SEPARATES_OUTERWEAR_THRESHOLD = 0.6
DRESS_OUTERWEAR_THRESHOLD = 0.7


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the builder relies on."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...


@dataclass(frozen=True)
class OutfitCompositionResult:
    outfits: List[OutfitCombination]
    diagnostics: Dict[str, object]


def partition_by_category(products: Iterable[Product]) -> Dict[str, List[Product]]:
    """Group products by category, preserving catalog order."""

    grouped: Dict[str, List[Product]] = {category: [] for category in CATEGORIES}
    for product in products:
        grouped[product.category].append(product)
    return grouped


def garment_products(rows: Iterable[Product | Mapping[str, Any]]) -> List[Product]:
    """Normalise catalog rows, skipping rows outside the garment categories."""

    catalog: List[Product] = []
    for row in rows:
        if not isinstance(row, Product) and not is_known_category(row.get("category")):
            logger.warning(
                "Skipping catalog row %s with unsupported category %r",
                row.get("product_id", row.get("id")),
                row.get("category"),
            )
            continue
        catalog.append(ensure_product(row))
    return catalog


def outfit_match_score(items: Sequence[Product], palette: Sequence[str], occasion: str) -> int:
    """Average item score plus a tenth of every pairwise harmony score."""

    if not items:
        return 0
    average = sum(score_product(item, palette, occasion) for item in items) / len(items)
    harmony_bonus = 0.0
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            harmony_bonus += calculate_color_harmony(items[i].color, items[j].color).score * PAIR_HARMONY_WEIGHT
    return clamp_score(average + harmony_bonus)


def dominant_harmony(items: Sequence[Product]) -> str:
    """Return the most common pairwise harmony label, first seen wins ties."""

    labels = Counter(
        calculate_color_harmony(items[i].color, items[j].color).harmony.value
        for i in range(len(items) - 1)
        for j in range(i + 1, len(items))
    )
    if not labels:
        return MIXED_HARMONY
    # max() keeps the first maximal key and Counter keeps insertion order.
    return max(labels, key=labels.__getitem__)


def style_description(occasion: str, rng: RandomSource) -> str:
    return rng.choice(style_descriptions_for(occasion))


def _maybe_layer(
    items: MutableSequence[Product],
    outerwear: Sequence[Product],
    threshold: float,
    rng: RandomSource,
    always: bool = False,
) -> None:
    if not outerwear:
        return
    if always or rng.random() > threshold:
        items.append(outerwear[0])


def _build_combination(
    combination_id: str,
    items: List[Product],
    palette: Sequence[str],
    occasion: str,
    rng: RandomSource,
) -> OutfitCombination:
    return OutfitCombination(
        combination_id=combination_id,
        items=items,
        match_score=outfit_match_score(items, palette, occasion),
        color_harmony=dominant_harmony(items),
        occasion=occasion,
        style_description=style_description(occasion, rng),
    )


def enumerate_separates(
    grouped: Mapping[str, List[Product]], palette: Sequence[str], occasion: str, rng: RandomSource
) -> List[OutfitCombination]:
    """Top + bottom + shoes candidates, with optional outerwear."""

    combinations = []
    layered = occasion in LAYERED_OCCASIONS
    for i, top in enumerate(grouped["tops"][:TOP_WINDOW]):
        for j, bottom in enumerate(grouped["bottoms"][:BOTTOM_WINDOW]):
            for k, shoes in enumerate(grouped["shoes"][:SEPARATES_SHOE_WINDOW]):
                items = [top, bottom, shoes]
                _maybe_layer(items, grouped["outerwear"], SEPARATES_OUTERWEAR_THRESHOLD, rng, always=layered)
                combinations.append(_build_combination(f"combo-{i}-{j}-{k}", items, palette, occasion, rng))
    return combinations


def enumerate_dresses(
    grouped: Mapping[str, List[Product]], palette: Sequence[str], occasion: str, rng: RandomSource
) -> List[OutfitCombination]:
    """Dress + shoes candidates, occasionally layered with outerwear."""

    combinations = []
    for i, dress in enumerate(grouped["dresses"][:DRESS_WINDOW]):
        for j, shoes in enumerate(grouped["shoes"][:DRESS_SHOE_WINDOW]):
            items = [dress, shoes]
            _maybe_layer(items, grouped["outerwear"], DRESS_OUTERWEAR_THRESHOLD, rng)
            combinations.append(_build_combination(f"dress-combo-{i}-{j}", items, palette, occasion, rng))
    return combinations


def rank_combinations(
    combinations: Iterable[OutfitCombination], max_combinations: int
) -> List[OutfitCombination]:
    """Drop weak matches, sort best first and truncate."""

    kept = [combo for combo in combinations if combo.match_score >= MIN_MATCH_SCORE]
    kept.sort(key=lambda combo: combo.match_score, reverse=True)
    return kept[: max(0, max_combinations)]


def compose_outfits(
    products: Iterable[Product | Mapping[str, Any]],
    palette: Sequence[str] | None,
    occasion: str | None = "casual",
    max_combinations: int = 6,
    rng: RandomSource | None = None,
) -> OutfitCompositionResult:
    """Compose ranked outfits and report how the candidates fared."""

    if rng is None:
        rng = random.Random()
    swatches = validate_palette(palette)
    occasion_key = normalize_occasion(occasion)
    catalog = garment_products(products)
    if not swatches:
        warn_empty_palette("composing outfits")

    grouped = partition_by_category(catalog)
    candidates = enumerate_separates(grouped, swatches, occasion_key, rng)
    candidates += enumerate_dresses(grouped, swatches, occasion_key, rng)
    ranked = rank_combinations(candidates, max_combinations)

    diagnostics: Dict[str, object] = {
        "occasion": occasion_key,
        "palette_size": len(swatches),
        "partition_sizes": {category: len(values) for category, values in grouped.items()},
        "candidates_scored": len(candidates),
        "below_threshold": sum(1 for combo in candidates if combo.match_score < MIN_MATCH_SCORE),
        "best_score": ranked[0].match_score if ranked else None,
        "chosen_ids": [combo.combination_id for combo in ranked],
    }
    logger.info(
        "Composed %s candidates for occasion=%s, kept %s (best=%s)",
        len(candidates),
        occasion_key,
        len(ranked),
        diagnostics["best_score"],
    )
    return OutfitCompositionResult(outfits=ranked, diagnostics=diagnostics)


def generate_outfit_combinations(
    products: Iterable[Product | Mapping[str, Any]],
    palette: Sequence[str] | None,
    occasion: str | None = "casual",
    max_combinations: int = 6,
    rng: RandomSource | None = None,
) -> List[OutfitCombination]:
    """Compose ranked outfits from a catalog for a palette and occasion.

    ``rng`` drives outerwear layering and style descriptions; pass a seeded
    :class:`random.Random` for reproducible output. Malformed colors raise
    :class:`~models.color_theory.InvalidColorFormat` before anything is built.
    """

    return compose_outfits(products, palette, occasion, max_combinations, rng).outfits


__all__ = [
    "MIN_MATCH_SCORE",
    "RandomSource",
    "OutfitCompositionResult",
    "garment_products",
    "partition_by_category",
    "outfit_match_score",
    "dominant_harmony",
    "style_description",
    "enumerate_separates",
    "enumerate_dresses",
    "rank_combinations",
    "compose_outfits",
    "generate_outfit_combinations",
]
