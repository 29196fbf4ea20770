"""Evaluation scenarios exercising palettes, occasions and catalog shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

AUTUMN_PALETTE = ["#000080", "#FFFFFF", "#800000", "#008080"]


@dataclass
class EvaluationScenario:
    name: str
    description: str
    occasion: str
    palette: Optional[List[str]]
    catalog: List[Dict[str, object]]
    expectations: Dict[str, object]
    seed: int = 7
    max_combinations: int = 6
    stored_palette: Optional[List[str]] = field(default=None)


def catalog_fixtures() -> List[Dict[str, object]]:
    """A small catalog covering every category, newest entries last."""

    rows = [
        {"id": "top-white-tee", "name": "Essential Tee", "brand": "Zara", "category": "tops",
         "color": "#FFFFFF", "price": 29.9, "rating": 4.5, "stock_quantity": 20},
        {"id": "top-navy-shirt", "name": "Oxford Shirt", "brand": "Mango", "category": "tops",
         "color": "#000080", "price": 59, "rating": 4.6, "stock_quantity": 12},
        {"id": "top-red-blouse", "name": "Silk Blouse", "brand": "H&M", "category": "tops",
         "color": "#FF0000", "price": 35, "rating": 4.2, "stock_quantity": 3},
        {"id": "bottom-blue-jeans", "name": "Straight Jeans", "brand": "Levi's", "category": "bottoms",
         "color": "#0000FF", "price": 89, "rating": 4.7, "stock_quantity": 30},
        {"id": "bottom-black-trousers", "name": "Tailored Trousers", "brand": "Zara", "category": "bottoms",
         "color": "#000000", "price": 69, "rating": 4.4, "stock_quantity": 8},
        {"id": "bottom-beige-chinos", "name": "Chinos", "brand": "Uniqlo", "category": "bottoms",
         "color": "#F5F5DC", "price": 45, "rating": 4.1, "stock_quantity": 9},
        {"id": "shoes-white-sneakers", "name": "Court Sneakers", "brand": "Nike", "category": "shoes",
         "color": "#FFFFFF", "price": 110, "rating": 4.8, "stock_quantity": 15},
        {"id": "shoes-black-loafers", "name": "Penny Loafers", "brand": "Clarks", "category": "shoes",
         "color": "#000000", "price": 120, "rating": 4.3, "stock_quantity": 4},
        {"id": "dress-maroon-midi", "name": "Midi Dress", "brand": "Mango", "category": "dresses",
         "color": "#800000", "price": 89, "rating": 4.5, "stock_quantity": 6},
        {"id": "dress-teal-wrap", "name": "Wrap Dress", "brand": "Zara", "category": "dresses",
         "color": "#008080", "price": 79, "rating": 4.4, "stock_quantity": 10},
        {"id": "outer-camel-coat", "name": "Camel Coat", "brand": "Mango", "category": "outerwear",
         "color": "#C19A6B", "price": 180, "rating": 4.6, "stock_quantity": 7},
    ]
    for index, row in enumerate(rows):
        row["created_at"] = f"2024-03-{index + 1:02d}T09:00:00+00:00"
    return rows


def _only(*categories: str) -> List[Dict[str, object]]:
    return [row for row in catalog_fixtures() if row["category"] in categories]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="business_workday",
        description="Business occasions always layer the first outerwear piece onto separates.",
        occasion="business",
        palette=AUTUMN_PALETTE,
        catalog=catalog_fixtures(),
        expectations={"min_outfits": 1, "requires_outerwear": True, "palette_source": "request"},
    ),
    EvaluationScenario(
        name="party_dresses",
        description="A dress-only catalog still produces dress + shoes outfits.",
        occasion="party",
        palette=None,
        stored_palette=AUTUMN_PALETTE,
        catalog=_only("dresses", "shoes", "outerwear"),
        expectations={"min_outfits": 1, "requires_dress": True, "palette_source": "profile"},
    ),
    EvaluationScenario(
        name="guest_casual",
        description="Guests without a palette get outfits scored without a color bonus.",
        occasion="casual",
        palette=None,
        catalog=catalog_fixtures(),
        expectations={"min_outfits": 1, "palette_source": "guest"},
    ),
    EvaluationScenario(
        name="workout_missing_tops",
        description="Without tops or dresses no outfit can be assembled.",
        occasion="workout",
        palette=AUTUMN_PALETTE,
        catalog=_only("bottoms", "shoes"),
        expectations={"min_outfits": 0, "max_outfits": 0, "palette_source": "request"},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS", "AUTUMN_PALETTE", "catalog_fixtures"]
