"""Per-product palette and occasion scoring tests."""
from __future__ import annotations

import sys
import warnings
from pathlib import Path
from typing import Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.product_scoring import EmptyPaletteWarning, calculate_advanced_product_match
from models.color_theory import InvalidColorFormat
from models.product import Product, from_raw_metadata
from models.taxonomy import OCCASION_CATEGORY_BONUS, occasion_bonus


def _product(**overrides: object) -> Product:
    fields: Dict[str, object] = {
        "product_id": "p-1",
        "name": "Plain Loafer",
        "brand": "Clarks",
        "category": "shoes",
        "color": "#FF0000",
        "price": 30,
    }
    fields.update(overrides)
    return Product(**fields)  # type: ignore[arg-type]


def test_strong_workout_top_is_clamped_to_ceiling() -> None:
    product = _product(category="tops", brand="Nike Sport", price=75, rating=4.8, color="#1E90FF")
    score = calculate_advanced_product_match(product, ["#1E90FF", "#F5F5DC"], "workout")
    assert score == 98


def test_base_scoring_components() -> None:
    # 50 + (60 - 50) * 0.4 + formal shoes bonus 8
    assert calculate_advanced_product_match(_product(), ["#FFFF00"], "formal") == 62


def test_best_palette_match_wins_over_average() -> None:
    assert calculate_advanced_product_match(_product(), ["#00FFFF"], "formal") == 76
    assert calculate_advanced_product_match(_product(), ["#FFFF00", "#00FFFF"], "formal") == 76


def test_matching_palette_beats_unrelated_palette() -> None:
    product = _product(category="dresses", color="#800000")
    matching = calculate_advanced_product_match(product, ["#800000"], "party")
    unrelated = calculate_advanced_product_match(product, ["#FFFF00"], "party")
    assert matching > unrelated


def test_unknown_occasion_uses_default_bonus() -> None:
    assert occasion_bonus("shoes", "picnic") == 5
    assert calculate_advanced_product_match(_product(), ["#FFFF00"], "picnic") == 59


def test_occasion_is_case_insensitive() -> None:
    assert calculate_advanced_product_match(_product(), ["#FFFF00"], " Formal ") == 62


def test_occasion_table_values() -> None:
    assert OCCASION_CATEGORY_BONUS["workout"]["tops"] == 18
    assert OCCASION_CATEGORY_BONUS["party"]["dresses"] == 18
    assert OCCASION_CATEGORY_BONUS["workout"]["dresses"] == 2
    with pytest.raises(TypeError):
        OCCASION_CATEGORY_BONUS["formal"]["tops"] = 1  # type: ignore[index]


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"rating": 4.5}, 67),
        ({"rating": 4.0}, 62),
        ({"rating": 3.2}, 62),
        ({"rating": 4.25}, 65),
        ({"brand": "ZARA Woman"}, 67),
        ({"brand": "h&m basics"}, 67),
        ({"price": 50}, 65),
        ({"price": 500}, 65),
        ({"price": 500.01}, 62),
        ({"stock_quantity": 6}, 64),
        ({"stock_quantity": 5}, 62),
    ],
)
def test_quality_adjustments(overrides: Dict[str, object], expected: int) -> None:
    assert calculate_advanced_product_match(_product(**overrides), ["#FFFF00"], "formal") == expected


def test_scores_are_bounded() -> None:
    palettes = [["#FFFF00"], ["#000000", "#FFFFFF"], ["#00FFFF", "#FF0000", "#808080", "#006AFF"]]
    for category in ("tops", "bottoms", "dresses", "outerwear", "shoes"):
        for palette in palettes:
            for occasion in ("formal", "casual", "party", "business", "workout", "gala"):
                product = _product(category=category, rating=5, brand="adidas", price=120, stock_quantity=40)
                score = calculate_advanced_product_match(product, palette, occasion)
                assert 0 <= score <= 98


def test_empty_palette_gives_zero_color_bonus() -> None:
    with pytest.warns(EmptyPaletteWarning):
        score = calculate_advanced_product_match(_product(), [], "formal")
    assert score == 58


def test_palette_colors_are_validated() -> None:
    with pytest.raises(InvalidColorFormat):
        calculate_advanced_product_match(_product(), ["#FFFF00", "yellow"], "formal")


def test_raw_catalog_rows_are_normalised() -> None:
    row = {"id": 42, "name": "Loafer", "brand": None, "category": "Shoes", "color": "#ff0000", "price": "30"}
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert calculate_advanced_product_match(row, ["#FFFF00"], "formal") == 62


def test_product_validation_rejects_bad_rows() -> None:
    with pytest.raises(ValueError):
        _product(category="hats")
    with pytest.raises(ValueError):
        _product(category="jacket")
    assert _product(category=" Outerwear ").category == "outerwear"
    with pytest.raises(ValueError):
        _product(rating=6)
    with pytest.raises(InvalidColorFormat):
        _product(color="navy")
    with pytest.raises(ValueError, match="Missing required fields"):
        from_raw_metadata({"name": "No id", "category": "tops", "color": "#000000", "price": 10})
