"""Catalog and wardrobe storage tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color_theory import InvalidColorFormat
from models.product import Product, from_raw_metadata
from tools.catalog_store import SQLiteCatalogStore


@pytest.fixture()
def catalog_rows() -> List[Dict[str, object]]:
    return [
        {"id": "tee", "name": "Tee", "brand": "Zara", "category": "Tops", "color": "#ffffff",
         "price": 25, "gender": "female", "created_at": "2024-01-01T00:00:00+00:00"},
        {"id": "shirt", "name": "Shirt", "brand": "Mango", "category": "tops", "color": "#000080",
         "price": 60, "gender": "male", "created_at": "2024-01-02T00:00:00+00:00"},
        {"id": "jeans", "name": "Jeans", "brand": "Levi's", "category": "bottoms", "color": "#0000FF",
         "price": 90, "gender": "unisex", "created_at": "2024-01-03T00:00:00+00:00"},
        {"id": "retired", "name": "Old Boots", "brand": "Clarks", "category": "shoes", "color": "#000000",
         "price": 80, "is_active": False, "created_at": "2024-01-04T00:00:00+00:00"},
    ]


@pytest.fixture()
def store(tmp_path: Path, catalog_rows: List[Dict[str, object]]) -> SQLiteCatalogStore:
    catalog = SQLiteCatalogStore(tmp_path / "catalog.db")
    for row in catalog_rows:
        catalog.create_product(from_raw_metadata(row))
    return catalog


def test_create_and_get_product_normalises_fields(store: SQLiteCatalogStore) -> None:
    product = store.get_product("tee")
    assert isinstance(product, Product)
    assert product.category == "tops"
    assert product.color == "#FFFFFF"
    assert product.updated_at is not None
    assert store.get_product("missing") is None


def test_fetch_products_returns_active_newest_first(store: SQLiteCatalogStore) -> None:
    ids = [product.product_id for product in store.fetch_products()]
    assert ids == ["jeans", "shirt", "tee"]
    assert [p.product_id for p in store.fetch_products(category="all")] == ids


def test_fetch_products_filters_by_category_and_gender(store: SQLiteCatalogStore) -> None:
    assert [p.product_id for p in store.fetch_products(category="Tops")] == ["shirt", "tee"]
    assert [p.product_id for p in store.fetch_products(gender="female")] == ["jeans", "tee"]
    assert [p.product_id for p in store.fetch_products(category="tops", gender="male")] == ["shirt"]
    with pytest.raises(ValueError):
        store.fetch_products(category="hats")


def test_update_product_revalidates(store: SQLiteCatalogStore) -> None:
    updated = store.update_product("tee", {"price": 55, "color": "#c19a6b", "product_id": "ignored"})
    assert updated is not None
    assert updated.product_id == "tee"
    assert updated.price == 55.0
    assert store.get_product("tee").color == "#C19A6B"

    with pytest.raises(InvalidColorFormat):
        store.update_product("tee", {"color": "camel"})
    assert store.update_product("missing", {"price": 1}) is None


def test_delete_product_removes_wardrobe_entries(store: SQLiteCatalogStore) -> None:
    assert store.add_product_to_wardrobe("user-1", "jeans")
    assert store.delete_product("jeans") is True
    assert store.delete_product("jeans") is False
    assert store.fetch_wardrobe_items("user-1") == []


def test_wardrobe_add_list_and_remove(store: SQLiteCatalogStore) -> None:
    assert store.add_product_to_wardrobe("user-1", "tee", size="S") is True
    assert store.add_product_to_wardrobe("user-1", "shirt") is True
    assert store.add_product_to_wardrobe("user-1", "unknown") is False

    entries = store.fetch_wardrobe_items("user-1")
    assert {entry["product"].product_id for entry in entries} == {"tee", "shirt"}
    sizes = {entry["product"].product_id: entry["size"] for entry in entries}
    assert sizes == {"tee": "S", "shirt": "M"}
    assert store.fetch_wardrobe_items("user-2") == []

    assert store.remove_wardrobe_item("user-1", "tee") is True
    assert store.remove_wardrobe_item("user-1", "tee") is False
    assert [entry["product"].product_id for entry in store.fetch_wardrobe_items("user-1")] == ["shirt"]
