"""Catalog product data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from models.color_theory import normalize_hex
from models.taxonomy import validate_category, validate_gender


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in {"0", "false", "no", "off", ""}
    return bool(value)


@dataclass
class Product:
    """A catalog product as seen by the scoring engine.

    Rows coming from the catalog may be loosely typed; ``__post_init__``
    coerces and validates them so that scoring never has to.
    """

    product_id: str
    name: str
    brand: str
    category: str
    color: str
    price: float
    original_price: Optional[float] = None
    rating: Optional[float] = None
    stock_quantity: Optional[int] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    gender: str = "unisex"
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self) -> None:
        self.product_id = str(self.product_id)
        self.name = str(self.name)
        self.brand = str(self.brand or "")
        self.category = validate_category(self.category)
        self.color = normalize_hex(self.color)
        self.price = float(self.price)
        if self.price < 0:
            raise ValueError(f"Product {self.product_id} has a negative price")
        self.original_price = _optional_float(self.original_price)
        self.rating = _optional_float(self.rating)
        if self.rating is not None and not 0 <= self.rating <= 5:
            raise ValueError(f"Product {self.product_id} rating {self.rating} outside 0-5")
        self.stock_quantity = _optional_int(self.stock_quantity)
        self.gender = validate_gender(self.gender)
        self.is_active = _as_bool(self.is_active)


def from_raw_metadata(metadata: Mapping[str, Any]) -> Product:
    """Factory to build a :class:`Product` from a loose catalog row.

    Accepts either ``id`` or ``product_id`` as the identifier key.
    """

    data: Dict[str, Any] = dict(metadata)
    if "product_id" not in data and "id" in data:
        data["product_id"] = data["id"]
    required_fields = ["product_id", "name", "category", "color", "price"]
    missing = [field for field in required_fields if data.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for Product: {missing}")

    return Product(
        product_id=str(data["product_id"]),
        name=str(data["name"]),
        brand=str(data.get("brand") or ""),
        category=str(data["category"]),
        color=data["color"],
        price=data["price"],
        original_price=data.get("original_price"),
        rating=data.get("rating"),
        stock_quantity=data.get("stock_quantity"),
        description=data.get("description"),
        image_url=data.get("image_url"),
        gender=data.get("gender") or "unisex",
        is_active=data.get("is_active", True),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def ensure_product(value: Product | Mapping[str, Any]) -> Product:
    """Return ``value`` as a :class:`Product`, normalising mappings."""

    if isinstance(value, Product):
        return value
    return from_raw_metadata(value)


__all__ = ["Product", "from_raw_metadata", "ensure_product"]
