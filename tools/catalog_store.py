"""Catalog and wardrobe storage abstractions with a SQLite implementation."""
from __future__ import annotations

import logging
import sqlite3
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.product import Product, from_raw_metadata
from models.taxonomy import validate_category, validate_gender
from tools.observability import instrument_call

logger = logging.getLogger(__name__)

_PRODUCT_COLUMNS = (
    "product_id",
    "name",
    "brand",
    "category",
    "color",
    "price",
    "original_price",
    "rating",
    "stock_quantity",
    "description",
    "image_url",
    "gender",
    "is_active",
    "created_at",
    "updated_at",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CatalogStore:
    """Persistence interface for catalog products and user wardrobes."""

    def create_product(self, product: Product) -> Product:
        raise NotImplementedError

    def get_product(self, product_id: str) -> Optional[Product]:
        raise NotImplementedError

    def update_product(self, product_id: str, updated_fields: Dict[str, object]) -> Optional[Product]:
        raise NotImplementedError

    def delete_product(self, product_id: str) -> bool:
        raise NotImplementedError

    def fetch_products(self, category: Optional[str] = None, gender: Optional[str] = None) -> List[Product]:
        raise NotImplementedError

    def add_product_to_wardrobe(self, user_id: str, product_id: str, size: Optional[str] = None) -> bool:
        raise NotImplementedError

    def fetch_wardrobe_items(self, user_id: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def remove_wardrobe_item(self, user_id: str, product_id: str) -> bool:
        raise NotImplementedError


class SQLiteCatalogStore(CatalogStore):
    """Local SQLite-backed store for products and wardrobe entries."""

    def __init__(self, database_path: str | Path = "data/catalog.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS products (
                    product_id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    brand TEXT,
                    category TEXT NOT NULL,
                    color TEXT NOT NULL,
                    price REAL NOT NULL,
                    original_price REAL,
                    rating REAL,
                    stock_quantity INTEGER,
                    description TEXT,
                    image_url TEXT,
                    gender TEXT NOT NULL DEFAULT 'unisex',
                    is_active INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT,
                    updated_at TEXT
                );
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS wardrobe_items (
                    user_id TEXT NOT NULL,
                    product_id TEXT NOT NULL,
                    size TEXT NOT NULL DEFAULT 'M',
                    created_at TEXT,
                    PRIMARY KEY (user_id, product_id)
                );
                """
            )

    def _row_to_product(self, row: sqlite3.Row) -> Optional[Product]:
        try:
            return from_raw_metadata({key: row[key] for key in _PRODUCT_COLUMNS})
        except ValueError as exc:
            logger.warning("Skipping catalog row %s due to validation error: %s", row["product_id"], exc)
            return None

    @instrument_call("create_product")
    def create_product(self, product: Product) -> Product:
        now = _utc_now()
        product.created_at = product.created_at or now
        product.updated_at = product.updated_at or now
        record = asdict(product)
        record["is_active"] = int(product.is_active)
        placeholders = ", ".join("?" for _ in _PRODUCT_COLUMNS)
        with self._connect() as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO products ({', '.join(_PRODUCT_COLUMNS)}) VALUES ({placeholders})",
                tuple(record[column] for column in _PRODUCT_COLUMNS),
            )
        return product

    def get_product(self, product_id: str) -> Optional[Product]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM products WHERE product_id = ?", (product_id,))
            row = cursor.fetchone()
            return self._row_to_product(row) if row else None

    @instrument_call("update_product")
    def update_product(self, product_id: str, updated_fields: Dict[str, object]) -> Optional[Product]:
        current = self.get_product(product_id)
        if not current:
            return None

        data = asdict(current)
        for key, value in updated_fields.items():
            if key in {"product_id", "created_at"}:
                continue
            if key in data:
                data[key] = value
        data["updated_at"] = _utc_now()

        validated = Product(**data)
        return self.create_product(validated)

    @instrument_call("delete_product")
    def delete_product(self, product_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM products WHERE product_id = ?", (product_id,))
            conn.execute("DELETE FROM wardrobe_items WHERE product_id = ?", (product_id,))
            return cursor.rowcount > 0

    @instrument_call("fetch_products")
    def fetch_products(self, category: Optional[str] = None, gender: Optional[str] = None) -> List[Product]:
        """Return active products, newest first.

        ``category`` of ``None`` or ``"all"`` disables the category filter. A
        gender filter also admits ``unisex`` products.
        """

        query = "SELECT * FROM products WHERE is_active = 1"
        params: List[object] = []
        if category and category.strip().lower() != "all":
            query += " AND category = ?"
            params.append(validate_category(category))
        if gender:
            query += " AND gender IN (?, 'unisex')"
            params.append(validate_gender(gender))
        query += " ORDER BY created_at DESC, product_id"

        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
        products = [product for product in (self._row_to_product(row) for row in rows) if product]
        logger.info("Fetched %s products (category=%s gender=%s)", len(products), category, gender)
        return products

    @instrument_call("add_product_to_wardrobe")
    def add_product_to_wardrobe(self, user_id: str, product_id: str, size: Optional[str] = None) -> bool:
        if not self.get_product(product_id):
            logger.info("Cannot add unknown product %s to wardrobe", product_id)
            return False
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO wardrobe_items (user_id, product_id, size, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (user_id, product_id, size or "M", _utc_now()),
            )
        return True

    def fetch_wardrobe_items(self, user_id: str) -> List[Dict[str, Any]]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT w.product_id, w.size, w.created_at AS added_at, p.*
                FROM wardrobe_items w JOIN products p ON p.product_id = w.product_id
                WHERE w.user_id = ?
                ORDER BY w.created_at DESC, w.product_id
                """,
                (user_id,),
            ).fetchall()
        entries = []
        for row in rows:
            product = self._row_to_product(row)
            if product:
                entries.append({"size": row["size"], "added_at": row["added_at"], "product": product})
        return entries

    @instrument_call("remove_wardrobe_item")
    def remove_wardrobe_item(self, user_id: str, product_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM wardrobe_items WHERE user_id = ? AND product_id = ?",
                (user_id, product_id),
            )
            return cursor.rowcount > 0


__all__ = ["CatalogStore", "SQLiteCatalogStore"]
