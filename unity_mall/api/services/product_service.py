# This file implements the product data-access service, including product images.
# Product reads join the image table and fold the image rows into an ordered `images` list
# of URLs per product, so a product without images carries an empty list.
# Image batches are inserted one statement at a time without a surrounding transaction.

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from unity_mall.api.db_access import DatabaseClient

LOGGER = logging.getLogger("unity_mall.products")

PRODUCT_FIELDS: tuple[str, ...] = (
    "name",
    "category",
    "price",
    "stock",
    "description",
    "status",
)

DEFAULT_PRODUCT_STATUS = "active"

_PRODUCT_COLUMNS = """
    p.id,
    p.vendor_id,
    p.name,
    p.category,
    p.price,
    p.stock,
    p.description,
    p.status,
    p.created_at,
    p.updated_at
"""

_VENDOR_CONTACT_COLUMNS = """
    v.name AS vendor_name,
    v.phone AS vendor_phone,
    v.location AS vendor_location
"""


def group_product_rows(rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Collapse one-row-per-image join output into one dict per product.

    Rows must arrive grouped by product with images in upload order; the product
    order of the input is kept.
    """

    products: dict[int, dict[str, Any]] = {}
    for row in rows:
        product_id = int(row["id"])
        product = products.get(product_id)
        if product is None:
            product = {key: value for key, value in row.items() if key != "image_url"}
            product["images"] = []
            products[product_id] = product
        if row.get("image_url") is not None:
            product["images"].append(row["image_url"])
    return list(products.values())


class ProductService:
    """Persistence for products and their images."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_product(self, fields: Mapping[str, Any]) -> int:
        query = """
        INSERT INTO products (vendor_id, name, category, price, stock, description, status)
        VALUES (:vendor_id, :name, :category, :price, :stock, :description, :status)
        """
        params = {name: fields.get(name) for name in PRODUCT_FIELDS}
        params["vendor_id"] = fields.get("vendor_id")
        params["stock"] = params["stock"] or 0
        params["status"] = params["status"] or DEFAULT_PRODUCT_STATUS
        return self.db.insert(query, params)

    def add_images(self, product_id: int, image_urls: Sequence[str]) -> int:
        """Record uploaded image URLs for a product; the first URL is flagged primary."""

        query = """
        INSERT INTO product_images (product_id, image_url, is_primary)
        VALUES (:product_id, :image_url, :is_primary)
        """
        saved = 0
        for index, image_url in enumerate(image_urls):
            try:
                self.db.insert(
                    query,
                    {
                        "product_id": product_id,
                        "image_url": image_url,
                        "is_primary": 1 if index == 0 else 0,
                    },
                )
            except SQLAlchemyError:
                LOGGER.error(
                    "Error saving image product_id=%s image_url=%s saved_before_failure=%d",
                    product_id,
                    image_url,
                    saved,
                )
                raise
            saved += 1
        return saved

    def list_products(self) -> list[dict[str, Any]]:
        return self._fetch_products(include_vendor_contact=True)

    def list_vendor_products(self, vendor_id: int) -> list[dict[str, Any]]:
        return self._fetch_products(
            where_sql="WHERE p.vendor_id = :vendor_id",
            params={"vendor_id": vendor_id},
        )

    def get_product(self, product_id: int) -> dict[str, Any] | None:
        products = self._fetch_products(
            where_sql="WHERE p.id = :product_id",
            params={"product_id": product_id},
        )
        return products[0] if products else None

    def update_product(self, product_id: int, fields: Mapping[str, Any]) -> int:
        """Overwrite every editable column; fields missing from `fields` become NULL."""

        query = """
        UPDATE products
        SET name = :name,
            category = :category,
            price = :price,
            stock = :stock,
            description = :description,
            status = :status,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = :product_id
        """
        params = {name: fields.get(name) for name in PRODUCT_FIELDS}
        params["product_id"] = product_id
        return self.db.execute(query, params)

    def delete_product(self, product_id: int) -> int:
        return self.db.execute("DELETE FROM products WHERE id = :product_id", {"product_id": product_id})

    def _fetch_products(
        self,
        *,
        where_sql: str = "",
        params: Mapping[str, Any] | None = None,
        include_vendor_contact: bool = False,
    ) -> list[dict[str, Any]]:
        select_columns = _PRODUCT_COLUMNS
        vendor_join = ""
        if include_vendor_contact:
            select_columns = f"{_PRODUCT_COLUMNS},{_VENDOR_CONTACT_COLUMNS}"
            vendor_join = "LEFT JOIN vendors v ON v.id = p.vendor_id"

        query = f"""
        SELECT {select_columns},
            pi.image_url AS image_url
        FROM products p
        LEFT JOIN product_images pi ON pi.product_id = p.id
        {vendor_join}
        {where_sql}
        ORDER BY p.created_at DESC, p.id DESC, pi.id ASC
        """
        return group_product_rows(self.db.fetch_all(query, params))
