# This file implements the vendor data-access service.
# Routers hand it plain field dictionaries; it returns rows as dictionaries and change counts.
# Vendor deletion relies on the foreign keys to remove the vendor's products and services.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from unity_mall.api.db_access import DatabaseClient

VENDOR_FIELDS: tuple[str, ...] = (
    "name",
    "category",
    "phone",
    "location",
    "description",
    "facebook",
    "email",
)


def _field_params(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {name: fields.get(name) for name in VENDOR_FIELDS}


class VendorService:
    """Persistence for vendor rows."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_vendor(self, fields: Mapping[str, Any]) -> int:
        query = """
        INSERT INTO vendors (name, category, phone, location, description, facebook, email)
        VALUES (:name, :category, :phone, :location, :description, :facebook, :email)
        """
        return self.db.insert(query, _field_params(fields))

    def list_vendors(self) -> list[dict[str, Any]]:
        return self.db.fetch_all("SELECT * FROM vendors ORDER BY created_at DESC, id DESC")

    def get_vendor(self, vendor_id: int) -> dict[str, Any] | None:
        return self.db.fetch_one("SELECT * FROM vendors WHERE id = :vendor_id", {"vendor_id": vendor_id})

    def update_vendor(self, vendor_id: int, fields: Mapping[str, Any]) -> int:
        """Overwrite every editable column; fields missing from `fields` become NULL."""

        query = """
        UPDATE vendors
        SET name = :name,
            category = :category,
            phone = :phone,
            location = :location,
            description = :description,
            facebook = :facebook,
            email = :email,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = :vendor_id
        """
        params = _field_params(fields)
        params["vendor_id"] = vendor_id
        return self.db.execute(query, params)

    def delete_vendor(self, vendor_id: int) -> int:
        return self.db.execute("DELETE FROM vendors WHERE id = :vendor_id", {"vendor_id": vendor_id})
