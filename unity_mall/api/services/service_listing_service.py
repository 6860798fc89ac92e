# This file implements the data-access service for vendor service listings.
# A listing carries at most one image URL, recorded when the listing is created.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from unity_mall.api.db_access import DatabaseClient

SERVICE_FIELDS: tuple[str, ...] = (
    "vendor_id",
    "name",
    "category",
    "price",
    "duration",
    "description",
)


class ServiceListingService:
    """Persistence for service rows."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def create_service(self, fields: Mapping[str, Any], *, image_url: str | None = None) -> int:
        query = """
        INSERT INTO services (vendor_id, name, category, price, duration, description, image_url)
        VALUES (:vendor_id, :name, :category, :price, :duration, :description, :image_url)
        """
        params = {name: fields.get(name) for name in SERVICE_FIELDS}
        params["duration"] = params["duration"] or 0
        params["image_url"] = image_url
        return self.db.insert(query, params)

    def list_services(self) -> list[dict[str, Any]]:
        query = """
        SELECT s.*,
            v.name AS vendor_name,
            v.phone AS vendor_phone,
            v.location AS vendor_location
        FROM services s
        LEFT JOIN vendors v ON v.id = s.vendor_id
        ORDER BY s.created_at DESC, s.id DESC
        """
        return self.db.fetch_all(query)

    def list_vendor_services(self, vendor_id: int) -> list[dict[str, Any]]:
        query = """
        SELECT * FROM services
        WHERE vendor_id = :vendor_id
        ORDER BY created_at DESC, id DESC
        """
        return self.db.fetch_all(query, {"vendor_id": vendor_id})

    def delete_service(self, service_id: int) -> int:
        return self.db.execute("DELETE FROM services WHERE id = :service_id", {"service_id": service_id})
