# This file implements the dashboard summary counts.
# The four counts are independent reads; they run back to back inside one call.

from __future__ import annotations

from unity_mall.api.db_access import DatabaseClient

ACTIVE_PRODUCT_STATUS = "active"


class StatsService:
    """Aggregate counts across the marketplace tables."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def get_summary(self) -> dict[str, int]:
        return {
            "totalVendors": self._count("SELECT COUNT(*) FROM vendors"),
            "totalProducts": self._count("SELECT COUNT(*) FROM products"),
            "activeProducts": self._count(
                "SELECT COUNT(*) FROM products WHERE status = :status",
                {"status": ACTIVE_PRODUCT_STATUS},
            ),
            "totalServices": self._count("SELECT COUNT(*) FROM services"),
        }

    def _count(self, query: str, params: dict[str, object] | None = None) -> int:
        return int(self.db.fetch_scalar(query, params))
