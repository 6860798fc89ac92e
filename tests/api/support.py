# This file provides shared helpers for API endpoint tests.
# Each client wraps a freshly built app whose database and upload directory come from the
# per-test environment prepared in `tests/conftest.py`.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from unity_mall.api.app import create_app
from unity_mall.api.dependencies import clear_dependency_caches, get_database_client

VENDOR_PAYLOAD: dict[str, Any] = {
    "name": "Mama Njeri Crafts",
    "category": "Handicrafts",
    "phone": "+254700000001",
    "location": "Stall 14, Block B",
    "description": "Beaded jewellery and kiondo baskets",
    "facebook": "fb.com/mamanjeri",
    "email": "njeri@example.com",
}

PRODUCT_PAYLOAD: dict[str, Any] = {
    "name": "Kiondo Basket",
    "category": "Bags",
    "price": 19.99,
    "stock": 3,
    "description": "Hand-woven sisal basket",
    "status": "active",
}

SERVICE_PAYLOAD: dict[str, Any] = {
    "name": "Hair Braiding",
    "category": "Beauty",
    "price": 25.5,
    "duration": 90,
    "description": "Box braids, shoulder length",
}


@contextmanager
def api_test_client() -> Iterator[TestClient]:
    """Yield a TestClient on a freshly built app; startup creates the tables."""

    clear_dependency_caches()
    app = create_app()
    try:
        with TestClient(app) as client:
            yield client
    finally:
        clear_dependency_caches()


def db_rows(query: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    """Read rows straight from the database the app is using."""

    return get_database_client().fetch_all(query, params)


def create_vendor(client: TestClient, **overrides: Any) -> int:
    response = client.post("/api/vendors", json={**VENDOR_PAYLOAD, **overrides})
    assert response.status_code == 200, response.text
    return int(response.json()["id"])


def create_product(client: TestClient, vendor_id: int, **overrides: Any) -> int:
    response = client.post("/api/products", json={**PRODUCT_PAYLOAD, "vendor_id": vendor_id, **overrides})
    assert response.status_code == 200, response.text
    return int(response.json()["id"])


def create_service(client: TestClient, vendor_id: int, **overrides: Any) -> int:
    response = client.post("/api/services", json={**SERVICE_PAYLOAD, "vendor_id": vendor_id, **overrides})
    assert response.status_code == 200, response.text
    return int(response.json()["id"])


def image_part(name: str, content: bytes, content_type: str = "image/png") -> tuple[str, tuple[str, bytes, str]]:
    return ("images", (name, content, content_type))
