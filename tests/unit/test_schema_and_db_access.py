"""
Unit tests for the marketplace schema and the database client.
These run against a throwaway SQLite file per test.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from unity_mall.api.db_access import DatabaseClient
from unity_mall.api.ddl import MARKETPLACE_TABLES


def _insert_vendor(db: DatabaseClient, name: str = "Stall") -> int:
    return db.insert(
        "INSERT INTO vendors (name, category, phone, location) VALUES (:name, 'Food', '0700', 'Gate A')",
        {"name": name},
    )


def test_schema_creation_is_idempotent(db_client: DatabaseClient) -> None:
    vendor_id = _insert_vendor(db_client)
    db_client.initialize_schema()

    for table in MARKETPLACE_TABLES:
        assert db_client.table_exists(table)
    assert db_client.fetch_scalar("SELECT COUNT(*) FROM vendors") == 1
    assert db_client.fetch_one("SELECT id FROM vendors") == {"id": vendor_id}


def test_table_exists_rejects_unsafe_identifiers(db_client: DatabaseClient) -> None:
    with pytest.raises(ValueError, match="Unsafe SQL identifier"):
        db_client.table_exists("vendors; DROP TABLE vendors")
    assert db_client.table_exists("not_a_table") is False


def test_ids_are_monotonic_and_never_reused(db_client: DatabaseClient) -> None:
    first = _insert_vendor(db_client, "one")
    second = _insert_vendor(db_client, "two")
    assert second > first

    assert db_client.execute("DELETE FROM vendors WHERE id = :id", {"id": second}) == 1
    third = _insert_vendor(db_client, "three")
    assert third > second


def test_foreign_keys_are_enforced(db_client: DatabaseClient) -> None:
    with pytest.raises(IntegrityError):
        db_client.insert(
            "INSERT INTO products (vendor_id, name, category, price) VALUES (99, 'Ghost', 'None', 1.0)"
        )


def test_cascade_delete_reaches_grandchildren(db_client: DatabaseClient) -> None:
    vendor_id = _insert_vendor(db_client)
    product_id = db_client.insert(
        "INSERT INTO products (vendor_id, name, category, price) VALUES (:vendor_id, 'Mat', 'Home', 3.0)",
        {"vendor_id": vendor_id},
    )
    db_client.insert(
        "INSERT INTO product_images (product_id, image_url, is_primary) VALUES (:product_id, '/uploads/a.png', 1)",
        {"product_id": product_id},
    )
    db_client.insert(
        "INSERT INTO services (vendor_id, name, category, price) VALUES (:vendor_id, 'Fix', 'Repairs', 2.0)",
        {"vendor_id": vendor_id},
    )

    db_client.execute("DELETE FROM vendors WHERE id = :vendor_id", {"vendor_id": vendor_id})

    for table in ("products", "product_images", "services"):
        assert db_client.fetch_scalar(f"SELECT COUNT(*) FROM {table}") == 0


def test_bound_parameters_are_not_interpreted_as_sql(db_client: DatabaseClient) -> None:
    hostile = "x'); DROP TABLE vendors; --"
    vendor_id = _insert_vendor(db_client, hostile)

    row = db_client.fetch_one("SELECT name FROM vendors WHERE id = :id", {"id": vendor_id})
    assert row == {"name": hostile}
    assert db_client.table_exists("vendors")


def test_defaults_fill_timestamps_and_product_columns(db_client: DatabaseClient) -> None:
    vendor_id = _insert_vendor(db_client)
    product_id = db_client.insert(
        "INSERT INTO products (vendor_id, name, category, price) VALUES (:vendor_id, 'Mat', 'Home', 3.0)",
        {"vendor_id": vendor_id},
    )
    row = db_client.fetch_one("SELECT * FROM products WHERE id = :id", {"id": product_id})

    assert row is not None
    assert row["stock"] == 0
    assert row["status"] == "active"
    assert row["created_at"]
    assert row["updated_at"]


def test_can_connect(db_client: DatabaseClient) -> None:
    assert db_client.can_connect() is True
