"""DDL for the marketplace tables."""

from __future__ import annotations

from sqlalchemy.engine import Engine

VENDORS_DDL = """
CREATE TABLE IF NOT EXISTS vendors (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    phone TEXT NOT NULL,
    location TEXT NOT NULL,
    description TEXT,
    facebook TEXT,
    email TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""

PRODUCTS_DDL = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    vendor_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    price REAL NOT NULL,
    stock INTEGER DEFAULT 0,
    description TEXT,
    status TEXT DEFAULT 'active',
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (vendor_id) REFERENCES vendors(id) ON DELETE CASCADE
)
"""

PRODUCT_IMAGES_DDL = """
CREATE TABLE IF NOT EXISTS product_images (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    product_id INTEGER NOT NULL,
    image_url TEXT NOT NULL,
    is_primary INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (product_id) REFERENCES products(id) ON DELETE CASCADE
)
"""

SERVICES_DDL = """
CREATE TABLE IF NOT EXISTS services (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    vendor_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    price REAL NOT NULL,
    duration INTEGER DEFAULT 0,
    description TEXT,
    image_url TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (vendor_id) REFERENCES vendors(id) ON DELETE CASCADE
)
"""

# Parents before children.
MARKETPLACE_DDL_ORDER: list[tuple[str, str]] = [
    ("vendors", VENDORS_DDL),
    ("products", PRODUCTS_DDL),
    ("product_images", PRODUCT_IMAGES_DDL),
    ("services", SERVICES_DDL),
]

MARKETPLACE_TABLES: tuple[str, ...] = tuple(name for name, _ in MARKETPLACE_DDL_ORDER)


def apply_marketplace_ddl(engine: Engine) -> None:
    """Create the marketplace tables if they are missing."""

    with engine.begin() as connection:
        for _, ddl in MARKETPLACE_DDL_ORDER:
            connection.exec_driver_sql(ddl)
