# This file wraps database access so API services can run parameterized SQL safely.
# Every value reaches the driver as a bound parameter; identifiers are validated separately.
# SQLite connections get foreign key enforcement switched on as they are opened.

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from unity_mall.api.ddl import apply_marketplace_ddl

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

LOGGER = logging.getLogger("unity_mall.db")


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        self._engine: Engine = create_engine(database_url, pool_pre_ping=True, future=True)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @property
    def engine(self) -> Engine:
        return self._engine

    def initialize_schema(self) -> None:
        apply_marketplace_ddl(self._engine)
        LOGGER.info("Database tables initialized url=%s", self._engine.url.render_as_string())

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        self._validate_identifier(table_name)
        return inspect(self._engine).has_table(table_name)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: str, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(text(query), dict(params or {})).scalar_one()

    def insert(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run an INSERT and return the generated row id."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return int(result.lastrowid)

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement and return the number of rows it changed."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return int(result.rowcount)

    def dispose(self) -> None:
        self._engine.dispose()
        LOGGER.info("Database connection closed")

    def _validate_identifier(self, identifier: str) -> str:
        if not _IDENTIFIER_RE.match(identifier):
            raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
        return identifier
