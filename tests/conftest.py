"""
Shared test configuration.
Every test gets its own SQLite file and upload directory under `tmp_path`, and the
cached dependency singletons are rebuilt so nothing leaks between tests.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from unity_mall.api.db_access import DatabaseClient  # noqa: E402
from unity_mall.api.dependencies import clear_dependency_caches  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point the database and upload directory at per-test temporary locations."""

    values = {
        "ENV": "test",
        "LOG_LEVEL": "WARNING",
        "PORT": "3000",
        "DATABASE_URL": f"sqlite:///{tmp_path / 'unity_mall_test.db'}",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "UPLOAD_URL_PREFIX": "/uploads",
        "STATIC_DIR": "",
        "API_PREFIX": "/api",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    for key in ("MAX_UPLOAD_BYTES", "MAX_IMAGES_PER_UPLOAD", "API_ALLOWED_ORIGINS"):
        monkeypatch.delenv(key, raising=False)

    clear_dependency_caches()
    yield
    clear_dependency_caches()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def db_client(tmp_path: Path) -> Iterator[DatabaseClient]:
    """A schema-initialized client on the per-test database file."""

    client = DatabaseClient(database_url=f"sqlite:///{tmp_path / 'unity_mall_test.db'}")
    client.initialize_schema()
    yield client
    client.dispose()
