# This file defines liveness, readiness, and version endpoints for API operations.
# They are served outside the API prefix so process supervisors can probe them directly.
# Readiness requires a reachable database with all four marketplace tables present.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from unity_mall.api.api_config import ApiConfig
from unity_mall.api.db_access import DatabaseClient
from unity_mall.api.ddl import MARKETPLACE_TABLES
from unity_mall.api.dependencies import get_config, get_database_client
from unity_mall.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@lru_cache(maxsize=1)
def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, db: DBDep) -> dict[str, object]:
    db_connected = db.can_connect()
    missing_tables = (
        [table for table in MARKETPLACE_TABLES if not db.table_exists(table)]
        if db_connected
        else list(MARKETPLACE_TABLES)
    )
    tables_ready = db_connected and not missing_tables

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "tables_ready": tables_ready,
        "missing_tables": missing_tables,
        "ready": tables_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
