# This file builds the FastAPI application and registers all API routers.
# Startup creates the upload directory and the marketplace tables; shutdown closes the
# database connections. Uploaded files are served statically under the upload URL prefix.
# The app adds request IDs, timing headers, and Prometheus request metrics.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint
from starlette.routing import Match

from unity_mall.api.api_config import get_api_config
from unity_mall.api.dependencies import get_database_client, get_upload_store
from unity_mall.api.error_handlers import register_error_handlers
from unity_mall.api.routers.health import router as health_router
from unity_mall.api.routers.products import router as products_router
from unity_mall.api.routers.services import router as services_router
from unity_mall.api.routers.stats import router as stats_router
from unity_mall.api.routers.vendors import router as vendors_router
from unity_mall.common.logging import configure_logging

LOGGER = logging.getLogger("unity_mall.api")

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def _route_label(app: FastAPI, request: Request) -> str:
    # Label by route template or mount prefix, never by the raw path.
    partial: str | None = None
    for route in app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", "") or "/"
        if match == Match.PARTIAL and partial is None:
            partial = getattr(route, "path", "") or "/"
    return partial or "unmatched"


def _resolve(app: FastAPI, factory: Callable[[], Any]) -> Any:
    return app.dependency_overrides.get(factory, factory)()


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Marketplace directory API: vendors, their products with image galleries, "
            "their services, and dashboard counts."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "vendors", "description": "Marketplace sellers."},
            {"name": "products", "description": "Vendor products and product images."},
            {"name": "services", "description": "Vendor service listings."},
            {"name": "stats", "description": "Dashboard summary counts."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials="*" not in config.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = _route_label(app, request)
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            LOGGER.debug(
                "%s %s -> %s in %.2fms request_id=%s",
                method_label,
                request.url.path,
                status_code,
                duration_ms,
                request_id,
            )
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup() -> None:
        _resolve(app, get_upload_store).ensure_directory()
        _resolve(app, get_database_client).initialize_schema()
        LOGGER.info(
            "%s running on http://%s:%s (api prefix %s)",
            config.api_name,
            config.host,
            config.port,
            config.api_prefix or "/",
        )

    @app.on_event("shutdown")
    def shutdown() -> None:
        _resolve(app, get_database_client).dispose()

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(vendors_router, prefix=config.api_prefix)
    app.include_router(products_router, prefix=config.api_prefix)
    app.include_router(services_router, prefix=config.api_prefix)
    app.include_router(stats_router, prefix=config.api_prefix)

    app.mount(
        config.upload_url_prefix,
        StaticFiles(directory=config.upload_dir, check_dir=False),
        name="uploads",
    )
    # Mounted last: a root mount shadows every route registered after it.
    if config.static_dir and Path(config.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="public")

    return app


app = create_app()
