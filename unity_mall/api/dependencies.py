# This file provides dependency factories for FastAPI routes and lifecycle hooks.
# The database client, upload store and services are built once per process and
# injected through `Depends`, so tests can override or rebuild them.

from __future__ import annotations

from functools import lru_cache

from unity_mall.api.api_config import ApiConfig, get_api_config
from unity_mall.api.db_access import DatabaseClient
from unity_mall.api.services.product_service import ProductService
from unity_mall.api.services.service_listing_service import ServiceListingService
from unity_mall.api.services.stats_service import StatsService
from unity_mall.api.services.vendor_service import VendorService
from unity_mall.api.uploads import UploadStore


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_upload_store() -> UploadStore:
    config = get_api_config()
    return UploadStore(
        upload_dir=config.upload_dir,
        url_prefix=config.upload_url_prefix,
        max_file_bytes=config.max_upload_bytes,
    )


@lru_cache(maxsize=1)
def get_vendor_service() -> VendorService:
    return VendorService(db=get_database_client())


@lru_cache(maxsize=1)
def get_product_service() -> ProductService:
    return ProductService(db=get_database_client())


@lru_cache(maxsize=1)
def get_service_listing_service() -> ServiceListingService:
    return ServiceListingService(db=get_database_client())


@lru_cache(maxsize=1)
def get_stats_service() -> StatsService:
    return StatsService(db=get_database_client())


def get_config() -> ApiConfig:
    return get_api_config()


def clear_dependency_caches() -> None:
    """Drop every cached singleton so the next lookup re-reads the environment."""

    for factory in (
        get_api_config,
        get_database_client,
        get_upload_store,
        get_vendor_service,
        get_product_service,
        get_service_listing_service,
        get_stats_service,
    ):
        factory.cache_clear()
