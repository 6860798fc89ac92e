# This file defines product and product-image endpoints under the API prefix.
# The image upload route accepts up to the configured number of files in the `images`
# multipart field; the first file of each batch becomes the primary image.
# File writes and inserts run in the thread pool so uploads do not block other requests.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from unity_mall.api.api_config import ApiConfig
from unity_mall.api.dependencies import get_config, get_product_service, get_upload_store
from unity_mall.api.error_handlers import APIError, NotFoundError
from unity_mall.api.schemas.common import ChangesResponse, CreatedResponse, ErrorResponse, UploadResponse
from unity_mall.api.schemas.product_schemas import (
    ProductCreate,
    ProductOut,
    ProductUpdate,
    ProductWithVendorOut,
)
from unity_mall.api.services.product_service import ProductService
from unity_mall.api.uploads import UploadStore

router = APIRouter(tags=["products"])
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
UploadStoreDep = Annotated[UploadStore, Depends(get_upload_store)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.post("/products", response_model=CreatedResponse)
def create_product(payload: ProductCreate, service: ProductServiceDep) -> dict[str, Any]:
    product_id = service.create_product(payload.model_dump())
    return {"id": product_id, "message": "Product created successfully"}


@router.post("/products/{product_id}/images", response_model=UploadResponse)
async def upload_product_images(
    product_id: int,
    service: ProductServiceDep,
    store: UploadStoreDep,
    config: ConfigDep,
    images: list[UploadFile] | None = File(default=None),
) -> dict[str, Any]:
    files = images or []
    if len(files) > config.max_images_per_upload:
        raise APIError(
            status_code=400,
            error_code="TOO_MANY_FILES",
            message=f"Too many files: at most {config.max_images_per_upload} images per upload",
            details={"received": len(files), "limit": config.max_images_per_upload},
        )

    image_urls = await store.save_many(files)
    count = await run_in_threadpool(service.add_images, product_id, image_urls)
    return {"message": "Images uploaded successfully", "count": count}


@router.get("/products", response_model=list[ProductWithVendorOut])
def list_products(service: ProductServiceDep) -> list[dict[str, Any]]:
    return service.list_products()


@router.get("/vendors/{vendor_id}/products", response_model=list[ProductOut])
def list_vendor_products(vendor_id: int, service: ProductServiceDep) -> list[dict[str, Any]]:
    return service.list_vendor_products(vendor_id)


@router.get("/products/{product_id}", response_model=ProductOut, responses={404: {"model": ErrorResponse}})
def get_product(product_id: int, service: ProductServiceDep) -> dict[str, Any]:
    product = service.get_product(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.put("/products/{product_id}", response_model=ChangesResponse)
def update_product(product_id: int, payload: ProductUpdate, service: ProductServiceDep) -> dict[str, Any]:
    changes = service.update_product(product_id, payload.model_dump())
    return {"message": "Product updated successfully", "changes": changes}


@router.delete("/products/{product_id}", response_model=ChangesResponse)
def delete_product(product_id: int, service: ProductServiceDep) -> dict[str, Any]:
    changes = service.delete_product(product_id)
    return {"message": "Product deleted successfully", "changes": changes}
