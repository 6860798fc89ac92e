# This file defines the vendor endpoints under the API prefix.
# Reads return raw vendor rows; writes return a message with the new id or the changed-row count.
# Only the read-by-id route treats a missing row as 404.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from unity_mall.api.dependencies import get_vendor_service
from unity_mall.api.error_handlers import NotFoundError
from unity_mall.api.schemas.common import ChangesResponse, CreatedResponse, ErrorResponse
from unity_mall.api.schemas.vendor_schemas import VendorOut, VendorPayload
from unity_mall.api.services.vendor_service import VendorService

router = APIRouter(prefix="/vendors", tags=["vendors"])
VendorServiceDep = Annotated[VendorService, Depends(get_vendor_service)]


@router.post("", response_model=CreatedResponse)
def create_vendor(payload: VendorPayload, service: VendorServiceDep) -> dict[str, Any]:
    vendor_id = service.create_vendor(payload.model_dump())
    return {"id": vendor_id, "message": "Vendor created successfully"}


@router.get("", response_model=list[VendorOut])
def list_vendors(service: VendorServiceDep) -> list[dict[str, Any]]:
    return service.list_vendors()


@router.get("/{vendor_id}", response_model=VendorOut, responses={404: {"model": ErrorResponse}})
def get_vendor(vendor_id: int, service: VendorServiceDep) -> dict[str, Any]:
    vendor = service.get_vendor(vendor_id)
    if vendor is None:
        raise NotFoundError("Vendor not found")
    return vendor


@router.put("/{vendor_id}", response_model=ChangesResponse)
def update_vendor(vendor_id: int, payload: VendorPayload, service: VendorServiceDep) -> dict[str, Any]:
    changes = service.update_vendor(vendor_id, payload.model_dump())
    return {"message": "Vendor updated successfully", "changes": changes}


@router.delete("/{vendor_id}", response_model=ChangesResponse)
def delete_vendor(vendor_id: int, service: VendorServiceDep) -> dict[str, Any]:
    changes = service.delete_vendor(vendor_id)
    return {"message": "Vendor deleted successfully", "changes": changes}
