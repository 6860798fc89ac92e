# This file defines service listing endpoints under the API prefix.
# Creation takes either a JSON body or a multipart form with an optional `image` file.

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from unity_mall.api.dependencies import get_service_listing_service, get_upload_store
from unity_mall.api.error_handlers import APIError, ValidationError
from unity_mall.api.schemas.common import ChangesResponse, CreatedResponse
from unity_mall.api.schemas.service_schemas import ServiceCreate, ServiceOut, ServiceWithVendorOut
from unity_mall.api.services.service_listing_service import ServiceListingService
from unity_mall.api.uploads import UploadStore

router = APIRouter(tags=["services"])
ServiceListingDep = Annotated[ServiceListingService, Depends(get_service_listing_service)]
UploadStoreDep = Annotated[UploadStore, Depends(get_upload_store)]

_FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")
IMAGE_FIELD = "image"


async def _read_json_fields(request: Request) -> dict[str, Any]:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ValidationError("Malformed JSON body", details={"position": exc.pos}) from exc
    if not isinstance(parsed, dict):
        raise ValidationError("JSON body must be an object")
    return parsed


def _parse_service_fields(raw_fields: dict[str, Any]) -> ServiceCreate:
    try:
        return ServiceCreate.model_validate(raw_fields)
    except PydanticValidationError as exc:
        raise APIError(
            status_code=422,
            error_code="VALIDATION_ERROR",
            message="Invalid request parameters.",
            details=exc.errors(include_url=False, include_context=False),
        ) from exc


@router.post("/services", response_model=CreatedResponse)
async def create_service(
    request: Request,
    service: ServiceListingDep,
    store: UploadStoreDep,
) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    image: StarletteUploadFile | None = None
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        raw_fields: dict[str, Any] = {}
        for key, value in form.items():
            if key == IMAGE_FIELD:
                if isinstance(value, StarletteUploadFile):
                    image = value
                continue
            raw_fields[key] = value
    else:
        raw_fields = await _read_json_fields(request)

    fields = _parse_service_fields(raw_fields)
    image_url = await store.save_one(image)
    service_id = await run_in_threadpool(
        service.create_service,
        fields.model_dump(),
        image_url=image_url,
    )
    return {"id": service_id, "message": "Service created successfully"}


@router.get("/services", response_model=list[ServiceWithVendorOut])
def list_services(service: ServiceListingDep) -> list[dict[str, Any]]:
    return service.list_services()


@router.get("/vendors/{vendor_id}/services", response_model=list[ServiceOut])
def list_vendor_services(vendor_id: int, service: ServiceListingDep) -> list[dict[str, Any]]:
    return service.list_vendor_services(vendor_id)


@router.delete("/services/{service_id}", response_model=ChangesResponse)
def delete_service(service_id: int, service: ServiceListingDep) -> dict[str, Any]:
    changes = service.delete_service(service_id)
    return {"message": "Service deleted successfully", "changes": changes}
