# This file defines request and response models for service listing endpoints.
# Creation accepts JSON or multipart form fields, so numeric fields are coerced from strings.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ServiceCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    vendor_id: int | None = None
    name: str | None = None
    category: str | None = None
    price: float | None = None
    duration: int | None = None
    description: str | None = None


class ServiceOut(BaseModel):
    id: int
    vendor_id: int
    name: str
    category: str
    price: float
    duration: int | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class ServiceWithVendorOut(ServiceOut):
    vendor_name: str | None = None
    vendor_phone: str | None = None
    vendor_location: str | None = None
