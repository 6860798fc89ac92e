# This file defines request and response models for product endpoints.
# Product reads always include `images`, the product's image URLs in upload order.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    category: str | None = None
    price: float | None = None
    stock: int | None = None
    description: str | None = None
    status: str | None = None


class ProductCreate(ProductFields):
    vendor_id: int | None = None


class ProductUpdate(ProductFields):
    pass


class ProductOut(BaseModel):
    id: int
    vendor_id: int
    name: str
    category: str
    price: float
    stock: int | None = None
    description: str | None = None
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    images: list[str] = Field(default_factory=list)


class ProductWithVendorOut(ProductOut):
    vendor_name: str | None = None
    vendor_phone: str | None = None
    vendor_location: str | None = None
