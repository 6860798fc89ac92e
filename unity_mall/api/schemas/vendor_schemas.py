# This file defines request and response models for vendor endpoints.
# Request fields are all optional: a missing field is stored as NULL and the table constraints decide.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VendorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    category: str | None = None
    phone: str | None = None
    location: str | None = None
    description: str | None = None
    facebook: str | None = None
    email: str | None = None


class VendorOut(BaseModel):
    id: int
    name: str
    category: str
    phone: str
    location: str
    description: str | None = None
    facebook: str | None = None
    email: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
