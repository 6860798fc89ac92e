# This file defines the dashboard summary response.

from __future__ import annotations

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    totalVendors: int = Field(ge=0)
    totalProducts: int = Field(ge=0)
    activeProducts: int = Field(ge=0)
    totalServices: int = Field(ge=0)
