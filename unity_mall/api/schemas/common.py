# This file defines schema pieces shared by several resource routers.
# Write endpoints answer with a message plus either the new id, a changed-row count or a file count.

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    id: int
    message: str


class ChangesResponse(BaseModel):
    message: str
    changes: int


class UploadResponse(BaseModel):
    message: str
    count: int


class ErrorResponse(BaseModel):
    error: str
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
