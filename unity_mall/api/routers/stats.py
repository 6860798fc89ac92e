# This file defines the dashboard summary endpoint under the API prefix.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from unity_mall.api.dependencies import get_stats_service
from unity_mall.api.schemas.stats_schemas import StatsResponse
from unity_mall.api.services.stats_service import StatsService

router = APIRouter(tags=["stats"])
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]


@router.get("/stats", response_model=StatsResponse)
def get_stats(service: StatsServiceDep) -> dict[str, int]:
    return service.get_summary()
