# This file defines the state endpoints: list, lookup by id, and per-state district totals.
# Each handler runs inside `storage_boundary`, so any failure becomes the generic 500 response.
# Path ids are passed to storage as received strings.
# Each path is also served without its trailing slash instead of redirecting.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from covid19_india.api.dependencies import get_state_service
from covid19_india.api.error_handlers import storage_boundary
from covid19_india.api.response_mapper import map_state_row, map_state_stats_row
from covid19_india.api.schemas.state_schemas import StateResponse, StateStatsResponse
from covid19_india.api.services.state_service import StateService

router = APIRouter(prefix="/states", tags=["states"])
StateServiceDep = Annotated[StateService, Depends(get_state_service)]


@router.get("/", response_model=list[StateResponse])
@router.get("", response_model=list[StateResponse], include_in_schema=False)
def list_states(service: StateServiceDep) -> list[dict[str, object]]:
    with storage_boundary("list_states"):
        return [map_state_row(row) for row in service.list_states()]


@router.get("/{state_id}/", response_model=StateResponse)
@router.get("/{state_id}", response_model=StateResponse, include_in_schema=False)
def get_state(state_id: str, service: StateServiceDep) -> dict[str, object]:
    with storage_boundary("get_state"):
        return map_state_row(service.get_state(state_id))


@router.get("/{state_id}/stats/", response_model=StateStatsResponse)
@router.get("/{state_id}/stats", response_model=StateStatsResponse, include_in_schema=False)
def get_state_stats(state_id: str, service: StateServiceDep) -> dict[str, object]:
    with storage_boundary("get_state_stats"):
        return map_state_stats_row(service.get_state_stats(state_id))
