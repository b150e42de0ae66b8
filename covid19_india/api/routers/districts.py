# This file defines the district endpoints: create, read, full replace, delete, and state-name details.
# Write endpoints answer with fixed confirmation text; replace and delete succeed even when nothing matched.
# The details endpoint runs two sequential lookups without a transaction around them.
# Each path is also served without its trailing slash instead of redirecting.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from covid19_india.api.dependencies import get_district_service, get_state_service
from covid19_india.api.error_handlers import storage_boundary
from covid19_india.api.response_mapper import map_district_row, map_state_name_row, require_row
from covid19_india.api.schemas.district_schemas import DistrictPayload, DistrictResponse
from covid19_india.api.schemas.state_schemas import StateNameResponse
from covid19_india.api.services.district_service import DistrictService
from covid19_india.api.services.state_service import StateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/districts", tags=["districts"])
DistrictServiceDep = Annotated[DistrictService, Depends(get_district_service)]
StateServiceDep = Annotated[StateService, Depends(get_state_service)]

DISTRICT_ADDED_TEXT = "District Successfully Added"
DISTRICT_REMOVED_TEXT = "District Removed"
DISTRICT_UPDATED_TEXT = "District Details Updated"


def _body_values(payload: DistrictPayload | None) -> dict[str, object]:
    # An empty body binds every field as NULL.
    if payload is None:
        payload = DistrictPayload()
    return payload.model_dump()


@router.post("/", response_class=PlainTextResponse)
@router.post("", response_class=PlainTextResponse, include_in_schema=False)
def create_district(service: DistrictServiceDep, payload: DistrictPayload | None = None) -> str:
    with storage_boundary("create_district"):
        result = service.create_district(_body_values(payload))
    logger.debug("Inserted district_id=%s", result.lastrowid)
    return DISTRICT_ADDED_TEXT


@router.get("/{district_id}/", response_model=DistrictResponse)
@router.get("/{district_id}", response_model=DistrictResponse, include_in_schema=False)
def get_district(district_id: str, service: DistrictServiceDep) -> dict[str, object]:
    with storage_boundary("get_district"):
        return map_district_row(service.get_district(district_id))


@router.delete("/{district_id}/", response_class=PlainTextResponse)
@router.delete("/{district_id}", response_class=PlainTextResponse, include_in_schema=False)
def delete_district(district_id: str, service: DistrictServiceDep) -> str:
    with storage_boundary("delete_district"):
        service.delete_district(district_id)
    return DISTRICT_REMOVED_TEXT


@router.put("/{district_id}/", response_class=PlainTextResponse)
@router.put("/{district_id}", response_class=PlainTextResponse, include_in_schema=False)
def replace_district(
    district_id: str,
    service: DistrictServiceDep,
    payload: DistrictPayload | None = None,
) -> str:
    with storage_boundary("replace_district"):
        service.replace_district(district_id, _body_values(payload))
    return DISTRICT_UPDATED_TEXT


@router.get("/{district_id}/details/", response_model=StateNameResponse)
@router.get("/{district_id}/details", response_model=StateNameResponse, include_in_schema=False)
def get_district_details(
    district_id: str,
    district_service: DistrictServiceDep,
    state_service: StateServiceDep,
) -> dict[str, object]:
    with storage_boundary("get_district_details"):
        district_row = require_row(district_service.get_district_state_ref(district_id), "district")
        return map_state_name_row(state_service.get_state_name(district_row["state_id"]))
