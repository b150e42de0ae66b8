# This file converts raw storage rows into the camelCase shapes returned to clients.
# The functions rename fields only; the aggregate mapper extracts the four sums as they are.
# A missing row is a failure, never a partially-null object.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from covid19_india.api.error_handlers import RowNotFoundError

Row = Mapping[str, Any]


def require_row(row: Row | None, kind: str) -> Row:
    if row is None:
        raise RowNotFoundError(f"{kind} row not found")
    return row


def map_state_row(row: Row | None) -> dict[str, Any]:
    row = require_row(row, "state")
    return {
        "stateId": row["state_id"],
        "stateName": row["state_name"],
        "population": row["population"],
    }


def map_district_row(row: Row | None) -> dict[str, Any]:
    row = require_row(row, "district")
    return {
        "districtId": row["district_id"],
        "districtName": row["district_name"],
        "stateId": row["state_id"],
        "cases": row["cases"],
        "cured": row["cured"],
        "active": row["active"],
        "deaths": row["deaths"],
    }


def map_state_stats_row(row: Row | None) -> dict[str, Any]:
    """Map the four SUM columns; SQL yields NULL sums when no district matched."""

    row = require_row(row, "statistics")
    return {
        "totalCases": row["total_cases"],
        "totalCured": row["total_cured"],
        "totalActive": row["total_active"],
        "totalDeaths": row["total_deaths"],
    }


def map_state_name_row(row: Row | None) -> dict[str, Any]:
    row = require_row(row, "state")
    return {"stateName": row["state_name"]}
