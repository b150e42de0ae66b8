# This file implements create, read, replace, and delete queries over the district table.
# It exists so routers can work with districts without embedding SQL directly.
# Each method issues exactly one statement; replace and delete succeed even when no row matches.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from covid19_india.api.api_config import ApiConfig
from covid19_india.api.db_access import DatabaseClient, ExecutionResult

DISTRICT_FIELDS: tuple[str, ...] = (
    "district_name",
    "state_id",
    "cases",
    "cured",
    "active",
    "deaths",
)


def _district_params(values: Mapping[str, Any]) -> dict[str, Any]:
    # Missing fields bind as NULL.
    return {field: values.get(field) for field in DISTRICT_FIELDS}


class DistrictService:
    """Data access for district endpoints."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db
        self.district_table = self.config.validate_table_name(self.config.district_table_name)

    def create_district(self, values: Mapping[str, Any]) -> ExecutionResult:
        query = f"""
        INSERT INTO {self.district_table} (district_name, state_id, cases, cured, active, deaths)
        VALUES (:district_name, :state_id, :cases, :cured, :active, :deaths)
        """
        return self.db.execute(query, _district_params(values))

    def get_district(self, district_id: Any) -> dict[str, Any] | None:
        query = f"""
        SELECT district_id, district_name, state_id, cases, cured, active, deaths
        FROM {self.district_table}
        WHERE district_id = :district_id
        """
        return self.db.fetch_one(query, {"district_id": district_id})

    def get_district_state_ref(self, district_id: Any) -> dict[str, Any] | None:
        query = f"""
        SELECT state_id
        FROM {self.district_table}
        WHERE district_id = :district_id
        """
        return self.db.fetch_one(query, {"district_id": district_id})

    def replace_district(self, district_id: Any, values: Mapping[str, Any]) -> ExecutionResult:
        query = f"""
        UPDATE {self.district_table}
        SET
            district_name = :district_name,
            state_id = :state_id,
            cases = :cases,
            cured = :cured,
            active = :active,
            deaths = :deaths
        WHERE district_id = :district_id
        """
        params = _district_params(values)
        params["district_id"] = district_id
        return self.db.execute(query, params)

    def delete_district(self, district_id: Any) -> ExecutionResult:
        query = f"DELETE FROM {self.district_table} WHERE district_id = :district_id"
        return self.db.execute(query, {"district_id": district_id})
