# This file implements read queries over the state table and the per-state district totals.
# It exists so routers can fetch rows without embedding SQL directly.
# Ids are bound exactly as received; storage affinity decides whether they match.

from __future__ import annotations

from typing import Any

from covid19_india.api.api_config import ApiConfig
from covid19_india.api.db_access import DatabaseClient


class StateService:
    """Data retrieval for state endpoints."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db
        self.state_table = self.config.validate_table_name(self.config.state_table_name)
        self.district_table = self.config.validate_table_name(self.config.district_table_name)

    def list_states(self) -> list[dict[str, Any]]:
        query = f"""
        SELECT state_id, state_name, population
        FROM {self.state_table}
        ORDER BY state_id
        """
        return self.db.fetch_all(query)

    def get_state(self, state_id: Any) -> dict[str, Any] | None:
        query = f"""
        SELECT state_id, state_name, population
        FROM {self.state_table}
        WHERE state_id = :state_id
        """
        return self.db.fetch_one(query, {"state_id": state_id})

    def get_state_name(self, state_id: Any) -> dict[str, Any] | None:
        query = f"""
        SELECT state_name
        FROM {self.state_table}
        WHERE state_id = :state_id
        """
        return self.db.fetch_one(query, {"state_id": state_id})

    def get_state_stats(self, state_id: Any) -> dict[str, Any] | None:
        query = f"""
        SELECT
            SUM(cases) AS total_cases,
            SUM(cured) AS total_cured,
            SUM(active) AS total_active,
            SUM(deaths) AS total_deaths
        FROM {self.district_table}
        WHERE state_id = :state_id
        """
        return self.db.fetch_one(query, {"state_id": state_id})
