# This file provides shared helpers for API endpoint tests.
# It exists so tests can override service dependencies without touching a file database.
# The helpers build consistent config objects, in-memory SQLite clients, and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from covid19_india.api.api_config import ApiConfig
from covid19_india.api.app import app
from covid19_india.api.db_access import DatabaseClient
from covid19_india.api.dependencies import (
    get_config,
    get_database_client,
    get_district_service,
    get_state_service,
)
from covid19_india.api.services.district_service import DistrictService
from covid19_india.api.services.state_service import StateService
from covid19_india.storage.ddl import apply_storage_ddl


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test COVID-19 India API",
        host="127.0.0.1",
        port=3000,
        environment="test",
        database_url="sqlite://",
        enable_request_logging=False,
        allowed_origins=[],
        state_table_name="state",
        district_table_name="district",
        app_version="0.1.0",
        allowed_table_names={"state", "district"},
    )


class FakeDBClient:
    """Simple fake DB dependency for health/readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {"state", "district"}

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


class FakeStateService:
    """In-memory stand-in for StateService keyed by the raw path id string."""

    def __init__(self) -> None:
        self.states = {
            "1": {"state_id": 1, "state_name": "Andaman and Nicobar Islands", "population": 380581},
            "17": {"state_id": 17, "state_name": "Kerala", "population": 33406061},
        }
        self.stats_calls: list[str] = []

    def list_states(self) -> list[dict[str, Any]]:
        return list(self.states.values())

    def get_state(self, state_id: str) -> dict[str, Any] | None:
        return self.states.get(state_id)

    def get_state_name(self, state_id: Any) -> dict[str, Any] | None:
        row = self.states.get(str(state_id))
        return None if row is None else {"state_name": row["state_name"]}

    def get_state_stats(self, state_id: str) -> dict[str, Any] | None:
        self.stats_calls.append(state_id)
        if state_id == "17":
            return {"total_cases": 30, "total_cured": 20, "total_active": 8, "total_deaths": 2}
        return {"total_cases": None, "total_cured": None, "total_active": None, "total_deaths": None}


def build_sqlite_client(states: list[dict[str, Any]] | None = None) -> DatabaseClient:
    """In-memory SQLite client with both tables created and optional state rows."""

    db = DatabaseClient(database_url="sqlite://")
    apply_storage_ddl(db.engine)
    for state in states or []:
        db.execute(
            "INSERT INTO state (state_id, state_name, population) VALUES (:state_id, :state_name, :population)",
            state,
        )
    return db


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    state_service: Any | None = None,
    district_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
    if state_service is not None:
        app.dependency_overrides[get_state_service] = lambda: state_service
    if district_service is not None:
        app.dependency_overrides[get_district_service] = lambda: district_service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@contextmanager
def sqlite_test_client(db_client: DatabaseClient) -> Iterator[TestClient]:
    """TestClient whose services run real SQL against the given client."""

    config = build_test_config()
    with api_test_client(
        config=config,
        db_client=db_client,
        state_service=StateService(config=config, db=db_client),
        district_service=DistrictService(config=config, db=db_client),
    ) as client:
        yield client
