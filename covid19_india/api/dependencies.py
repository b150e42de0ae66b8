# This file provides dependency factories for FastAPI routes and the app lifespan.
# It exists so the storage handle and services are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.

from __future__ import annotations

from functools import lru_cache

from covid19_india.api.api_config import ApiConfig, get_api_config
from covid19_india.api.db_access import DatabaseClient
from covid19_india.api.services.district_service import DistrictService
from covid19_india.api.services.state_service import StateService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_state_service() -> StateService:
    config = get_api_config()
    db_client = get_database_client()
    return StateService(config=config, db=db_client)


@lru_cache(maxsize=1)
def get_district_service() -> DistrictService:
    config = get_api_config()
    db_client = get_database_client()
    return DistrictService(config=config, db=db_client)


def get_config() -> ApiConfig:
    return get_api_config()
