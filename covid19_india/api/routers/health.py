# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that both tables exist.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from covid19_india.api.api_config import ApiConfig
from covid19_india.api.db_access import DatabaseClient
from covid19_india.api.dependencies import get_config, get_database_client
from covid19_india.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, config: ConfigDep, db: DBDep) -> dict[str, object]:
    db_connected = db.can_connect()
    state_source_ready = db_connected and db.table_exists(config.state_table_name)
    district_source_ready = db_connected and db.table_exists(config.district_table_name)

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "state_source_ready": state_source_ready,
        "district_source_ready": district_source_ready,
        "ready": db_connected and state_source_ready and district_source_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
