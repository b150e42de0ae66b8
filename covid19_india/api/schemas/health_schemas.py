# This file defines response schemas for health, readiness, and version endpoints.
# It exists to keep operational status contracts explicit for platform consumers.
# The models include request tracing fields for observability.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    request_id: str
    db_connected: bool
    state_source_ready: bool
    district_source_ready: bool
    ready: bool
    database: str
    timestamp: datetime


class VersionResponse(BaseModel):
    request_id: str
    app_version: str
    git_commit: str | None = None
    project: str
    version: str
    timestamp: datetime
