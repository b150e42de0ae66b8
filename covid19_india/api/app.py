# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# Startup opens the shared storage handle once and refuses to serve if it is unreachable.
# The app adds request IDs, timing headers, and Prometheus request metrics.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from covid19_india.api.api_config import get_api_config
from covid19_india.api.dependencies import get_database_client
from covid19_india.api.error_handlers import register_error_handlers
from covid19_india.api.routers.districts import router as districts_router
from covid19_india.api.routers.health import router as health_router
from covid19_india.api.routers.states import router as states_router
from covid19_india.common.logging import configure_logging

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _route_label(request: Request) -> str:
    # Template path keeps label cardinality bounded across ids.
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    db_factory = app.dependency_overrides.get(get_database_client, get_database_client)
    db = db_factory()
    if not db.can_connect():
        logger.error("DB Error: storage is unreachable at startup")
        raise RuntimeError("Database is unreachable; refusing to start.")
    logger.info("Server is running")
    yield
    logger.info("Server shutting down")


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="CRUD endpoints over Indian states and their district COVID-19 case counts.",
        version=config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "states", "description": "State lookups and per-state case totals."},
            {"name": "districts", "description": "District case records and their state details."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                logger.info(
                    "%s %s -> %s in %.2fms [%s]",
                    request.method,
                    request.url.path,
                    response.status_code,
                    duration_ms,
                    request_id,
                )
            return response
        finally:
            path_label = _route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(time.perf_counter() - started)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(states_router)
    app.include_router(districts_router)

    return app


app = create_app()
