# This file defines the single failure contract shared by every endpoint.
# It exists so all handlers answer failures with the same status and plain-text body.
# `storage_boundary` wraps a handler body, logs the underlying message, and re-raises as StorageFailure.
# The registered handlers then translate StorageFailure and anything unexpected into a 500 response.

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_TEXT = "Internal Server Error"
BAD_REQUEST_TEXT = "Bad Request"


class StorageFailure(Exception):
    """A handler's unit of storage work failed."""

    def __init__(self, *, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(message)


class RowNotFoundError(LookupError):
    """A storage read expected a row and got none."""


@contextmanager
def storage_boundary(operation: str) -> Iterator[None]:
    """Log any failure inside the block and re-raise it as StorageFailure."""

    try:
        yield
    except StorageFailure:
        raise
    except Exception as exc:
        logger.error("%s failed: %s", operation, exc)
        raise StorageFailure(operation=operation, message=str(exc)) from exc


def _internal_error() -> PlainTextResponse:
    return PlainTextResponse(INTERNAL_SERVER_ERROR_TEXT, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(StorageFailure)
    async def storage_failure_handler(request: Request, exc: StorageFailure) -> PlainTextResponse:
        return _internal_error()

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
        return PlainTextResponse(BAD_REQUEST_TEXT, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return _internal_error()
