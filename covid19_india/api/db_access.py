# This file wraps database access so API services can run parameterized SQL safely.
# It exists to keep SQL execution details out of router code and make testing easier.
# Every call runs exactly one statement and lets driver errors propagate unchanged.
# For SQLite the client holds a single shared connection for the whole process lifetime.
# Handlers run in a thread pool, so each use of that connection holds a lock until it is returned.

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a write statement."""

    rowcount: int
    lastrowid: int | None = None


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    return create_engine(database_url, pool_pre_ping=True, future=True)


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        self._engine: Engine = build_engine(database_url)
        self._lock: AbstractContextManager[Any] = (
            threading.Lock() if database_url.startswith("sqlite") else nullcontext()
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        with self._lock, self._engine.connect() as connection:
            yield connection

    @contextmanager
    def _begin(self) -> Iterator[Connection]:
        with self._lock, self._engine.begin() as connection:
            yield connection

    def can_connect(self) -> bool:
        try:
            with self._connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        with self._connect() as connection:
            return inspect(connection).has_table(table_name)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> ExecutionResult:
        with self._begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return ExecutionResult(rowcount=result.rowcount, lastrowid=result.lastrowid)

    def dispose(self) -> None:
        self._engine.dispose()
