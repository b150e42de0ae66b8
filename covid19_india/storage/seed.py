"""Load state and district reference data from CSV files into storage."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd
from sqlalchemy import text
from sqlalchemy.engine import Engine

from covid19_india.api.db_access import build_engine
from covid19_india.common.logging import configure_logging
from covid19_india.common.settings import get_settings
from covid19_india.storage.ddl import apply_storage_ddl

logger = logging.getLogger(__name__)

SEED_DIR = Path(__file__).resolve().parents[2] / "data" / "seed"
STATE_FILE = SEED_DIR / "state.csv"
DISTRICT_FILE = SEED_DIR / "district.csv"

STATE_COLUMN_MAP = {
    "State Code": "state_id",
    "State": "state_name",
    "Population": "population",
}
DISTRICT_COLUMN_MAP = {
    "District Code": "district_id",
    "District": "district_name",
    "State Code": "state_id",
    "Confirmed": "cases",
    "Recovered": "cured",
    "Active": "active",
    "Deceased": "deaths",
}

STATE_COLUMNS = ["state_id", "state_name", "population"]
DISTRICT_COLUMNS = ["district_id", "district_name", "state_id", "cases", "cured", "active", "deaths"]
DISTRICT_COUNT_COLUMNS = ["cases", "cured", "active", "deaths"]

STATE_UPSERT_SQL = """
INSERT INTO state (state_id, state_name, population)
VALUES (:state_id, :state_name, :population)
ON CONFLICT (state_id)
DO UPDATE SET
    state_name = excluded.state_name,
    population = excluded.population
"""

DISTRICT_UPSERT_SQL = """
INSERT INTO district (district_id, district_name, state_id, cases, cured, active, deaths)
VALUES (:district_id, :district_name, :state_id, :cases, :cured, :active, :deaths)
ON CONFLICT (district_id)
DO UPDATE SET
    district_name = excluded.district_name,
    state_id = excluded.state_id,
    cases = excluded.cases,
    cured = excluded.cured,
    active = excluded.active,
    deaths = excluded.deaths
"""


def _optional_int(value: Any) -> int | None:
    return None if pd.isna(value) else int(value)


def _read_frame(path: Path, column_map: dict[str, str], columns: list[str], required: list[str]) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    frame = pd.read_csv(path).rename(columns=column_map)
    missing_columns = [column for column in columns if column not in frame.columns]
    if missing_columns:
        raise RuntimeError(f"Missing required columns in {path.name}: {missing_columns}")

    frame = frame[columns].copy()
    for column in required:
        if column.endswith("_id"):
            frame[column] = pd.to_numeric(frame[column], errors="coerce").astype("Int64")
    dropped = frame[required].isna().any(axis=1)
    if dropped.any():
        logger.warning("Dropping %d incomplete rows from %s", int(dropped.sum()), path.name)
    return frame.loc[~dropped].drop_duplicates(subset=[required[0]], keep="last")


def read_state_records(path: Path = STATE_FILE) -> list[dict[str, Any]]:
    frame = _read_frame(path, STATE_COLUMN_MAP, STATE_COLUMNS, ["state_id", "state_name"])
    return [
        {
            "state_id": int(row.state_id),
            "state_name": str(row.state_name),
            "population": _optional_int(pd.to_numeric(row.population, errors="coerce")),
        }
        for row in frame.itertuples(index=False)
    ]


def read_district_records(path: Path = DISTRICT_FILE) -> list[dict[str, Any]]:
    frame = _read_frame(path, DISTRICT_COLUMN_MAP, DISTRICT_COLUMNS, ["district_id", "district_name", "state_id"])
    for column in DISTRICT_COUNT_COLUMNS:
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    return [
        {
            "district_id": int(row.district_id),
            "district_name": str(row.district_name),
            "state_id": int(row.state_id),
            **{column: _optional_int(getattr(row, column)) for column in DISTRICT_COUNT_COLUMNS},
        }
        for row in frame.itertuples(index=False)
    ]


def load_seed_data(
    engine: Engine,
    *,
    state_file: Path = STATE_FILE,
    district_file: Path = DISTRICT_FILE,
    ddl_dir: Path | None = None,
) -> dict[str, int]:
    """Create tables if needed, upsert seed rows, and return the resulting row counts."""

    apply_storage_ddl(engine, ddl_dir)
    state_records = read_state_records(state_file)
    district_records = read_district_records(district_file)

    with engine.begin() as connection:
        for record in state_records:
            connection.execute(text(STATE_UPSERT_SQL), record)
        for record in district_records:
            connection.execute(text(DISTRICT_UPSERT_SQL), record)

        state_rows = connection.execute(text("SELECT COUNT(*) FROM state")).scalar_one()
        district_rows = connection.execute(text("SELECT COUNT(*) FROM district")).scalar_one()

    result = {
        "state_records_loaded": len(state_records),
        "district_records_loaded": len(district_records),
        "state_rows": int(state_rows),
        "district_rows": int(district_rows),
    }
    logger.info("Seed load complete: %s", result)
    return result


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create and seed the state and district tables")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL; defaults to DATABASE_URL")
    parser.add_argument("--state-file", type=Path, default=STATE_FILE)
    parser.add_argument("--district-file", type=Path, default=DISTRICT_FILE)
    return parser.parse_args()


def main() -> None:
    configure_logging()
    args = parse_args()
    engine = build_engine(args.database_url or get_settings().DATABASE_URL)
    try:
        result = load_seed_data(engine, state_file=args.state_file, district_file=args.district_file)
    finally:
        engine.dispose()
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
