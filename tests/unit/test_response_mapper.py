"""
Unit tests for the row-to-response mappers.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

import pytest

from covid19_india.api.error_handlers import RowNotFoundError
from covid19_india.api.response_mapper import (
    map_district_row,
    map_state_name_row,
    map_state_row,
    map_state_stats_row,
)


def test_map_state_row_renames_fields() -> None:
    row = {"state_id": 17, "state_name": "Kerala", "population": 33406061}
    assert map_state_row(row) == {"stateId": 17, "stateName": "Kerala", "population": 33406061}


def test_map_district_row_renames_all_seven_fields() -> None:
    row = {
        "district_id": 3,
        "district_name": "Anantapur",
        "state_id": 2,
        "cases": 80214,
        "cured": 75462,
        "active": 4339,
        "deaths": 413,
    }
    assert map_district_row(row) == {
        "districtId": 3,
        "districtName": "Anantapur",
        "stateId": 2,
        "cases": 80214,
        "cured": 75462,
        "active": 4339,
        "deaths": 413,
    }


def test_map_state_stats_row_keeps_null_sums() -> None:
    row = {"total_cases": None, "total_cured": None, "total_active": None, "total_deaths": None}
    assert map_state_stats_row(row) == {
        "totalCases": None,
        "totalCured": None,
        "totalActive": None,
        "totalDeaths": None,
    }


def test_map_state_name_row() -> None:
    assert map_state_name_row({"state_name": "Kerala"}) == {"stateName": "Kerala"}


@pytest.mark.parametrize(
    "mapper",
    [map_state_row, map_district_row, map_state_stats_row, map_state_name_row],
)
def test_missing_row_is_a_failure(mapper) -> None:
    with pytest.raises(RowNotFoundError):
        mapper(None)
