# This file tests the state endpoints against a fake service.
# It exists to protect the camelCase response shapes and the generic failure response.
# Real SQL behavior is covered separately by the SQLite integration tests.

from __future__ import annotations

from typing import Any

from tests.api.support import FakeDBClient, FakeStateService, api_test_client


class BrokenStateService:
    def list_states(self) -> list[dict[str, Any]]:
        raise RuntimeError("no such table: state")


def test_list_states_maps_rows_to_camel_case() -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=FakeStateService()) as client:
        response = client.get("/states/")

    assert response.status_code == 200
    assert response.json() == [
        {"stateId": 1, "stateName": "Andaman and Nicobar Islands", "population": 380581},
        {"stateId": 17, "stateName": "Kerala", "population": 33406061},
    ]


def test_get_state_returns_single_object() -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=FakeStateService()) as client:
        response = client.get("/states/17/")

    assert response.status_code == 200
    assert response.json() == {"stateId": 17, "stateName": "Kerala", "population": 33406061}


def test_get_missing_state_returns_generic_failure() -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=FakeStateService()) as client:
        response = client.get("/states/99/")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert response.headers["content-type"].startswith("text/plain")


def test_state_stats_passes_path_id_through_as_string() -> None:
    service = FakeStateService()
    with api_test_client(db_client=FakeDBClient(), state_service=service) as client:
        response = client.get("/states/17/stats/")

    assert response.status_code == 200
    assert response.json() == {"totalCases": 30, "totalCured": 20, "totalActive": 8, "totalDeaths": 2}
    assert service.stats_calls == ["17"]


def test_state_stats_without_districts_are_null() -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=FakeStateService()) as client:
        response = client.get("/states/abc/stats/")

    assert response.status_code == 200
    assert response.json() == {
        "totalCases": None,
        "totalCured": None,
        "totalActive": None,
        "totalDeaths": None,
    }


def test_storage_error_is_logged_and_hidden(caplog) -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=BrokenStateService()) as client:
        response = client.get("/states/")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert "no such table: state" in caplog.text


def test_state_paths_without_trailing_slash_do_not_redirect() -> None:
    with api_test_client(db_client=FakeDBClient(), state_service=FakeStateService()) as client:
        listed = client.get("/states", follow_redirects=False)
        single = client.get("/states/17", follow_redirects=False)
        stats = client.get("/states/17/stats", follow_redirects=False)

    assert [listed.status_code, single.status_code, stats.status_code] == [200, 200, 200]
    assert single.json() == {"stateId": 17, "stateName": "Kerala", "population": 33406061}
