# This file defines response schemas for the state endpoints.
# Every state response is a bare object; there is no envelope.
# Field values are passed through as stored, so they are typed Any.

from __future__ import annotations

from typing import Any

from covid19_india.api.schemas.common import CamelModel


class StateResponse(CamelModel):
    state_id: Any = None
    state_name: Any = None
    population: Any = None


class StateStatsResponse(CamelModel):
    total_cases: Any = None
    total_cured: Any = None
    total_active: Any = None
    total_deaths: Any = None


class StateNameResponse(CamelModel):
    state_name: Any = None
