# This file defines request and response schemas for the district endpoints.
# The request body accepts any JSON values; storage decides whether they are acceptable.

from __future__ import annotations

from typing import Any

from covid19_india.api.schemas.common import CamelModel


class DistrictPayload(CamelModel):
    """Full district body for create and replace; absent fields stay None."""

    district_name: Any = None
    state_id: Any = None
    cases: Any = None
    cured: Any = None
    active: Any = None
    deaths: Any = None


class DistrictResponse(CamelModel):
    # Values come back exactly as storage holds them.
    district_id: Any = None
    district_name: Any = None
    state_id: Any = None
    cases: Any = None
    cured: Any = None
    active: Any = None
    deaths: Any = None
