# This file defines schema pieces shared by the state and district models.
# Fields are declared in snake_case and serialized with camelCase aliases.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
