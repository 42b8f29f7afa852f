"""
COVID-19 India API — District Request/Response Schemas
========================================================

What:  Pydantic models for district request bodies and responses.
How:   camelCase aliases on the wire, snake_case column names in Python.

Input policy:
    Values are coerced to their declared types ("10" → 10) and nothing
    more. Negative counters, counters that do not add up, and state ids
    with no matching state are all accepted.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DistrictPayload(BaseModel):
    """
    What:  Body of POST /districts and PUT /districts/{id}.
    Why one model: an update replaces all six mutable columns, so create
    and update take exactly the same fields.
    """
    district_name: str = Field(description="District name")
    state_id: int = Field(description="Identifier of the owning state")
    cases: int = Field(description="Total confirmed cases")
    cured: int = Field(description="Recovered cases")
    active: int = Field(description="Currently active cases")
    deaths: int = Field(description="Deaths")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class DistrictResponse(BaseModel):
    """
    What:  One row of the `district` table.
    Who:   Returned by GET /districts/{id}.
    """
    district_id: int = Field(description="District identifier")
    district_name: Optional[str] = Field(description="District name")
    state_id: Optional[int] = Field(description="Identifier of the owning state")
    cases: Optional[int] = Field(description="Total confirmed cases")
    cured: Optional[int] = Field(description="Recovered cases")
    active: Optional[int] = Field(description="Currently active cases")
    deaths: Optional[int] = Field(description="Deaths")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class DistrictDetailsResponse(BaseModel):
    """
    What:  Name of the state a district belongs to.
    Who:   Returned by GET /districts/{id}/details.
    """
    state_name: Optional[str] = Field(description="Name of the owning state")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
