"""
COVID-19 India API — State Request/Response Schemas
=====================================================

What:  Pydantic models defining the JSON shape of state data.
How:   Field names follow the `state` table columns; the alias generator
       turns them into the camelCase keys clients see (state_id → stateId).

Every field of a response model is required (nullable, but present) so a
row can never be confused with the empty object returned for a miss.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class StateResponse(BaseModel):
    """
    What:  One row of the `state` table.
    Who:   Returned by GET /states/ (as array items) and GET /states/{id}.
    """
    state_id: int = Field(description="State identifier")
    state_name: Optional[str] = Field(description="State name")
    population: Optional[int] = Field(description="State population")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class StateStatsResponse(BaseModel):
    """
    What:  Case counters summed over every district of one state.
    Who:   Returned by GET /states/{id}/stats.

    A state without districts yields null for all four totals: SQL SUM over
    an empty set is NULL and the value is passed through unchanged.
    """
    total_cases: Optional[int] = Field(description="SUM(cases)")
    total_cured: Optional[int] = Field(description="SUM(cured)")
    total_active: Optional[int] = Field(description="SUM(active)")
    total_deaths: Optional[int] = Field(description="SUM(deaths)")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
