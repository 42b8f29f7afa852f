"""
COVID-19 India API — Shared Response Schemas
=============================================

What:  Response models that are not tied to one resource.
Who:   Used by route handlers and the global exception handlers in main.py.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class EmptyObject(BaseModel):
    """
    What:  The `{}` payload returned when a lookup matches no row.
    Why:   Missing states and districts are not errors; clients receive a
           200 with an object that has no fields.

    extra="forbid" keeps this model from swallowing a populated row when it
    sits in a Union with a real response model.
    """

    model_config = {"extra": "forbid"}


class ErrorResponse(BaseModel):
    """
    What:  Error body produced by the global exception handlers.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
