"""
COVID-19 India API — State SQLAlchemy Model
=============================================

What:  ORM model representing the `state` table.
Why:   Maps rows to Python objects so every query is built with bound
       parameters instead of interpolated SQL text.
Who:   Queried by StateService; joined by DistrictService for details.

States are seeded outside this service and are read-only through the API.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from covid19_api.database import Base


class State(Base):
    """A top-level administrative region with a name and population."""

    __tablename__ = "state"

    state_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    state_name: Mapped[str | None] = mapped_column(Text)
    population: Mapped[int | None] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<State(state_id={self.state_id}, state_name='{self.state_name}')>"
