"""
COVID-19 India API — District SQLAlchemy Model
================================================

What:  ORM model representing the `district` table.
Who:   Used by DistrictService for create/read/update/delete, stats and details.

Table Design Notes:
    - district_id is an INTEGER PRIMARY KEY, so SQLite assigns it on insert
      (rowid alias).
    - state_id refers to state.state_id but carries no FOREIGN KEY
      constraint: districts may name a state that does not exist.
    - cases, cured, active and deaths are tracked independently. Nothing
      enforces cases == cured + active + deaths, and negative values are
      stored as given.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from covid19_api.database import Base


class District(Base):
    """A sub-region of a State tracking COVID-19 case counters."""

    __tablename__ = "district"

    district_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    district_name: Mapped[str | None] = mapped_column(Text)
    state_id: Mapped[int | None] = mapped_column(Integer)
    cases: Mapped[int | None] = mapped_column(Integer)
    cured: Mapped[int | None] = mapped_column(Integer)
    active: Mapped[int | None] = mapped_column(Integer)
    deaths: Mapped[int | None] = mapped_column(Integer)

    def __repr__(self) -> str:
        return (
            f"<District(district_id={self.district_id}, "
            f"district_name='{self.district_name}', state_id={self.state_id})>"
        )
