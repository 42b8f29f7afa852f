"""
COVID-19 India API — State Service
====================================

What:  Read-only queries over the `state` table, plus the per-state case
       totals aggregated from the `district` table.
Who:   Called by the /states route handlers.

Queries:
    list_states:      SELECT * FROM state
    get_state:        SELECT * FROM state WHERE state_id = :id
    get_state_stats:  SELECT SUM(cases), SUM(cured), SUM(active), SUM(deaths)
                      FROM district WHERE state_id = :id
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from covid19_api.exceptions import DatabaseError
from covid19_api.models.district import District
from covid19_api.models.state import State
from covid19_api.schemas.state import StateResponse, StateStatsResponse

logger = logging.getLogger(__name__)


class StateService:
    """
    Query logic for state endpoints.

    Stateless: the session is passed into every call.
    """

    @staticmethod
    def _to_response(state: State) -> StateResponse:
        return StateResponse(
            state_id=state.state_id,
            state_name=state.state_name,
            population=state.population,
        )

    async def list_states(self, db: AsyncSession) -> List[StateResponse]:
        """
        Return every state row.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(State).order_by(State.state_id))
            states = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing states: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve states. Please try again.",
                context={"operation": "list_states", "error_type": type(e).__name__},
            )

        return [self._to_response(state) for state in states]

    async def get_state(self, db: AsyncSession, state_id: int) -> Optional[StateResponse]:
        """
        Return one state, or None when no row has this id.

        Why None (not an exception): a missing state is answered with an
        empty object and a 200, never a 404.
        """
        try:
            result = await db.execute(select(State).where(State.state_id == state_id))
            state = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching state %s: %s", state_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the state. Please try again.",
                context={"operation": "get_state", "state_id": state_id},
            )

        if state is None:
            logger.debug("State %s not found", state_id)
            return None
        return self._to_response(state)

    async def get_state_stats(self, db: AsyncSession, state_id: int) -> StateStatsResponse:
        """
        Sum the four case counters over the districts of one state.

        The aggregate always produces exactly one row. When no district
        matches, every SUM is NULL and the totals come back as None.
        """
        query = select(
            func.sum(District.cases).label("total_cases"),
            func.sum(District.cured).label("total_cured"),
            func.sum(District.active).label("total_active"),
            func.sum(District.deaths).label("total_deaths"),
        ).where(District.state_id == state_id)

        try:
            result = await db.execute(query)
            row = result.one()
        except SQLAlchemyError as e:
            logger.error("Database error aggregating stats for state %s: %s", state_id, str(e))
            raise DatabaseError(
                message="Could not retrieve state statistics. Please try again.",
                context={"operation": "get_state_stats", "state_id": state_id},
            )

        return StateStatsResponse(
            total_cases=row.total_cases,
            total_cured=row.total_cured,
            total_active=row.total_active,
            total_deaths=row.total_deaths,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
state_service = StateService()
