"""
COVID-19 India API — District Service
=======================================

What:  Create/read/update/delete for the `district` table and the
       district → state name lookup.
Who:   Called by the /districts route handlers.

Every statement binds its values as parameters. A district name such as
"O'Brien'); DROP TABLE district; --" is stored as exactly that text.

Writes commit inside the service call so the row is durable before the
route answers; the session dependency's own commit is then a no-op.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from covid19_api.exceptions import DatabaseError
from covid19_api.models.district import District
from covid19_api.models.state import State
from covid19_api.schemas.district import (
    DistrictDetailsResponse,
    DistrictPayload,
    DistrictResponse,
)

logger = logging.getLogger(__name__)


class DistrictService:
    """
    Query logic for district endpoints.

    None of the write methods check that the target row or the referenced
    state exists: deleting or updating a missing id affects zero rows and
    still succeeds.
    """

    async def create_district(self, db: AsyncSession, payload: DistrictPayload) -> Optional[int]:
        """
        Insert one district and return the id SQLite assigned to it.

        The id is only logged; the route does not echo it to the client.
        """
        district = District(**payload.model_dump())
        try:
            db.add(district)
            await db.flush()  # Emits the INSERT and assigns district_id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating district: %s", str(e))
            raise DatabaseError(
                message="Could not add the district. Please try again.",
                context={"operation": "create_district", "error_type": type(e).__name__},
            )

        logger.info("District created: %s (state_id=%s)", district.district_id, payload.state_id)
        return district.district_id

    async def get_district(self, db: AsyncSession, district_id: int) -> Optional[DistrictResponse]:
        """Return one district, or None when no row has this id."""
        try:
            result = await db.execute(
                select(District).where(District.district_id == district_id)
            )
            district = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching district %s: %s", district_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the district. Please try again.",
                context={"operation": "get_district", "district_id": district_id},
            )

        if district is None:
            logger.debug("District %s not found", district_id)
            return None

        return DistrictResponse(
            district_id=district.district_id,
            district_name=district.district_name,
            state_id=district.state_id,
            cases=district.cases,
            cured=district.cured,
            active=district.active,
            deaths=district.deaths,
        )

    async def update_district(
        self,
        db: AsyncSession,
        district_id: int,
        payload: DistrictPayload,
    ) -> int:
        """
        Replace all six mutable columns of one district.

        Returns:
            Number of rows matched (0 or 1)
        """
        try:
            result = await db.execute(
                update(District)
                .where(District.district_id == district_id)
                .values(**payload.model_dump())
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating district %s: %s", district_id, str(e))
            raise DatabaseError(
                message="Could not update the district. Please try again.",
                context={"operation": "update_district", "district_id": district_id},
            )

        logger.info("District %s updated (%d row(s))", district_id, result.rowcount)
        return result.rowcount

    async def delete_district(self, db: AsyncSession, district_id: int) -> int:
        """
        Delete one district by id.

        Returns:
            Number of rows deleted (0 or 1)
        """
        try:
            result = await db.execute(
                delete(District).where(District.district_id == district_id)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting district %s: %s", district_id, str(e))
            raise DatabaseError(
                message="Could not remove the district. Please try again.",
                context={"operation": "delete_district", "district_id": district_id},
            )

        logger.info("District %s removed (%d row(s))", district_id, result.rowcount)
        return result.rowcount

    async def get_district_details(
        self,
        db: AsyncSession,
        district_id: int,
    ) -> Optional[DistrictDetailsResponse]:
        """
        Look up the name of the state a district belongs to.

        Query:
            SELECT DISTINCT state.state_name
            FROM state JOIN district ON state.state_id = district.state_id
            WHERE district.district_id = :id

        Returns None when the district does not exist or names a state
        that is not in the `state` table.
        """
        query = (
            select(State.state_name)
            .distinct()
            .join(District, State.state_id == District.state_id)
            .where(District.district_id == district_id)
        )

        try:
            result = await db.execute(query)
            row = result.first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching details for district %s: %s", district_id, str(e))
            raise DatabaseError(
                message="Could not retrieve district details. Please try again.",
                context={"operation": "get_district_details", "district_id": district_id},
            )

        if row is None:
            return None
        return DistrictDetailsResponse(state_name=row.state_name)


# ── Singleton Instance ────────────────────────────────────────────────────
district_service = DistrictService()
