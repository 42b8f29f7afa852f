"""
COVID-19 India API — District Route Handlers
==============================================

What:  Handles district create/read/update/delete and the state-name lookup.
How:   Path ids and body counters are coerced by FastAPI; writes answer
       with a fixed plain-text confirmation instead of echoing the row.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from covid19_api.database import get_db_session
from covid19_api.schemas.common import EmptyObject, ErrorResponse
from covid19_api.schemas.district import (
    DistrictDetailsResponse,
    DistrictPayload,
    DistrictResponse,
)
from covid19_api.services.district_service import district_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Districts"])

DISTRICT_ADDED = "District Successfully Added"
DISTRICT_REMOVED = "District Removed"
DISTRICT_UPDATED = "District Details Updated"


@router.post(
    "/districts",
    response_class=PlainTextResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Add a district",
)
async def create_district(
    payload: DistrictPayload,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.create_district(db, payload)
    return DISTRICT_ADDED


@router.get(
    "/districts/{district_id}",
    response_model=Union[DistrictResponse, EmptyObject],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get a single district by ID",
    description="Returns the district, or an empty object when no district has this ID.",
)
async def get_district(
    district_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Union[DistrictResponse, EmptyObject]:
    district = await district_service.get_district(db, district_id)
    return district if district is not None else EmptyObject()


@router.delete(
    "/districts/{district_id}",
    response_class=PlainTextResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Remove a district",
)
async def delete_district(
    district_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.delete_district(db, district_id)
    return DISTRICT_REMOVED


@router.put(
    "/districts/{district_id}",
    response_class=PlainTextResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Replace a district's details",
)
async def update_district(
    district_id: int,
    payload: DistrictPayload,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.update_district(db, district_id, payload)
    return DISTRICT_UPDATED


@router.get(
    "/districts/{district_id}/details",
    response_model=Union[DistrictDetailsResponse, EmptyObject],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Name of the state a district belongs to",
)
async def get_district_details(
    district_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Union[DistrictDetailsResponse, EmptyObject]:
    details = await district_service.get_district_details(db, district_id)
    return details if details is not None else EmptyObject()
