"""
COVID-19 India API — State Route Handlers
===========================================

What:  Handles GET /states/, GET /states/{state_id} and
       GET /states/{state_id}/stats.
How:   Coerces the path id to int, delegates to StateService, returns JSON.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from covid19_api.database import get_db_session
from covid19_api.schemas.common import EmptyObject, ErrorResponse
from covid19_api.schemas.state import StateResponse, StateStatsResponse
from covid19_api.services.state_service import state_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["States"])


@router.get(
    "/states/",
    response_model=List[StateResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all states",
)
async def list_states(
    db: AsyncSession = Depends(get_db_session),
) -> List[StateResponse]:
    return await state_service.list_states(db)


@router.get(
    "/states/{state_id}",
    response_model=Union[StateResponse, EmptyObject],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get a single state by ID",
    description="Returns the state, or an empty object when no state has this ID.",
)
async def get_state(
    state_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Union[StateResponse, EmptyObject]:
    state = await state_service.get_state(db, state_id)
    return state if state is not None else EmptyObject()


@router.get(
    "/states/{state_id}/stats",
    response_model=StateStatsResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Aggregated case counters of a state",
    description=(
        "Sums cases, cured, active and deaths over every district of the state. "
        "All totals are null when the state has no districts."
    ),
)
async def get_state_stats(
    state_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> StateStatsResponse:
    return await state_service.get_state_stats(db, state_id)
