"""
COVID-19 India API — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 through the storage handle and reports the result.
Who:   Called by container health checks and monitoring systems.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from covid19_api import __version__
from covid19_api.database import Storage, get_storage
from covid19_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    response: Response,
    storage: Storage = Depends(get_storage),
) -> HealthResponse:
    """
    Check that the store still answers queries.

    Why SELECT 1: health checks run every few seconds; the probe must not
    touch the case tables.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await storage.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
