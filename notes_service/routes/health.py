"""
Notes Service - Health Check Route
==================================

What:  Liveness endpoint for process supervisors and load balancer probes.
How:   Returns a fixed "ok" status with the current server time. It touches
       no dependencies: if the process can answer, it is up.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from notes_service import __version__
from notes_service.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
