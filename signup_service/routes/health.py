"""
Sign-Up Service — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings MongoDB through the application's MongoConnection.

Status levels:
    - healthy:   MongoDB answers the ping (HTTP 200)
    - unhealthy: MongoDB unreachable (HTTP 503); sign-ups would fail
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from signup_service import __version__
from signup_service.middleware.request_id import request_id_var
from signup_service.schemas.account import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "MongoDB unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request) -> JSONResponse:
    connection = request.app.state.mongo

    if await connection.ping():
        db_status, overall, status_code = "connected", "healthy", 200
    else:
        db_status, overall, status_code = "disconnected", "unhealthy", 503
        logger.warning("Health check: MongoDB unreachable")

    health = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
        request_id=request_id_var.get("") or None,
    )
    return JSONResponse(status_code=status_code, content=health.model_dump())
