"""Health Routes — liveness and database readiness, both public.

Invariants:
    - GET /health/ answers 200 whenever the process serves requests
    - GET /health/ready answers 503 until db_manager exists and SELECT 1 succeeds
    - db_manager is read at call time (lifespan assigns it after import)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import wasaphoto.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "wasaphoto-api"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    manager = database.db_manager
    if manager is None:
        logger.warning("Readiness requested before database init")
        database_ok = False
    else:
        database_ok = await manager.health_check()

    checks = {"database": "healthy" if database_ok else "unavailable"}
    if not database_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
