"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET / always returns 200 plain text if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from customer_api.infrastructure.database import get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "Service is up!"


@router.get("/", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness check."""
    return LIVENESS_MESSAGE


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness check — includes database connectivity."""
    manager = get_db_manager(request)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
