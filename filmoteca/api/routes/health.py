"""Health Routes — service status and catalog-store reachability for Filmoteca.

Invariants:
    - GET /health reports service name and package version with 200 and never touches the store
    - GET /health/ready answers 200 only when app.state holds a session manager
      whose SELECT 1 succeeds; otherwise 503 with reason "database_unavailable"
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from filmoteca import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Service name and version; 200 while the process is up."""
    return {
        "status": "healthy",
        "service": "filmoteca-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Ping the catalog store through the app-owned session manager."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
