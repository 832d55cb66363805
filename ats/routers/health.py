"""Health check endpoint.

Returns service status including database connectivity and whether the
n8n webhook is configured.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from ats.dependencies import Services, get_services

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(services: Services = Depends(get_services)) -> Any:
    """Return health status with a real Supabase connectivity test.

    Returns 200 OK when healthy, 503 when the database is down.
    """
    db_status = "disconnected"
    try:
        services.candidate_store.ping()
        db_status = "connected"
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "workflow": "configured" if services.notifier.configured else "not_configured",
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
