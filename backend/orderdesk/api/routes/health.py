"""Health & Readiness: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if no order repository is available (readiness)
    - Readiness sees the same repository the order routes are served from
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from orderdesk.config import Settings, get_settings
from orderdesk.core.repository_protocols import OrderRepository
from orderdesk.infrastructure.order_store import get_order_repository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "order-desk-api",
        "version": settings.version,
    }


@router.get("/ready")
async def readiness_check(
    repository: OrderRepository | None = Depends(get_order_repository),
):
    """Readiness: order repository must be available."""
    if repository is None:
        logger.warning("Readiness check failed: order store not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "order_store_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"order_store": "healthy"},
        "orders": await repository.count(),
    }
