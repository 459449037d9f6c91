"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
import platform
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_order_repository
from core.domain.repositories.order_repository import OrderRepository
from core.settings import get_app_settings


router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "order-service",
        "version": "1.0.0",
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(repository: OrderRepository = Depends(get_order_repository)):
    """
    Readiness check endpoint.

    Probes the order store with a cheap existence lookup.
    """
    settings = get_app_settings()
    await repository.exists("readiness-probe")

    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "api": "ok",
            "database": settings.database.backend,
            "messaging": "redis" if settings.messaging.enabled else "log",
        },
    }
