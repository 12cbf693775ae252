"""Readiness probes for the database and Redis.

Liveness lives at ``/health`` on the app itself and touches nothing.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])

ComponentStatus = Dict[str, Any]


def _health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)


@router.get("/", response_model=HealthCheckResponse)
async def readiness(service: HealthService = Depends(_health_service)):
    """Aggregate status.

    ``unhealthy`` means the database is unreachable. ``degraded`` means only
    Redis is down: requests are still served and rate limits are counted
    per process.
    """
    return await service.get_health_status()


@router.get("/database", response_model=ComponentStatus)
async def database_status(service: HealthService = Depends(_health_service)):
    """Round-trip a ``SELECT 1`` and report its latency."""
    return await service.check_database_health()


@router.get("/redis", response_model=ComponentStatus)
async def redis_status(service: HealthService = Depends(_health_service)):
    """PING the shared rate limit client; ``unavailable`` if it never connected."""
    return await service.check_redis_health()
