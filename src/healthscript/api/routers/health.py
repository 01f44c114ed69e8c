"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...core.config import get_settings
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    service: str


@router.get("/", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    settings = get_settings()
    return ok(request, data=HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        service=settings.app_name,
    ), message="OK")


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness_check(request: Request):
    """
    Readiness check endpoint.

    Pings MongoDB and reports each dependency. The response is always 200;
    ``data.ready`` tells whether every check passed.
    """
    from motor.motor_asyncio import AsyncIOMotorClient

    settings = get_settings()
    checks = {}
    try:
        client = AsyncIOMotorClient(
            settings.database.uri,
            serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
        )
        try:
            await client.admin.command("ping")
        finally:
            client.close()
        checks["database"] = "ok"
    except Exception as e:
        checks["database"] = f"error: {str(e)[:50]}"

    all_ok = all(v == "ok" for v in checks.values())
    return ok(
        request,
        data={"ready": all_ok, "checks": checks},
        message="READY" if all_ok else "NOT_READY",
    )


@router.get("/live", response_model=ApiResponse[dict])
async def liveness_check(request: Request):
    """Liveness check: the process is up and serving requests."""
    return ok(request, data={"alive": True}, message="ALIVE")
