"""
Health check router for liveness and readiness probes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorClient

from app.database.connections import get_mongo_client, ping

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(
    client: Optional[AsyncIOMotorClient] = Depends(get_mongo_client),
):
    """
    Readiness check that verifies the MongoDB connection.
    Always returns 200; the body reports "degraded" when MongoDB is unreachable.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        if client is None:
            raise RuntimeError("no MongoDB client")
        await ping(client)
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
