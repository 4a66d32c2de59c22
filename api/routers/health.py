"""
Health check endpoint.

This is the first thing you hit to verify the API is running.
There is no database or cache behind the simulator, so it only reports
which scheduling policies the server can run.
"""

from fastapi import APIRouter

from models.enums import SchedulingPolicy

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {
        "status": "healthy",
        "policies": [policy.value for policy in SchedulingPolicy],
    }
