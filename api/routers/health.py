"""
Health check endpoint.

This is the first thing you hit to verify the API is running.
The simulator is in-process and stateless, so there are no
downstream connections to check.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
