"""
Scheduler introspection endpoints.

GET /scheduler/schemes → the policy table: every scheme with its preemptive flag
"""

from fastapi import APIRouter

from api.schemas.scheduler import SchemeInfo
from scheduler.registry import available_schemes

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/schemes", response_model=list[SchemeInfo])
async def list_schemes() -> list[SchemeInfo]:
    """List every supported scheduling scheme."""
    return [
        SchemeInfo(
            scheme=policy.scheme,
            preemptive=policy.preemptive,
            uses_quantum=policy.uses_quantum,
        )
        for policy in available_schemes()
    ]
