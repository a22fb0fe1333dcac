"""
Simulation endpoint.

POST /simulations → run a workload through the scheduler and return the timings

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Hand the workload to the simulator
- Return the response

Each request gets its own scheduler, so concurrent requests never share state.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_settings
from api.schemas.simulation import (
    JobOutcomeResponse,
    SimulationRequest,
    SimulationResponse,
)
from config.settings import Settings
from models.errors import SchedulerError
from simulator.runner import simulate
from simulator.workload import JobSpec

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
def run_simulation(
    request: SimulationRequest,
    config: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Simulate the submitted workload.

    Declared as a plain `def` on purpose: the simulation is CPU-bound, so
    FastAPI runs it in its threadpool instead of blocking the event loop.
    """
    if len(request.jobs) > config.MAX_JOBS_PER_SIMULATION:
        raise HTTPException(
            status_code=413,
            detail=f"At most {config.MAX_JOBS_PER_SIMULATION} jobs per simulation",
        )

    try:
        jobs = [
            JobSpec(
                job_id=job.job_id if job.job_id is not None else index,
                arrival_time=job.arrival_time,
                burst_time=job.burst_time,
                priority=job.priority,
            )
            for index, job in enumerate(request.jobs)
        ]
        quantum = request.quantum if request.quantum is not None else config.ROUND_ROBIN_TIME_QUANTUM
        result = simulate(jobs, request.num_cores, request.scheme, quantum)
    except SchedulerError as e:
        logger.warning(f"Rejected simulation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return SimulationResponse(
        scheme=result.scheme,
        num_cores=result.num_cores,
        quantum=result.quantum,
        jobs=[
            JobOutcomeResponse(
                job_id=o.job_id,
                arrival_time=o.arrival_time,
                burst_time=o.burst_time,
                priority=o.priority,
                first_start_time=o.first_start_time,
                finish_time=o.finish_time,
                waiting_time=o.waiting_time,
                response_time=o.response_time,
                turnaround_time=o.turnaround_time,
            )
            for o in result.outcomes
        ],
        average_waiting_time=result.average_waiting_time,
        average_turnaround_time=result.average_turnaround_time,
        average_response_time=result.average_response_time,
        makespan=result.makespan,
    )
