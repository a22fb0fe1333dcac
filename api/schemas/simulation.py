"""
Pydantic schemas for the /simulations endpoint.

These define the HTTP API contract, not the scheduler's internal types:
- JobIn: one job in the submitted workload (request body)
- SimulationRequest: cores, scheme, quantum and the workload
- JobOutcomeResponse: per-job timings (response body)
- SimulationResponse: per-job timings plus the averages

FastAPI validates incoming data against these automatically.
If someone sends num_cores=0, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from models.enums import SchedulingScheme


class JobIn(BaseModel):
    job_id: Optional[int] = Field(
        default=None,
        description=(
            "Unique id; defaults to the job's position in the list. "
            "Either every job gives an id or none does"
        ),
    )
    arrival_time: float = Field(..., ge=0, allow_inf_nan=False)
    burst_time: float = Field(..., gt=0, allow_inf_nan=False)
    priority: int = Field(default=0, description="Lower value = higher priority")


class SimulationRequest(BaseModel):
    num_cores: int = Field(default=1, ge=1)
    scheme: SchedulingScheme = SchedulingScheme.FCFS
    quantum: Optional[float] = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Round Robin time slice; ignored by other schemes",
    )
    jobs: list[JobIn] = Field(..., min_length=1)

    @model_validator(mode="after")
    def ids_all_given_or_all_omitted(self):
        given = [job.job_id is not None for job in self.jobs]
        if any(given) and not all(given):
            raise ValueError("job_id must be given for every job or for none")
        return self


class JobOutcomeResponse(BaseModel):
    job_id: int
    arrival_time: float
    burst_time: float
    priority: int
    first_start_time: float
    finish_time: float
    waiting_time: float
    response_time: float
    turnaround_time: float


class SimulationResponse(BaseModel):
    scheme: SchedulingScheme
    num_cores: int
    quantum: Optional[float] = None
    jobs: list[JobOutcomeResponse]
    average_waiting_time: float
    average_turnaround_time: float
    average_response_time: float
    makespan: float
