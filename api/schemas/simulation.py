"""
Pydantic schemas for the /simulations endpoints.

These define the HTTP API contract, separate from models/job.py:
- JobSpec: one job in a request body
- SimulationRequest: jobs + which policies to run
- UploadRequest: raw job-file text, parsed by the same loader as the CLI
- SimulationResponse: one PolicyResult per requested policy

FastAPI validates incoming data against these automatically.
If someone sends duration=-1, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from models.enums import SchedulingPolicy


class JobSpec(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["A"])
    start_time: int = Field(default=0, ge=0, description="Earliest tick the job may run")
    duration: int = Field(..., ge=0, description="Time units of CPU the job needs")


class SimulationRequest(BaseModel):
    """Request body for POST /simulations/."""

    jobs: list[JobSpec]
    policies: list[SchedulingPolicy] = Field(
        default_factory=lambda: [SchedulingPolicy.FCFS, SchedulingPolicy.ROUND_ROBIN],
        min_length=1,
    )

    @field_validator("jobs")
    @classmethod
    def names_are_unique(cls, jobs: list[JobSpec]) -> list[JobSpec]:
        names = [job.name for job in jobs]
        if len(names) != len(set(names)):
            raise ValueError("job names must be unique")
        return jobs


class UploadRequest(BaseModel):
    """Request body for POST /simulations/upload — the contents of a job file."""

    content: str
    delimiter: Optional[str] = Field(default=None, min_length=1, max_length=1)


class JobResult(BaseModel):
    name: str
    start_time: int
    duration: int
    busy_ticks: list[int]
    chart: str                              # rendered line, e.g. "A  XXX"
    first_run: Optional[int] = None
    finished_at: Optional[int] = None
    waiting_time: Optional[int] = None
    turnaround_time: Optional[int] = None


class PolicyResult(BaseModel):
    policy: SchedulingPolicy
    label: str
    makespan: int
    avg_waiting_time: float
    avg_turnaround_time: float
    jobs: list[JobResult]


class SimulationResponse(BaseModel):
    results: list[PolicyResult]
    diagnostics: list[str] = Field(default_factory=list)  # lines skipped by the loader
