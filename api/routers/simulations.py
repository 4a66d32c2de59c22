"""
Simulation endpoints.

POST /simulations/        → Simulate a JSON list of jobs under the requested policies
POST /simulations/upload  → Simulate the raw text of a job file (same format as the CLI)

Both endpoints are stateless: every request loads its own jobs, runs
the simulations and returns the results. Nothing is stored.
"""

import io
import logging

from fastapi import APIRouter

from api.schemas.simulation import (
    JobResult,
    PolicyResult,
    SimulationRequest,
    SimulationResponse,
    UploadRequest,
)
from jobs.loader import parse_records
from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.base import ScheduleResult
from scheduler.gantt import render_lines, section_label
from scheduler.registry import DEFAULT_POLICIES, create_scheduler

router = APIRouter(prefix="/simulations", tags=["simulations"])
logger = logging.getLogger(__name__)


def _to_policy_result(result: ScheduleResult) -> PolicyResult:
    lines = render_lines(result)
    return PolicyResult(
        policy=result.policy,
        label=section_label(result.policy),
        makespan=result.makespan,
        avg_waiting_time=result.average_waiting_time(),
        avg_turnaround_time=result.average_turnaround_time(),
        jobs=[
            JobResult(
                name=t.name,
                start_time=t.job.start_time,
                duration=t.job.duration,
                busy_ticks=t.busy_ticks,
                chart=line,
                first_run=t.first_run,
                finished_at=t.finished_at,
                waiting_time=t.waiting_time,
                turnaround_time=t.turnaround_time,
            )
            for t, line in zip(result.timelines, lines)
        ],
    )


def _simulate(jobs: list[Job], policies: list[SchedulingPolicy]) -> list[PolicyResult]:
    results = [create_scheduler(policy).simulate(jobs) for policy in policies]
    logger.info(f"Simulated {len(jobs)} jobs under {[p.value for p in policies]}")
    return [_to_policy_result(r) for r in results]


@router.post("/", response_model=SimulationResponse)
async def simulate_jobs(request: SimulationRequest) -> SimulationResponse:
    """Run each requested policy over the same job list, in request order."""
    jobs = [
        Job(name=item.name, start_time=item.start_time, duration=item.duration)
        for item in request.jobs
    ]
    return SimulationResponse(results=_simulate(jobs, request.policies))


@router.post("/upload", response_model=SimulationResponse)
async def simulate_upload(request: UploadRequest) -> SimulationResponse:
    """
    Parse a job file's contents and run FCFS then Round Robin.

    Bad lines are skipped exactly like the CLI does; their diagnostics
    come back in the `diagnostics` field instead of on stdout.
    """
    out = io.StringIO()
    jobs = parse_records(
        request.content.splitlines(),
        delimiter=request.delimiter,
        out=out,
    )
    diagnostics = out.getvalue().splitlines()
    return SimulationResponse(
        results=_simulate(jobs, list(DEFAULT_POLICIES)),
        diagnostics=diagnostics,
    )
