"""
First Come First Served (FCFS) simulation.

The simplest scheduling policy: jobs run in the order they were loaded,
each one to completion, with no interruption.

    current_time = 0
    for each job (file order, NOT sorted by start time):
        actual_start = max(current_time, job.start_time)   # idle if not arrived yet
        job runs during [actual_start, actual_start + duration)
        current_time = actual_start + duration

Single pass, O(n). Only duration is used — remaining_time is never
read or written, which is why FCFS can share the loaded job list.

Downside: a long-running job blocks everything behind it.
This is called the "convoy effect".
"""

import logging

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.base import AbstractScheduler, JobTimeline, ScheduleResult

logger = logging.getLogger(__name__)


class FCFSScheduler(AbstractScheduler):

    def simulate(self, jobs: list[Job]) -> ScheduleResult:
        current_time = 0
        timelines: list[JobTimeline] = []

        for job in jobs:
            actual_start = max(current_time, job.start_time)
            timeline = JobTimeline(job=job)
            timeline.pad_to(actual_start)
            for tick in range(actual_start, actual_start + job.duration):
                timeline.mark(tick)
            current_time = actual_start + job.duration
            timelines.append(timeline)

            logger.debug(f"{job.name} runs [{actual_start}, {current_time})")

        return ScheduleResult(
            policy=SchedulingPolicy.FCFS,
            timelines=timelines,
            makespan=current_time,
        )

    @property
    def policy_name(self) -> str:
        return "fcfs"
