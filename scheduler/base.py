"""
Abstract base class for all scheduling simulations (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code
that uses them. The CLI and the API only know about AbstractScheduler —
they call simulate() without caring whether it's FCFS or Round Robin.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement simulate() and policy_name
3. Register it in scheduler/registry.py

Every simulation returns the same shape of result: one JobTimeline per
job (in load order) plus the makespan. Rendering that result as an ASCII
Gantt chart lives in scheduler/gantt.py, so schedulers never print.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from models.enums import SchedulingPolicy
from models.job import Job


@dataclass
class JobTimeline:
    """
    Busy/idle marks for one job, indexed by absolute time unit.

    busy[t] is True when the job held the CPU during [t, t+1).
    """
    job: Job
    busy: list[bool] = field(default_factory=list)
    first_run: Optional[int] = None     # tick of the first unit executed
    finished_at: Optional[int] = None   # tick right after the last unit

    @property
    def name(self) -> str:
        return self.job.name

    @property
    def length(self) -> int:
        return len(self.busy)

    @property
    def busy_count(self) -> int:
        return sum(self.busy)

    @property
    def busy_ticks(self) -> list[int]:
        return [t for t, running in enumerate(self.busy) if running]

    @property
    def turnaround_time(self) -> Optional[int]:
        if self.finished_at is None:
            return None
        return self.finished_at - self.job.start_time

    @property
    def waiting_time(self) -> Optional[int]:
        turnaround = self.turnaround_time
        if turnaround is None:
            return None
        return turnaround - self.job.duration

    def mark(self, tick: int) -> None:
        """Record one unit of execution at `tick`."""
        self.pad_to(tick)
        self.busy.append(True)
        if self.first_run is None:
            self.first_run = tick
        self.finished_at = tick + 1

    def pad_to(self, length: int) -> None:
        """Append idle marks until the timeline is `length` units long."""
        if len(self.busy) < length:
            self.busy.extend([False] * (length - len(self.busy)))


@dataclass
class ScheduleResult:
    policy: SchedulingPolicy
    timelines: list[JobTimeline]
    makespan: int

    @property
    def total_busy(self) -> int:
        return sum(t.busy_count for t in self.timelines)

    def average_waiting_time(self) -> float:
        values = [t.waiting_time for t in self.timelines if t.waiting_time is not None]
        return sum(values) / len(values) if values else 0.0

    def average_turnaround_time(self) -> float:
        values = [t.turnaround_time for t in self.timelines if t.turnaround_time is not None]
        return sum(values) / len(values) if values else 0.0


class AbstractScheduler(ABC):
    """
    Interface that all scheduling simulations implement.

    simulate() must not mutate the jobs it is given. The same loaded list
    is passed to every policy in turn.
    """

    @abstractmethod
    def simulate(self, jobs: list[Job]) -> ScheduleResult:
        """Run the whole simulation and return one timeline per job."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'fcfs', 'round_robin')."""
        ...
