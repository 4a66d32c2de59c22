"""
Job model — one line of the input file.

Key design decisions:
- name is just a unique key. Nothing derives an index from its characters;
  schedulers map jobs to timelines by load-order position instead.
- name, start_time and duration never change after loading.
- remaining_time is the ONLY mutable field, and only the Round Robin
  simulation touches it. FCFS reads duration directly.
- Round Robin never mutates the caller's jobs: it works on fresh_copy()
  results, so the same loaded list can be simulated any number of times
  without remaining_time leaking from one run into the next.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Job:
    name: str
    start_time: int            # earliest tick the job may run
    duration: int              # total time units the job needs
    remaining_time: Optional[int] = None  # None → starts at duration

    def __post_init__(self) -> None:
        if self.start_time < 0:
            raise ValueError(f"start_time must be >= 0, got {self.start_time}")
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")
        if self.remaining_time is None:
            self.remaining_time = self.duration
        if self.remaining_time < 0:
            raise ValueError(f"remaining_time must be >= 0, got {self.remaining_time}")
        if self.remaining_time > self.duration:
            raise ValueError(
                f"remaining_time {self.remaining_time} exceeds duration {self.duration}"
            )

    @property
    def is_complete(self) -> bool:
        return self.remaining_time == 0

    def fresh_copy(self) -> "Job":
        """Independent copy with remaining_time reset to the full duration."""
        return replace(self, remaining_time=self.duration)

    def run_quantum(self) -> None:
        """Consume one time unit of work."""
        if self.is_complete:
            raise ValueError(f"Job {self.name!r} has no remaining time")
        self.remaining_time -= 1

    def __repr__(self) -> str:
        return (
            f"<Job {self.name} start={self.start_time} "
            f"duration={self.duration} remaining={self.remaining_time}>"
        )
