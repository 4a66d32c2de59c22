"""
ASCII Gantt chart rendering.

Turns a ScheduleResult into printable lines. Two layouts, one per section:

    FCFS                 name + 2 spaces + idle prefix + one mark per unit of duration
    A  XXX
    B     XX

    Round-Robin          name + 1 space + the full timeline (length = makespan)
    A X X X
    B  X X

An empty job list renders as just the label line.
"""

from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import JobTimeline, ScheduleResult

# Characters between the job name and its chart, per section.
_NAME_SEPARATOR = {
    SchedulingPolicy.FCFS: "  ",
    SchedulingPolicy.ROUND_ROBIN: " ",
}


def section_label(policy: SchedulingPolicy) -> str:
    if policy == SchedulingPolicy.FCFS:
        return settings.FCFS_LABEL
    return settings.ROUND_ROBIN_LABEL


def render_timeline(
    timeline: JobTimeline,
    busy_mark: Optional[str] = None,
    idle_mark: Optional[str] = None,
) -> str:
    busy_mark = busy_mark if busy_mark is not None else settings.BUSY_MARK
    idle_mark = idle_mark if idle_mark is not None else settings.IDLE_MARK
    return "".join(busy_mark if running else idle_mark for running in timeline.busy)


def render_lines(result: ScheduleResult, **marks) -> list[str]:
    """One line per job, without the section label."""
    separator = _NAME_SEPARATOR[result.policy]
    return [
        f"{timeline.name}{separator}{render_timeline(timeline, **marks)}"
        for timeline in result.timelines
    ]


def render_section(result: ScheduleResult, **marks) -> list[str]:
    """Section label followed by one line per job."""
    return [section_label(result.policy), *render_lines(result, **marks)]


def render_stats(result: ScheduleResult) -> str:
    return (
        f"avg waiting={result.average_waiting_time():.2f} "
        f"avg turnaround={result.average_turnaround_time():.2f} "
        f"makespan={result.makespan}"
    )
