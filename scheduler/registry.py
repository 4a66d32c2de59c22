"""
Scheduler factory — maps policy names to scheduler classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create schedulers.
Adding a policy = create the class, add one line to this registry.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.fcfs import FCFSScheduler
from scheduler.round_robin import RoundRobinScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.FCFS: FCFSScheduler,
    SchedulingPolicy.ROUND_ROBIN: RoundRobinScheduler,
}

# Order the CLI prints sections in.
DEFAULT_POLICIES: tuple[SchedulingPolicy, ...] = (
    SchedulingPolicy.FCFS,
    SchedulingPolicy.ROUND_ROBIN,
)


def create_scheduler(policy: SchedulingPolicy) -> AbstractScheduler:
    """Create a fresh scheduler instance for the given policy."""
    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")
    return cls()
