"""
Round Robin simulation with a fixed time quantum of 1.

Each job in the ready queue gets one time unit, then goes to the back
of the line if it still has work left. Jobs join the queue when the
clock reaches their start time.

Data structure: deque of load-order indices
- dequeue: pop from left   → O(1)
- requeue: append to right → O(1)
Timelines are looked up by the same index, so job names can be anything.

One loop step:
    1. pop the head job
    2. if the clock is before its start time, jump the clock forward
    3. if it has work left: run it for one unit at the current tick
    4. admit every job whose start time equals the new clock (load order)
    5. requeue the popped job if it still has work left
    6. if nothing ran this step, advance the clock anyway
    7. pad every timeline with idle marks up to the clock

When the queue runs dry but some jobs never arrived (the CPU sits idle
until their start time), the earliest of them are admitted and step 2
moves the clock to them.

The arrival scan in step 4 is O(n) per tick — fine at this scale.
"""

import logging
from collections import deque

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.base import AbstractScheduler, JobTimeline, ScheduleResult

logger = logging.getLogger(__name__)

TIME_QUANTUM = 1


class RoundRobinScheduler(AbstractScheduler):

    @property
    def time_quantum(self) -> int:
        return TIME_QUANTUM

    def simulate(self, jobs: list[Job]) -> ScheduleResult:
        # Work on copies: remaining_time must start at duration every run
        # and the caller's jobs must come back untouched.
        work = [job.fresh_copy() for job in jobs]
        timelines = [JobTimeline(job=job) for job in jobs]
        admitted: set[int] = set()
        queue: deque[int] = deque()
        current_time = 0

        for i, job in enumerate(work):
            if job.start_time <= current_time:
                queue.append(i)
                admitted.add(i)

        while True:
            if not queue and not self._admit_next_arrivals(work, admitted, queue):
                break

            i = queue.popleft()
            job = work[i]

            if current_time < job.start_time:
                current_time = job.start_time

            ran = False
            if job.remaining_time > 0:
                timelines[i].mark(current_time)
                job.run_quantum()
                current_time += TIME_QUANTUM
                ran = True

            for j, other in enumerate(work):
                if other.start_time == current_time and j not in queue:
                    queue.append(j)
                    admitted.add(j)

            if job.remaining_time > 0:
                queue.append(i)

            if not ran:
                current_time += 1

            for timeline in timelines:
                timeline.pad_to(current_time)

        logger.debug(f"Round Robin finished {len(work)} jobs at t={current_time}")
        return ScheduleResult(
            policy=SchedulingPolicy.ROUND_ROBIN,
            timelines=timelines,
            makespan=current_time,
        )

    @staticmethod
    def _admit_next_arrivals(work: list[Job], admitted: set[int], queue: deque) -> bool:
        """
        Admit the earliest-starting jobs that were never admitted.

        Returns False when every job has already been through the queue.
        """
        pending = [i for i in range(len(work)) if i not in admitted]
        if not pending:
            return False

        earliest = min(work[i].start_time for i in pending)
        for i in pending:
            if work[i].start_time == earliest:
                queue.append(i)
                admitted.add(i)
        logger.debug(f"CPU idle until t={earliest}")
        return True

    @property
    def policy_name(self) -> str:
        return "round_robin"
