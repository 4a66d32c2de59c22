"""
Tests for the Round Robin simulation (quantum = 1).

Each admitted job gets one time unit, then goes to the back of the
queue. Jobs join the queue when the clock reaches their start time.
"""

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.round_robin import RoundRobinScheduler


def _make_job(name: str, start_time: int = 0, duration: int = 1) -> Job:
    return Job(name=name, start_time=start_time, duration=duration)


def _simulate(*jobs: Job):
    return RoundRobinScheduler().simulate(list(jobs))


def test_two_jobs_alternate():
    result = _simulate(_make_job("A", 0, 3), _make_job("B", 0, 2))

    a, b = result.timelines
    assert result.makespan == 5
    assert a.busy_ticks == [0, 2, 4]
    assert b.busy_ticks == [1, 3]


def test_late_arrival_joins_behind_requeued_job():
    """A job arriving at tick t is admitted before the job that just ran is requeued."""
    result = _simulate(_make_job("A", 0, 3), _make_job("B", 1, 2))

    a, b = result.timelines
    assert a.busy_ticks == [0, 2, 4]
    assert b.busy_ticks == [1, 3]


def test_arrival_ties_admitted_in_load_order():
    result = _simulate(_make_job("A", 0, 1), _make_job("C", 1, 1), _make_job("B", 1, 1))

    a, c, b = result.timelines
    assert a.busy_ticks == [0]
    assert c.busy_ticks == [1]
    assert b.busy_ticks == [2]


def test_busy_marks_match_durations_and_timelines_match_makespan():
    jobs = [
        _make_job("A", 0, 4),
        _make_job("B", 2, 3),
        _make_job("C", 3, 5),
        _make_job("D", 6, 2),
    ]
    result = RoundRobinScheduler().simulate(jobs)

    assert result.total_busy == sum(job.duration for job in jobs)
    for job, timeline in zip(jobs, result.timelines):
        assert timeline.busy_count == job.duration
        assert timeline.length == result.makespan
    assert result.makespan >= max(job.start_time + job.duration for job in jobs)


def test_only_one_job_runs_per_tick():
    jobs = [_make_job("A", 0, 3), _make_job("B", 1, 3), _make_job("C", 1, 2)]
    result = RoundRobinScheduler().simulate(jobs)

    for tick in range(result.makespan):
        running = [t.name for t in result.timelines if t.busy[tick]]
        assert len(running) <= 1


def test_makespan_is_sum_of_durations_when_all_start_at_zero():
    jobs = [_make_job("A", 0, 2), _make_job("B", 0, 3), _make_job("C", 0, 1)]
    result = RoundRobinScheduler().simulate(jobs)

    assert result.makespan == 6


def test_idle_gap_before_late_job():
    """The CPU waits for a job that arrives after everything else finished."""
    result = _simulate(_make_job("A", 0, 1), _make_job("B", 5, 2))

    a, b = result.timelines
    assert a.busy_ticks == [0]
    assert b.busy_ticks == [5, 6]
    assert result.makespan == 7
    assert a.length == b.length == 7


def test_no_job_starts_at_zero():
    result = _simulate(_make_job("A", 3, 2))

    assert result.timelines[0].busy_ticks == [3, 4]
    assert result.makespan == 5


def test_zero_duration_job_never_runs():
    """A zero-length job takes a no-op step that still advances the clock."""
    result = _simulate(_make_job("Z", 0, 0))

    z = result.timelines[0]
    assert z.busy_count == 0
    assert z.finished_at is None
    assert result.makespan == 2
    assert z.length == 2


def test_caller_jobs_are_not_mutated():
    """Remaining time must not leak from one run into the next."""
    jobs = [_make_job("A", 0, 3), _make_job("B", 0, 2)]
    scheduler = RoundRobinScheduler()

    first = scheduler.simulate(jobs)
    assert [job.remaining_time for job in jobs] == [3, 2]

    second = scheduler.simulate(jobs)
    assert [t.busy for t in first.timelines] == [t.busy for t in second.timelines]


def test_waiting_and_turnaround_times():
    result = _simulate(_make_job("A", 0, 3), _make_job("B", 0, 2))

    a, b = result.timelines
    assert a.turnaround_time == 5
    assert a.waiting_time == 2
    assert b.turnaround_time == 4
    assert b.waiting_time == 2
    assert result.average_waiting_time() == 2.0


def test_empty_job_list():
    result = _simulate()
    assert result.timelines == []
    assert result.makespan == 0


def test_time_quantum_is_fixed_at_one():
    assert RoundRobinScheduler().time_quantum == 1


def test_policy_name():
    assert RoundRobinScheduler().policy_name == "round_robin"
    assert _simulate().policy == SchedulingPolicy.ROUND_ROBIN


def test_arrival_skipped_by_no_op_step_still_runs():
    """
    Z's no-op step moves the clock past C's start tick before the arrival
    scan can see it. C is picked up once the queue runs dry.
    """
    result = _simulate(_make_job("Z", 0, 0), _make_job("B", 0, 2), _make_job("C", 1, 1))

    z, b, c = result.timelines
    assert z.busy_ticks == []
    assert b.busy_ticks == [1, 3]
    assert c.busy_ticks == [4]
    assert result.makespan == 5
