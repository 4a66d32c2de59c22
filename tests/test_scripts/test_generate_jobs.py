"""Tests for the sample job file generator."""

import io

from jobs.loader import parse_records
from scripts.generate_jobs import format_jobs, generate_jobs


def test_same_seed_same_jobs():
    assert generate_jobs(5, seed=7) == generate_jobs(5, seed=7)


def test_jobs_within_bounds():
    jobs = generate_jobs(50, max_start=4, max_duration=3, seed=1)

    assert [job.name for job in jobs] == [f"J{i}" for i in range(1, 51)]
    for job in jobs:
        assert 0 <= job.start_time <= 4
        assert 1 <= job.duration <= 3


def test_output_loads_back_cleanly():
    """Generated files must be valid loader input — no diagnostics."""
    jobs = generate_jobs(10, seed=3)
    out = io.StringIO()

    loaded = parse_records(format_jobs(jobs).splitlines(), out=out)
    assert loaded == jobs
    assert out.getvalue() == ""
