"""Tests for ASCII Gantt chart rendering."""

from models.job import Job
from scheduler.fcfs import FCFSScheduler
from scheduler.gantt import render_lines, render_section, render_stats, render_timeline
from scheduler.round_robin import RoundRobinScheduler


def _jobs() -> list[Job]:
    return [Job(name="A", start_time=0, duration=3), Job(name="B", start_time=0, duration=2)]


def test_fcfs_section():
    result = FCFSScheduler().simulate(_jobs())

    assert render_section(result) == ["FCFS", "A  XXX", "B     XX"]


def test_round_robin_section():
    result = RoundRobinScheduler().simulate(_jobs())

    assert render_section(result) == ["Round-Robin", "A X X X", "B  X X "]


def test_round_robin_lines_have_equal_length():
    jobs = [Job(name="long-name", start_time=0, duration=4), Job(name="B", start_time=2, duration=1)]
    result = RoundRobinScheduler().simulate(jobs)

    charts = [line.split(" ", 1)[1] for line in render_lines(result)]
    assert len({len(chart) for chart in charts}) == 1


def test_empty_result_renders_only_label():
    assert render_section(FCFSScheduler().simulate([])) == ["FCFS"]
    assert render_section(RoundRobinScheduler().simulate([])) == ["Round-Robin"]


def test_custom_marks():
    result = RoundRobinScheduler().simulate(_jobs())

    assert render_timeline(result.timelines[1], busy_mark="#", idle_mark=".") == ".#.#."


def test_stats_line():
    result = RoundRobinScheduler().simulate(_jobs())

    assert render_stats(result) == "avg waiting=2.00 avg turnaround=4.50 makespan=5"
