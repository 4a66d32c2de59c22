"""
Command-line entry point.

Usage:
    python -m cli.main jobs.txt             # FCFS + Round Robin Gantt charts
    python -m cli.main jobs.txt --stats     # also print average waiting/turnaround
    python -m cli.main jobs.txt --json      # machine-readable results

Installed as the `cpusched` console script.

Flow:
    1. Load jobs once (bad lines are reported on stdout and skipped)
    2. Simulate FCFS over the loaded list
    3. Simulate Round Robin over the same list (it copies the jobs itself,
       so remaining_time from one run never leaks into another)
    4. Print one section per policy

Logs go to stderr; stdout carries only diagnostics and the charts.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from config.settings import settings
from jobs.errors import UnreadableInputError
from jobs.loader import load_jobs
from models.job import Job
from scheduler.base import ScheduleResult
from scheduler.gantt import render_section, render_stats, render_timeline
from scheduler.registry import DEFAULT_POLICIES, create_scheduler

logger = logging.getLogger(__name__)

USAGE = "Usage: cpusched <jobs-file>"


def run_all(jobs: list[Job]) -> list[ScheduleResult]:
    """Simulate every default policy over the same job list, in order."""
    results = []
    for policy in DEFAULT_POLICIES:
        scheduler = create_scheduler(policy)
        results.append(scheduler.simulate(jobs))
        logger.info(f"Simulated {len(jobs)} jobs with {scheduler.policy_name}")
    return results


def result_to_dict(result: ScheduleResult) -> dict:
    return {
        "policy": result.policy.value,
        "makespan": result.makespan,
        "avg_waiting_time": result.average_waiting_time(),
        "avg_turnaround_time": result.average_turnaround_time(),
        "jobs": [
            {
                "name": t.name,
                "busy_ticks": t.busy_ticks,
                "timeline": render_timeline(t),
            }
            for t in result.timelines
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate FCFS and Round Robin (quantum 1) CPU scheduling",
    )
    parser.add_argument("jobs_file", nargs="?", help="tab-delimited file: name, start, duration")
    parser.add_argument("--stats", action="store_true", help="print average waiting/turnaround times")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.jobs_file is None:
        print(USAGE)
        return 0

    try:
        jobs = load_jobs(args.jobs_file)
    except UnreadableInputError as e:
        print(e, file=sys.stderr)
        return 1

    results = run_all(jobs)

    if args.json:
        print(json.dumps([result_to_dict(r) for r in results], indent=2))
        return 0

    for result in results:
        for line in render_section(result):
            print(line)
        if args.stats:
            print(render_stats(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
