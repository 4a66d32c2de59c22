"""
Sample data script — writes a random job file for demos.

Usage:
    python -m scripts.generate_jobs --count 5 --seed 42 --output jobs.txt

Jobs are named J1..JN and written in the CLI's input format, one per line:
    <name><TAB><start_time><TAB><duration>

Then:
    python -m cli.main jobs.txt
"""

import argparse
import random
from typing import Optional

from config.settings import settings
from models.job import Job


def generate_jobs(
    count: int,
    max_start: int = 10,
    max_duration: int = 6,
    seed: Optional[int] = None,
) -> list[Job]:
    rng = random.Random(seed)
    return [
        Job(
            name=f"J{i}",
            start_time=rng.randint(0, max_start),
            duration=rng.randint(1, max_duration),
        )
        for i in range(1, count + 1)
    ]


def format_jobs(jobs: list[Job], delimiter: Optional[str] = None) -> str:
    delimiter = delimiter or settings.FIELD_DELIMITER
    return "".join(
        f"{job.name}{delimiter}{job.start_time}{delimiter}{job.duration}\n"
        for job in jobs
    )


def main():
    parser = argparse.ArgumentParser(description="Generate a random job file")
    parser.add_argument("--count", type=int, default=5, help="Number of jobs (default: 5)")
    parser.add_argument("--max-start", type=int, default=10, help="Latest start time (default: 10)")
    parser.add_argument("--max-duration", type=int, default=6, help="Longest duration (default: 6)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable files")
    parser.add_argument("--output", type=str, default="jobs.txt", help="Output path (default: jobs.txt)")
    args = parser.parse_args()

    jobs = generate_jobs(args.count, args.max_start, args.max_duration, args.seed)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(format_jobs(jobs))

    print(f"Wrote {len(jobs)} jobs to {args.output}")


if __name__ == "__main__":
    main()
