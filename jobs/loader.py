"""
Job loader — turns the lines of a job file into Job objects.

File format: one job per line, exactly three fields separated by a
single delimiter character (TAB by default):

    <name><TAB><start_time><TAB><duration>

Example file:
    A	0	3
    B	2	6
    C	4	4

A bad line never stops the load. It is reported and skipped:
    "A	1"      → Invalid job format: A	1            (two fields)
    "B	X	3"   → Invalid number format in line: B	X	3

Only a missing or unreadable file is fatal (UnreadableInputError).
Jobs come back in file order — that order IS the FCFS scheduling order.
"""

import logging
import re
import sys
from typing import Iterable, Optional, TextIO

from config.settings import settings
from jobs.errors import InvalidNumberError, MalformedRecordError, UnreadableInputError
from models.job import Job

logger = logging.getLogger(__name__)

# Plain ASCII digits with an optional sign. int() alone would also take
# surrounding whitespace, "1_0" and non-ASCII digits.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_record(line: str, delimiter: Optional[str] = None) -> Job:
    """
    Parse a single line into a Job.

    Raises:
        MalformedRecordError: the line doesn't have exactly three fields
        InvalidNumberError: start time or duration isn't a non-negative integer
    """
    delimiter = delimiter or settings.FIELD_DELIMITER
    parts = line.split(delimiter)
    # Trailing empty fields don't count: "A\t0\t3\t" is still three fields.
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) != 3:
        raise MalformedRecordError(line)

    name, raw_start, raw_duration = parts
    if not (_INTEGER.fullmatch(raw_start) and _INTEGER.fullmatch(raw_duration)):
        raise InvalidNumberError(line)

    start_time = int(raw_start)
    duration = int(raw_duration)
    if start_time < 0 or duration < 0:
        raise InvalidNumberError(line)

    return Job(name=name, start_time=start_time, duration=duration)


def parse_records(
    lines: Iterable[str],
    delimiter: Optional[str] = None,
    out: Optional[TextIO] = None,
) -> list[Job]:
    """
    Parse every line, skipping bad ones.

    Each skipped line gets a one-line diagnostic written to `out`
    (stdout by default), so it shows up next to the normal program output.
    """
    out = out if out is not None else sys.stdout
    jobs: list[Job] = []
    skipped = 0

    for raw in lines:
        line = raw.rstrip("\r\n")
        try:
            jobs.append(parse_record(line, delimiter))
        except (MalformedRecordError, InvalidNumberError) as e:
            skipped += 1
            print(e, file=out)
            logger.warning(f"Skipped record: {e}")

    logger.info(f"Loaded {len(jobs)} jobs ({skipped} skipped)")
    return jobs


def load_jobs(
    path: str,
    delimiter: Optional[str] = None,
    out: Optional[TextIO] = None,
) -> list[Job]:
    """
    Read a job file from disk.

    Raises:
        UnreadableInputError: the file is missing or can't be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableInputError(path, str(e)) from e

    logger.info(f"Read {len(lines)} lines from {path}")
    return parse_records(lines, delimiter=delimiter, out=out)
