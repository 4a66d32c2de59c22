"""
Errors raised while loading jobs.

Two kinds of failure, handled very differently:
- Record-level (MalformedRecordError, InvalidNumberError): one bad line.
  The loader catches these, prints a diagnostic, skips the line and keeps going.
- Source-level (UnreadableInputError): the whole file is missing or can't be read.
  Nothing can be simulated, so it propagates to the caller and ends the run.

The record errors are also ValueErrors and UnreadableInputError is also an
OSError, so callers that only know the builtin hierarchy still catch them.
"""


class JobLoadError(Exception):
    """Base class for everything the job loader raises."""


class MalformedRecordError(JobLoadError, ValueError):
    """The line does not have exactly three fields."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid job format: {line}")


class InvalidNumberError(JobLoadError, ValueError):
    """Start time or duration is not a non-negative integer."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid number format in line: {line}")


class UnreadableInputError(JobLoadError, OSError):
    """The input file is missing or cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read job file '{path}': {reason}")
